import copy

import pytest

from utils import RED, WEB_MERCATOR


@pytest.fixture
def feature_set_doc():
    return {
        "objectIdFieldName": "OBJECTID",
        "geometryType": "esriGeometryPoint",
        "spatialReference": dict(WEB_MERCATOR),
        "fields": [
            {"name": "OBJECTID", "type": "esriFieldTypeOID", "alias": "OBJECTID"},
            {"name": "NAME", "type": "esriFieldTypeString", "length": 50},
        ],
        "features": [
            {
                "attributes": {"OBJECTID": 1, "NAME": "Redlands"},
                "geometry": {"x": -13046165.0, "y": 4036389.0},
            },
            {
                "attributes": {"OBJECTID": 2, "NAME": "Riverside"},
                "geometry": {
                    "x": -13075816.0,
                    "y": 4014771.0,
                    "spatialReference": dict(WEB_MERCATOR),
                },
            },
        ],
    }

_WEBMAP = {
    "authoringApp": "ArcGISMapViewer",
    "authoringAppVersion": "10.7",
    "version": "2.14",
    "spatialReference": WEB_MERCATOR,
    "baseMap": {
        "title": "Topographic",
        "baseMapLayers": [
            {
                "id": "World_Topo_Map_1",
                "layerType": "ArcGISTiledMapServiceLayer",
                "url": "https://services.arcgisonline.com/ArcGIS/rest/services/World_Topo_Map/MapServer",
                "visibility": True,
                "opacity": 1,
                "title": "World Topographic Map",
            }
        ],
    },
    "operationalLayers": [
        {
            "id": "trailheads",
            "layerType": "ArcGISFeatureLayer",
            "url": "https://services3.arcgis.com/example/arcgis/rest/services/Trailheads/FeatureServer/0",
            "visibility": True,
            "opacity": 0.8,
            "title": "Trailheads",
            "itemId": "883cedb8c9fe4524b64d47666ed234a7",
            "popupInfo": {
                "title": "Trailhead: {TRL_NAME}",
                "description": None,
                "fieldInfos": [
                    {"fieldName": "TRL_NAME", "label": "Trail", "visible": True},
                    {
                        "fieldName": "ELEV_FT",
                        "label": "Elevation",
                        "visible": True,
                        "format": {"digitSeparator": True, "places": 0},
                    },
                ],
                "showAttachments": False,
            },
            "layerDefinition": {
                "definitionExpression": "ELEV_FT > 500",
                "drawingInfo": {
                    "renderer": {
                        "type": "uniqueValue",
                        "field1": "PARK_NAME",
                        "defaultSymbol": {
                            "type": "esriSMS",
                            "style": "esriSMSCircle",
                            "color": [130, 130, 130, 255],
                            "size": 6,
                        },
                        "uniqueValueInfos": [
                            {
                                "value": "Griffith Park",
                                "label": "Griffith Park",
                                "symbol": {
                                    "type": "esriSMS",
                                    "style": "esriSMSSquare",
                                    "color": RED,
                                    "size": 8,
                                    "outline": {"color": [0, 0, 0, 255], "width": 1},
                                },
                            }
                        ],
                    },
                    "labelingInfo": [
                        {
                            "labelExpressionInfo": {
                                "expression": "$feature.TRL_NAME",
                                "value": "{TRL_NAME}",
                            },
                            "labelPlacement": "esriServerPointLabelPlacementAboveCenter",
                            "removeDuplicates": "none",
                            "removeDuplicatesDistance": 0,
                            "repeatLabel": True,
                            "repeatLabelDistance": 0,
                            "stackAlignment": "dynamic",
                            "stackLabel": False,
                            "useCodedValues": True,
                            "where": "1=1",
                            "symbol": {
                                "type": "esriTS",
                                "color": [0, 0, 0, 255],
                                "font": {"family": "Arial", "size": 9},
                            },
                        }
                    ],
                    "transparency": 10,
                },
            },
        },
        {
            "id": "notes",
            "layerType": "ArcGISFeatureLayer",
            "visibility": True,
            "opacity": 1,
            "title": "Map Notes",
            "featureCollection": {
                "layers": [
                    {
                        "layerDefinition": {
                            "name": "Points",
                            "geometryType": "esriGeometryPoint",
                            "objectIdField": "OBJECTID",
                            "fields": [
                                {"name": "OBJECTID", "type": "esriFieldTypeOID"},
                                {
                                    "name": "TITLE",
                                    "type": "esriFieldTypeString",
                                    "length": 50,
                                    "editable": True,
                                    "nullable": True,
                                },
                            ],
                            "drawingInfo": {
                                "renderer": {
                                    "type": "simple",
                                    "symbol": {
                                        "type": "esriPMS",
                                        "url": "https://static.arcgis.com/images/Symbols/Basic/RedStickpin.png",
                                        "contentType": "image/png",
                                        "width": 15,
                                        "height": 15,
                                    },
                                }
                            },
                        },
                        "featureSet": {
                            "geometryType": "esriGeometryPoint",
                            "features": [
                                {
                                    "attributes": {"OBJECTID": 1, "TITLE": "Start"},
                                    "geometry": {
                                        "x": -13046165.0,
                                        "y": 4036389.0,
                                        "spatialReference": {"wkid": 102100},
                                    },
                                }
                            ],
                        },
                        "nextObjectId": 2,
                    }
                ]
            },
        },
        {
            "id": "population",
            "layerType": "ArcGISMapServiceLayer",
            "url": "https://sampleserver6.arcgisonline.com/arcgis/rest/services/Census/MapServer",
            "visibility": False,
            "opacity": 0.6,
            "title": "Census",
            "layers": [
                {
                    "id": 3,
                    "layerDefinition": {
                        "drawingInfo": {
                            "renderer": {
                                "type": "classBreaks",
                                "field": "POP2007",
                                "classBreakInfos": [
                                    {
                                        "classMaxValue": 1000000,
                                        "symbol": {
                                            "type": "esriSFS",
                                            "style": "esriSFSSolid",
                                            "color": [255, 255, 178, 255],
                                        },
                                    }
                                ],
                            }
                        }
                    },
                }
            ],
        },
    ],
    "bookmarks": [
        {
            "name": "Los Angeles",
            "extent": {
                "xmin": -13210000,
                "ymin": 3980000,
                "xmax": -13100000,
                "ymax": 4070000,
                "spatialReference": WEB_MERCATOR,
            },
        }
    ],
    "applicationProperties": {
        "viewing": {
            "search": {
                "enabled": True,
                "hintText": "Find a trailhead",
                "layers": [
                    {
                        "id": "trailheads",
                        "field": {
                            "name": "TRL_NAME",
                            "exactMatch": False,
                            "type": "esriFieldTypeString",
                        },
                    }
                ],
            }
        }
    },
    "widgets": {
        "timeSlider": {
            "properties": {
                "startTime": 1262304000000,
                "endTime": 1293840000000,
                "thumbCount": 2,
                "timeStopInterval": {"interval": 1, "units": "esriTimeUnitsMonths"},
            }
        }
    },
}

@pytest.fixture
def webmap_doc():
    return copy.deepcopy(_WEBMAP)
