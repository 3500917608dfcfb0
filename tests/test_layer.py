import pytest

import msgspec

from arcgis_rest_types import geometry as g
from arcgis_rest_types import json as arcjson
from arcgis_rest_types import layer as lyr
from arcgis_rest_types import renderer as r
from arcgis_rest_types.errors import GeometryTypeMismatch, MissingField, UnknownVariant
from arcgis_rest_types.inspect import capabilities, tags
from arcgis_rest_types.layer_definition import (
    DrawingInfo,
    DynamicDataLayer,
    DynamicMapLayer,
    LayerDefinition,
    QueryTableDataSource,
    RangeInfo,
)
from arcgis_rest_types.popup import MediaInfo, MediaValue, PopupInfo

from utils import WEB_MERCATOR, wire


def base(layer_type, **kwargs):
    out = {
        "layerType": layer_type,
        "id": "layer-1",
        "opacity": 1,
        "title": "Layer",
        "visibility": True,
    }
    out.update(kwargs)
    return out


def decode(msg, type=lyr.OperationalLayer):
    return arcjson.decode(msgspec.json.encode(msg), type=type)


class TestDiscriminants:
    @pytest.mark.parametrize(
        "union",
        [lyr.OperationalLayer, lyr.BaseMapLayer, r.Renderer],
        ids=["OperationalLayer", "BaseMapLayer", "Renderer"],
    )
    def test_unique(self, union):
        mapping = tags(union)
        assert len(mapping) == len(set(mapping.values()))

    def test_operational_layer_types(self):
        assert set(tags(lyr.OperationalLayer)) == {
            "CSV",
            "ArcGISFeatureLayer",
            "GeoRSS",
            "ArcGISImageServiceLayer",
            "ArcGISImageServiceVectorLayer",
            "KML",
            "ArcGISMapServiceLayer",
            "ArcGISStreamLayer",
            "ArcGISTiledImageServiceLayer",
            "ArcGISTiledMapServiceLayer",
            "VectorTileLayer",
            "WebTiledLayer",
            "WFS",
            "WMS",
        }

    def test_basemap_layer_types(self):
        assert set(tags(lyr.BaseMapLayer)) == {
            "BingMapsAerial",
            "BingMapsRoad",
            "BingMapsHybrid",
            "ArcGISImageServiceLayer",
            "ArcGISImageServiceVectorLayer",
            "ArcGISMapServiceLayer",
            "OpenStreetMap",
            "ArcGISTiledImageServiceLayer",
            "ArcGISTiledMapServiceLayer",
            "VectorTileLayer",
            "WebTiledLayer",
            "WMS",
        }

    def test_any_renderer_shares_a_tag(self):
        with pytest.raises(ValueError, match="share the tag 'uniqueValue'"):
            tags(r.AnyRenderer)

    def test_unknown_layer_type(self):
        with pytest.raises(UnknownVariant, match="`\\$.layerType`"):
            decode(base("ArcGISSceneServiceLayer"))

    def test_basemap_only_layer_type(self):
        msg = base("OpenStreetMap")
        assert isinstance(decode(msg, lyr.BaseMapLayer), lyr.OpenStreetMapLayer)
        with pytest.raises(UnknownVariant):
            decode(msg)

    def test_operational_only_layer_type(self):
        msg = base("CSV", url="https://example.com/data.csv")
        assert isinstance(decode(msg), lyr.CsvLayer)
        with pytest.raises(UnknownVariant):
            decode(msg, lyr.BaseMapLayer)


class TestCapabilities:
    @pytest.mark.parametrize(
        "cls, expected",
        [
            (
                lyr.FeatureLayer,
                {
                    "url",
                    "popupInfo",
                    "refreshInterval",
                    "itemId",
                    "layerDefinition",
                    "definitionEditor",
                    "disablePopup",
                    "showLegend",
                    "timeAnimation",
                },
            ),
            (
                lyr.MapServiceLayer,
                {"url", "refreshInterval", "itemId", "isReference", "showLegend", "timeAnimation"},
            ),
            (
                lyr.CsvLayer,
                {"url", "popupInfo", "refreshInterval", "layerDefinition", "showLegend"},
            ),
            (lyr.KmlLayer, {"url", "refreshInterval", "itemId", "showLegend"}),
            (lyr.VectorTileLayer, {"itemId"}),
            (lyr.BingMapsRoadLayer, set()),
            (lyr.OpenStreetMapLayer, set()),
        ],
    )
    def test_capabilities(self, cls, expected):
        assert capabilities(cls) == expected

    def test_not_a_layer(self):
        with pytest.raises(TypeError):
            capabilities(PopupInfo)

    def test_unsupported_mixin_ignored(self):
        # Properties of mixins a layer type doesn't support aren't kept
        msg = base("VectorTileLayer", styleUrl="https://example.com/style.json", url="x")
        out = decode(msg)
        assert not hasattr(out, "url")
        assert "url" not in wire(out)


class TestLayerBase:
    @pytest.mark.parametrize("field", ["id", "opacity", "title", "visibility"])
    def test_required(self, field):
        msg = base("KML")
        del msg[field]
        with pytest.raises(MissingField, match=f"`{field}`"):
            decode(msg)

    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_opacity_range(self, opacity):
        with pytest.raises(msgspec.ValidationError, match=r"`\$\.opacity`"):
            decode(base("KML", opacity=opacity))

    def test_integer_id(self):
        out = decode(base("KML", id=3))
        assert out.id == 3

    def test_scale_range(self):
        out = decode(base("KML", minScale=100000, maxScale=0))
        assert (out.min_scale, out.max_scale) == (100000, 0)


class TestFeatureLayer:
    def test_service_layer(self):
        msg = base(
            "ArcGISFeatureLayer",
            url="https://example.com/FeatureServer/0",
            itemId="abc",
            mode=1,
            showLabels=True,
            popupInfo={"title": "{NAME}", "description": None},
            layerDefinition={
                "definitionExpression": "POP > 0",
                "drawingInfo": {
                    "renderer": {
                        "type": "simple",
                        "symbol": {"type": "esriSFS", "style": "esriSFSSolid"},
                    }
                },
            },
        )
        out = decode(msg)
        assert isinstance(out, lyr.FeatureLayer)
        assert out.mode == 1
        assert out.popup_info.description is None
        assert isinstance(out.layer_definition.drawing_info.renderer, r.SimpleRenderer)
        assert wire(out) == msg

    def test_invalid_mode(self):
        with pytest.raises(msgspec.ValidationError, match=r"`\$\.mode`"):
            decode(base("ArcGISFeatureLayer", mode=3))

    def test_feature_collection(self):
        msg = base(
            "ArcGISFeatureLayer",
            featureCollection={
                "layers": [
                    {
                        "layerDefinition": {
                            "geometryType": "esriGeometryPolyline",
                            "fields": [{"name": "OBJECTID", "type": "esriFieldTypeOID"}],
                        },
                        "featureSet": {
                            "geometryType": "esriGeometryPolyline",
                            "features": [
                                {
                                    "attributes": {"OBJECTID": 1},
                                    "geometry": {"paths": [[[0, 0], [1, 1]]]},
                                    "symbol": {"type": "esriSLS", "width": 2},
                                }
                            ],
                        },
                    }
                ]
            },
        )
        out = decode(msg)
        (sub,) = out.feature_collection.layers
        (feature,) = sub.feature_set.features
        assert isinstance(feature.geometry, g.Polyline)
        assert feature.symbol.width == 2
        assert wire(out) == msg


class TestDrawingInfo:
    def test_renderer_dispatched_by_content(self):
        info = DrawingInfo(
            renderer={
                "type": "uniqueValue",
                "valueExpression": "...",
                "uniqueValueInfos": [],
            }
        )
        assert isinstance(info.renderer, r.PredominanceRenderer)

    def test_invalid_renderer(self):
        msg = b'{"renderer": {"type": "simple"}}'
        with pytest.raises(MissingField, match="`symbol`"):
            arcjson.decode(msg, type=DrawingInfo)

    def test_invalid_renderer_location(self):
        msg = b'{"drawingInfo": {"renderer": {"type": "simple"}}}'
        with pytest.raises(MissingField) as rec:
            arcjson.decode(msg, type=LayerDefinition)
        assert str(rec.value).endswith("at `$.drawingInfo.renderer`")

    def test_invalid_renderer_constructed(self):
        with pytest.raises(MissingField, match=r"at `\$\.renderer`"):
            DrawingInfo(renderer={"type": "simple"})

    def test_transparency_range(self):
        with pytest.raises(msgspec.ValidationError, match="<= 100"):
            arcjson.decode(b'{"transparency": 101}', type=DrawingInfo)


class TestLayerDefinition:
    def test_extent_null_kept_distinct(self):
        absent = arcjson.decode(b"{}", type=LayerDefinition)
        null = arcjson.decode(b'{"extent": null}', type=LayerDefinition)
        assert absent.extent is msgspec.UNSET
        assert null.extent is None
        assert arcjson.encode(absent) == b"{}"
        assert arcjson.encode(null) == b'{"extent":null}'

    def test_dynamic_sources(self):
        msg = {
            "source": {
                "type": "dataLayer",
                "dataSource": {
                    "type": "queryTable",
                    "geometryType": "esriGeometryPoint",
                    "query": "SELECT * FROM t",
                    "workspaceId": "ws",
                },
            }
        }
        out = arcjson.decode(msgspec.json.encode(msg), type=LayerDefinition)
        assert isinstance(out.source, DynamicDataLayer)
        assert isinstance(out.source.data_source, QueryTableDataSource)
        assert wire(out) == msg

        out = arcjson.decode(
            b'{"source": {"type": "mapLayer", "mapLayerId": 2}}', type=LayerDefinition
        )
        assert out.source == DynamicMapLayer(map_layer_id=2)

    def test_range_infos(self):
        msg = {
            "rangeInfos": [
                {"type": "rangeInfo", "name": "depth", "currentRangeExtent": [0, 10]}
            ]
        }
        out = arcjson.decode(msgspec.json.encode(msg), type=LayerDefinition)
        assert out.range_infos == [RangeInfo(name="depth", current_range_extent=[0, 10])]
        assert wire(out) == msg

    def test_feature_types(self):
        msg = {
            "types": [
                {
                    "id": 1,
                    "name": "Paved",
                    "domains": {
                        "SURFACE": {
                            "type": "codedValue",
                            "name": "Surface",
                            "codedValues": [{"name": "Asphalt", "code": 1}],
                        },
                        "WIDTH": {"type": "inherited", "name": "Width"},
                    },
                    "templates": [
                        {
                            "name": "Paved road",
                            "drawingTool": "esriFeatureEditToolLine",
                            "prototype": {"attributes": {"TYPE": 1}},
                        }
                    ],
                }
            ]
        }
        out = arcjson.decode(msgspec.json.encode(msg), type=LayerDefinition)
        assert set(out.types[0].domains) == {"SURFACE", "WIDTH"}
        assert wire(out) == msg


class TestPopup:
    def test_description_null_kept_distinct(self):
        assert arcjson.encode(PopupInfo()) == b"{}"
        assert arcjson.encode(PopupInfo(description=None)) == b'{"description":null}'

    def test_media_value_wire_names(self):
        msg = {
            "type": "image",
            "value": {
                "sourceURL": "https://example.com/a.png",
                "linkURL": "https://example.com",
            },
        }
        out = arcjson.decode(msgspec.json.encode(msg), type=MediaInfo)
        assert out.value == MediaValue(
            source_url="https://example.com/a.png", link_url="https://example.com"
        )
        assert wire(out) == msg

    def test_media_value_null(self):
        out = arcjson.decode(b'{"type": "piechart", "value": null}', type=MediaInfo)
        assert out.value is None


class TestImageService:
    def test_mosaic_rule_viewpoint(self):
        msg = base(
            "ArcGISImageServiceLayer",
            mosaicRule={
                "mosaicMethod": "esriMosaicViewpoint",
                "viewpoint": {"x": 1, "y": 2, "spatialReference": WEB_MERCATOR},
            },
            renderingRule={"rasterFunction": "Hillshade"},
        )
        out = decode(msg)
        assert isinstance(out.mosaic_rule.viewpoint, g.Point)
        assert out.rendering_rule.raster_function is lyr.RasterFunction.HILLSHADE
        assert wire(out) == msg

    def test_viewpoint_must_be_point(self):
        msg = base(
            "ArcGISImageServiceLayer",
            mosaicRule={
                "mosaicMethod": "esriMosaicViewpoint",
                "viewpoint": {"points": [[1, 2]]},
            },
        )
        with pytest.raises(GeometryTypeMismatch):
            decode(msg)

    def test_mosaic_method_required(self):
        with pytest.raises(MissingField, match="`mosaicMethod`"):
            decode(base("ArcGISImageServiceLayer", mosaicRule={}))


class TestTiledLayers:
    def test_web_tiled_layer(self):
        msg = base(
            "WebTiledLayer",
            templateUrl="https://{subDomain}.tile.example.com/{level}/{col}/{row}.png",
            subDomains=["a", "b", "c"],
            tileInfo={
                "rows": 256,
                "cols": 256,
                "origin": {"x": -20037508.342787, "y": 20037508.342787},
                "lods": [{"level": 0, "resolution": 156543.03, "scale": 591657527.59}],
            },
            wmtsInfo={"url": "https://example.com/wmts", "layerIdentifier": "base"},
        )
        out = decode(msg, lyr.BaseMapLayer)
        assert isinstance(out.tile_info.origin, g.Point)
        assert wire(out) == msg

    def test_wmts_info_requires_url(self):
        msg = base("WebTiledLayer", wmtsInfo={"layerIdentifier": "base"})
        with pytest.raises(MissingField, match="`url`"):
            decode(msg)

    def test_bing_requires_portal_url(self):
        with pytest.raises(MissingField, match="`portalUrl`"):
            decode(base("BingMapsRoad"), lyr.BaseMapLayer)

    def test_map_service_requires_layers(self):
        with pytest.raises(MissingField, match="`layers`"):
            decode(base("ArcGISMapServiceLayer"))


class TestOgcLayers:
    def test_wfs_swap_xy(self):
        msg = base("WFS", mode=0, wfsInfo={"name": "roads", "swapXY": True})
        out = decode(msg)
        assert out.wfs_info.swap_xy is True
        assert wire(out) == msg

    def test_wms_extent(self):
        msg = base("WMS", extent=[[-180, -90], [180, 90]], visibleLayers=["0"])
        out = decode(msg)
        assert out.extent == [[-180, -90], [180, 90]]

    def test_wms_extent_corners(self):
        with pytest.raises(msgspec.ValidationError, match="length"):
            decode(base("WMS", extent=[[-180, -90, 0], [180, 90]]))


def test_csv_location_info():
    msg = base(
        "CSV",
        columnDelimiter=";",
        locationInfo={
            "locationType": "coordinates",
            "latitudeFieldName": "LAT",
            "longitudeFieldName": "LON",
        },
    )
    out = decode(msg)
    assert out.location_info == lyr.LocationInfo(
        latitude_field_name="LAT", longitude_field_name="LON"
    )
    assert wire(out) == msg
