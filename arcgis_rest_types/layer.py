"""Operational and basemap layers of a web map.

Every layer type is tagged by ``layerType``. The REST format composes layer
types from a shared base plus a set of optional "mixin" properties (``url``,
``popupInfo``, ``itemId``, ...). Here each layer type is a single flat record
listing the base properties, the mixin properties it supports and its own
properties. `arcgis_rest_types.inspect.capabilities` recovers the mixin set
of a layer type.
"""
import enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import msgspec
from msgspec import Meta

from . import geometry as _geometry
from ._base import Schema
from .core import Extent, GeometryType, SpatialReference
from .errors import located
from .layer_definition import DefinitionEditor, LayerDefinition, WebmapFeature
from .popup import PopupInfo
from .symbol import PictureMarkerSymbol, SimpleFillSymbol, SimpleLineSymbol

__all__ = (
    "LayerBase",
    "BaseMapLayer",
    "OperationalLayer",
    "FeatureLayer",
    "FeatureCollection",
    "FeatureCollectionLayer",
    "FeatureCollectionFeatureSet",
    "Group",
    "StreamLayer",
    "BingMapsAerialLayer",
    "BingMapsRoadLayer",
    "BingMapsHybridLayer",
    "CsvLayer",
    "LocationInfo",
    "GeoRssLayer",
    "ImageServiceLayer",
    "ImageServiceVectorLayer",
    "MosaicRule",
    "MultidimensionalDefinition",
    "RenderingRule",
    "PixelType",
    "RasterFunction",
    "KmlLayer",
    "MapServiceLayer",
    "MapServiceChildLayer",
    "ThematicGroup",
    "OpenStreetMapLayer",
    "TiledImageServiceLayer",
    "TiledMapServiceLayer",
    "TiledLayerInfo",
    "ExclusionArea",
    "VectorTileLayer",
    "WebTiledLayer",
    "TileInfo",
    "Lod",
    "WmtsInfo",
    "WfsLayer",
    "WfsInfo",
    "WmsLayer",
    "WmsSublayer",
    "MIXINS",
)


def __dir__():
    return __all__


#: Wire names of the optional properties layer types pick from, in the order
#: they're documented.
MIXINS = (
    "url",
    "popupInfo",
    "refreshInterval",
    "itemId",
    "layerDefinition",
    "definitionEditor",
    "disablePopup",
    "isReference",
    "showLegend",
    "timeAnimation",
)


class LayerBase(Schema, tag_field="layerType", kw_only=True):
    """Properties shared by all layers.

    Parameters
    ----------
    id : str or int
        A unique identifier for the layer.
    opacity : float
        The layer's opacity, from 0 (transparent) to 1 (opaque).
    title : str
        A user-friendly name for the layer.
    visibility : bool
        Whether the layer is initially visible.
    max_scale, min_scale : float, optional
        The scale range in which the layer is visible.
    type : str, optional
        Deprecated, superseded by ``layerType``.
    """

    id: Union[str, int]
    opacity: Annotated[float, Meta(ge=0, le=1)]
    title: str
    visibility: bool
    max_scale: Optional[float] = None
    min_scale: Optional[float] = None
    type: Optional[str] = None


def _point(obj, field):
    if obj is None:
        return None
    try:
        return _geometry.convert(obj, _geometry.PointAny)
    except msgspec.ValidationError as exc:
        raise located(exc, field) from exc


# Feature layer ---------------------------------------------------------------


class Group(Schema, tag_field="groupType", tag="pointSymbolCallout", kw_only=True):
    group_id: Optional[int] = None


class FeatureCollectionFeatureSet(Schema, kw_only=True):
    features: Optional[List[WebmapFeature]] = None
    geometry_type: Optional[GeometryType] = None


class FeatureCollectionLayer(Schema, kw_only=True):
    feature_set: Optional[FeatureCollectionFeatureSet] = None
    layer_definition: Optional[LayerDefinition] = None
    next_object_id: Optional[int] = None
    popup_info: Optional[PopupInfo] = None
    show_legend: Optional[bool] = None


class FeatureCollection(Schema, kw_only=True):
    """Features stored in the web map itself rather than in a service."""

    group_id_field: Optional[str] = None
    groups: Optional[List[Group]] = None
    layers: Optional[List[FeatureCollectionLayer]] = None
    show_legend: Optional[bool] = None


class FeatureLayer(LayerBase, tag="ArcGISFeatureLayer", kw_only=True):
    """A layer of a feature service, or a feature collection.

    ``mode`` is ``0`` for snapshot, ``1`` for on-demand and ``2`` for
    selection-only.
    """

    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    definition_editor: Optional[DefinitionEditor] = None
    disable_popup: Optional[bool] = None
    show_legend: Optional[bool] = None
    time_animation: Optional[bool] = None
    capabilities: Optional[str] = None
    feature_collection: Optional[FeatureCollection] = None
    feature_collection_type: Optional[Literal["markup", "notes", "route"]] = None
    mode: Optional[Literal[0, 1, 2]] = None
    show_labels: Optional[bool] = None
    visible_layers: Optional[List[int]] = None


class StreamLayer(LayerBase, tag="ArcGISStreamLayer", kw_only=True):
    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    definition_editor: Optional[DefinitionEditor] = None
    disable_popup: Optional[bool] = None
    show_legend: Optional[bool] = None


# Bing ------------------------------------------------------------------------


class BingMapsAerialLayer(LayerBase, tag="BingMapsAerial", kw_only=True):
    portal_url: str


class BingMapsRoadLayer(LayerBase, tag="BingMapsRoad", kw_only=True):
    portal_url: str


class BingMapsHybridLayer(LayerBase, tag="BingMapsHybrid", kw_only=True):
    portal_url: str


# CSV and GeoRSS --------------------------------------------------------------


class LocationInfo(
    Schema, tag_field="locationType", tag="coordinates", kw_only=True
):
    """Which CSV columns hold the coordinates of each row."""

    latitude_field_name: Optional[str] = None
    longitude_field_name: Optional[str] = None


class CsvLayer(LayerBase, tag="CSV", kw_only=True):
    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    refresh_interval: Optional[float] = None
    layer_definition: Optional[LayerDefinition] = None
    show_legend: Optional[bool] = None
    column_delimiter: Optional[Literal[",", " ", ";", "|", "\t"]] = None
    location_info: Optional[LocationInfo] = None
    type: Optional[Literal["CSV"]] = None


class GeoRssLayer(LayerBase, tag="GeoRSS", kw_only=True):
    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    show_legend: Optional[bool] = None
    line_symbol: Optional[SimpleLineSymbol] = None
    point_symbol: Optional[PictureMarkerSymbol] = None
    polygon_symbol: Optional[SimpleFillSymbol] = None
    type: Optional[Literal["GeoRSS"]] = None


# Image services --------------------------------------------------------------


class PixelType(str, enum.Enum):
    C128 = "C128"
    C64 = "C64"
    F32 = "F32"
    F64 = "F64"
    S16 = "S16"
    S32 = "S32"
    S8 = "S8"
    U1 = "U1"
    U16 = "U16"
    U2 = "U2"
    U32 = "U32"
    U4 = "U4"
    U8 = "U8"
    UNKNOWN = "UNKNOWN"


class RasterFunction(str, enum.Enum):
    ARG_STATISTICS = "ArgStatistics"
    ARITHMETIC = "Arithmetic"
    ASPECT = "Aspect"
    BAND_ARITHMETIC = "BandArithmetic"
    CLASSIFY = "Classify"
    CLIP = "Clip"
    COLORMAP = "Colormap"
    COLORMAP_TO_RGB = "ColormapToRGB"
    COMPLEX = "Complex"
    COMPOSITE_BAND = "CompositeBand"
    CONTRAST_BRIGHTNESS = "ContrastBrightness"
    CONVOLUTION = "Convolution"
    CURVATURE = "Curvature"
    ELEVATION_VOID_FILL = "ElevationVoidFill"
    EXTRACT_BAND = "ExtractBand"
    GEOMETRIC = "Geometric"
    GREYSCALE = "Greyscale"
    IDENTITY = "Identity"
    HILLSHADE = "Hillshade"
    LOCAL = "Local"
    MASK = "Mask"
    ML_CLASSIFY = "MLClassify"
    NDVI = "NDVI"
    PANSHARPENING = "Pansharpening"
    RASTER_CALCULATOR = "RasterCalculator"
    RECAST = "Recast"
    REMAP = "Remap"
    RESAMPLE = "Resample"
    SEGMENT_MEAN_SHIFT = "SegmentMeanShift"
    SHADED_RELIEF = "ShadedRelief"
    SLOPE = "Slope"
    STATISTICS = "Statistics"
    STATISTICS_HISTOGRAM = "StatisticsHistogram"
    STRETCH = "Stretch"
    TASSELED_CAP = "TasseledCap"
    THRESHOLD = "Threshold"
    TRANSPOSE_BITS = "TransposeBits"
    UNIT_CONVERSION = "UnitConversion"
    VECTORFIELD = "Vectorfield"
    VECTOR_FIELD_RENDERER = "VectorFieldRenderer"
    WEIGHTED_SUM = "WeightedSum"
    WEIGHTED_OVERLAY = "WeightedOverlay"


class MultidimensionalDefinition(Schema, kw_only=True):
    dimension_name: Optional[str] = None
    is_slice: Optional[bool] = None
    values: Optional[List[float]] = None
    variable_name: Optional[str] = None


class MosaicRule(Schema, kw_only=True):
    """How the rasters of an image service are mosaicked together.

    ``viewpoint`` is a point geometry, given as a geometry instance or a
    decoded mapping.
    """

    mosaic_method: Literal[
        "esriMosaicNone",
        "esriMosaicCenter",
        "esriMosaicNadir",
        "esriMosaicViewpoint",
        "esriMosaicAttribute",
        "esriMosaicLockRaster",
        "esriMosaicNorthwest",
        "esriMosaicSeamline",
    ]
    ascending: Optional[bool] = None
    fids: Optional[List[int]] = None
    item_rendering_rule: Optional[str] = None
    lock_raster_ids: Optional[List[int]] = None
    mosaic_operation: Optional[
        Literal["MT_FIRST", "MT_LAST", "MT_MIN", "MT_MAX", "MT_MEAN", "MT_BLEND", "MT_SUM"]
    ] = None
    multidimensional_definition: Optional[List[MultidimensionalDefinition]] = None
    sort_field: Optional[str] = None
    sort_value: Optional[Literal["Number", "String"]] = None
    viewpoint: Any = None
    where: Optional[str] = None

    def __post_init__(self):
        self.viewpoint = _point(self.viewpoint, "viewpoint")


class RenderingRule(Schema, kw_only=True):
    output_pixel_type: Optional[PixelType] = None
    raster_function: Optional[RasterFunction] = None
    raster_function_arguments: Optional[Dict[RasterFunction, Any]] = None
    variable_name: Optional[str] = None


class ImageServiceLayer(LayerBase, tag="ArcGISImageServiceLayer", kw_only=True):
    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    definition_editor: Optional[DefinitionEditor] = None
    disable_popup: Optional[bool] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None
    time_animation: Optional[bool] = None
    mosaic_rule: Optional[MosaicRule] = None
    band_ids: Optional[List[int]] = None
    compression_quality: Optional[Annotated[float, Meta(ge=0, le=100)]] = None
    format: Optional[
        Literal["jpgpng", "png", "png8", "png24", "jpg", "bmp", "gif", "tiff", "png32"]
    ] = None
    interpolation: Optional[
        Literal[
            "RSP_BilinearInterpolation",
            "RSP_CubicConvolution",
            "RSP_Majority",
            "RSP_NearestNeighbor",
        ]
    ] = None
    no_data: Union[float, List[float], None] = None
    no_data_interpretation: Optional[
        Literal["esriNoDataMatchAny", "esriNoDataMatchAll"]
    ] = None
    pixel_type: Optional[PixelType] = None
    rendering_rule: Optional[RenderingRule] = None


class ImageServiceVectorLayer(
    LayerBase, tag="ArcGISImageServiceVectorLayer", kw_only=True
):
    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    definition_editor: Optional[DefinitionEditor] = None
    disable_popup: Optional[bool] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None
    time_animation: Optional[bool] = None
    mosaic_rule: Optional[MosaicRule] = None
    symbol_tile_size: Optional[float] = None


# KML -------------------------------------------------------------------------


class KmlLayer(LayerBase, tag="KML", kw_only=True):
    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    show_legend: Optional[bool] = None
    type: Optional[Literal["KML"]] = None
    visible_folders: Optional[List[int]] = None


# Map services ----------------------------------------------------------------


class MapServiceChildLayer(Schema, kw_only=True):
    """Overrides for one sublayer of a map service layer."""

    popup_info: Optional[PopupInfo] = None
    layer_definition: Optional[LayerDefinition] = None
    definition_editor: Optional[DefinitionEditor] = None
    show_legend: Optional[bool] = None
    default_visibility: Optional[bool] = None
    disable_popup: Optional[bool] = None
    id: Optional[int] = None
    layer_item_id: Optional[str] = None
    layer_url: Optional[str] = None
    max_scale: Optional[float] = None
    min_scale: Optional[float] = None
    name: Optional[str] = None
    parent_layer_id: Optional[int] = None
    sub_layer_ids: Optional[List[int]] = None


class ThematicGroup(Schema, kw_only=True):
    field_names: Optional[List[str]] = None
    layer_ids: Optional[List[int]] = None
    name: Optional[str] = None


class MapServiceLayer(LayerBase, tag="ArcGISMapServiceLayer", kw_only=True):
    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None
    time_animation: Optional[bool] = None
    layers: List[MapServiceChildLayer]
    thematic_group: Optional[ThematicGroup] = None
    visible_layers: Optional[List[int]] = None


class OpenStreetMapLayer(LayerBase, tag="OpenStreetMap", kw_only=True):
    pass


# Tiled services --------------------------------------------------------------


class TiledImageServiceLayer(
    LayerBase, tag="ArcGISTiledImageServiceLayer", kw_only=True
):
    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None


class TiledLayerInfo(Schema, kw_only=True):
    """Overrides for one sublayer of a tiled map service layer."""

    popup_info: Optional[PopupInfo] = None
    show_legend: Optional[bool] = None
    disable_popup: Optional[bool] = None
    id: Optional[int] = None
    layer_item_id: Optional[str] = None
    layer_url: Optional[str] = None


class ExclusionArea(Schema, kw_only=True):
    """An area in which a reference layer is not drawn."""

    geometry: Optional[Extent] = None
    max_scale: Optional[float] = None
    max_zoom: Optional[int] = None
    min_scale: Optional[float] = None
    min_zoom: Optional[int] = None


class TiledMapServiceLayer(
    LayerBase, tag="ArcGISTiledMapServiceLayer", kw_only=True
):
    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None
    display_levels: Union[int, List[int], None] = None
    exclusion_areas: Optional[List[ExclusionArea]] = None
    layers: Optional[List[TiledLayerInfo]] = None


class VectorTileLayer(LayerBase, tag="VectorTileLayer", kw_only=True):
    item_id: Optional[str] = None
    style_url: Optional[str] = None


class Lod(Schema, kw_only=True):
    """One level of detail of a tiling scheme."""

    level: Optional[int] = None
    level_value: Optional[str] = None
    resolution: Optional[float] = None
    scale: Optional[float] = None


class TileInfo(Schema, kw_only=True):
    """The tiling scheme of a web tiled layer.

    ``origin`` is a point geometry, given as a geometry instance or a decoded
    mapping.
    """

    cols: Optional[int] = None
    compression_quality: Optional[float] = None
    dpi: Optional[float] = None
    format: Optional[
        Literal[
            "jpg",
            "png",
            "png24",
            "png32",
            "png8",
            "pdf",
            "bmp",
            "gif",
            "svg",
            "svgz",
            "emf",
            "ps",
            "mixed",
            "lerc",
        ]
    ] = None
    lods: Optional[List[Lod]] = None
    origin: Any = None
    rows: Optional[int] = None
    spatial_reference: Optional[SpatialReference] = None

    def __post_init__(self):
        self.origin = _point(self.origin, "origin")


class WmtsInfo(Schema, kw_only=True):
    """Where and how to request tiles from a WMTS service."""

    layer_identifier: str
    url: str
    custom_layer_parameters: Optional[Dict[str, Any]] = None
    custom_parameters: Optional[Dict[str, Any]] = None
    tile_matrix_set: Optional[str] = None


class WebTiledLayer(LayerBase, tag="WebTiledLayer", kw_only=True):
    """Tiles requested from a URL template with ``{level}``, ``{col}`` and
    ``{row}`` placeholders."""

    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    is_reference: Optional[bool] = None
    copyright: Optional[str] = None
    full_extent: Optional[Extent] = None
    sub_domains: Optional[List[str]] = None
    template_url: Optional[str] = None
    tile_info: Optional[TileInfo] = None
    wmts_info: Optional[WmtsInfo] = None


# OGC services ----------------------------------------------------------------


class WfsInfo(Schema, kw_only=True):
    custom_parameters: Optional[Dict[str, Any]] = None
    feature_url: Optional[str] = None
    max_features: Optional[int] = None
    name: Optional[str] = None
    supported_spatial_references: Optional[List[int]] = None
    swap_xy: Optional[bool] = msgspec.field(default=None, name="swapXY")
    version: Optional[str] = None
    wfs_namespace: Optional[str] = None


class WfsLayer(LayerBase, tag="WFS", kw_only=True):
    """A layer of an OGC Web Feature Service.

    ``mode`` is ``0`` for snapshot and ``1`` for on-demand.
    """

    url: Optional[str] = None
    popup_info: Optional[PopupInfo] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    show_legend: Optional[bool] = None
    mode: Optional[Literal[0, 1]] = None
    wfs_info: Optional[WfsInfo] = None


class WmsSublayer(Schema, kw_only=True):
    legend_url: Optional[str] = None
    name: Optional[str] = None
    queryable: Optional[bool] = None
    show_popup: Optional[bool] = None
    title: Optional[str] = None


Position2 = Annotated[List[float], Meta(min_length=2, max_length=2)]


class WmsLayer(LayerBase, tag="WMS", kw_only=True):
    """A layer of an OGC Web Map Service.

    ``extent`` is given as the lower left and upper right corners.
    """

    url: Optional[str] = None
    refresh_interval: Optional[float] = None
    item_id: Optional[str] = None
    is_reference: Optional[bool] = None
    show_legend: Optional[bool] = None
    copyright: Optional[str] = None
    custom_layer_parameters: Optional[Dict[str, Any]] = None
    custom_parameters: Optional[Dict[str, Any]] = None
    extent: Optional[Annotated[List[Position2], Meta(min_length=2, max_length=2)]] = None
    feature_info_format: Optional[str] = None
    feature_info_url: Optional[str] = None
    format: Optional[Literal["bmp", "gif", "jpg", "png", "svg"]] = None
    layers: Optional[List[WmsSublayer]] = None
    map_url: Optional[str] = None
    max_height: Optional[int] = None
    max_width: Optional[int] = None
    spatial_references: Optional[List[int]] = None
    version: Optional[str] = None
    visible_layers: Optional[List[str]] = None


# Unions ----------------------------------------------------------------------

BaseMapLayer = Union[
    BingMapsAerialLayer,
    BingMapsRoadLayer,
    BingMapsHybridLayer,
    ImageServiceLayer,
    ImageServiceVectorLayer,
    MapServiceLayer,
    OpenStreetMapLayer,
    TiledImageServiceLayer,
    TiledMapServiceLayer,
    VectorTileLayer,
    WebTiledLayer,
    WmsLayer,
]

OperationalLayer = Union[
    CsvLayer,
    FeatureLayer,
    GeoRssLayer,
    ImageServiceLayer,
    ImageServiceVectorLayer,
    KmlLayer,
    MapServiceLayer,
    StreamLayer,
    TiledImageServiceLayer,
    TiledMapServiceLayer,
    VectorTileLayer,
    WebTiledLayer,
    WfsLayer,
    WmsLayer,
]
