"""Layer definitions and the records they're built from.

A layer definition overrides or supplements the properties a layer gets from
its service: drawing info, definition expression, fields, templates, time
info, and for dynamic map layers, the data source.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import msgspec
from msgspec import UNSET, Meta, UnsetType

from . import renderer as _renderer
from ._base import Schema
from .core import Extent, FieldType, GeometryType, SpatialReference, TimeUnits
from .domain import Domain
from .errors import located
from .feature import Feature, Field
from .labeling import LabelingInfo
from .popup import PopupInfo
from .symbol import Symbol

__all__ = (
    "LayerDefinition",
    "DrawingInfo",
    "DefinitionEditor",
    "DefinitionInput",
    "DefinitionParameter",
    "FeatureReduction",
    "RangeInfo",
    "Template",
    "FeatureType",
    "LayerTimeInfo",
    "TimeInfoExportOptions",
    "TimeReference",
    "WebmapField",
    "WebmapFeature",
    "Source",
    "DynamicDataLayer",
    "DynamicMapLayer",
    "DataSource",
    "JoinTableDataSource",
    "QueryTableDataSource",
    "RasterDataSource",
    "TableDataSource",
)


def __dir__():
    return __all__


class WebmapField(Field, kw_only=True):
    """A field as described within a web map, with domain and editing
    properties."""

    domain: Optional[Domain] = None
    editable: Optional[bool] = None
    exact_match: Optional[bool] = None
    nullable: Optional[bool] = None


class WebmapFeature(Feature, kw_only=True):
    """A feature stored in a web map, optionally with its own symbol."""

    symbol: Optional[Symbol] = None


# Definition editor -----------------------------------------------------------


class DefinitionParameter(Schema, kw_only=True):
    default_value: Union[float, str, None] = None
    field_name: Optional[str] = None
    parameter_id: Any = None
    type: Optional[FieldType] = None
    utc_value: Optional[float] = None


class DefinitionInput(Schema, kw_only=True):
    hint: Optional[str] = None
    parameters: Optional[List[DefinitionParameter]] = None
    prompt: Optional[str] = None


class DefinitionEditor(Schema, kw_only=True):
    """Interactive filter inputs substituted into a parameterized
    definition expression."""

    inputs: Optional[List[DefinitionInput]] = None
    parameterized_expression: Optional[str] = None


# Drawing info ----------------------------------------------------------------


class DrawingInfo(Schema, kw_only=True):
    """How a layer is drawn: its renderer, labels and transparency.

    ``renderer`` may be given as a renderer instance or a decoded mapping,
    see `arcgis_rest_types.renderer.convert`.
    """

    fixed_symbols: Any = None
    labeling_info: Optional[List[LabelingInfo]] = None
    renderer: Any = None
    scale_symbols: Optional[bool] = None
    show_labels: Optional[bool] = None
    transparency: Optional[Annotated[float, Meta(ge=0, le=100)]] = None

    def __post_init__(self):
        if self.renderer is not None:
            try:
                self.renderer = _renderer.convert(self.renderer)
            except msgspec.ValidationError as exc:
                raise located(exc, "renderer") from exc


# Dynamic layer sources -------------------------------------------------------


class _SourceBase(Schema, tag_field="type"):
    pass


class DynamicMapLayer(_SourceBase, tag="mapLayer", kw_only=True):
    """A layer of the map service itself."""

    gdb_version: Optional[str] = None
    map_layer_id: Optional[int] = None


class DynamicDataLayer(_SourceBase, tag="dataLayer", kw_only=True):
    """A layer created on the fly from a registered workspace."""

    data_source: Optional["DataSource"] = None
    fields: Optional[List[WebmapField]] = None


Source = Union[DynamicMapLayer, DynamicDataLayer]


class JoinTableDataSource(_SourceBase, tag="joinTable", kw_only=True):
    join_type: Optional[Literal["esriLeftOuterJoin", "esriLeftInnerJoin"]] = None
    left_table_key: Optional[str] = None
    left_table_source: Optional[Source] = None
    right_table_key: Optional[str] = None
    right_table_source: Optional[Source] = None


class QueryTableDataSource(_SourceBase, tag="queryTable", kw_only=True):
    geometry_type: GeometryType
    oid_fields: Optional[str] = None
    query: Optional[str] = None
    spatial_reference: Optional[SpatialReference] = None
    workspace_id: Optional[str] = None


class RasterDataSource(_SourceBase, tag="raster", kw_only=True):
    data_source_name: Optional[str] = None
    workspace_id: Optional[str] = None


class TableDataSource(_SourceBase, tag="table", kw_only=True):
    data_source_name: Optional[str] = None
    gdb_version: Optional[str] = None
    workspace_id: Optional[str] = None


DataSource = Union[
    JoinTableDataSource, QueryTableDataSource, RasterDataSource, TableDataSource
]


# Layer definition ------------------------------------------------------------


class FeatureReduction(Schema, kw_only=True):
    cluster_radius: float
    popup_info: Optional[PopupInfo] = None
    type: Optional[Literal["cluster"]] = None


Range = Annotated[List[float], Meta(min_length=2, max_length=2)]


class RangeInfo(Schema, tag_field="type", tag="rangeInfo", kw_only=True):
    current_range_extent: Optional[Range] = None
    field: Optional[str] = None
    full_range_extent: Optional[Range] = None
    name: Optional[str] = None


class Template(Schema, kw_only=True):
    """A feature template, describing how new features are created."""

    description: Optional[str] = None
    drawing_tool: Optional[
        Literal[
            "esriFeatureEditToolAutoCompletePolygon",
            "esriFeatureEditToolPolygon",
            "esriFeatureEditToolTriangle",
            "esriFeatureEditToolRectangle",
            "esriFeatureEditToolLeftArrow",
            "esriFeatureEditToolRightArrow",
            "esriFeatureEditToolEllipse",
            "esriFeatureEditToolUpArrow",
            "esriFeatureEditToolDownArrow",
            "esriFeatureEditToolCircle",
            "esriFeatureEditToolFreehand",
            "esriFeatureEditToolLine",
            "esriFeatureEditToolNone",
            "esriFeatureEditToolText",
            "esriFeatureEditToolPoint",
        ]
    ] = None
    name: Optional[str] = None
    prototype: Optional[WebmapFeature] = None


class FeatureType(Schema, kw_only=True):
    """A feature subtype, with its own domains and templates."""

    domains: Optional[Dict[str, Domain]] = None
    id: Union[int, str, None] = None
    name: Optional[str] = None
    templates: Optional[List[Template]] = None


class TimeReference(Schema, kw_only=True):
    respects_daylight_saving: Optional[bool] = None
    time_zone: Optional[str] = None


class TimeInfoExportOptions(Schema, kw_only=True):
    time_data_cumulative: Optional[bool] = None
    time_offset: Optional[float] = None
    time_offset_units: Optional[TimeUnits] = None
    use_time: Optional[bool] = None


class LayerTimeInfo(Schema, kw_only=True):
    end_time_field: Optional[str] = None
    export_options: Optional[TimeInfoExportOptions] = None
    has_live_data: Optional[bool] = None
    start_time_field: Optional[str] = None
    time_extent: Any = None
    time_interval: Optional[float] = None
    time_interval_unit: Optional[TimeUnits] = None
    time_reference: Optional[TimeReference] = None
    track_id_field: Optional[str] = None


class LayerDefinition(Schema, kw_only=True):
    """Overrides for the properties a layer gets from its service.

    ``extent`` may be an explicit ``null``, which is kept distinct from an
    absent extent.
    """

    allow_geometry_updates: Optional[bool] = None
    capabilities: Optional[str] = None
    copyright_text: Optional[str] = None
    current_version: Optional[float] = None
    default_visibility: Optional[bool] = None
    definition_editor: Optional[DefinitionEditor] = None
    definition_expression: Optional[str] = None
    description: Optional[str] = None
    display_field: Optional[str] = None
    drawing_info: Optional[DrawingInfo] = None
    extent: Union[Extent, None, UnsetType] = UNSET
    feature_reduction: Optional[FeatureReduction] = None
    fields: Optional[List[WebmapField]] = None
    geometry_type: Optional[GeometryType] = None
    global_id_field: Optional[str] = None
    has_attachments: Optional[bool] = None
    has_m: Optional[bool] = None
    has_static_data: Optional[bool] = None
    has_z: Optional[bool] = None
    html_popup_type: Optional[
        Literal[
            "esriServerHTMLPopupTypeNone",
            "esriServerHTMLPopupTypeAsURL",
            "esriServerHTMLPopupTypeAsHTMLText",
        ]
    ] = None
    id: Optional[int] = None
    is_data_versioned: Optional[bool] = None
    max_record_count: Optional[int] = None
    max_scale: Optional[float] = None
    min_scale: Optional[float] = None
    name: Optional[str] = None
    object_id_field: Optional[str] = None
    override_symbols: Optional[bool] = None
    range_infos: Optional[List[RangeInfo]] = None
    source: Optional[Source] = None
    spatial_reference: Optional[SpatialReference] = None
    supported_query_formats: Optional[str] = None
    supports_advanced_queries: Optional[bool] = None
    supports_attachments_by_upload_id: Optional[bool] = None
    supports_calculate: Optional[bool] = None
    supports_rollback_on_failure_parameter: Optional[bool] = None
    supports_statistics: Optional[bool] = None
    supports_validate_sql: Optional[bool] = None
    templates: Optional[List[Template]] = None
    time_info: Optional[LayerTimeInfo] = None
    type: Optional[Literal["Feature Layer", "Table"]] = None
    type_id_field: Optional[str] = None
    types: Optional[List[FeatureType]] = None
    visibility_field: Optional[str] = None
