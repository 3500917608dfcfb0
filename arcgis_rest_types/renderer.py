"""Renderers, and the visual variables and authoring info they carry.

All renderers are tagged by ``type``, but the predominance renderer is
written with ``type: "uniqueValue"`` just like the unique value renderer.
`Renderer` is therefore the tagged union of the seven renderers with
distinct tags, and `convert` tells the two ``uniqueValue`` renderers apart
by their content. `AnyRenderer` covers all eight.
"""
import logging
from collections.abc import Mapping
from typing import Annotated, Any, List, Literal, Optional, Union

import msgspec
from msgspec import Meta

from ._base import Schema
from .core import Color
from .errors import UnknownVariant
from .symbol import SimpleFillSymbol, Symbol

__all__ = (
    "Renderer",
    "AnyRenderer",
    "RendererBase",
    "SimpleRenderer",
    "UniqueValueRenderer",
    "UniqueValueInfo",
    "PredominanceRenderer",
    "ClassBreaksRenderer",
    "ClassBreakInfo",
    "HeatmapRenderer",
    "HeatmapColorStop",
    "RasterStretchRenderer",
    "TemporalRenderer",
    "VectorFieldRenderer",
    "LegendOptions",
    "AuthoringInfo",
    "AuthoringInfoField",
    "AuthoringInfoClassBreakInfo",
    "AuthoringInfoVisualVariable",
    "ColorRamp",
    "AlgorithmicColorRamp",
    "MultipartColorRamp",
    "VisualVariable",
    "ColorInfo",
    "ColorStop",
    "RotationInfo",
    "SizeInfo",
    "Size",
    "SizeStop",
    "TransparencyInfo",
    "TransparencyStop",
    "convert",
    "renderer_kind",
)


def __dir__():
    return __all__


logger = logging.getLogger(__name__)

RotationType = Literal["arithmetic", "geographic"]


class LegendOptions(Schema, kw_only=True):
    show_legend: bool
    order: Optional[Literal["ascendingValues", "descendingValues"]] = None
    title: Optional[str] = None


# Color ramps -----------------------------------------------------------------


class ColorRampBase(Schema, tag_field="type"):
    pass


class AlgorithmicColorRamp(ColorRampBase, tag="algorithmic", kw_only=True):
    """A ramp interpolating between two colors."""

    algorithm: Literal["esriHSVAlgorithm", "esriCIELabAlgorithm", "esriLabLChAlgorithm"]
    from_color: Color
    to_color: Color


class MultipartColorRamp(ColorRampBase, tag="multipart", kw_only=True):
    color_ramps: List[AlgorithmicColorRamp]


ColorRamp = Union[AlgorithmicColorRamp, MultipartColorRamp]


# Authoring info --------------------------------------------------------------


class AuthoringInfoClassBreakInfo(Schema, kw_only=True):
    max_value: float
    min_value: float


class AuthoringInfoField(Schema, kw_only=True):
    class_break_infos: List[AuthoringInfoClassBreakInfo]
    field: str
    normalization_field: Optional[str] = None


class AuthoringInfoVisualVariable(Schema, kw_only=True):
    max_slider_value: float
    min_slider_value: float
    type: Literal["colorInfo", "sizeInfo", "transparencyInfo", "rotationInfo"]
    end_time: Optional[float] = None
    field: Optional[str] = None
    start_time: Optional[float] = None
    style: Optional[Literal["percent", "ratio", "percentTotal"]] = None
    theme: Optional[
        Literal["high-to-low", "above-and-below", "centered-on", "extremes"]
    ] = None
    units: Optional[
        Literal["seconds", "minutes", "hours", "days", "months", "years"]
    ] = None


_STANDARD_DEVIATION_INTERVALS = (1, 0.5, 0.33, 0.25)


class AuthoringInfo(Schema, kw_only=True):
    """How a renderer was authored, so that authoring tools can restore
    their state. Not used for drawing."""

    visual_variables: List[AuthoringInfoVisualVariable]
    classification_method: Optional[
        Literal[
            "esriClassifyNaturalBreaks",
            "esriClassifyEqualInterval",
            "esriClassifyQuantile",
            "esriClassifyStandardDeviation",
            "esriClassifyManual",
        ]
    ] = None
    color_ramp: Optional[ColorRamp] = None
    field1: Optional[AuthoringInfoField] = None
    field2: Optional[AuthoringInfoField] = None
    fields: Optional[List[str]] = None
    focus: Optional[Literal["HH", "HL", "LH", "LL"]] = None
    num_classes: Optional[int] = None
    standard_deviation_interval: Optional[float] = None
    type: Optional[
        Literal["classedSize", "classedColor", "predominance", "relationship"]
    ] = None

    def __post_init__(self):
        sdi = self.standard_deviation_interval
        if sdi is not None and sdi not in _STANDARD_DEVIATION_INTERVALS:
            raise ValueError(
                f"Invalid enum value {sdi!r} - `standardDeviationInterval` must be "
                f"one of {', '.join(map(str, _STANDARD_DEVIATION_INTERVALS))}"
            )


# Visual variables ------------------------------------------------------------


class VisualVariableBase(Schema, tag_field="type"):
    pass


class ColorStop(Schema, kw_only=True):
    color: Color
    value: float
    label: Optional[str] = None


class ColorInfo(VisualVariableBase, tag="colorInfo", kw_only=True):
    """Varies the color of symbols with a field or expression value."""

    field: str
    legend_options: Optional[LegendOptions] = None
    normalization_field: Optional[str] = None
    stops: Optional[List[ColorStop]] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None


class RotationInfo(VisualVariableBase, tag="rotationInfo", kw_only=True):
    field: str
    rotation_type: RotationType
    legend_options: Optional[LegendOptions] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None


class SizeStop(Schema, kw_only=True):
    size: float
    value: float


class Size(VisualVariableBase, tag="sizeInfo", kw_only=True):
    """A size that itself varies with scale, used for ``min_size`` and
    ``max_size`` of a `SizeInfo`."""

    stops: List[SizeStop]
    expression: Optional[str] = None
    value_expression: Optional[str] = None


class SizeInfo(VisualVariableBase, tag="sizeInfo", kw_only=True):
    """Varies the size of symbols with a field or expression value."""

    field: str
    stops: List[SizeStop]
    expression: Optional[str] = None
    legend_options: Optional[LegendOptions] = None
    max_data_value: Optional[float] = None
    max_size: Union[Size, float, None] = None
    min_data_value: Optional[float] = None
    min_size: Union[Size, float, None] = None
    normalization_field: Optional[str] = None
    target: Optional[Literal["outline"]] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None
    value_unit: Optional[str] = None


class TransparencyStop(Schema, kw_only=True):
    transparency: float
    value: float
    label: Optional[str] = None


class TransparencyInfo(VisualVariableBase, tag="transparencyInfo", kw_only=True):
    field: str
    legend_options: Optional[LegendOptions] = None
    normalization_field: Optional[str] = None
    stops: Optional[List[TransparencyStop]] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None


VisualVariable = Union[ColorInfo, RotationInfo, SizeInfo, TransparencyInfo]


# Renderers -------------------------------------------------------------------


class RendererBase(Schema, tag_field="type"):
    """Base class for renderers, tagged by ``type``."""


class SimpleRenderer(RendererBase, tag="simple", kw_only=True):
    """Draws every feature with the same symbol."""

    symbol: Symbol
    authoring_info: Optional[AuthoringInfo] = None
    description: Optional[str] = None
    label: Optional[str] = None
    rotation_expression: Union[str, float, None] = None
    rotation_type: Optional[RotationType] = None
    visual_variables: Optional[List[VisualVariable]] = None


class UniqueValueInfo(Schema, kw_only=True):
    symbol: Symbol
    value: str
    description: Optional[str] = None
    label: Optional[str] = None


class _UniqueValueBase(RendererBase, kw_only=True):
    unique_value_infos: List[UniqueValueInfo]
    authoring_info: Optional[AuthoringInfo] = None
    background_fill_symbol: Optional[SimpleFillSymbol] = None
    default_label: Optional[str] = None
    default_symbol: Optional[Symbol] = None
    rotation_expression: Union[str, float, None] = None
    rotation_type: Optional[RotationType] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None
    visual_variables: Optional[List[VisualVariable]] = None


class UniqueValueRenderer(_UniqueValueBase, tag="uniqueValue", kw_only=True):
    """Symbolizes features by matching up to three field values (joined by
    ``field_delimiter``) against ``unique_value_infos``."""

    field1: str
    field2: Optional[str] = None
    field3: Optional[str] = None
    field_delimiter: Optional[str] = None
    legend_options: Optional[LegendOptions] = None


class PredominanceRenderer(_UniqueValueBase, tag="uniqueValue", kw_only=True):
    """Symbolizes features by which of several competing values is the
    largest, as computed by ``value_expression``.

    Written with the same ``type`` as `UniqueValueRenderer`, and told apart
    from it by having no ``field1``. Its authoring info usually has
    ``type: "predominance"``.
    """


class ClassBreakInfo(Schema, kw_only=True):
    class_max_value: float
    symbol: Symbol
    class_min_value: Optional[float] = None
    description: Optional[str] = None
    label: Optional[str] = None


class ClassBreaksRenderer(RendererBase, tag="classBreaks", kw_only=True):
    """Symbolizes features by which numeric range their value falls in."""

    class_break_infos: List[ClassBreakInfo]
    field: str
    authoring_info: Optional[AuthoringInfo] = None
    background_fill_symbol: Optional[SimpleFillSymbol] = None
    classification_method: Optional[
        Literal[
            "esriClassifyDefinedInterval",
            "esriClassifyEqualInterval",
            "esriClassifyGeometricalInterval",
            "esriClassifyNaturalBreaks",
            "esriClassifyQuantile",
            "esriClassifyStandardDeviation",
            "esriClassifyManual",
        ]
    ] = None
    default_label: Optional[str] = None
    default_symbol: Optional[Symbol] = None
    legend_options: Optional[LegendOptions] = None
    min_value: Optional[float] = None
    normalization_field: Optional[str] = None
    normalization_total: Optional[float] = None
    normalization_type: Optional[
        Literal[
            "esriNormalizeByField",
            "esriNormalizeByLog",
            "esriNormalizeByPercentOfTotal",
        ]
    ] = None
    rotation_expression: Union[str, float, None] = None
    rotation_type: Optional[RotationType] = None
    value_expression: Optional[str] = None
    value_expression_title: Optional[str] = None
    visual_variables: Optional[List[VisualVariable]] = None


class HeatmapColorStop(Schema, kw_only=True):
    color: Color
    ratio: float


class HeatmapRenderer(RendererBase, tag="heatmap", kw_only=True):
    color_stops: List[HeatmapColorStop]
    blur_radius: Optional[float] = None
    field: Optional[str] = None
    max_pixel_intensity: Optional[float] = None
    min_pixel_intensity: Optional[float] = None


Statistics = Annotated[List[float], Meta(min_length=4, max_length=4)]


class RasterStretchRenderer(RendererBase, tag="rasterStretch", kw_only=True):
    """Stretches raster pixel values over a color ramp.

    Each entry of ``statistics`` is ``[min, max, mean, stddev]`` for one band.
    """

    color_ramp: Optional[ColorRamp] = None
    compute_gamma: Optional[bool] = None
    dra: Optional[bool] = None
    gamma: Optional[List[float]] = None
    max: Optional[float] = None
    max_percent: Optional[float] = None
    min: Optional[float] = None
    min_percent: Optional[float] = None
    number_of_standard_deviations: Optional[float] = None
    sigmoid_strength_level: Optional[float] = None
    statistics: Optional[List[Statistics]] = None
    stretch_type: Optional[
        Literal[
            "none",
            "standardDeviation",
            "histogramEqualization",
            "minMax",
            "percentClip",
            "sigmoid",
        ]
    ] = None
    use_gamma: Optional[bool] = None


class TemporalRenderer(RendererBase, tag="temporal", kw_only=True):
    """Renders a stream of observations, with separate renderers for the
    latest observation, older observations, and the track joining them."""

    latest_observation_renderer: SimpleRenderer
    observational_renderer: SimpleRenderer
    track_renderer: SimpleRenderer


class VectorFieldRenderer(RendererBase, tag="vectorField", kw_only=True):
    attribute_field: Optional[str] = None
    flow_representation: Optional[Literal["flow_from", "flow_to"]] = None
    rotation_type: Optional[RotationType] = None
    style: Optional[
        Literal[
            "wind_speed",
            "single_arrow",
            "classified_arrow",
            "beaufort_kn",
            "beaufort_m",
            "beaufort_mi",
            "beaufort_ft",
            "beaufort_km",
            "ocean_current_m",
            "ocean_current_kn",
            "simple_scalar",
        ]
    ] = None
    visual_variables: Optional[List[VisualVariable]] = None


Renderer = Union[
    ClassBreaksRenderer,
    HeatmapRenderer,
    RasterStretchRenderer,
    SimpleRenderer,
    TemporalRenderer,
    UniqueValueRenderer,
    VectorFieldRenderer,
]

AnyRenderer = Union[Renderer, PredominanceRenderer]


def _is_predominance(obj: Mapping) -> bool:
    # `UniqueValueRenderer` requires `field1`, the predominance renderer has none
    return "field1" not in obj


def convert(obj: Any) -> RendererBase:
    """Convert a decoded renderer mapping into its renderer class.

    A ``uniqueValue`` renderer is a `PredominanceRenderer` if it has no
    ``field1``, whatever its authoring info says. All other renderers are
    converted through the `Renderer` tagged union.

    Parameters
    ----------
    obj : Mapping or RendererBase
        A renderer object as decoded from JSON. Renderer instances are
        returned unchanged.

    Returns
    -------
    renderer : RendererBase
    """
    if isinstance(obj, RendererBase):
        return obj
    if not isinstance(obj, Mapping):
        raise UnknownVariant(
            f"Unknown renderer, expected an object, got `{type(obj).__name__}`"
        )
    if obj.get("type") == "uniqueValue" and _is_predominance(obj):
        logger.debug("Converting `uniqueValue` renderer as a predominance renderer")
        return msgspec.convert(obj, PredominanceRenderer)
    return msgspec.convert(obj, Renderer)


def renderer_kind(renderer: RendererBase) -> str:
    """A name for the renderer's variant, distinct for all eight variants.

    This is the wire ``type`` for all renderers except the predominance
    renderer, which is ``"predominance"``.
    """
    if isinstance(renderer, PredominanceRenderer):
        return "predominance"
    return type(renderer).__struct_config__.tag
