"""Label classes."""
import enum
from typing import List, Literal, Optional

from ._base import Schema
from .popup import Format
from .symbol import TextSymbol

__all__ = ("LabelingInfo", "LabelPlacement", "LabelExpressionInfo", "LabelFieldInfo")


def __dir__():
    return __all__


class LabelPlacement(str, enum.Enum):
    POINT_ABOVE_CENTER = "esriServerPointLabelPlacementAboveCenter"
    POINT_BELOW_CENTER = "esriServerPointLabelPlacementBelowCenter"
    POINT_CENTER_CENTER = "esriServerPointLabelPlacementCenterCenter"
    POINT_ABOVE_LEFT = "esriServerPointLabelPlacementAboveLeft"
    POINT_BELOW_LEFT = "esriServerPointLabelPlacementBelowLeft"
    POINT_CENTER_LEFT = "esriServerPointLabelPlacementCenterLeft"
    POINT_ABOVE_RIGHT = "esriServerPointLabelPlacementAboveRight"
    POINT_BELOW_RIGHT = "esriServerPointLabelPlacementBelowRight"
    POINT_CENTER_RIGHT = "esriServerPointLabelPlacementCenterRight"
    LINE_ABOVE_AFTER = "esriServerLinePlacementAboveAfter"
    LINE_ABOVE_START = "esriServerLinePlacementAboveStart"
    LINE_BELOW_AFTER = "esriServerLinePlacementBelowAfter"
    LINE_BELOW_START = "esriServerLinePlacementBelowStart"
    LINE_CENTER_AFTER = "esriServerLinePlacementCenterAfter"
    LINE_CENTER_START = "esriServerLinePlacementCenterStart"
    LINE_ABOVE_ALONG = "esriServerLinePlacementAboveAlong"
    LINE_ABOVE_END = "esriServerLinePlacementAboveEnd"
    LINE_BELOW_ALONG = "esriServerLinePlacementBelowAlong"
    LINE_BELOW_END = "esriServerLinePlacementBelowEnd"
    LINE_CENTER_ALONG = "esriServerLinePlacementCenterAlong"
    LINE_CENTER_END = "esriServerLinePlacementCenterEnd"
    LINE_ABOVE_BEFORE = "esriServerLinePlacementAboveBefore"
    LINE_BELOW_BEFORE = "esriServerLinePlacementBelowBefore"
    LINE_CENTER_BEFORE = "esriServerLinePlacementCenterBefore"
    POLYGON_ALWAYS_HORIZONTAL = "esriServerPolygonPlacementAlwaysHorizontal"


class LabelFieldInfo(Schema, kw_only=True):
    field_name: str
    format: Format


class LabelExpressionInfo(Schema, kw_only=True):
    """An Arcade label expression."""

    expression: str
    value: str


class LabelingInfo(Schema, kw_only=True):
    """One label class of a layer: which features to label, with what text,
    placed how.

    Parameters
    ----------
    where : str
        A SQL where clause selecting the features this class labels.
    symbol : TextSymbol
        The symbol used to draw the labels.
    label_expression : str, optional
        A legacy label expression, such as ``[NAME]``.
    label_expression_info : LabelExpressionInfo, optional
        An Arcade label expression. Takes precedence over
        ``label_expression``.
    label_placement : LabelPlacement, optional
        The placement of labels relative to their feature.
    """

    remove_duplicates: Literal["none", "labelClass", "featureType", "all"]
    remove_duplicates_distance: float
    repeat_label: bool
    repeat_label_distance: float
    stack_alignment: Literal["textSymbol", "dynamic"]
    stack_label: bool
    symbol: TextSymbol
    use_coded_values: bool
    where: str
    allow_overrun: Optional[bool] = None
    deconfliction_strategy: Optional[Literal["none", "static", "dynamic"]] = None
    field_infos: Optional[List[LabelFieldInfo]] = None
    label_expression: Optional[str] = None
    label_expression_info: Optional[LabelExpressionInfo] = None
    label_placement: Optional[LabelPlacement] = None
    line_connection: Optional[
        Literal["none", "unambiguousLabels", "minimizeLabels"]
    ] = None
    max_scale: Optional[float] = None
    min_scale: Optional[float] = None
    multi_part: Optional[
        Literal["labelPerSegment", "labelPerPart", "labelPerFeature", "labelLargest"]
    ] = None
    name: Optional[str] = None
    priority: Optional[int] = None
