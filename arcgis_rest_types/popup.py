"""Popup configuration for layers and tables."""
import enum
from typing import List, Literal, Optional, Union

import msgspec
from msgspec import UNSET, UnsetType

from ._base import Schema

__all__ = (
    "PopupInfo",
    "ExpressionInfo",
    "FieldInfo",
    "Format",
    "DateFormat",
    "LayerOptions",
    "MediaInfo",
    "MediaValue",
    "PopupElement",
    "RelatedRecordsInfo",
    "OrderByField",
)


def __dir__():
    return __all__


class DateFormat(str, enum.Enum):
    SHORT_DATE = "shortDate"
    SHORT_DATE_LE = "shortDateLE"
    LONG_MONTH_DAY_YEAR = "longMonthDayYear"
    LONG_MONTH_DAY_YEAR_SHORT_TIME = "longMonthDayYearShortTime"
    LONG_MONTH_DAY_YEAR_SHORT_TIME_24 = "longMonthDayYearShortTime24"
    LONG_MONTH_DAY_YEAR_LONG_TIME = "longMonthDayYearLongTime"
    LONG_MONTH_DAY_YEAR_LONG_TIME_24 = "longMonthDayYearLongTime24"
    DAY_SHORT_MONTH_YEAR = "dayShortMonthYear"
    DAY_SHORT_MONTH_YEAR_SHORT_TIME = "dayShortMonthYearShortTime"
    DAY_SHORT_MONTH_YEAR_SHORT_TIME_24 = "dayShortMonthYearShortTime24"
    DAY_SHORT_MONTH_YEAR_LONG_TIME = "dayShortMonthYearLongTime"
    DAY_SHORT_MONTH_YEAR_LONG_TIME_24 = "dayShortMonthYearLongTime24"
    LONG_DATE = "longDate"
    LONG_DATE_SHORT_TIME = "longDateShortTime"
    LONG_DATE_SHORT_TIME_24 = "longDateShortTime24"
    LONG_DATE_LONG_TIME = "longDateLongTime"
    LONG_DATE_LONG_TIME_24 = "longDateLongTime24"
    SHORT_DATE_SHORT_TIME = "shortDateShortTime"
    SHORT_DATE_LE_SHORT_TIME = "shortDateLEShortTime"
    SHORT_DATE_SHORT_TIME_24 = "shortDateShortTime24"
    SHORT_DATE_LE_SHORT_TIME_24 = "shortDateLEShortTime24"
    SHORT_DATE_LONG_TIME = "shortDateLongTime"
    SHORT_DATE_LE_LONG_TIME = "shortDateLELongTime"
    SHORT_DATE_LONG_TIME_24 = "shortDateLongTime24"
    SHORT_DATE_LE_LONG_TIME_24 = "shortDateLELongTime24"
    LONG_MONTH_YEAR = "longMonthYear"
    SHORT_MONTH_YEAR = "shortMonthYear"
    YEAR = "year"


class Format(Schema, kw_only=True):
    """Display formatting for a date or numeric field."""

    date_format: Optional[DateFormat] = None
    digit_separator: Optional[bool] = None
    places: Optional[int] = None


class ExpressionInfo(Schema, kw_only=True):
    """An Arcade expression available to the popup as ``{expression/name}``."""

    expression: Optional[str] = None
    name: Optional[str] = None
    return_type: Optional[Literal["number", "string"]] = None
    title: Optional[str] = None


class FieldInfo(Schema, kw_only=True):
    field_name: Optional[str] = None
    format: Optional[Format] = None
    is_editable: Optional[bool] = None
    label: Optional[str] = None
    statistic_type: Optional[
        Literal["avg", "count", "max", "min", "stddev", "sum", "var"]
    ] = None
    string_field_option: Optional[Literal["textbox", "textarea", "richtext"]] = None
    tooltip: Optional[str] = None
    visible: Optional[bool] = None


class LayerOptions(Schema, kw_only=True):
    show_no_data_records: Optional[bool] = None


class MediaValue(Schema, kw_only=True):
    """The data behind a chart or image media item."""

    fields: Optional[List[str]] = None
    link_url: Optional[str] = msgspec.field(default=None, name="linkURL")
    normalize_field: Optional[str] = None
    source_url: Optional[str] = msgspec.field(default=None, name="sourceURL")
    tooltip_field: Optional[str] = None


class MediaInfo(Schema, kw_only=True):
    """An image or chart shown in a popup.

    ``value`` may be an explicit ``null``, which is kept distinct from an
    absent value.
    """

    caption: Optional[str] = None
    refresh_interval: Optional[float] = None
    title: Optional[str] = None
    type: Optional[
        Literal["image", "barchart", "columnchart", "linechart", "piechart"]
    ] = None
    value: Union[MediaValue, None, UnsetType] = UNSET


class PopupElement(Schema, kw_only=True):
    display_type: Optional[Literal["preview", "list"]] = None
    field_infos: Optional[List[FieldInfo]] = None
    media_infos: Optional[List[MediaInfo]] = None
    text: Optional[str] = None
    type: Optional[Literal["text", "fields", "media", "attachments"]] = None


class OrderByField(Schema, kw_only=True):
    field: Optional[str] = None
    order: Optional[Literal["asc", "desc"]] = None


class RelatedRecordsInfo(Schema, kw_only=True):
    show_related_records: bool
    order_by_fields: Optional[List[OrderByField]] = None


class PopupInfo(Schema, kw_only=True):
    """Defines the look and content of a layer's popup window.

    ``description`` may be an explicit ``null``, which is kept distinct from
    an absent description.
    """

    description: Union[str, None, UnsetType] = UNSET
    expression_infos: Optional[List[ExpressionInfo]] = None
    field_infos: Optional[List[FieldInfo]] = None
    layer_options: Optional[LayerOptions] = None
    media_infos: Optional[List[MediaInfo]] = None
    popup_elements: Optional[List[PopupElement]] = None
    related_records_info: Optional[RelatedRecordsInfo] = None
    show_attachments: Optional[bool] = None
    show_last_edit_info: Optional[bool] = None
    title: Optional[str] = None
