"""Presentation slides stored in a web map."""
from typing import Annotated, Any, List, Optional

import msgspec
from msgspec import Meta

from . import geometry as _geometry
from ._base import Schema
from .core import Color, Extent
from .errors import located
from .layer import BaseMapLayer

__all__ = (
    "Presentation",
    "Slide",
    "SlideTitle",
    "SlideBasemap",
    "MapLocation",
    "VisibleLayer",
    "VisiblePopup",
)


def __dir__():
    return __all__


def _point(obj, field):
    try:
        return _geometry.convert(obj, _geometry.PointAny)
    except msgspec.ValidationError as exc:
        raise located(exc, field) from exc


class SlideBasemap(Schema, kw_only=True):
    base_map_layers: List[BaseMapLayer]
    title: str


class SlideTitle(Schema, kw_only=True):
    """The title of a slide and how it's drawn.

    ``horizontal_alignment`` and ``title_font_style`` are the numeric codes
    used by the presentation viewer.
    """

    background_color: Color
    border_color: Color
    border_size: float
    font: str
    font_size: float
    foreground_color: Color
    horizontal_alignment: int
    opacity: Annotated[float, Meta(ge=0, le=1)]
    text: str
    title_font_style: int


class MapLocation(Schema, kw_only=True):
    center_point: Any

    def __post_init__(self):
        self.center_point = _point(self.center_point, "centerPoint")


class VisibleLayer(Schema, kw_only=True):
    feature_visibility: Optional[List[List[int]]] = None
    id: Optional[str] = None
    sub_layer_ids: Optional[List[int]] = None


class VisiblePopup(Schema, kw_only=True):
    anchor_point: Any
    feature_id: int
    layer_id: str
    sub_layer_id: Optional[int] = None

    def __post_init__(self):
        self.anchor_point = _point(self.anchor_point, "anchorPoint")


class Slide(Schema, kw_only=True):
    """A saved view of the map: basemap, extent, visible layers and an
    optional open popup."""

    base_map: SlideBasemap
    hidden: bool
    title: SlideTitle
    visible_layers: List[VisibleLayer]
    extent: Optional[Extent] = None
    map_location: Optional[MapLocation] = None
    time_extent: Optional[Annotated[List[float], Meta(min_length=2, max_length=2)]] = None
    visible_popup: Optional[VisiblePopup] = None


class Presentation(Schema, kw_only=True):
    display_time_slider: bool
    show_legend: bool
    slide_advancement_interval: float
    slides: List[Slide]
    use_time_extent_of_slide: bool
