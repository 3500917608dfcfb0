"""The web map document.

A web map describes an interactive map: its basemap, operational layers,
tables, bookmarks, presentation slides and widgets. ``baseMap``,
``spatialReference`` and ``version`` are the only required properties.
"""
from typing import Annotated, List, Literal, Optional

from msgspec import Meta

from ._base import Schema
from .application import ApplicationProperties
from .core import Color, Extent, SpatialReference, TimeUnits
from .errors import InvalidEnumValue
from .layer import BaseMapLayer, OperationalLayer
from .layer_definition import DefinitionEditor, LayerDefinition
from .popup import PopupInfo
from .presentation import Presentation

__all__ = (
    "Webmap",
    "Basemap",
    "Background",
    "Bookmark",
    "Thumbnail",
    "MapRangeInfo",
    "Table",
    "Widgets",
    "RangeWidget",
    "TimeSlider",
    "TimeSliderProperties",
    "TimeStopInterval",
)


def __dir__():
    return __all__


Range = Annotated[List[float], Meta(min_length=2, max_length=2)]


class Basemap(Schema, kw_only=True):
    """The layers drawn beneath the operational layers.

    Parameters
    ----------
    base_map_layers : list
        The basemap layers, bottom to top. Reference layers (with
        ``isReference`` set) are drawn above the operational layers.
    title : str
        The basemap's name.
    """

    base_map_layers: List[BaseMapLayer]
    title: str


class Background(Schema, kw_only=True):
    color: Color


class Thumbnail(Schema, kw_only=True):
    url: str


class Bookmark(Schema, kw_only=True):
    extent: Extent
    name: str
    thumbnail: Optional[Thumbnail] = None


class MapRangeInfo(Schema, kw_only=True):
    active_range_name: Optional[str] = None
    current_range_extent: Optional[Range] = None
    full_range_extent: Optional[Range] = None


class Table(Schema, kw_only=True):
    """A non-spatial table, such as a feature service table."""

    name: Optional[str] = None
    capabilities: Optional[str] = None
    definition_editor: Optional[DefinitionEditor] = None
    id: Optional[str] = None
    item_id: Optional[str] = None
    layer_definition: Optional[LayerDefinition] = None
    popup_info: Optional[PopupInfo] = None
    title: Optional[str] = None
    url: Optional[str] = None


class RangeWidget(Schema, kw_only=True):
    interaction_mode: Optional[Literal["slider", "picker"]] = None
    number_of_stops: Optional[int] = None
    stop_interval: Optional[float] = None


class TimeStopInterval(Schema, kw_only=True):
    interval: Optional[float] = None
    units: Optional[TimeUnits] = None

    def __post_init__(self):
        if self.units is TimeUnits.UNKNOWN:
            raise InvalidEnumValue("Invalid enum value 'esriTimeUnitsUnknown'")


class TimeSliderProperties(Schema, kw_only=True):
    current_time_extent: Optional[List[float]] = None
    end_time: Optional[float] = None
    number_of_stops: Optional[int] = None
    start_time: Optional[float] = None
    thumb_count: Optional[int] = None
    thumb_moving_rate: Optional[float] = None
    time_stop_interval: Optional[TimeStopInterval] = None


class TimeSlider(Schema, kw_only=True):
    properties: TimeSliderProperties


class Widgets(Schema, kw_only=True):
    range: Optional[RangeWidget] = None
    time_slider: Optional[TimeSlider] = None


class Webmap(Schema, kw_only=True):
    """A web map document.

    Parameters
    ----------
    base_map : Basemap
        The basemap.
    spatial_reference : SpatialReference
        The spatial reference of the map. Layers and geometries in the map
        should share it.
    version : str
        The version of the web map format, for example ``"2.10"``.
    application_properties : ApplicationProperties, optional
    authoring_app : str, optional
    authoring_app_version : str, optional
    background : Background, optional
    bookmarks : list of Bookmark, optional
    map_range_info : MapRangeInfo, optional
    operational_layers : list, optional
        The operational layers, bottom to top.
    presentation : Presentation, optional
    tables : list of Table, optional
    widgets : Widgets, optional

    See Also
    --------
    arcgis_rest_types.validate.check_webmap
    """

    base_map: Basemap
    spatial_reference: SpatialReference
    version: str
    application_properties: Optional[ApplicationProperties] = None
    authoring_app: Optional[str] = None
    authoring_app_version: Optional[str] = None
    background: Optional[Background] = None
    bookmarks: Optional[List[Bookmark]] = None
    map_range_info: Optional[MapRangeInfo] = None
    operational_layers: Optional[List[OperationalLayer]] = None
    presentation: Optional[Presentation] = None
    tables: Optional[List[Table]] = None
    widgets: Optional[Widgets] = None

    def layers(self):
        """Iterate over all layers of the map, basemap layers first."""
        yield from self.base_map.base_map_layers
        if self.operational_layers:
            yield from self.operational_layers

    def check(self) -> "Webmap":
        """Check the layers and geometries in the map agree with each other.

        Returns the web map, raising a ``SchemaError`` subclass on the first
        disagreement.
        """
        from .validate import check_webmap

        check_webmap(self)
        return self
