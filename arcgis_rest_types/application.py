"""Application properties: how apps should configure editing, offline use
and viewing tools for a web map."""
from typing import List, Literal, Optional

import msgspec

from ._base import Schema
from .core import FieldType

__all__ = (
    "ApplicationProperties",
    "EditingProperties",
    "LocationTracking",
    "LocationTrackingInfo",
    "OfflineInfo",
    "EditableLayers",
    "OfflineBasemap",
    "ReadOnlyLayers",
    "ViewingInfo",
    "BasemapGallery",
    "Measure",
    "Routing",
    "Search",
    "SearchLayer",
    "SearchLayerField",
)


def __dir__():
    return __all__


class LocationTrackingInfo(Schema, kw_only=True):
    layer_id: str
    update_interval: float


class LocationTracking(Schema, kw_only=True):
    enabled: bool
    info: LocationTrackingInfo


class EditingProperties(Schema, kw_only=True):
    location_tracking: LocationTracking


class EditableLayers(Schema, kw_only=True):
    download: Literal["none", "featuresAndAttachments", "features"]
    sync: Literal[
        "uploadFeaturesAndAttachments",
        "syncFeaturesAndAttachments",
        "syncFeaturesUploadAttachments",
    ]


class OfflineBasemap(Schema, kw_only=True):
    reference_basemap_name: str


class ReadOnlyLayers(Schema, kw_only=True):
    download_attachments: bool


class OfflineInfo(Schema, kw_only=True):
    """How layers and the basemap are taken offline."""

    editable_layers: EditableLayers
    # Lowercase on the wire
    offline_basemap: OfflineBasemap = msgspec.field(name="offlinebasemap")
    readonly_layers: ReadOnlyLayers


class BasemapGallery(Schema, kw_only=True):
    enabled: bool


class Measure(Schema, kw_only=True):
    enabled: bool


class Routing(Schema, kw_only=True):
    enabled: bool


class SearchLayerField(Schema, kw_only=True):
    exact_match: bool
    name: str
    type: Optional[FieldType] = None


class SearchLayer(Schema, kw_only=True):
    field: SearchLayerField
    id: str
    sub_layer: Optional[int] = None


class Search(Schema, kw_only=True):
    """Search configuration, optionally searching the map's own layers."""

    enabled: bool
    disable_place_finder: Optional[bool] = None
    hint_text: Optional[str] = None
    layers: Optional[List[SearchLayer]] = None


class ViewingInfo(Schema, kw_only=True):
    basemap_gallery: Optional[BasemapGallery] = None
    measure: Optional[Measure] = None
    routing: Optional[Routing] = None
    search: Optional[Search] = None


class ApplicationProperties(Schema, kw_only=True):
    editing: Optional[EditingProperties] = None
    offline: Optional[OfflineInfo] = None
    viewing: Optional[ViewingInfo] = None
