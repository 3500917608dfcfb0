import enum
from typing import Annotated, List, Optional

from msgspec import Meta

from ._base import Schema
from .errors import SchemaError

__all__ = (
    "GeometryType",
    "Units",
    "FieldType",
    "SpatialRelationship",
    "TimeUnits",
    "Dimension",
    "SpatialReference",
    "Extent",
    "PagingParams",
    "Color",
)


def __dir__():
    return __all__


class GeometryType(str, enum.Enum):
    """The geometry family reported in ``geometryType`` properties."""

    POINT = "esriGeometryPoint"
    MULTIPOINT = "esriGeometryMultipoint"
    POLYLINE = "esriGeometryPolyline"
    POLYGON = "esriGeometryPolygon"
    ENVELOPE = "esriGeometryEnvelope"


class Units(str, enum.Enum):
    METER = "esriSRUnit_Meter"
    STATUTE_MILE = "esriSRUnit_StatuteMile"
    FOOT = "esriSRUnit_Foot"
    KILOMETER = "esriSRUnit_Kilometer"
    NAUTICAL_MILE = "esriSRUnit_NauticalMile"
    US_NAUTICAL_MILE = "esriSRUnit_USNauticalMile"


class FieldType(str, enum.Enum):
    BLOB = "esriFieldTypeBlob"
    DATE = "esriFieldTypeDate"
    DOUBLE = "esriFieldTypeDouble"
    GEOMETRY = "esriFieldTypeGeometry"
    GLOBAL_ID = "esriFieldTypeGlobalID"
    GUID = "esriFieldTypeGUID"
    INTEGER = "esriFieldTypeInteger"
    OID = "esriFieldTypeOID"
    RASTER = "esriFieldTypeRaster"
    SINGLE = "esriFieldTypeSingle"
    SMALL_INTEGER = "esriFieldTypeSmallInteger"
    STRING = "esriFieldTypeString"
    XML = "esriFieldTypeXML"


class SpatialRelationship(str, enum.Enum):
    INTERSECTS = "esriSpatialRelIntersects"
    CONTAINS = "esriSpatialRelContains"
    CROSSES = "esriSpatialRelCrosses"
    ENVELOPE_INTERSECTS = "esriSpatialRelEnvelopeIntersects"
    INDEX_INTERSECTS = "esriSpatialRelIndexIntersects"
    OVERLAPS = "esriSpatialRelOverlaps"
    TOUCHES = "esriSpatialRelTouches"
    WITHIN = "esriSpatialRelWithin"


class Dimension(enum.Enum):
    """Which extra ordinates a geometry's vertices carry.

    ``Z`` is a vertical coordinate, ``M`` a linear measure. The two are
    independent, giving four combinations.
    """

    NONE = "none"
    Z = "z"
    M = "m"
    ZM = "zm"

    @property
    def has_z(self) -> bool:
        return self in (Dimension.Z, Dimension.ZM)

    @property
    def has_m(self) -> bool:
        return self in (Dimension.M, Dimension.ZM)

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> "Dimension":
        if has_z:
            return cls.ZM if has_m else cls.Z
        return cls.M if has_m else cls.NONE


Channel = Annotated[int, Meta(ge=0, le=255)]

Color = Annotated[
    List[Channel],
    Meta(
        min_length=4,
        max_length=4,
        description="An RGBA color, each channel in the range 0-255.",
    ),
]


class SpatialReference(Schema, kw_only=True):
    """A coordinate system, identified either by well-known ID or by
    well-known text.

    Exactly one of ``wkid`` or ``wkt`` must be set. The ``latest_*`` and
    ``vcs_*`` identifiers only accompany a ``wkid``.

    Parameters
    ----------
    wkid : int, optional
        The well-known ID of the horizontal coordinate system.
    latest_wkid : int, optional
        The most recent ID for the same coordinate system.
    vcs_wkid : int, optional
        The well-known ID of the vertical coordinate system.
    latest_vcs_wkid : int, optional
        The most recent ID for the same vertical coordinate system.
    wkt : str, optional
        The well-known text of the coordinate system.
    """

    wkid: Optional[int] = None
    latest_wkid: Optional[int] = None
    vcs_wkid: Optional[int] = None
    latest_vcs_wkid: Optional[int] = None
    wkt: Optional[str] = None

    def __post_init__(self):
        if (self.wkid is None) == (self.wkt is None):
            raise SchemaError(
                "A spatial reference must set exactly one of `wkid` or `wkt`"
            )
        if self.wkt is not None and (
            self.latest_wkid is not None
            or self.vcs_wkid is not None
            or self.latest_vcs_wkid is not None
        ):
            raise SchemaError(
                "`latestWkid`, `vcsWkid` and `latestVcsWkid` require `wkid`"
            )

    @property
    def is_wkid(self) -> bool:
        return self.wkid is not None

    @property
    def is_wkt(self) -> bool:
        return self.wkt is not None


class Extent(Schema, kw_only=True):
    """An axis-aligned bounding rectangle."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float
    spatial_reference: SpatialReference


class PagingParams(Schema, kw_only=True):
    start: Optional[int] = None
    num: Optional[int] = None


class TimeUnits(str, enum.Enum):
    UNKNOWN = "esriTimeUnitsUnknown"
    CENTURIES = "esriTimeUnitsCenturies"
    DAYS = "esriTimeUnitsDays"
    DECADES = "esriTimeUnitsDecades"
    HOURS = "esriTimeUnitsHours"
    MILLISECONDS = "esriTimeUnitsMilliseconds"
    MINUTES = "esriTimeUnitsMinutes"
    MONTHS = "esriTimeUnitsMonths"
    SECONDS = "esriTimeUnitsSeconds"
    WEEKS = "esriTimeUnitsWeeks"
    YEARS = "esriTimeUnitsYears"
