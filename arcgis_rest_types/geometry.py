"""Geometry objects.

Geometries aren't tagged on the wire. The family is implied by which
coordinate property is present (``x``, ``points``, ``paths``, ``curvePaths``,
``rings``, ``curveRings`` or ``xmin``), and the dimension by the ``hasZ`` and
``hasM`` flags. Each (family, dimension) pair is a separate concrete class
here; `convert` picks the right one for a decoded mapping.
"""
import logging
import math
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, List, Literal, Optional, Union

import msgspec
from msgspec import UNSET, Meta, UnsetType

from ._base import Schema
from .core import Dimension, GeometryType, SpatialReference
from .errors import (
    DimensionalityMismatch,
    GeometryTypeMismatch,
    UnknownVariant,
    classify,
    located,
)

__all__ = (
    "GeometryAny",
    "PointAny",
    "MultipointAny",
    "PolylineAny",
    "PolygonAny",
    "EnvelopeAny",
    "EmptyPoint",
    "Point",
    "PointZ",
    "PointM",
    "PointZM",
    "EmptyMultipoint",
    "Multipoint",
    "MultipointZ",
    "MultipointM",
    "MultipointZM",
    "EmptyPolyline",
    "Polyline",
    "PolylineZ",
    "PolylineM",
    "PolylineZM",
    "CurvePolyline",
    "CurvePolylineZ",
    "CurvePolylineM",
    "CurvePolylineZM",
    "EmptyPolygon",
    "Polygon",
    "PolygonZ",
    "PolygonM",
    "PolygonZM",
    "CurvePolygon",
    "CurvePolygonZ",
    "CurvePolygonM",
    "CurvePolygonZM",
    "EmptyEnvelope",
    "Envelope",
    "CurveSegment",
    "CircularArc",
    "BezierCurve",
    "EllipticArc",
    "LegacyArc",
    "Location",
    "Position",
    "geometry_type",
    "dimension",
    "is_empty",
    "convert",
)


def __dir__():
    return __all__


logger = logging.getLogger(__name__)

#: A vertex as ``[x, y, z?, m?]``. The allowed length depends on the
#: geometry's dimension, see `POSITION_ARITY`.
Position = List[float]

#: The (min, max) number of elements in a position for each dimension. The
#: measure is optional even when a geometry has M values.
POSITION_ARITY = {
    Dimension.NONE: (2, 2),
    Dimension.Z: (3, 3),
    Dimension.M: (2, 3),
    Dimension.ZM: (3, 4),
}

_NAN = "NaN"

_WIRE_NAMES = {"curve_paths": "curvePaths", "curve_rings": "curveRings"}


def _is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_position(pos, dim, where):
    lo, hi = POSITION_ARITY[dim]
    if not isinstance(pos, (list, tuple)):
        raise DimensionalityMismatch(
            f"Dimensionality mismatch: expected a position array, got "
            f"`{type(pos).__name__}` - at `{where}`"
        )
    n = len(pos)
    if not lo <= n <= hi:
        expected = str(lo) if lo == hi else f"{lo} to {hi}"
        raise DimensionalityMismatch(
            f"Dimensionality mismatch: a position with dimension "
            f"{dim.name} has {expected} elements, got {n} - at `{where}`"
        )
    for x in pos:
        if not _is_number(x):
            raise ValueError(f"Position elements must be numbers - at `{where}`")


def _check_flags(geom):
    dim = type(geom).dimension
    for name, wire, enabled in (
        ("has_z", "hasZ", dim.has_z),
        ("has_m", "hasM", dim.has_m),
    ):
        value = getattr(geom, name)
        if enabled and value is not True:
            raise DimensionalityMismatch(
                f"Dimensionality mismatch: `{type(geom).__name__}` requires "
                f"`{wire}` to be true"
            )
        if not enabled and value is True:
            raise DimensionalityMismatch(
                f"Dimensionality mismatch: `{type(geom).__name__}` can't set "
                f"`{wire}`, use a geometry class with {wire[-1]} values instead"
            )


def _is_sentinel(value) -> bool:
    return value is None or value == _NAN


class GeometryAny(
    msgspec.Struct, rename="camel", kw_only=True, repr_omit_defaults=True
):
    """Base class for all geometries.

    Geometries always encode their ``hasZ``/``hasM`` flags when enabled, so
    unlike other records defaults aren't omitted. Optional properties use
    ``UNSET`` instead and are dropped when unset.
    """

    spatial_reference: Union[SpatialReference, UnsetType] = UNSET

    geometry_type: ClassVar[Optional[GeometryType]] = None
    dimension: ClassVar[Dimension] = Dimension.NONE
    empty: ClassVar[bool] = False

    def __post_init__(self):
        if type(self) in _FAMILIES:
            raise UnknownVariant(
                f"Unknown geometry, `{type(self).__name__}` is abstract and has "
                "no coordinates, use `geometry.convert` to pick a concrete class"
            )


class PointAny(GeometryAny, kw_only=True):
    geometry_type = GeometryType.POINT


class MultipointAny(GeometryAny, kw_only=True):
    geometry_type = GeometryType.MULTIPOINT


class PolylineAny(GeometryAny, kw_only=True):
    geometry_type = GeometryType.POLYLINE


class PolygonAny(GeometryAny, kw_only=True):
    geometry_type = GeometryType.POLYGON


class EnvelopeAny(GeometryAny, kw_only=True):
    geometry_type = GeometryType.ENVELOPE


_FAMILIES = (GeometryAny, PointAny, MultipointAny, PolylineAny, PolygonAny, EnvelopeAny)


# Points ----------------------------------------------------------------------


class EmptyPoint(PointAny, kw_only=True):
    """A point with no location.

    The wire format spells this as ``"x": "NaN"`` or ``"x": null``. Both are
    accepted, and normalized to ``None`` (encoded as ``null``).
    """

    x: Union[Literal["NaN"], None] = None
    y: Union[float, Literal["NaN"], None, UnsetType] = UNSET

    empty = True

    def __post_init__(self):
        if not _is_sentinel(self.x):
            raise ValueError("An empty point's `x` must be 'NaN' or null")
        self.x = None
        if self.y == _NAN:
            self.y = None


class _PointBase(PointAny, kw_only=True):
    def __post_init__(self):
        for name in ("x", "y", "z"):
            value = getattr(self, name, 0)
            if not _is_number(value) or (
                isinstance(value, float) and math.isnan(value)
            ):
                raise ValueError(
                    f"A non-empty point's `{name}` must be a number, got {value!r}"
                )
        m = getattr(self, "m", None)
        if m is not None and not _is_number(m):
            raise ValueError(f"A point's `m` must be a number or null, got {m!r}")


class Point(_PointBase, kw_only=True):
    x: float
    y: float


class PointZ(_PointBase, kw_only=True):
    x: float
    y: float
    z: float

    dimension = Dimension.Z


class PointM(_PointBase, kw_only=True):
    x: float
    y: float
    m: Optional[float] = None

    dimension = Dimension.M


class PointZM(_PointBase, kw_only=True):
    x: float
    y: float
    z: float
    m: Optional[float] = None

    dimension = Dimension.ZM


# Multipoints -----------------------------------------------------------------


class _EmptyCollection(GeometryAny, kw_only=True):
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET

    empty = True
    _coordinates: ClassVar[str]

    def __post_init__(self):
        value = getattr(self, self._coordinates)
        if _is_sentinel(value):
            setattr(self, self._coordinates, [])
        elif value:
            raise ValueError(
                f"An empty {type(self).geometry_type.name.lower()}'s "
                f"`{self._coordinates}` must be empty"
            )


class _Flagged(GeometryAny, kw_only=True):
    _coordinates: ClassVar[str]

    def __post_init__(self):
        self._check_coordinates()
        _check_flags(self)
        dim = type(self).dimension
        for where, pos in self._positions():
            _check_position(pos, dim, where)

    def _positions(self):
        raise NotImplementedError

    def _check_coordinates(self):
        value = getattr(self, self._coordinates)
        if not isinstance(value, list) or not value:
            wire = _WIRE_NAMES.get(self._coordinates, self._coordinates)
            raise ValueError(
                f"`{type(self).__name__}` requires a non-empty `{wire}` list, "
                f"got {value!r}, use an empty geometry class instead"
            )


class EmptyMultipoint(_EmptyCollection, MultipointAny, kw_only=True):
    points: Union[List[Any], Literal["NaN"], None] = []

    _coordinates = "points"


class _MultipointBase(_Flagged, MultipointAny, kw_only=True):
    _coordinates = "points"

    def _positions(self):
        for i, pos in enumerate(self.points):
            yield f"$.points[{i}]", pos


class Multipoint(_MultipointBase, kw_only=True):
    points: List[Position]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET


class MultipointZ(_MultipointBase, kw_only=True):
    points: List[Position]
    has_z: bool = True
    has_m: Union[bool, UnsetType] = UNSET

    dimension = Dimension.Z


class MultipointM(_MultipointBase, kw_only=True):
    points: List[Position]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: bool = True

    dimension = Dimension.M


class MultipointZM(_MultipointBase, kw_only=True):
    points: List[Position]
    has_z: bool = True
    has_m: bool = True

    dimension = Dimension.ZM


# Curve segments --------------------------------------------------------------


class CurveSegment(msgspec.Struct, repr_omit_defaults=True):
    """Base class for the curved segments of a ``curvePaths`` or
    ``curveRings`` array.

    Each segment is written as a single-key object. Its first element is the
    segment's end point (which follows the geometry's dimension). The start
    point is the end of the preceding element.
    """

    _key: ClassVar[str]

    @property
    def parts(self) -> list:
        return getattr(self, self._key)

    @property
    def end_point(self) -> Position:
        return self.parts[0]

    def __post_init__(self):
        parts = self.parts
        # The end point's arity is checked against the owning geometry
        for i, pos in enumerate(parts[1:], 1):
            if i >= self._num_points:
                break
            _check_position(pos, Dimension.NONE, f"$.{self._key}[{i}]")
        for i in range(self._num_points, len(parts)):
            if not _is_number(parts[i]):
                raise ValueError(
                    f"Expected a number, got {parts[i]!r} - at `$.{self._key}[{i}]`"
                )
        for i in self._flags:
            if parts[i] not in (0, 1):
                raise ValueError(
                    f"Expected 0 or 1, got {parts[i]!r} - at `$.{self._key}[{i}]`"
                )

    _num_points: ClassVar[int]
    _flags: ClassVar[tuple] = ()


class CircularArc(CurveSegment):
    """A circular arc through an interior point,
    ``{"c": [end, interior]}``."""

    c: Annotated[List[Any], Meta(min_length=2, max_length=2)]

    _key = "c"
    _num_points = 2

    @property
    def interior_point(self) -> Position:
        return self.c[1]


class BezierCurve(CurveSegment):
    """A cubic Bézier curve, ``{"b": [end, control1, control2]}``."""

    b: Annotated[List[Any], Meta(min_length=3, max_length=3)]

    _key = "b"
    _num_points = 3

    @property
    def control_points(self) -> tuple:
        return (self.b[1], self.b[2])


class LegacyArc(CurveSegment):
    """A circular arc in the older center-point form,
    ``{"a": [end, center, minor, clockwise]}``."""

    a: Annotated[List[Any], Meta(min_length=4, max_length=4)]

    _key = "a"
    _num_points = 2
    _flags = (2, 3)

    @property
    def center(self) -> Position:
        return self.a[1]

    @property
    def minor(self) -> bool:
        return bool(self.a[2])

    @property
    def clockwise(self) -> bool:
        return bool(self.a[3])


class EllipticArc(LegacyArc):
    """An elliptic arc,
    ``{"a": [end, center, minor, clockwise, rotation, axis, ratio]}``."""

    a: Annotated[List[Any], Meta(min_length=7, max_length=7)]

    @property
    def rotation(self) -> float:
        return self.a[4]

    @property
    def axis(self) -> float:
        return self.a[5]

    @property
    def ratio(self) -> float:
        return self.a[6]


_SEGMENTS = {"c": CircularArc, "b": BezierCurve}


def _convert_segment(obj, where):
    if isinstance(obj, CurveSegment):
        return obj
    if isinstance(obj, Mapping) and len(obj) == 1:
        (key,) = obj
        cls = _SEGMENTS.get(key)
        if key == "a":
            parts = obj["a"]
            cls = LegacyArc if isinstance(parts, list) and len(parts) == 4 else EllipticArc
        if cls is not None:
            try:
                return msgspec.convert(obj, cls)
            except msgspec.ValidationError as exc:
                raise located(exc, where) from exc
    raise UnknownVariant(
        f"Unknown curve segment, expected an object with one of the keys "
        f"'a', 'b' or 'c' - at `$.{where}`"
    )


class _CurveBase(_Flagged, kw_only=True):
    _coordinates: ClassVar[str]

    def __post_init__(self):
        self._check_coordinates()
        key = self._coordinates
        wire = _WIRE_NAMES[key]
        converted = []
        for i, path in enumerate(getattr(self, key)):
            out = []
            for j, item in enumerate(path):
                if isinstance(item, (list, tuple)):
                    out.append(item)
                else:
                    out.append(_convert_segment(item, f"{wire}[{i}][{j}]"))
            converted.append(out)
        setattr(self, key, converted)
        super().__post_init__()

    def _positions(self):
        key = self._coordinates
        wire = _WIRE_NAMES[key]
        for i, path in enumerate(getattr(self, key)):
            for j, item in enumerate(path):
                where = f"$.{wire}[{i}][{j}]"
                if isinstance(item, CurveSegment):
                    yield f"{where}.{item._key}[0]", item.end_point
                else:
                    yield where, item


# Polylines -------------------------------------------------------------------


class EmptyPolyline(_EmptyCollection, PolylineAny, kw_only=True):
    paths: Union[List[Any], Literal["NaN"], None] = []

    _coordinates = "paths"


class _PolylineBase(_Flagged, PolylineAny, kw_only=True):
    _coordinates = "paths"

    def _positions(self):
        for i, path in enumerate(self.paths):
            for j, pos in enumerate(path):
                yield f"$.paths[{i}][{j}]", pos


class Polyline(_PolylineBase, kw_only=True):
    paths: List[List[Position]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET


class PolylineZ(_PolylineBase, kw_only=True):
    paths: List[List[Position]]
    has_z: bool = True
    has_m: Union[bool, UnsetType] = UNSET

    dimension = Dimension.Z


class PolylineM(_PolylineBase, kw_only=True):
    paths: List[List[Position]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: bool = True

    dimension = Dimension.M


class PolylineZM(_PolylineBase, kw_only=True):
    paths: List[List[Position]]
    has_z: bool = True
    has_m: bool = True

    dimension = Dimension.ZM


class CurvePolyline(_CurveBase, PolylineAny, kw_only=True):
    curve_paths: List[List[Any]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET

    _coordinates = "curve_paths"


class CurvePolylineZ(_CurveBase, PolylineAny, kw_only=True):
    curve_paths: List[List[Any]]
    has_z: bool = True
    has_m: Union[bool, UnsetType] = UNSET

    dimension = Dimension.Z
    _coordinates = "curve_paths"


class CurvePolylineM(_CurveBase, PolylineAny, kw_only=True):
    curve_paths: List[List[Any]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: bool = True

    dimension = Dimension.M
    _coordinates = "curve_paths"


class CurvePolylineZM(_CurveBase, PolylineAny, kw_only=True):
    curve_paths: List[List[Any]]
    has_z: bool = True
    has_m: bool = True

    dimension = Dimension.ZM
    _coordinates = "curve_paths"


# Polygons --------------------------------------------------------------------


class EmptyPolygon(_EmptyCollection, PolygonAny, kw_only=True):
    rings: Union[List[Any], Literal["NaN"], None] = []

    _coordinates = "rings"


class _PolygonBase(_Flagged, PolygonAny, kw_only=True):
    _coordinates = "rings"

    def _positions(self):
        for i, ring in enumerate(self.rings):
            for j, pos in enumerate(ring):
                yield f"$.rings[{i}][{j}]", pos


class Polygon(_PolygonBase, kw_only=True):
    rings: List[List[Position]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET


class PolygonZ(_PolygonBase, kw_only=True):
    rings: List[List[Position]]
    has_z: bool = True
    has_m: Union[bool, UnsetType] = UNSET

    dimension = Dimension.Z


class PolygonM(_PolygonBase, kw_only=True):
    rings: List[List[Position]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: bool = True

    dimension = Dimension.M


class PolygonZM(_PolygonBase, kw_only=True):
    rings: List[List[Position]]
    has_z: bool = True
    has_m: bool = True

    dimension = Dimension.ZM


class CurvePolygon(_CurveBase, PolygonAny, kw_only=True):
    curve_rings: List[List[Any]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: Union[bool, UnsetType] = UNSET

    _coordinates = "curve_rings"


class CurvePolygonZ(_CurveBase, PolygonAny, kw_only=True):
    curve_rings: List[List[Any]]
    has_z: bool = True
    has_m: Union[bool, UnsetType] = UNSET

    dimension = Dimension.Z
    _coordinates = "curve_rings"


class CurvePolygonM(_CurveBase, PolygonAny, kw_only=True):
    curve_rings: List[List[Any]]
    has_z: Union[bool, UnsetType] = UNSET
    has_m: bool = True

    dimension = Dimension.M
    _coordinates = "curve_rings"


class CurvePolygonZM(_CurveBase, PolygonAny, kw_only=True):
    curve_rings: List[List[Any]]
    has_z: bool = True
    has_m: bool = True

    dimension = Dimension.ZM
    _coordinates = "curve_rings"


# Envelopes -------------------------------------------------------------------


class EmptyEnvelope(EnvelopeAny, kw_only=True):
    """An envelope with no extent, written as ``"xmin": "NaN"`` or
    ``"xmin": null``. Normalized to ``None``."""

    xmin: Union[Literal["NaN"], None] = None

    empty = True

    def __post_init__(self):
        if not _is_sentinel(self.xmin):
            raise ValueError("An empty envelope's `xmin` must be 'NaN' or null")
        self.xmin = None


class Envelope(EnvelopeAny, kw_only=True):
    """An axis-aligned bounding box.

    Z and M bounds are optional, but each comes as a pair: ``zmin`` requires
    ``zmax`` and ``mmin`` requires ``mmax``.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float
    zmin: Union[float, UnsetType] = UNSET
    zmax: Union[float, UnsetType] = UNSET
    mmin: Union[float, UnsetType] = UNSET
    mmax: Union[float, UnsetType] = UNSET

    def __post_init__(self):
        for name in ("xmin", "ymin", "xmax", "ymax"):
            if not _is_number(getattr(self, name)):
                raise ValueError(f"A non-empty envelope's `{name}` must be a number")
        for lo, hi in (("zmin", "zmax"), ("mmin", "mmax")):
            if (getattr(self, lo) is UNSET) != (getattr(self, hi) is UNSET):
                raise DimensionalityMismatch(
                    f"Dimensionality mismatch: `{lo}` and `{hi}` must be set together"
                )


class Location(Schema, kw_only=True):
    """A geographic location, as used by geocoding results."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    lat: Optional[float] = None
    long: Optional[float] = None
    z: Optional[float] = None


# Dispatch --------------------------------------------------------------------

_POINTS = {
    Dimension.NONE: Point,
    Dimension.Z: PointZ,
    Dimension.M: PointM,
    Dimension.ZM: PointZM,
}

# (wire key, classes by dimension, empty class)
_COLLECTIONS = (
    (
        "points",
        {
            Dimension.NONE: Multipoint,
            Dimension.Z: MultipointZ,
            Dimension.M: MultipointM,
            Dimension.ZM: MultipointZM,
        },
        EmptyMultipoint,
    ),
    (
        "paths",
        {
            Dimension.NONE: Polyline,
            Dimension.Z: PolylineZ,
            Dimension.M: PolylineM,
            Dimension.ZM: PolylineZM,
        },
        EmptyPolyline,
    ),
    (
        "curvePaths",
        {
            Dimension.NONE: CurvePolyline,
            Dimension.Z: CurvePolylineZ,
            Dimension.M: CurvePolylineM,
            Dimension.ZM: CurvePolylineZM,
        },
        None,
    ),
    (
        "rings",
        {
            Dimension.NONE: Polygon,
            Dimension.Z: PolygonZ,
            Dimension.M: PolygonM,
            Dimension.ZM: PolygonZM,
        },
        EmptyPolygon,
    ),
    (
        "curveRings",
        {
            Dimension.NONE: CurvePolygon,
            Dimension.Z: CurvePolygonZ,
            Dimension.M: CurvePolygonM,
            Dimension.ZM: CurvePolygonZM,
        },
        None,
    ),
)


def _select(obj: Mapping) -> type:
    if "x" in obj:
        if _is_sentinel(obj["x"]):
            return EmptyPoint
        return _POINTS[Dimension.from_flags("z" in obj, "m" in obj)]

    dim = Dimension.from_flags(obj.get("hasZ") is True, obj.get("hasM") is True)
    for key, classes, empty in _COLLECTIONS:
        if key in obj:
            value = obj[key]
            if empty is not None and (_is_sentinel(value) or value == []):
                return empty
            return classes[dim]

    if "xmin" in obj:
        return EmptyEnvelope if _is_sentinel(obj["xmin"]) else Envelope

    raise UnknownVariant(
        "Unknown geometry, expected an object with one of the keys 'x', "
        "'points', 'paths', 'curvePaths', 'rings', 'curveRings' or 'xmin'"
    )


def convert(obj: Any, family: type = GeometryAny) -> GeometryAny:
    """Convert a decoded geometry mapping into its concrete geometry class.

    Parameters
    ----------
    obj : Mapping or GeometryAny
        A geometry object, as decoded from JSON with ``msgspec.json.decode``
        (or ``json.loads``). Geometry instances are passed through after
        checking their family.
    family : type, optional
        Restrict the result to one geometry family (`PointAny`,
        `MultipointAny`, `PolylineAny`, `PolygonAny` or `EnvelopeAny`).
        Defaults to `GeometryAny`, accepting any geometry.

    Returns
    -------
    geometry : GeometryAny
        An instance of the concrete class matching the object's shape.

    Raises
    ------
    UnknownVariant
        If the object doesn't have the shape of any geometry.
    GeometryTypeMismatch
        If the object is a geometry outside of ``family``.
    SchemaError
        If the object has the shape of a geometry but is otherwise invalid,
        as the most specific subclass.
    """
    if family not in _FAMILIES:
        raise TypeError(f"`family` must be one of the abstract geometry types, got {family!r}")

    if isinstance(obj, GeometryAny):
        cls = type(obj)
    elif isinstance(obj, Mapping):
        cls = _select(obj)
    else:
        raise UnknownVariant(
            f"Unknown geometry, expected an object, got `{type(obj).__name__}`"
        )

    if not issubclass(cls, family):
        raise GeometryTypeMismatch(
            f"Geometry type mismatch: expected {family.geometry_type.value}, "
            f"got {cls.geometry_type.value}"
        )
    if isinstance(obj, GeometryAny):
        return obj

    logger.debug("Converting geometry as %s", cls.__name__)
    try:
        return msgspec.convert(obj, cls)
    except msgspec.ValidationError as exc:
        err = classify(exc)
        if err is exc:
            raise
        raise err from exc


def geometry_type(obj: Any) -> GeometryType:
    """The `GeometryType` a service reports for a geometry.

    This is the same for all dimensions (and for empty geometries) of a
    family.

    Parameters
    ----------
    obj : GeometryAny, type, or Mapping
        A geometry instance, a concrete geometry class, or a decoded geometry
        mapping.

    Returns
    -------
    geometry_type : GeometryType
    """
    if isinstance(obj, GeometryAny):
        cls = type(obj)
    elif isinstance(obj, type) and issubclass(obj, GeometryAny):
        cls = obj
    elif isinstance(obj, Mapping):
        cls = _select(obj)
    else:
        raise TypeError(f"Expected a geometry, got `{type(obj).__name__}`")
    if cls.geometry_type is None:
        raise TypeError("`GeometryAny` has no single geometry type")
    return cls.geometry_type


def dimension(obj: GeometryAny) -> Dimension:
    """The `Dimension` of a geometry instance.

    For most geometries this is fixed by the class. Envelopes carry their
    dimension through the presence of ``zmin``/``zmax`` and ``mmin``/``mmax``.
    """
    if isinstance(obj, Envelope):
        return Dimension.from_flags(obj.zmin is not UNSET, obj.mmin is not UNSET)
    if isinstance(obj, GeometryAny):
        return type(obj).dimension
    raise TypeError(f"Expected a geometry, got `{type(obj).__name__}`")


def is_empty(obj: GeometryAny) -> bool:
    """Whether a geometry is one of the empty sentinel variants."""
    return type(obj).empty
