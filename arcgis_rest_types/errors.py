import functools
import re

import msgspec

__all__ = (
    "SchemaError",
    "UnknownVariant",
    "MissingField",
    "InvalidEnumValue",
    "DimensionalityMismatch",
    "GeometryTypeMismatch",
    "SpatialReferenceMismatch",
    "classify",
    "located",
)


def __dir__():
    return __all__


class SchemaError(msgspec.ValidationError):
    """A document doesn't match the ArcGIS REST schema.

    All errors raised by this library for invalid documents subclass this
    type. It is itself a ``msgspec.ValidationError``, so code that already
    handles msgspec errors will handle these as well.
    """


class UnknownVariant(SchemaError):
    """An object's discriminant doesn't match any variant of a union."""


class MissingField(SchemaError):
    """A required field (or a field declared in a field list) is absent."""


class InvalidEnumValue(SchemaError):
    """A value falls outside of its closed enumeration."""


class DimensionalityMismatch(SchemaError):
    """Coordinate arity disagrees with the declared ``hasZ``/``hasM`` flags."""


class GeometryTypeMismatch(SchemaError):
    """A geometry doesn't belong to the expected geometry family."""


class SpatialReferenceMismatch(SchemaError):
    """Geometries that should share a spatial reference don't."""


# Ordered, first match wins. The first group matches msgspec's own messages,
# the second matches the messages raised by this library so that errors
# re-wrapped by msgspec during decoding keep their classification.
_PATTERNS = (
    (re.compile(r"^Invalid enum value"), InvalidEnumValue),
    (re.compile(r"^Invalid value "), UnknownVariant),
    (re.compile(r"^Object missing required field"), MissingField),
    (re.compile(r"^Unknown (geometry|curve segment|renderer)"), UnknownVariant),
    (re.compile(r"^Dimensionality mismatch"), DimensionalityMismatch),
    (re.compile(r"^Geometry type mismatch"), GeometryTypeMismatch),
    (re.compile(r"^Spatial reference mismatch"), SpatialReferenceMismatch),
    (re.compile(r"^Missing attribute"), MissingField),
)


def classify(exc: msgspec.ValidationError) -> SchemaError:
    """Map a ``msgspec.ValidationError`` onto the error taxonomy.

    Parameters
    ----------
    exc : msgspec.ValidationError
        The error to classify.

    Returns
    -------
    error : SchemaError
        An instance of the most specific ``SchemaError`` subclass matching
        the error message. Errors that are already a ``SchemaError`` are
        returned unchanged, errors matching no known pattern are returned as
        a plain ``SchemaError``. A location moved by `located` is joined
        with the location msgspec added for the enclosing record.
    """
    if isinstance(exc, SchemaError):
        return exc
    msg = _join_locations(str(exc))
    for pattern, cls in _PATTERNS:
        if pattern.search(msg):
            return cls(msg)
    return SchemaError(msg)


# An error raised from a `__post_init__` while decoding ends up carrying two
# locations: its own, relative to the object that raised it, and the
# location of that object appended by msgspec.
_LOCATION = re.compile(r" - at `\$(?P<path>[^`]*)`$")
_NESTED_LOCATION = re.compile(
    r"^(?P<msg>.*) - at `\$(?P<inner>[^`]*)` - at `\$(?P<outer>[^`]*)`$", re.DOTALL
)


def _join_locations(msg: str) -> str:
    match = _NESTED_LOCATION.match(msg)
    if match is None:
        return msg
    return f"{match['msg']} - at `${match['outer']}{match['inner']}`"


@functools.lru_cache(maxsize=None)
def _as_value_error(cls):
    # msgspec only prefixes the location of `ValueError`s raised in `__post_init__`
    if issubclass(cls, ValueError):
        return cls
    return type(cls.__name__, (cls, ValueError), {"__module__": cls.__module__})


def located(exc: msgspec.ValidationError, field: str) -> SchemaError:
    """Move the location of an error under ``field``.

    Used by records that convert one of their fields by content (such as a
    feature's geometry) to report errors relative to themselves.

    Parameters
    ----------
    exc : msgspec.ValidationError
        An error raised while converting the field's value.
    field : str
        The wire name of the field, optionally followed by indices, such as
        ``"geometry"`` or ``"curvePaths[0][1]"``.

    Returns
    -------
    error : SchemaError
        An instance of the most specific ``SchemaError`` subclass for the
        error. It's also a ``ValueError``, so when raised from
        ``__post_init__`` during decoding msgspec adds the location of the
        record itself, which `classify` then joins into a single location.
    """
    err = classify(exc)
    msg = str(err)
    match = _LOCATION.search(msg)
    if match is None:
        msg = f"{msg} - at `$.{field}`"
    else:
        msg = f"{msg[:match.start()]} - at `$.{field}{match['path']}`"
    return _as_value_error(type(err))(msg)
