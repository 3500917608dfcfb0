"""Encoding and decoding ArcGIS REST JSON documents.

These wrap ``msgspec.json`` with the two things a plain msgspec decoder can't
express for this format: geometries and renderers that are dispatched by
their content rather than by a tag, and errors classified into the
`arcgis_rest_types.errors` taxonomy.
"""
import functools
import logging
from typing import Any, Literal, Optional, Type, TypeVar, Union, overload

import msgspec
import msgspec.inspect as mi

from . import geometry as _geometry
from . import renderer as _renderer
from .errors import classify

__all__ = ("encode", "decode", "Encoder", "Decoder", "schema")


def __dir__():
    return __all__


logger = logging.getLogger(__name__)

T = TypeVar("T")

Order = Optional[Literal["deterministic", "sorted"]]


def _converter(tp):
    """The content-based converter for ``tp``, or None if msgspec can decode
    ``tp`` directly."""
    if tp == _renderer.AnyRenderer:
        return _renderer.convert
    if tp in _geometry._FAMILIES:
        return functools.partial(_geometry.convert, family=tp)
    return None


def _embedded_family(tp):
    """The first abstract geometry type found inside ``tp``, or None."""
    seen = set()

    def walk(t):
        if isinstance(t, mi.StructType):
            if t.cls in _geometry._FAMILIES:
                return t.cls
            if t.cls in seen:
                return None
            seen.add(t.cls)
            children = [f.type for f in t.fields]
        elif isinstance(t, (mi.DataclassType, mi.TypedDictType, mi.NamedTupleType)):
            children = [f.type for f in t.fields]
        elif isinstance(t, mi.UnionType):
            children = t.types
        elif isinstance(t, (mi.ListType, mi.VarTupleType, mi.SetType, mi.FrozenSetType)):
            children = [t.item_type]
        elif isinstance(t, mi.TupleType):
            children = t.item_types
        elif isinstance(t, mi.DictType):
            children = [t.key_type, t.value_type]
        elif isinstance(t, mi.Metadata):
            children = [t.type]
        else:
            return None
        for child in children:
            found = walk(child)
            if found is not None:
                return found
        return None

    return walk(mi.type_info(tp))


def _reject_embedded_family(tp):
    family = _embedded_family(tp)
    if family is not None:
        raise TypeError(
            f"`{family.__name__}` is dispatched by content and can only be used "
            f"as the root type, not inside {tp!r}. Decode the geometries as "
            "`Any` and pass each one to `geometry.convert`"
        )


class Encoder:
    """A JSON encoder for ArcGIS REST documents.

    Parameters
    ----------
    order : {None, 'deterministic', 'sorted'}, optional
        The ordering to use when encoding unordered compound types. See
        ``msgspec.json.Encoder`` for details. Struct fields are always
        encoded in declaration order unless ``'sorted'`` is given.
    """

    def __init__(self, *, order: Order = None):
        self.order = order
        self._encoder = msgspec.json.Encoder(order=order)

    def encode(self, obj: Any) -> bytes:
        """Serialize an object to bytes.

        Parameters
        ----------
        obj : Any
            The object to serialize.

        Returns
        -------
        data : bytes
            The serialized object.
        """
        return self._encoder.encode(obj)


class Decoder:
    """A JSON decoder for ArcGIS REST documents.

    Parameters
    ----------
    type : type, optional
        The type to decode as. May be any record or union declared in this
        package, one of the abstract geometry types (`GeometryAny` or a
        family such as `PointAny`), or `renderer.AnyRenderer`. Defaults to
        `Any`, decoding into builtin types. The abstract geometry types are
        only accepted as the root type.
    strict : bool, optional
        Whether type coercion rules should be strict. See
        ``msgspec.json.Decoder``. Defaults to True.
    check : bool, optional
        Whether to run `arcgis_rest_types.validate.check` on the decoded
        value. Defaults to False.
    """

    def __init__(self, type: Any = Any, *, strict: bool = True, check: bool = False):
        self.type = type
        self.strict = strict
        self.check = check
        self._convert = _converter(type)
        if self._convert is None:
            _reject_embedded_family(type)
        self._decoder = msgspec.json.Decoder(
            Any if self._convert is not None else type, strict=strict
        )

    def __repr__(self):
        return f"Decoder({self.type!r}, strict={self.strict}, check={self.check})"

    def decode(self, buf: Union[bytes, str]) -> Any:
        """Deserialize an object from JSON.

        Parameters
        ----------
        buf : bytes-like or str
            The message to decode.

        Returns
        -------
        obj : Any
            The deserialized object.

        Raises
        ------
        msgspec.DecodeError
            If the message is not valid JSON.
        SchemaError
            If the message doesn't match the expected type. The error is an
            instance of the most specific subclass in
            `arcgis_rest_types.errors`.
        """
        try:
            obj = self._decoder.decode(buf)
            if self._convert is not None:
                obj = self._convert(obj)
        except msgspec.ValidationError as exc:
            err = classify(exc)
            if err is exc:
                raise
            logger.debug("Classified %r as %s", str(exc), type(err).__name__)
            raise err from exc
        if self.check:
            from .validate import check

            check(obj)
        return obj


_encoder = Encoder()


def encode(obj: Any, *, order: Order = None) -> bytes:
    """Serialize an object as JSON.

    Parameters
    ----------
    obj : Any
        The object to serialize.
    order : {None, 'deterministic', 'sorted'}, optional
        The ordering to use when encoding unordered compound types.

    Returns
    -------
    data : bytes
        The serialized object.

    See Also
    --------
    decode
    Encoder
    """
    if order is None:
        return _encoder.encode(obj)
    return Encoder(order=order).encode(obj)


@overload
def decode(buf: Union[bytes, str], *, strict: bool = True, check: bool = False) -> Any:
    pass


@overload
def decode(
    buf: Union[bytes, str],
    *,
    type: Type[T] = ...,
    strict: bool = True,
    check: bool = False,
) -> T:
    pass


@overload
def decode(
    buf: Union[bytes, str],
    *,
    type: Any = ...,
    strict: bool = True,
    check: bool = False,
) -> Any:
    pass


def decode(buf, *, type=Any, strict=True, check=False):
    """Deserialize an object from JSON.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    type : type, optional
        The type to decode as, see `Decoder`. Defaults to `Any`.
    strict : bool, optional
        Whether type coercion rules should be strict. Defaults to True.
    check : bool, optional
        Whether to run `arcgis_rest_types.validate.check` on the result.
        Defaults to False.

    Returns
    -------
    obj : Any
        The deserialized object.

    Examples
    --------
    >>> from arcgis_rest_types import geometry
    >>> decode(b'{"x": 1, "y": 2, "z": 3}', type=geometry.GeometryAny)
    PointZ(x=1.0, y=2.0, z=3.0)

    See Also
    --------
    encode
    Decoder
    """
    return Decoder(type, strict=strict, check=check).decode(buf)


def schema(type: Any) -> dict:
    """Generate a JSON Schema for a type.

    Parameters
    ----------
    type : type
        A record or union declared in this package, or
        `renderer.AnyRenderer`. The abstract geometry types are dispatched by
        content and have no schema.

    Returns
    -------
    schema : dict
    """
    if type in _geometry._FAMILIES:
        raise TypeError(
            f"`{type.__name__}` is dispatched by content and has no JSON Schema"
        )
    if type == _renderer.AnyRenderer:
        # The two `uniqueValue` renderers can't share one tagged union
        (renderers, predominance), components = msgspec.json.schema_components(
            [_renderer.Renderer, _renderer.PredominanceRenderer]
        )
        out = {"anyOf": [renderers, predominance]}
        if components:
            out["$defs"] = components
        return out
    _reject_embedded_family(type)
    return msgspec.json.schema(type)
