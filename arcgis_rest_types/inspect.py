"""Introspection of the tagged unions and records in this package."""
import typing
from typing import Any, Dict, FrozenSet, Tuple, Union

import msgspec
import msgspec.inspect as mi

from .layer import MIXINS, LayerBase

__all__ = ("tags", "tag_of", "variants", "capabilities", "info", "FieldInfo")


def __dir__():
    return __all__


def variants(union: Any) -> Tuple[type, ...]:
    """The Struct types of a union, in declaration order.

    Nested unions are flattened, and ``None`` is dropped. A single Struct
    type is treated as a union of one.
    """
    if isinstance(union, type) and issubclass(union, msgspec.Struct):
        return (union,)
    if typing.get_origin(union) is not Union:
        raise TypeError(f"Expected a union of Struct types, got {union!r}")
    out = []
    for arg in typing.get_args(union):
        if arg is type(None):
            continue
        for cls in variants(arg):
            if cls not in out:
                out.append(cls)
    return tuple(out)


def tag_of(cls: type) -> Union[str, int]:
    """The tag value of a tagged Struct type.

    Raises
    ------
    TypeError
        If ``cls`` isn't a tagged Struct type.
    """
    config = getattr(cls, "__struct_config__", None)
    if config is None or config.tag is None:
        raise TypeError(f"{cls!r} is not a tagged Struct type")
    return config.tag


def tags(union: Any) -> Dict[Union[str, int], type]:
    """Map every tag value of a tagged union to its variant.

    Parameters
    ----------
    union : type
        A union of tagged Struct types, such as `layer.OperationalLayer`.

    Returns
    -------
    tags : dict
        A mapping from tag value to Struct type.

    Raises
    ------
    ValueError
        If two variants share a tag value, or use different tag fields.
    """
    out = {}
    tag_field = None
    for cls in variants(union):
        config = cls.__struct_config__
        if tag_field is None:
            tag_field = config.tag_field
        elif config.tag_field != tag_field:
            raise ValueError(
                f"{cls.__name__} is tagged by {config.tag_field!r}, "
                f"other variants by {tag_field!r}"
            )
        tag = tag_of(cls)
        if tag in out:
            raise ValueError(
                f"{out[tag].__name__} and {cls.__name__} share the tag {tag!r}"
            )
        out[tag] = cls
    return out


def capabilities(layer_cls: type) -> FrozenSet[str]:
    """The optional mixin properties a layer type supports.

    Parameters
    ----------
    layer_cls : type
        A layer type, such as `layer.FeatureLayer`.

    Returns
    -------
    capabilities : frozenset of str
        The wire names out of `layer.MIXINS` that the layer type declares.
    """
    if not (isinstance(layer_cls, type) and issubclass(layer_cls, LayerBase)):
        raise TypeError(f"Expected a layer type, got {layer_cls!r}")
    fields = set(layer_cls.__struct_encode_fields__)
    return frozenset(name for name in MIXINS if name in fields)


class FieldInfo(msgspec.Struct, frozen=True):
    """A record field.

    Parameters
    ----------
    name : str
        The Python attribute name.
    wire_name : str
        The property name in JSON.
    required : bool
        Whether the property must be present when decoding.
    type : msgspec.inspect.Type
        The field's type.
    """

    name: str
    wire_name: str
    required: bool
    type: mi.Type


def info(cls: type) -> Tuple[FieldInfo, ...]:
    """Describe the fields of a record type.

    The tag field of a tagged type is not included.
    """
    t = mi.type_info(cls)
    if not isinstance(t, mi.StructType):
        raise TypeError(f"Expected a Struct type, got {cls!r}")
    return tuple(
        FieldInfo(f.name, f.encode_name, f.required, f.type) for f in t.fields
    )
