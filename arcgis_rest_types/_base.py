import msgspec

__all__ = ("Schema",)


class Schema(
    msgspec.Struct,
    rename="camel",
    omit_defaults=True,
    kw_only=True,
    repr_omit_defaults=True,
):
    """Base class for records in the ArcGIS REST JSON format.

    Python attribute names are snake_case and are renamed to camelCase on the
    wire. Fields left at their default value are omitted when encoding, which
    matches how the REST API treats optional properties.

    ``kw_only`` isn't inherited by subclasses, so every subclass declaring
    fields passes ``kw_only=True`` itself. This lets required fields follow
    optional fields inherited from a base class.
    """
