from typing import Any, Dict, List, Optional

import msgspec

from . import geometry as _geometry
from ._base import Schema
from .core import Dimension, FieldType, GeometryType, SpatialReference
from .errors import located

__all__ = ("Field", "Feature", "FeatureSet")


def __dir__():
    return __all__


class Field(Schema, kw_only=True):
    """Metadata describing one attribute of a feature.

    Parameters
    ----------
    name : str
        The attribute name. Must be a key of the attributes of every feature
        in the same `FeatureSet`.
    type : FieldType
        The attribute's data type.
    alias : str, optional
        A display name for the attribute.
    length : int, optional
        The maximum length, for string fields.
    """

    name: str
    type: FieldType
    alias: Optional[str] = None
    length: Optional[int] = None


class Feature(Schema, kw_only=True):
    """An attribute record with an optional geometry.

    The geometry may be given either as a geometry instance or as a decoded
    mapping, in which case it's converted to the matching geometry class.
    """

    attributes: Dict[str, Any]
    geometry: Any = None

    def __post_init__(self):
        if self.geometry is not None:
            try:
                self.geometry = _geometry.convert(self.geometry)
            except msgspec.ValidationError as exc:
                raise located(exc, "geometry") from exc


class FeatureSet(Schema, kw_only=True):
    """A field catalog plus a homogeneous array of features.

    Attributes-only sets (as returned for tables) leave ``geometry_type`` and
    ``spatial_reference`` unset. Spatial sets give the shared geometry type
    and spatial reference, and flag Z/M values with ``has_z``/``has_m``.

    Use `check` (or decode with ``check=True``) to verify that the features
    agree with the set's declarations.
    """

    fields: List[Field]
    features: List[Feature]
    object_id_field_name: Optional[str] = None
    global_id_field_name: Optional[str] = None
    display_field_name: Optional[str] = None
    geometry_type: Optional[GeometryType] = None
    spatial_reference: Optional[SpatialReference] = None
    has_z: Optional[bool] = None
    has_m: Optional[bool] = None

    @property
    def dimension(self) -> Dimension:
        return Dimension.from_flags(bool(self.has_z), bool(self.has_m))

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def check(self) -> "FeatureSet":
        """Check that features agree with the declared fields, geometry type,
        dimension, and spatial reference.

        Returns the feature set, raising a ``SchemaError`` subclass on the
        first disagreement.

        See Also
        --------
        arcgis_rest_types.validate.check_feature_set
        """
        from .validate import check_feature_set

        check_feature_set(self)
        return self
