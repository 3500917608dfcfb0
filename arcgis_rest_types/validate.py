"""Consistency checks across the objects of a document.

Decoding checks each object against its own type. The checks here cover
what a type can't express: that a feature set's features agree with its
declared fields, geometry type, dimension and spatial reference, and that the
geometries and layers of a web map agree with the map. They're opt-in, either
by calling them directly or by decoding with ``check=True``.
"""
from typing import Any, Iterable, Optional

from msgspec import UNSET

from . import geometry as _geometry
from .core import Dimension, GeometryType, SpatialReference
from .errors import (
    DimensionalityMismatch,
    GeometryTypeMismatch,
    MissingField,
    SchemaError,
    SpatialReferenceMismatch,
)
from .feature import Feature, FeatureSet
from .layer import FeatureLayer
from .webmap import Webmap

__all__ = ("check", "check_feature_set", "check_webmap", "same_spatial_reference")


def __dir__():
    return __all__


def same_spatial_reference(a: SpatialReference, b: SpatialReference) -> bool:
    """Whether two spatial references identify the same coordinate system.

    References by well-known ID match if any of their ``wkid`` and
    ``latestWkid`` values match (so ``102100`` matches ``3857``, given as its
    latest ID). References by well-known text match if the text is equal.
    """
    if a.is_wkt or b.is_wkt:
        return a.wkt == b.wkt
    ids_a = {a.wkid, a.latest_wkid} - {None}
    ids_b = {b.wkid, b.latest_wkid} - {None}
    if ids_a.isdisjoint(ids_b):
        return False
    if a.vcs_wkid is not None and b.vcs_wkid is not None:
        vcs_a = {a.vcs_wkid, a.latest_vcs_wkid} - {None}
        vcs_b = {b.vcs_wkid, b.latest_vcs_wkid} - {None}
        return not vcs_a.isdisjoint(vcs_b)
    return True


def _check_spatial_reference(sr, expected, where):
    if sr is UNSET or sr is None or expected is None:
        return
    if not same_spatial_reference(sr, expected):
        raise SpatialReferenceMismatch(
            f"Spatial reference mismatch: expected {_describe(expected)}, "
            f"got {_describe(sr)} - at `{where}`"
        )


def _describe(sr: SpatialReference) -> str:
    return f"wkid {sr.wkid}" if sr.is_wkid else "a different wkt"


def _check_features(
    features: Iterable[Feature],
    field_names: Iterable[str],
    geometry_type: Optional[GeometryType],
    dim: Optional[Dimension],
    spatial_reference: Optional[SpatialReference],
    where: str,
):
    field_names = list(field_names)
    for i, feature in enumerate(features):
        here = f"{where}.features[{i}]"
        for name in field_names:
            if name not in feature.attributes:
                raise MissingField(
                    f"Missing attribute `{name}` declared in `fields` - "
                    f"at `{here}.attributes`"
                )

        geom = feature.geometry
        if geom is None:
            continue
        if geometry_type is not None and _geometry.geometry_type(geom) != geometry_type:
            raise GeometryTypeMismatch(
                f"Geometry type mismatch: expected {geometry_type.value}, got "
                f"{_geometry.geometry_type(geom).value} - at `{here}.geometry`"
            )
        if dim is not None and not _geometry.is_empty(geom):
            actual = _geometry.dimension(geom)
            if actual != dim:
                raise DimensionalityMismatch(
                    f"Dimensionality mismatch: expected {dim.value!r}, got "
                    f"{actual.value!r} - at `{here}.geometry`"
                )
        _check_spatial_reference(
            geom.spatial_reference, spatial_reference, f"{here}.geometry.spatialReference"
        )


def check_feature_set(fs: FeatureSet, where: str = "$") -> None:
    """Check that a feature set's features agree with its declarations.

    Parameters
    ----------
    fs : FeatureSet
        The feature set to check.
    where : str, optional
        The location of the feature set in its document, used in error
        messages.

    Raises
    ------
    MissingField
        If a feature lacks an attribute named in ``fields``.
    GeometryTypeMismatch
        If a feature's geometry isn't of the declared ``geometryType``.
    DimensionalityMismatch
        If a non-empty geometry's dimension disagrees with the declared
        ``hasZ``/``hasM``.
    SpatialReferenceMismatch
        If a geometry carries a spatial reference other than the feature
        set's.
    """
    _check_features(
        fs.features,
        fs.field_names(),
        fs.geometry_type,
        fs.dimension,
        fs.spatial_reference,
        where,
    )


def _check_feature_layer(layer: FeatureLayer, sr: SpatialReference, where: str):
    fc = layer.feature_collection
    if fc is None or not fc.layers:
        return
    for i, sub in enumerate(fc.layers):
        here = f"{where}.featureCollection.layers[{i}]"
        fs = sub.feature_set
        if fs is None or not fs.features:
            continue
        definition = sub.layer_definition
        field_names = []
        geometry_type = fs.geometry_type
        dim = None
        if definition is not None:
            if definition.fields:
                field_names = [f.name for f in definition.fields]
            if geometry_type is None:
                geometry_type = definition.geometry_type
            if definition.spatial_reference is not None:
                _check_spatial_reference(
                    definition.spatial_reference,
                    sr,
                    f"{here}.layerDefinition.spatialReference",
                )
            if definition.has_z is not None or definition.has_m is not None:
                dim = Dimension.from_flags(bool(definition.has_z), bool(definition.has_m))
        _check_features(
            fs.features, field_names, geometry_type, dim, sr, f"{here}.featureSet"
        )


def check_webmap(wm: Webmap) -> None:
    """Check that the layers and geometries of a web map agree with the map.

    Checks that:

    - layer ``id`` values are unique across basemap and operational layers;
    - features stored in feature collections agree with their layer
      definitions (see `check_feature_set`);
    - geometries stored in the map (feature collection features, bookmark and
      slide extents) use the map's spatial reference.

    Raises
    ------
    SchemaError
        On the first disagreement, as the most specific subclass.
    """
    sr = wm.spatial_reference
    seen = {}
    layers = [
        (f"$.baseMap.baseMapLayers[{i}]", layer)
        for i, layer in enumerate(wm.base_map.base_map_layers)
    ]
    layers.extend(
        (f"$.operationalLayers[{i}]", layer)
        for i, layer in enumerate(wm.operational_layers or ())
    )
    for where, layer in layers:
        if layer.id in seen:
            raise SchemaError(
                f"Duplicate layer id {layer.id!r} - at `{where}.id`, "
                f"first used at `{seen[layer.id]}.id`"
            )
        seen[layer.id] = where
        if isinstance(layer, FeatureLayer):
            _check_feature_layer(layer, sr, where)

    for i, bookmark in enumerate(wm.bookmarks or ()):
        _check_spatial_reference(
            bookmark.extent.spatial_reference,
            sr,
            f"$.bookmarks[{i}].extent.spatialReference",
        )

    if wm.presentation is not None:
        for i, slide in enumerate(wm.presentation.slides):
            here = f"$.presentation.slides[{i}]"
            if slide.extent is not None:
                _check_spatial_reference(
                    slide.extent.spatial_reference, sr, f"{here}.extent.spatialReference"
                )
            if slide.map_location is not None:
                _check_spatial_reference(
                    slide.map_location.center_point.spatial_reference,
                    sr,
                    f"{here}.mapLocation.centerPoint.spatialReference",
                )


def check(obj: Any) -> Any:
    """Run the consistency checks for a decoded document.

    Parameters
    ----------
    obj : FeatureSet or Webmap
        The document to check.

    Returns
    -------
    obj : FeatureSet or Webmap
        The same document, if all checks pass.
    """
    if isinstance(obj, FeatureSet):
        check_feature_set(obj)
    elif isinstance(obj, Webmap):
        check_webmap(obj)
    else:
        raise TypeError(
            f"No consistency checks for `{type(obj).__name__}`, expected a "
            "FeatureSet or Webmap"
        )
    return obj
