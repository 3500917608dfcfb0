import pytest

import msgspec

from arcgis_rest_types import geometry as g
from arcgis_rest_types import json as arcjson
from arcgis_rest_types.core import Dimension, FieldType, GeometryType, SpatialReference
from arcgis_rest_types.errors import (
    DimensionalityMismatch,
    GeometryTypeMismatch,
    MissingField,
    SpatialReferenceMismatch,
    UnknownVariant,
)
from arcgis_rest_types.feature import Feature, FeatureSet, Field
from arcgis_rest_types.validate import check_feature_set, same_spatial_reference


def make_feature_set(*features, **kwargs):
    kwargs.setdefault("fields", [Field(name="OBJECTID", type=FieldType.OID)])
    return FeatureSet(features=list(features), **kwargs)


class TestFeature:
    def test_geometry_converted(self):
        f = Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0})
        assert f.geometry == g.Point(x=0, y=0)

    def test_geometry_optional(self):
        f = arcjson.decode(b'{"attributes": {"a": 1}}', type=Feature)
        assert f.geometry is None
        assert arcjson.encode(f) == b'{"attributes":{"a":1}}'

    def test_decode_dispatches_geometry(self):
        f = arcjson.decode(
            b'{"attributes": {}, "geometry": {"paths": [[[0, 0, 1]]], "hasM": true}}',
            type=Feature,
        )
        assert isinstance(f.geometry, g.PolylineM)

    def test_invalid_geometry(self):
        with pytest.raises(DimensionalityMismatch, match=r"at `\$\.geometry\.points\[0\]`"):
            arcjson.decode(
                b'{"attributes": {}, "geometry": {"points": [[0, 0, 1]]}}',
                type=Feature,
            )

    def test_invalid_geometry_constructed(self):
        with pytest.raises(DimensionalityMismatch, match=r"at `\$\.geometry\.points\[0\]`"):
            Feature(attributes={}, geometry={"points": [[0, 0, 1]]})

    def test_invalid_geometry_location_in_feature_set(self):
        msg = (
            b'{"fields": [], "features": ['
            b'{"attributes": {}, "geometry": {"x": 0, "y": 0}},'
            b'{"attributes": {}, "geometry": {"points": [[0, 0], [0, 0, 1]]}}'
            b"]}"
        )
        with pytest.raises(DimensionalityMismatch) as rec:
            arcjson.decode(msg, type=FeatureSet)
        assert str(rec.value).endswith("at `$.features[1].geometry.points[1]`")
        assert str(rec.value).count(" - at ") == 1

    def test_unknown_geometry_location(self):
        with pytest.raises(UnknownVariant, match=r"at `\$\.features\[0\]\.geometry`"):
            arcjson.decode(
                b'{"fields": [], "features": [{"attributes": {}, "geometry": {"spam": 1}}]}',
                type=FeatureSet,
            )

    def test_attributes_required(self):
        with pytest.raises(MissingField, match="`attributes`"):
            arcjson.decode(b'{"geometry": {"x": 0, "y": 0}}', type=Feature)

    def test_roundtrip(self):
        f = Feature(
            attributes={"OBJECTID": 1, "NAME": "a", "VALUE": 1.5, "NOTE": None},
            geometry=g.PointZ(x=1, y=2, z=3, spatial_reference=SpatialReference(wkid=4326)),
        )
        assert arcjson.decode(arcjson.encode(f), type=Feature) == f


class TestFeatureSet:
    def test_decode(self, feature_set_doc):
        fs = arcjson.decode(msgspec.json.encode(feature_set_doc), type=FeatureSet)
        assert fs.geometry_type is GeometryType.POINT
        assert fs.field_names() == ["OBJECTID", "NAME"]
        assert fs.fields[1].length == 50
        assert all(isinstance(f.geometry, g.Point) for f in fs.features)
        assert fs.dimension is Dimension.NONE
        assert fs.check() is fs

    def test_roundtrip(self, feature_set_doc):
        fs = arcjson.decode(msgspec.json.encode(feature_set_doc), type=FeatureSet)
        buf = arcjson.encode(fs)
        assert arcjson.decode(buf, type=FeatureSet) == fs
        assert msgspec.json.decode(buf) == feature_set_doc

    def test_attributes_only(self):
        fs = arcjson.decode(
            b'{"fields": [{"name": "a", "type": "esriFieldTypeInteger"}],'
            b' "features": [{"attributes": {"a": 1}}]}',
            type=FeatureSet,
        )
        assert fs.geometry_type is None
        fs.check()

    def test_dimension(self):
        fs = make_feature_set(has_z=True, has_m=True)
        assert fs.dimension is Dimension.ZM


class TestCheckFeatureSet:
    def test_example(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0})
        )
        check_feature_set(fs)

    def test_missing_attribute(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0}),
            Feature(attributes={"NAME": "x"}, geometry={"x": 0, "y": 0}),
        )
        with pytest.raises(
            MissingField, match=r"Missing attribute `OBJECTID`.*\$\.features\[1\]"
        ):
            check_feature_set(fs)

    def test_geometry_type_mismatch(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0}),
            geometry_type=GeometryType.POLYLINE,
        )
        with pytest.raises(GeometryTypeMismatch, match="expected esriGeometryPolyline"):
            fs.check()

    def test_envelope_is_not_polygon(self):
        fs = make_feature_set(
            Feature(
                attributes={"OBJECTID": 1},
                geometry={"xmin": 0, "ymin": 0, "xmax": 1, "ymax": 1},
            ),
            geometry_type=GeometryType.POLYGON,
        )
        with pytest.raises(GeometryTypeMismatch):
            fs.check()

    def test_dimension_mismatch(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0, "z": 1}),
        )
        with pytest.raises(DimensionalityMismatch, match="expected 'none', got 'z'"):
            fs.check()

    def test_dimension_matches(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0, "z": 1}),
            has_z=True,
        )
        fs.check()

    def test_empty_geometry_exempt_from_dimension(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": "NaN"}),
            has_z=True,
        )
        fs.check()

    def test_spatial_reference_mismatch(self):
        fs = make_feature_set(
            Feature(
                attributes={"OBJECTID": 1},
                geometry={"x": 0, "y": 0, "spatialReference": {"wkid": 4326}},
            ),
            spatial_reference=SpatialReference(wkid=102100),
        )
        with pytest.raises(
            SpatialReferenceMismatch, match="expected wkid 102100, got wkid 4326"
        ):
            fs.check()

    def test_geometry_without_spatial_reference(self):
        fs = make_feature_set(
            Feature(attributes={"OBJECTID": 1}, geometry={"x": 0, "y": 0}),
            spatial_reference=SpatialReference(wkid=102100),
        )
        fs.check()

    def test_decode_with_check(self, feature_set_doc):
        del feature_set_doc["features"][0]["attributes"]["NAME"]
        buf = msgspec.json.encode(feature_set_doc)
        arcjson.decode(buf, type=FeatureSet)
        with pytest.raises(MissingField):
            arcjson.decode(buf, type=FeatureSet, check=True)


class TestSameSpatialReference:
    @pytest.mark.parametrize(
        "a, b, same",
        [
            ({"wkid": 4326}, {"wkid": 4326}, True),
            ({"wkid": 102100}, {"wkid": 102100, "latestWkid": 3857}, True),
            ({"wkid": 3857}, {"wkid": 102100, "latestWkid": 3857}, True),
            ({"wkid": 4326}, {"wkid": 3857}, False),
            ({"wkt": "A"}, {"wkt": "A"}, True),
            ({"wkt": "A"}, {"wkid": 4326}, False),
            ({"wkid": 4326, "vcsWkid": 5703}, {"wkid": 4326, "vcsWkid": 115700}, False),
            ({"wkid": 4326, "vcsWkid": 5703}, {"wkid": 4326}, True),
        ],
    )
    def test_same(self, a, b, same):
        a = msgspec.convert(a, SpatialReference)
        b = msgspec.convert(b, SpatialReference)
        assert same_spatial_reference(a, b) is same
        assert same_spatial_reference(b, a) is same
