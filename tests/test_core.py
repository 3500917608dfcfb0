import pytest

import msgspec

from arcgis_rest_types import json as arcjson
from arcgis_rest_types.core import (
    Color,
    Dimension,
    Extent,
    FieldType,
    GeometryType,
    PagingParams,
    SpatialReference,
    Units,
)
from arcgis_rest_types.errors import InvalidEnumValue, SchemaError


class TestSpatialReference:
    def test_wkid(self):
        sr = SpatialReference(wkid=102100, latest_wkid=3857)
        assert sr.is_wkid and not sr.is_wkt
        assert arcjson.encode(sr) == b'{"wkid":102100,"latestWkid":3857}'

    def test_wkt(self):
        sr = SpatialReference(wkt='GEOGCS["GCS_WGS_1984"]')
        assert sr.is_wkt and not sr.is_wkid

    def test_vertical(self):
        sr = arcjson.decode(
            b'{"wkid": 4326, "vcsWkid": 115700, "latestVcsWkid": 115700}',
            type=SpatialReference,
        )
        assert sr.vcs_wkid == sr.latest_vcs_wkid == 115700

    def test_both(self):
        with pytest.raises(SchemaError, match="exactly one of `wkid` or `wkt`"):
            SpatialReference(wkid=4326, wkt="GEOGCS[]")

    def test_neither(self):
        with pytest.raises(SchemaError, match="exactly one of `wkid` or `wkt`"):
            SpatialReference()

    def test_neither_on_decode(self):
        with pytest.raises(SchemaError, match="exactly one of"):
            arcjson.decode(b"{}", type=SpatialReference)

    def test_latest_requires_wkid(self):
        with pytest.raises(SchemaError, match="require `wkid`"):
            SpatialReference(wkt="GEOGCS[]", latest_wkid=4326)


class TestDimension:
    @pytest.mark.parametrize(
        "has_z, has_m, dim",
        [
            (False, False, Dimension.NONE),
            (True, False, Dimension.Z),
            (False, True, Dimension.M),
            (True, True, Dimension.ZM),
        ],
    )
    def test_from_flags(self, has_z, has_m, dim):
        res = Dimension.from_flags(has_z, has_m)
        assert res is dim
        assert (res.has_z, res.has_m) == (has_z, has_m)


class TestColor:
    def test_valid(self):
        assert msgspec.json.decode(b"[255, 0, 0, 255]", type=Color) == [255, 0, 0, 255]

    @pytest.mark.parametrize(
        "buf",
        [b"[255, 0, 0]", b"[255, 0, 0, 255, 0]", b"[]"],
    )
    def test_arity(self, buf):
        with pytest.raises(msgspec.ValidationError, match="length"):
            msgspec.json.decode(buf, type=Color)

    @pytest.mark.parametrize("buf", [b"[256, 0, 0, 255]", b"[0, -1, 0, 255]"])
    def test_channel_range(self, buf):
        with pytest.raises(msgspec.ValidationError):
            msgspec.json.decode(buf, type=Color)

    def test_channels_are_integers(self):
        with pytest.raises(msgspec.ValidationError, match="Expected `int`"):
            msgspec.json.decode(b"[0.5, 0, 0, 255]", type=Color)


class TestEnums:
    @pytest.mark.parametrize(
        "cls, value",
        [
            (GeometryType, "esriGeometryPolygon"),
            (FieldType, "esriFieldTypeGlobalID"),
            (Units, "esriSRUnit_NauticalMile"),
        ],
    )
    def test_roundtrip(self, cls, value):
        res = arcjson.decode(f'"{value}"'.encode(), type=cls)
        assert res is cls(value)
        assert arcjson.encode(res) == f'"{value}"'.encode()

    def test_unknown_value(self):
        with pytest.raises(InvalidEnumValue, match="Invalid enum value 'esriGeometryCircle'"):
            arcjson.decode(b'"esriGeometryCircle"', type=GeometryType)

    def test_field_type_count(self):
        assert len(FieldType) == 13


def test_extent_requires_spatial_reference():
    with pytest.raises(msgspec.ValidationError, match="`spatialReference`"):
        arcjson.decode(b'{"xmin": 0, "ymin": 0, "xmax": 1, "ymax": 1}', type=Extent)


def test_paging_params():
    assert arcjson.encode(PagingParams(num=10)) == b'{"num":10}'
