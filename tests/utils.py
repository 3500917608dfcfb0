import msgspec

from arcgis_rest_types import json as arcjson

WEB_MERCATOR = {"wkid": 102100, "latestWkid": 3857}

RED = [255, 0, 0, 255]


def wire(obj):
    """Encode ``obj`` and decode it back into builtin types, to check what
    was written"""
    return msgspec.json.decode(arcjson.encode(obj))
