"""GeoJSON codec: composable read/write pipeline.

Reads GeoJSON into a ``FeatureCollection`` held in local East-North-Up
coordinates and writes it back in either the WGS 84 or the ENU flavour.

The pipeline is split into focused stages:
- **_envelope**: FeatureCollection / Feature / bare geometry -> collection
- **_validation**: collection ``properties`` (``crs``, ``datum``, ``heading``)
- **_geometry**: wire geometry <-> Point / Segment / Path / Polygon
- **_properties**: string-only property model
- **_reader** / **_writer**: orchestration of the stages above

Supported wire geometry: Point, LineString, Polygon (outer ring only),
MultiPoint, MultiLineString, MultiPolygon, GeometryCollection.
"""

from __future__ import annotations

from geoson.codec._envelope import normalize_envelope
from geoson.codec._geometry import (
    decode_geometry,
    decode_line_string,
    decode_point,
    decode_polygon,
    encode_geometry,
    encode_point,
)
from geoson.codec._properties import decode_properties, stringify_value
from geoson.codec._reader import from_tree, loads, read
from geoson.codec._validation import parse_crs
from geoson.codec._writer import dumps, to_tree, write

__all__ = [
    "decode_geometry",
    "decode_line_string",
    "decode_point",
    "decode_polygon",
    "decode_properties",
    "dumps",
    "encode_geometry",
    "encode_point",
    "from_tree",
    "loads",
    "normalize_envelope",
    "parse_crs",
    "read",
    "stringify_value",
    "to_tree",
    "write",
]
