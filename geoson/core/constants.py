"""Shared wire-format constants.

Centralises the GeoJSON type names, CRS strings and reserved property
keys used by both the read and the write path.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# GeoJSON type names
# ---------------------------------------------------------------------------

FEATURE_COLLECTION = "FeatureCollection"
FEATURE = "Feature"

POINT = "Point"
LINE_STRING = "LineString"
POLYGON = "Polygon"
MULTI_POINT = "MultiPoint"
MULTI_LINE_STRING = "MultiLineString"
MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"

# ---------------------------------------------------------------------------
# CRS strings
# ---------------------------------------------------------------------------

WGS_WIRE_NAME: str = "EPSG:4326"
"""CRS string written for geodetic (lon/lat/alt) output."""

ENU_WIRE_NAME: str = "ENU"
"""CRS string written for local East-North-Up output."""

WGS_ALIASES = frozenset({"EPSG:4326", "WGS84", "WGS"})

# "ECEF" is read as the local ENU frame for compatibility with existing files.
ENU_ALIASES = frozenset({"ENU", "ECEF"})

# ---------------------------------------------------------------------------
# Collection-level property keys
# ---------------------------------------------------------------------------

CRS_KEY = "crs"
DATUM_KEY = "datum"
HEADING_KEY = "heading"

RESERVED_PROPERTY_KEYS = frozenset({CRS_KEY, DATUM_KEY, HEADING_KEY})

# [longitude, latitude, altitude]
MIN_DATUM_LENGTH = 3

# [x, y] or [x, y, z]
MIN_POSITION_LENGTH = 2
