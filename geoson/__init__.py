"""geoson: GeoJSON in a local East-North-Up frame.

Reads GeoJSON documents whose coordinates are either WGS 84
(longitude/latitude/altitude) or local ENU metres, and holds every
geometry as local Cartesian points relative to a geodetic datum.
Writes them back in either flavour.
"""

from geoson.codec import dumps, loads, read, write
from geoson.core.config import CodecConfig, ConfigValidationError
from geoson.core.exceptions import FormatError, GeosonError, IoError
from geoson.models.types import (
    CRS,
    Datum,
    Feature,
    FeatureCollection,
    Heading,
    Path,
    Point,
    Polygon,
    Segment,
)

__version__ = "0.1.0"

__all__ = [
    "CRS",
    "CodecConfig",
    "ConfigValidationError",
    "Datum",
    "Feature",
    "FeatureCollection",
    "FormatError",
    "GeosonError",
    "Heading",
    "IoError",
    "Path",
    "Point",
    "Polygon",
    "Segment",
    "dumps",
    "loads",
    "read",
    "write",
]
