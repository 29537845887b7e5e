"""Data models.

Defines the in-memory structures produced by the reader and consumed by
the writer:
- Datum / Heading: frame anchor and orientation of a collection
- Point, Segment, Path, Polygon: the four local-frame geometry shapes
- Feature / FeatureCollection: geometry with string properties
"""

from geoson.models.types import (
    CRS,
    GEOMETRY_TYPES,
    Datum,
    Feature,
    FeatureCollection,
    Geodetic,
    Geometry,
    Heading,
    Path,
    Point,
    Polygon,
    Segment,
    geometry_kind,
)

__all__ = [
    "CRS",
    "GEOMETRY_TYPES",
    "Datum",
    "Feature",
    "FeatureCollection",
    "Geodetic",
    "Geometry",
    "Heading",
    "Path",
    "Point",
    "Polygon",
    "Segment",
    "geometry_kind",
]
