"""Geometry codec: wire GeoJSON geometry <-> local-frame shapes.

Decoding converts positions to local ENU metres (through the geodetic
converter when the document CRS is WGS) and collapses the GeoJSON
geometry types into the four internal shapes:

- ``Point``                        -> ``Point``
- ``LineString`` with 2 positions  -> ``Segment``
- ``LineString`` otherwise         -> ``Path`` (including 0 or 1 positions)
- ``Polygon``                      -> ``Polygon`` (outer ring only)
- ``Multi*`` / ``GeometryCollection`` -> several flat shapes

Encoding is the inverse, with altitude rounded to whole metres on WGS
output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from geoson.codec._validation import finite_float
from geoson.core.constants import (
    GEOMETRY_COLLECTION,
    LINE_STRING,
    MIN_POSITION_LENGTH,
    MULTI_LINE_STRING,
    MULTI_POINT,
    MULTI_POLYGON,
    POINT,
    POLYGON,
)
from geoson.core.exceptions import FormatError
from geoson.models.types import CRS, Geodetic, Path, Point, Polygon, Segment

if TYPE_CHECKING:
    from geoson.adapters.geodetic import GeodeticConverter
    from geoson.models.types import Datum, Geometry

logger = logging.getLogger("geoson.codec")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_point(coords: Any, datum: Datum, crs: CRS, converter: GeodeticConverter) -> Point:
    """Decode one wire position into a local ``Point``.

    For WGS input a missing altitude defaults to the datum altitude for
    the conversion, and the resulting local ``z`` is then set to
    ``0.0 - datum.altitude`` so 2D input stays flat.

    Raises:
        FormatError: If ``coords`` is not an array of at least two finite
            numbers.
    """
    if not isinstance(coords, list | tuple) or len(coords) < MIN_POSITION_LENGTH:
        msg = f"Invalid point coordinates: expected at least {MIN_POSITION_LENGTH} numbers, got {coords!r}"
        raise FormatError(msg)
    values = [finite_float(c) for c in coords[:3]]
    if any(v is None for v in values):
        msg = f"Invalid point coordinates: non-numeric or out-of-range value in {coords!r}"
        raise FormatError(msg)

    x, y = values[0], values[1]
    has_z = len(values) > MIN_POSITION_LENGTH
    z = values[2] if has_z else 0.0

    if crs is CRS.ENU:
        return Point(x, y, z)

    altitude = z if has_z else datum.altitude
    local = converter.to_local(datum, Geodetic(latitude=y, longitude=x, altitude=altitude))
    if not has_z:
        return Point(local.x, local.y, 0.0 - datum.altitude)
    return local


def decode_line_string(
    coords: Any, datum: Datum, crs: CRS, converter: GeodeticConverter
) -> Segment | Path:
    """Decode a wire LineString: two positions give a ``Segment``, any other count a ``Path``.

    Raises:
        FormatError: If ``coords`` is not an array of positions.
    """
    points = _decode_positions(coords, datum, crs, converter, LINE_STRING)
    if len(points) == 2:
        return Segment(points[0], points[1])
    return Path(points)


def decode_polygon(coords: Any, datum: Datum, crs: CRS, converter: GeodeticConverter) -> Polygon:
    """Decode a wire Polygon, keeping only its outer ring.

    Raises:
        FormatError: If ``coords`` is not an array of rings.
    """
    if not isinstance(coords, list):
        msg = f"Invalid {POLYGON} coordinates: expected an array of rings, got {type(coords).__name__}"
        raise FormatError(msg)
    if not coords:
        return Polygon([])
    if len(coords) > 1:
        logger.debug("Dropping %d inner ring(s) of polygon", len(coords) - 1)
    return Polygon(_decode_positions(coords[0], datum, crs, converter, POLYGON))


def decode_geometry(
    obj: Any, datum: Datum, crs: CRS, converter: GeodeticConverter
) -> list[Geometry]:
    """Decode a wire geometry object into zero or more local shapes.

    ``Multi*`` types fan out into one shape per member and
    ``GeometryCollection`` is decoded recursively. Unknown types and
    geometries without ``coordinates`` decode to an empty list.

    Raises:
        FormatError: If a position inside the geometry is malformed.
    """
    if not isinstance(obj, dict):
        logger.debug("Ignoring non-object geometry of type %s", type(obj).__name__)
        return []

    geom_type = obj.get("type")

    if geom_type == GEOMETRY_COLLECTION:
        members = obj.get("geometries", [])
        if not isinstance(members, list):
            msg = f"'{GEOMETRY_COLLECTION}.geometries' must be an array"
            raise FormatError(msg)
        out: list[Geometry] = []
        for member in members:
            out.extend(decode_geometry(member, datum, crs, converter))
        return out

    if "coordinates" not in obj:
        logger.debug("Ignoring geometry %r without coordinates", geom_type)
        return []
    coords = obj["coordinates"]

    if geom_type == POINT:
        return [decode_point(coords, datum, crs, converter)]
    if geom_type == LINE_STRING:
        return [decode_line_string(coords, datum, crs, converter)]
    if geom_type == POLYGON:
        return [decode_polygon(coords, datum, crs, converter)]
    if geom_type == MULTI_POINT:
        return [decode_point(c, datum, crs, converter) for c in _members(coords, geom_type)]
    if geom_type == MULTI_LINE_STRING:
        return [decode_line_string(c, datum, crs, converter) for c in _members(coords, geom_type)]
    if geom_type == MULTI_POLYGON:
        return [decode_polygon(c, datum, crs, converter) for c in _members(coords, geom_type)]

    logger.debug("Ignoring unsupported geometry type %r", geom_type)
    return []


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_point(
    point: Point, datum: Datum, output_crs: CRS, converter: GeodeticConverter
) -> list[float | int]:
    """Encode a local ``Point`` as a wire position.

    ENU output is ``[x, y, z]`` verbatim. WGS output is
    ``[longitude, latitude, altitude]`` with the altitude rounded to the
    nearest whole metre.
    """
    if output_crs is CRS.ENU:
        return [point.x, point.y, point.z]
    geodetic = converter.to_geodetic(datum, point)
    return [geodetic.longitude, geodetic.latitude, round(geodetic.altitude)]


def encode_geometry(
    geometry: Geometry, datum: Datum, output_crs: CRS, converter: GeodeticConverter
) -> dict[str, Any]:
    """Encode a local shape as a wire geometry object.

    Raises:
        TypeError: If ``geometry`` is not one of the four shapes.
    """

    def encode(p: Point) -> list[float | int]:
        return encode_point(p, datum, output_crs, converter)

    if isinstance(geometry, Point):
        return {"type": POINT, "coordinates": encode(geometry)}
    if isinstance(geometry, Segment):
        return {"type": LINE_STRING, "coordinates": [encode(geometry.start), encode(geometry.end)]}
    if isinstance(geometry, Path):
        return {"type": LINE_STRING, "coordinates": [encode(p) for p in geometry.points]}
    if isinstance(geometry, Polygon):
        return {"type": POLYGON, "coordinates": [[encode(p) for p in geometry.vertices]]}

    msg = f"Unsupported geometry type: {type(geometry).__name__}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _members(coords: Any, geom_type: str) -> list[Any]:
    if not isinstance(coords, list):
        msg = f"Invalid {geom_type} coordinates: expected an array, got {type(coords).__name__}"
        raise FormatError(msg)
    return coords


def _decode_positions(
    coords: Any, datum: Datum, crs: CRS, converter: GeodeticConverter, geom_type: str
) -> list[Point]:
    return [decode_point(c, datum, crs, converter) for c in _members(coords, geom_type)]
