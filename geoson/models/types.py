"""In-memory model for a parsed GeoJSON document.

Every coordinate held by these types is a local East-North-Up position in
metres relative to the collection's ``Datum``, whatever CRS the document
used on the wire.

Design notes:
- ``Geometry`` is a closed union over four shapes (``Point``, ``Segment``,
  ``Path``, ``Polygon``). ``Multi*`` and ``GeometryCollection`` inputs are
  flattened into several features rather than kept as grouped shapes.
- ``Polygon`` keeps a single ring. Wire polygon holes are not represented.
- Properties are string-only. Non-string JSON values are stored as their
  JSON literal text (``42`` -> ``"42"``, ``true`` -> ``"true"``).
- Reassigning ``FeatureCollection.datum`` does not touch existing local
  coordinates; they keep their numbers and are reinterpreted relative to
  the new datum.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geoson.core.constants import ENU_WIRE_NAME, WGS_WIRE_NAME

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class CRS(enum.Enum):
    """Coordinate reference system flavour used on the wire.

    Values:
        WGS: longitude/latitude/altitude in degrees, degrees, metres.
        ENU: local East-North-Up metres relative to the datum.
    """

    WGS = "WGS"
    ENU = "ENU"

    @property
    def wire_name(self) -> str:
        """The ``properties.crs`` string written for this CRS."""
        return WGS_WIRE_NAME if self is CRS.WGS else ENU_WIRE_NAME


# ---------------------------------------------------------------------------
# Frame anchors
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Datum:
    """Geodetic origin of the local frame.

    Attributes:
        latitude: Degrees north.
        longitude: Degrees east.
        altitude: Metres above the WGS 84 ellipsoid.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0


@dataclass(frozen=True, slots=True)
class Heading:
    """Orientation of the collection. Only ``yaw`` is persisted on the wire."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0


@dataclass(frozen=True, slots=True)
class Geodetic:
    """A geodetic position (degrees, degrees, metres)."""

    latitude: float
    longitude: float
    altitude: float = 0.0


# ---------------------------------------------------------------------------
# Geometry shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """Local ENU position in metres (x=east, y=north, z=up)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_shapely(self) -> BaseGeometry:
        from shapely.geometry import Point as ShapelyPoint

        return ShapelyPoint(self.x, self.y, self.z)


@dataclass(slots=True)
class Segment:
    """Straight line between exactly two points."""

    start: Point
    end: Point

    @property
    def points(self) -> list[Point]:
        return [self.start, self.end]

    def to_shapely(self) -> BaseGeometry:
        from shapely.geometry import LineString

        return LineString([(p.x, p.y, p.z) for p in self.points])


@dataclass(slots=True)
class Path:
    """Ordered polyline. May hold any number of points except exactly two
    when produced by the reader (two points decode to a ``Segment``)."""

    points: list[Point] = field(default_factory=list)

    def to_shapely(self) -> BaseGeometry:
        """Return a shapely ``LineString``.

        Raises:
            ValueError: If the path has fewer than two points.
        """
        from shapely.geometry import LineString

        if len(self.points) < 2:
            msg = f"Path with {len(self.points)} point(s) cannot form a LineString"
            raise ValueError(msg)
        return LineString([(p.x, p.y, p.z) for p in self.points])


@dataclass(slots=True)
class Polygon:
    """Single-ring polygon. The ring is stored as read (closed or not)."""

    vertices: list[Point] = field(default_factory=list)

    def to_shapely(self) -> BaseGeometry:
        from shapely.geometry import Polygon as ShapelyPolygon

        return ShapelyPolygon([(p.x, p.y, p.z) for p in self.vertices])


Geometry = Point | Segment | Path | Polygon
"""Closed union of the four internal geometry shapes."""

GEOMETRY_TYPES: tuple[type, ...] = (Point, Segment, Path, Polygon)


def geometry_kind(geometry: Geometry) -> str:
    """Return the upper-case label of a geometry shape.

    Raises:
        TypeError: If ``geometry`` is not one of the four shapes.
    """
    if isinstance(geometry, Polygon):
        return "POLYGON"
    if isinstance(geometry, Segment):
        return "LINE"
    if isinstance(geometry, Path):
        return "PATH"
    if isinstance(geometry, Point):
        return "POINT"
    msg = f"Unsupported geometry type: {type(geometry).__name__}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Feature:
    """One geometry with its string properties."""

    geometry: Geometry
    properties: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class FeatureCollection:
    """A whole document held in local coordinates.

    Attributes:
        datum: Geodetic origin of the local frame.
        heading: Collection orientation (only ``yaw`` is written out).
        features: Features in document order.
        global_properties: Collection-level properties other than
            ``crs``, ``datum`` and ``heading``.
    """

    datum: Datum = field(default_factory=Datum)
    heading: Heading = field(default_factory=Heading)
    features: list[Feature] = field(default_factory=list)
    global_properties: dict[str, str] = field(default_factory=dict)

    def summary(self) -> str:
        """Render a short multi-line description of the collection."""
        lines = [
            f"DATUM: {self.datum.latitude}, {self.datum.longitude}, {self.datum.altitude}",
            f"HEADING: {self.heading.yaw}",
            f"FEATURES: {len(self.features)}",
        ]
        for feature in self.features:
            lines.append(f"  {geometry_kind(feature.geometry)}")
            if feature.properties:
                lines.append(f"    PROPS:{len(feature.properties)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()
