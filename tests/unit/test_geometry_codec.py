"""Tests for the geometry codec.

Covers:
- Point decoding in ENU and WGS (with and without altitude)
- LineString classification into Segment / Path
- Polygon outer-ring retention
- Multi* and GeometryCollection fan-out, unknown types
- Encoding of every shape in both CRS flavours
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from geoson.codec import (
    decode_geometry,
    decode_line_string,
    decode_point,
    decode_polygon,
    encode_geometry,
    encode_point,
)
from geoson.core.exceptions import FormatError
from geoson.models.types import CRS, Datum, Path, Point, Polygon, Segment

if TYPE_CHECKING:
    from tests.conftest import ShiftConverter

DATUM = Datum(latitude=52.0, longitude=5.0, altitude=100.0)


class TestDecodePoint:
    """decode_point in both CRS flavours."""

    def test_enu_is_verbatim(self, shift_converter: ShiftConverter) -> None:
        """ENU positions become points unchanged."""
        assert decode_point([1.5, -2.5, 3.0], DATUM, CRS.ENU, shift_converter) == Point(1.5, -2.5, 3.0)

    def test_enu_without_z(self, shift_converter: ShiftConverter) -> None:
        """A 2D ENU position gets z = 0."""
        assert decode_point([1.0, 2.0], DATUM, CRS.ENU, shift_converter) == Point(1.0, 2.0, 0.0)

    def test_integer_coordinates(self, shift_converter: ShiftConverter) -> None:
        """Integer coordinates are stored as floats."""
        point = decode_point([1, 2, 3], DATUM, CRS.ENU, shift_converter)
        assert point == Point(1.0, 2.0, 3.0)
        assert isinstance(point.x, float)

    def test_wgs_with_altitude(self, shift_converter: ShiftConverter) -> None:
        """WGS positions go through the converter."""
        point = decode_point([5.002, 52.001, 110.0], DATUM, CRS.WGS, shift_converter)
        assert point.x == pytest.approx(2.0)
        assert point.y == pytest.approx(1.0)
        assert point.z == pytest.approx(10.0)

    def test_wgs_without_altitude_is_flattened(self, shift_converter: ShiftConverter) -> None:
        """A 2D WGS position gets z = -datum.altitude."""
        point = decode_point([5.002, 52.001], DATUM, CRS.WGS, shift_converter)
        assert point.x == pytest.approx(2.0)
        assert point.y == pytest.approx(1.0)
        assert point.z == 0.0 - DATUM.altitude

    def test_wgs_without_altitude_uses_datum_altitude_for_conversion(self) -> None:
        """A 2D WGS position is converted at the datum altitude."""
        seen = []

        class Recorder:
            def to_local(self, datum, geodetic):  # noqa: ANN001, ANN202
                seen.append(geodetic)
                return Point()

            def to_geodetic(self, datum, local):  # noqa: ANN001, ANN202
                raise AssertionError("not used")

        decode_point([5.1, 52.1], DATUM, CRS.WGS, Recorder())
        assert seen[0].longitude == 5.1
        assert seen[0].latitude == 52.1
        assert seen[0].altitude == DATUM.altitude

    @pytest.mark.parametrize(
        "coords",
        [
            [],
            [5.1],
            "5.1,52.1",
            None,
            [True, 1.0],
            ["a", "b"],
            [float("inf"), 0.0],
            [0.0, float("nan")],
            [10**400, 0.0],
            [0.0, 0.0, -(10**400)],
        ],
    )
    def test_invalid_coordinates(self, coords: object, shift_converter: ShiftConverter) -> None:
        """Short, non-numeric and out-of-range positions are rejected."""
        with pytest.raises(FormatError, match="Invalid point coordinates"):
            decode_point(coords, DATUM, CRS.ENU, shift_converter)


class TestDecodeLineString:
    """Two positions give a Segment, every other count a Path."""

    def test_two_positions_is_segment(self, shift_converter: ShiftConverter) -> None:
        """Exactly two positions decode to a Segment."""
        line = decode_line_string([[0, 0, 0], [1, 1, 1]], DATUM, CRS.ENU, shift_converter)
        assert line == Segment(Point(0, 0, 0), Point(1, 1, 1))

    @pytest.mark.parametrize("count", [0, 1, 3, 7])
    def test_other_counts_are_paths(self, count: int, shift_converter: ShiftConverter) -> None:
        """Any other number of positions decodes to a Path."""
        coords = [[float(i), 0.0, 0.0] for i in range(count)]
        line = decode_line_string(coords, DATUM, CRS.ENU, shift_converter)
        assert isinstance(line, Path)
        assert len(line.points) == count

    def test_not_an_array(self, shift_converter: ShiftConverter) -> None:
        """Non-array LineString coordinates are rejected."""
        with pytest.raises(FormatError, match="LineString"):
            decode_line_string({"a": 1}, DATUM, CRS.ENU, shift_converter)


class TestDecodePolygon:
    """Only the outer ring survives."""

    def test_holes_are_dropped(self, shift_converter: ShiftConverter) -> None:
        """Only the outer ring is kept."""
        outer = [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]
        hole = [[1, 1], [2, 1], [2, 2], [1, 1]]
        polygon = decode_polygon([outer, hole], DATUM, CRS.ENU, shift_converter)
        assert polygon == Polygon([Point(x, y, 0.0) for x, y in outer])

    def test_empty_ring_list(self, shift_converter: ShiftConverter) -> None:
        """A polygon without rings decodes to an empty polygon."""
        assert decode_polygon([], DATUM, CRS.ENU, shift_converter) == Polygon([])

    def test_not_an_array(self, shift_converter: ShiftConverter) -> None:
        """Non-array Polygon coordinates are rejected."""
        with pytest.raises(FormatError, match="Polygon"):
            decode_polygon("ring", DATUM, CRS.ENU, shift_converter)


class TestDecodeGeometry:
    """Dispatch over wire geometry types."""

    def test_point(self, shift_converter: ShiftConverter) -> None:
        """A Point decodes to one shape."""
        shapes = decode_geometry({"type": "Point", "coordinates": [1, 2, 3]}, DATUM, CRS.ENU, shift_converter)
        assert shapes == [Point(1, 2, 3)]

    def test_multi_point(self, shift_converter: ShiftConverter) -> None:
        """MultiPoint fans out into one point per member."""
        obj = {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4], [5, 6]]}
        shapes = decode_geometry(obj, DATUM, CRS.ENU, shift_converter)
        assert shapes == [Point(1, 2, 0), Point(3, 4, 0), Point(5, 6, 0)]

    def test_multi_line_string(self, shift_converter: ShiftConverter) -> None:
        """MultiLineString members are classified one by one."""
        obj = {
            "type": "MultiLineString",
            "coordinates": [[[0, 0], [1, 0]], [[0, 0], [1, 0], [2, 0]]],
        }
        shapes = decode_geometry(obj, DATUM, CRS.ENU, shift_converter)
        assert [type(s) for s in shapes] == [Segment, Path]

    def test_multi_polygon(self, shift_converter: ShiftConverter) -> None:
        """MultiPolygon members each keep their outer ring."""
        ring = [[0, 0], [1, 0], [1, 1], [0, 0]]
        obj = {"type": "MultiPolygon", "coordinates": [[ring], [ring, ring]]}
        shapes = decode_geometry(obj, DATUM, CRS.ENU, shift_converter)
        assert len(shapes) == 2
        assert all(isinstance(s, Polygon) and len(s.vertices) == 4 for s in shapes)

    def test_nested_geometry_collection(self, shift_converter: ShiftConverter) -> None:
        """Nested GeometryCollections are flattened in order."""
        obj = {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [1, 1]},
                {
                    "type": "GeometryCollection",
                    "geometries": [{"type": "LineString", "coordinates": [[0, 0], [2, 2]]}],
                },
            ],
        }
        shapes = decode_geometry(obj, DATUM, CRS.ENU, shift_converter)
        assert shapes == [Point(1, 1, 0), Segment(Point(0, 0, 0), Point(2, 2, 0))]

    def test_unknown_type_is_empty(self, shift_converter: ShiftConverter) -> None:
        """An unknown geometry type decodes to nothing."""
        obj = {"type": "Circle", "coordinates": [0, 0]}
        assert decode_geometry(obj, DATUM, CRS.ENU, shift_converter) == []

    def test_missing_coordinates_is_empty(self, shift_converter: ShiftConverter) -> None:
        """A geometry without coordinates decodes to nothing."""
        assert decode_geometry({"type": "Point"}, DATUM, CRS.ENU, shift_converter) == []

    def test_non_object_is_empty(self, shift_converter: ShiftConverter) -> None:
        """A non-object geometry decodes to nothing."""
        assert decode_geometry([1, 2], DATUM, CRS.ENU, shift_converter) == []

    def test_bad_position_inside_multi_aborts(self, shift_converter: ShiftConverter) -> None:
        """One malformed member position aborts the decode."""
        obj = {"type": "MultiPoint", "coordinates": [[1, 2], [3]]}
        with pytest.raises(FormatError):
            decode_geometry(obj, DATUM, CRS.ENU, shift_converter)


class TestEncode:
    """Encoding local shapes as wire geometry."""

    def test_encode_point_enu(self, shift_converter: ShiftConverter) -> None:
        """ENU output keeps full precision."""
        point = Point(0.1234567890123, -2.0, 3.5)
        assert encode_point(point, DATUM, CRS.ENU, shift_converter) == [0.1234567890123, -2.0, 3.5]

    def test_encode_point_wgs_rounds_altitude(self, shift_converter: ShiftConverter) -> None:
        """WGS output rounds the altitude only."""
        lon, lat, alt = encode_point(Point(2.0, 1.0, 10.6), DATUM, CRS.WGS, shift_converter)
        assert lon == pytest.approx(5.002)
        assert lat == pytest.approx(52.001)
        assert alt == 111

    def test_segment_is_two_position_line_string(self, shift_converter: ShiftConverter) -> None:
        """A Segment encodes as a two-position LineString."""
        wire = encode_geometry(Segment(Point(0, 0, 0), Point(1, 2, 3)), DATUM, CRS.ENU, shift_converter)
        assert wire == {"type": "LineString", "coordinates": [[0, 0, 0], [1, 2, 3]]}

    def test_path_is_line_string(self, shift_converter: ShiftConverter) -> None:
        """A Path encodes as a LineString with all its points."""
        path = Path([Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 0)])
        wire = encode_geometry(path, DATUM, CRS.ENU, shift_converter)
        assert wire["type"] == "LineString"
        assert len(wire["coordinates"]) == 3

    def test_empty_path(self, shift_converter: ShiftConverter) -> None:
        """An empty Path encodes as an empty LineString."""
        wire = encode_geometry(Path([]), DATUM, CRS.ENU, shift_converter)
        assert wire == {"type": "LineString", "coordinates": []}

    def test_polygon_has_single_ring(self, shift_converter: ShiftConverter) -> None:
        """A Polygon encodes with exactly one ring."""
        polygon = Polygon([Point(0, 0, 0), Point(1, 0, 0), Point(1, 1, 0), Point(0, 0, 0)])
        wire = encode_geometry(polygon, DATUM, CRS.ENU, shift_converter)
        assert wire["type"] == "Polygon"
        assert len(wire["coordinates"]) == 1
        assert len(wire["coordinates"][0]) == 4

    def test_unsupported_object(self, shift_converter: ShiftConverter) -> None:
        """Objects outside the four shapes raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported geometry type"):
            encode_geometry((1, 2, 3), DATUM, CRS.ENU, shift_converter)  # type: ignore[arg-type]

    def test_decode_of_encoded_segment_is_segment(self, shift_converter: ShiftConverter) -> None:
        """A Segment written as WGS decodes back to a Segment."""
        segment = Segment(Point(0, 0, 0), Point(3, 4, 0))
        wire = encode_geometry(segment, DATUM, CRS.WGS, shift_converter)
        (decoded,) = decode_geometry(wire, DATUM, CRS.WGS, shift_converter)
        assert isinstance(decoded, Segment)
        assert decoded.end.x == pytest.approx(3.0)
        assert decoded.end.y == pytest.approx(4.0)
        assert decoded.end.z == pytest.approx(0.0)
