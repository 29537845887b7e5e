"""Shared pytest fixtures for the geoson test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from geoson.adapters.geodetic import PyprojConverter
from geoson.models.types import Datum, Geodetic, Point

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample GeoJSON file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def wgs_point_geojson(data_dir: Path) -> Path:
    """WGS collection with one Point at (5.1, 52.1, 10) around datum (52, 5, 0)."""
    return data_dir / "01_wgs_point.geojson"


@pytest.fixture()
def enu_mixed_geojson(data_dir: Path) -> Path:
    """ENU collection covering every geometry shape, a hole and a null geometry."""
    return data_dir / "02_enu_mixed_geometries.geojson"


@pytest.fixture()
def bare_feature_geojson(data_dir: Path) -> Path:
    """A single Feature object without a collection envelope."""
    return data_dir / "03_bare_feature.geojson"


@pytest.fixture()
def bare_point_geojson(data_dir: Path) -> Path:
    """A bare Point geometry object."""
    return data_dir / "04_bare_point.geojson"


@pytest.fixture()
def not_json_geojson(edge_cases_dir: Path) -> Path:
    """A truncated file that is not valid JSON."""
    return edge_cases_dir / "11_malformed_not_json.geojson"


@pytest.fixture()
def missing_properties_geojson(edge_cases_dir: Path) -> Path:
    """A collection without a top-level ``properties`` object."""
    return edge_cases_dir / "12_missing_properties.geojson"


@pytest.fixture()
def unknown_crs_geojson(edge_cases_dir: Path) -> Path:
    """A collection whose ``crs`` is ``UNKNOWN:1``."""
    return edge_cases_dir / "13_unknown_crs.geojson"


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


@pytest.fixture()
def write_geojson(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Return a helper that dumps a JSON tree to a file under ``tmp_path``."""

    def _write(tree: Any, name: str = "doc.geojson") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(tree), encoding="utf-8")
        return path

    return _write


def make_collection(
    features: list[dict[str, Any]],
    *,
    crs: str = "EPSG:4326",
    datum: list[float] | None = None,
    heading: float = 0.0,
    **extra: Any,
) -> dict[str, Any]:
    """Build a wire FeatureCollection tree."""
    return {
        "type": "FeatureCollection",
        "properties": {
            "crs": crs,
            "datum": datum if datum is not None else [5.0, 52.0, 0.0],
            "heading": heading,
            **extra,
        },
        "features": features,
    }


def make_feature(geometry: Any, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a wire Feature tree."""
    return {"type": "Feature", "geometry": geometry, "properties": properties or {}}


# ---------------------------------------------------------------------------
# Geodesy fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def datum() -> Datum:
    """Datum at latitude 52, longitude 5, altitude 0."""
    return Datum(latitude=52.0, longitude=5.0, altitude=0.0)


@pytest.fixture()
def converter() -> PyprojConverter:
    """A fresh pyproj-backed geodetic converter."""
    return PyprojConverter()


class ShiftConverter:
    """Deterministic converter: local metres are degree offsets times 1000."""

    def to_local(self, datum: Datum, geodetic: Geodetic) -> Point:
        return Point(
            (geodetic.longitude - datum.longitude) * 1000.0,
            (geodetic.latitude - datum.latitude) * 1000.0,
            geodetic.altitude - datum.altitude,
        )

    def to_geodetic(self, datum: Datum, local: Point) -> Geodetic:
        return Geodetic(
            latitude=datum.latitude + local.y / 1000.0,
            longitude=datum.longitude + local.x / 1000.0,
            altitude=datum.altitude + local.z,
        )


@pytest.fixture()
def shift_converter() -> ShiftConverter:
    """A converter without pyproj, for exact arithmetic in tests."""
    return ShiftConverter()


def assert_points_close(a: Point, b: Point, tol: float = 1e-6) -> None:
    """Assert two local points agree component-wise within ``tol`` metres."""
    assert abs(a.x - b.x) <= tol, (a, b)
    assert abs(a.y - b.y) <= tol, (a, b)
    assert abs(a.z - b.z) <= tol, (a, b)
