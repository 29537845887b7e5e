"""Geodetic <-> local ENU conversion.

``PyprojConverter`` goes through Earth-centred Cartesian coordinates
(WGS 84, EPSG:4978) with pyproj and applies the East-North-Up rotation
about the datum:

    geodetic --pyproj--> ECEF --(minus datum ECEF, rotate)--> ENU

The converter is stateless apart from its two pyproj transformers, which
do not depend on the datum and are built once per instance.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Protocol

from geoson.models.types import Geodetic, Point

if TYPE_CHECKING:
    from pyproj import Transformer

    from geoson.models.types import Datum

logger = logging.getLogger("geoson.adapters")

# WGS 84 geographic 3D (lon/lat/ellipsoidal height) and geocentric CRS
GEODETIC_3D_EPSG = 4979
GEOCENTRIC_EPSG = 4978


class GeodeticConverter(Protocol):
    """Datum-relative conversion capability consumed by the codec."""

    def to_local(self, datum: Datum, geodetic: Geodetic) -> Point: ...

    def to_geodetic(self, datum: Datum, local: Point) -> Geodetic: ...


class PyprojConverter:
    """``GeodeticConverter`` on the WGS 84 ellipsoid using pyproj."""

    def __init__(self) -> None:
        self._geo_to_ecef: Transformer | None = None
        self._ecef_to_geo: Transformer | None = None

    def _transformers(self) -> tuple[Transformer, Transformer]:
        if self._geo_to_ecef is None or self._ecef_to_geo is None:
            from pyproj import CRS, Transformer

            geodetic3d = CRS.from_epsg(GEODETIC_3D_EPSG)
            ecef = CRS.from_epsg(GEOCENTRIC_EPSG)
            self._geo_to_ecef = Transformer.from_crs(geodetic3d, ecef, always_xy=True)
            self._ecef_to_geo = Transformer.from_crs(ecef, geodetic3d, always_xy=True)
            logger.debug("Built pyproj transformers EPSG:%d <-> EPSG:%d", GEODETIC_3D_EPSG, GEOCENTRIC_EPSG)
        return self._geo_to_ecef, self._ecef_to_geo

    def to_local(self, datum: Datum, geodetic: Geodetic) -> Point:
        """Convert a geodetic position to ENU metres relative to ``datum``."""
        geo_to_ecef, _ = self._transformers()
        ox, oy, oz = geo_to_ecef.transform(datum.longitude, datum.latitude, datum.altitude)
        px, py, pz = geo_to_ecef.transform(geodetic.longitude, geodetic.latitude, geodetic.altitude)
        dx, dy, dz = px - ox, py - oy, pz - oz

        sin_lat, cos_lat, sin_lon, cos_lon = _trig(datum)
        east = -sin_lon * dx + cos_lon * dy
        north = -sin_lat * cos_lon * dx - sin_lat * sin_lon * dy + cos_lat * dz
        up = cos_lat * cos_lon * dx + cos_lat * sin_lon * dy + sin_lat * dz
        return Point(east, north, up)

    def to_geodetic(self, datum: Datum, local: Point) -> Geodetic:
        """Convert ENU metres relative to ``datum`` to a geodetic position."""
        geo_to_ecef, ecef_to_geo = self._transformers()
        ox, oy, oz = geo_to_ecef.transform(datum.longitude, datum.latitude, datum.altitude)

        sin_lat, cos_lat, sin_lon, cos_lon = _trig(datum)
        east, north, up = local.x, local.y, local.z
        dx = -sin_lon * east - sin_lat * cos_lon * north + cos_lat * cos_lon * up
        dy = cos_lon * east - sin_lat * sin_lon * north + cos_lat * sin_lon * up
        dz = cos_lat * north + sin_lat * up

        lon, lat, alt = ecef_to_geo.transform(ox + dx, oy + dy, oz + dz)
        return Geodetic(latitude=lat, longitude=lon, altitude=alt)


def _trig(datum: Datum) -> tuple[float, float, float, float]:
    lat_rad = math.radians(datum.latitude)
    lon_rad = math.radians(datum.longitude)
    return math.sin(lat_rad), math.cos(lat_rad), math.sin(lon_rad), math.cos(lon_rad)
