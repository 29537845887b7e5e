"""Validation of the collection-level ``properties`` object.

Responsibilities:
- Presence and type of ``properties`` itself
- ``crs`` string -> ``CRS`` mapping (case-sensitive, with aliases)
- ``datum`` array ``[longitude, latitude, altitude]`` -> ``Datum``
- ``heading`` number -> ``Heading`` (yaw only)
"""

from __future__ import annotations

import math
from typing import Any

from geoson.core.constants import (
    CRS_KEY,
    DATUM_KEY,
    ENU_ALIASES,
    HEADING_KEY,
    MIN_DATUM_LENGTH,
    WGS_ALIASES,
)
from geoson.core.exceptions import FormatError
from geoson.models.types import CRS, Datum, Heading


def require_properties(envelope: dict[str, Any]) -> dict[str, Any]:
    """Return the collection ``properties`` object.

    Raises:
        FormatError: If ``properties`` is missing or not an object.
    """
    props = envelope.get("properties")
    if not isinstance(props, dict):
        msg = "missing top-level 'properties'"
        raise FormatError(msg)
    return props


def parse_crs(value: str) -> CRS:
    """Map a wire CRS string to ``CRS``.

    ``EPSG:4326``, ``WGS84`` and ``WGS`` map to ``CRS.WGS``; ``ENU`` and
    ``ECEF`` map to ``CRS.ENU``. Matching is case-sensitive.

    Raises:
        FormatError: If the string is not one of the accepted names.
    """
    if value in WGS_ALIASES:
        return CRS.WGS
    if value in ENU_ALIASES:
        return CRS.ENU
    msg = f"Unknown CRS string: {value}"
    raise FormatError(msg)


def extract_crs(props: dict[str, Any]) -> CRS:
    """Read and map ``properties.crs``.

    Raises:
        FormatError: If ``crs`` is missing, not a string, or unknown.
    """
    value = props.get(CRS_KEY)
    if not isinstance(value, str):
        msg = f"'properties' missing string '{CRS_KEY}'"
        raise FormatError(msg)
    return parse_crs(value)


def extract_datum(props: dict[str, Any]) -> Datum:
    """Read ``properties.datum`` as ``[longitude, latitude, altitude]``.

    Raises:
        FormatError: If ``datum`` is not an array of at least three finite
            numbers.
    """
    value = props.get(DATUM_KEY)
    msg = f"'properties' missing array '{DATUM_KEY}' of >={MIN_DATUM_LENGTH} numbers"
    if not isinstance(value, list) or len(value) < MIN_DATUM_LENGTH:
        raise FormatError(msg)
    lon, lat, alt = (finite_float(v) for v in value[:MIN_DATUM_LENGTH])
    if lon is None or lat is None or alt is None:
        raise FormatError(msg)
    return Datum(latitude=lat, longitude=lon, altitude=alt)


def extract_heading(props: dict[str, Any]) -> Heading:
    """Read ``properties.heading`` as the yaw of a ``Heading``.

    Raises:
        FormatError: If ``heading`` is missing or not a finite number.
    """
    yaw = finite_float(props.get(HEADING_KEY))
    if yaw is None:
        msg = f"'properties' missing numeric '{HEADING_KEY}'"
        raise FormatError(msg)
    return Heading(roll=0.0, pitch=0.0, yaw=yaw)


def finite_float(value: object) -> float | None:
    """Return ``value`` as a finite float, or ``None`` if it is not a usable number.

    Booleans are not numbers here. Integers too large for a double and
    out-of-range literals such as ``1e999`` (parsed as infinity) give
    ``None``.
    """
    if not isinstance(value, int | float) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number
