"""Codec configuration.

``CodecConfig`` holds the options shared by the read and write paths.
It is passed explicitly to ``read``/``write``; the library reads no
environment variables.

Fail-fast validation:
    Constructing through ``from_mapping()`` raises ``ConfigValidationError``
    if any value is out of its valid range, so a bad setting surfaces
    before any file is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geoson.core.constants import ENU_ALIASES, WGS_ALIASES
from geoson.core.exceptions import GeosonError
from geoson.models.types import CRS

if TYPE_CHECKING:
    from collections.abc import Mapping


class ConfigValidationError(GeosonError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    Attributes:
        default_output_crs: CRS used by ``write``/``dumps`` when the caller
            does not pass one.
        indent: JSON indentation for written files (``None`` = compact).
        ensure_ascii: Escape non-ASCII characters in written JSON.
        encoding: Text encoding for reading and writing files.
    """

    default_output_crs: CRS = CRS.WGS
    indent: int | None = None
    ensure_ascii: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> CodecConfig:
        """Build and validate a config from a plain mapping.

        Unknown keys are ignored. ``default_output_crs`` may be a ``CRS``,
        its name (``"WGS"``/``"ENU"``) or any accepted wire string.

        Raises:
            ConfigValidationError: If a value is out of range or has the
                wrong type.
        """
        crs_raw = values.get("default_output_crs", CRS.WGS)
        indent_raw = values.get("indent")
        if indent_raw is not None and (isinstance(indent_raw, bool) or not isinstance(indent_raw, int)):
            raise ConfigValidationError("indent", indent_raw, "must be an integer or None")

        config = cls(
            default_output_crs=_coerce_crs(crs_raw),
            indent=indent_raw,
            ensure_ascii=bool(values.get("ensure_ascii", False)),
            encoding=str(values.get("encoding", "utf-8")),
        )
        _validate(config)
        return config


def _coerce_crs(value: object) -> CRS:
    if isinstance(value, CRS):
        return value
    if isinstance(value, str):
        if value in WGS_ALIASES:
            return CRS.WGS
        if value in ENU_ALIASES:
            return CRS.ENU
    raise ConfigValidationError("default_output_crs", value, "must be 'WGS' or 'ENU'")


def _validate(config: CodecConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.indent is not None and config.indent < 0:
        raise ConfigValidationError("indent", config.indent, "must be >= 0 or None")

    if not config.encoding:
        raise ConfigValidationError("encoding", config.encoding, "must not be empty")

    try:
        "".encode(config.encoding)
    except LookupError as exc:
        raise ConfigValidationError("encoding", config.encoding, "unknown codec") from exc
