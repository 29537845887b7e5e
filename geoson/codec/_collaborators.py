"""Default collaborator resolution shared by the read and write paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoson.adapters.geodetic import PyprojConverter
from geoson.adapters.json_tree import StdlibJsonBackend
from geoson.core.config import CodecConfig

if TYPE_CHECKING:
    from geoson.adapters.geodetic import GeodeticConverter
    from geoson.adapters.json_tree import JsonBackend

_default_converter: PyprojConverter | None = None


def default_converter() -> PyprojConverter:
    """Return the process-wide ``PyprojConverter``, creating it on first use."""
    global _default_converter
    if _default_converter is None:
        _default_converter = PyprojConverter()
    return _default_converter


def resolve(
    config: CodecConfig | None,
    converter: GeodeticConverter | None,
    backend: JsonBackend | None,
) -> tuple[CodecConfig, GeodeticConverter, JsonBackend]:
    """Fill in defaults for any collaborator the caller did not pass."""
    config = config or CodecConfig()
    if converter is None:
        converter = default_converter()
    if backend is None:
        backend = StdlibJsonBackend(indent=config.indent, ensure_ascii=config.ensure_ascii)
    return config, converter, backend
