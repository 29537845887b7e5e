"""Feature collection codec: read path.

text -> JSON tree -> normalized envelope -> validated collection
properties -> per-feature geometry decode -> ``FeatureCollection``.

Any structural problem raises ``FormatError`` and aborts the whole read;
no partial collection is returned. Features with a null geometry or an
unsupported geometry type contribute nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from geoson.codec import _collaborators
from geoson.codec._envelope import normalize_envelope
from geoson.codec._geometry import decode_geometry
from geoson.codec._properties import decode_global_properties, decode_properties
from geoson.codec._validation import (
    extract_crs,
    extract_datum,
    extract_heading,
    require_properties,
)
from geoson.core.exceptions import FormatError, IoError
from geoson.models.types import Feature, FeatureCollection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geoson.adapters.geodetic import GeodeticConverter
    from geoson.adapters.json_tree import JsonBackend
    from geoson.core.config import CodecConfig

logger = logging.getLogger("geoson.codec")


def read(
    path: Path | str,
    *,
    config: CodecConfig | None = None,
    converter: GeodeticConverter | None = None,
    backend: JsonBackend | None = None,
    default_properties: Mapping[str, Any] | None = None,
) -> FeatureCollection:
    """Read a GeoJSON file into a ``FeatureCollection`` in local coordinates.

    Args:
        path: File to read.
        config: Codec options (encoding); defaults to ``CodecConfig()``.
        converter: Geodetic converter; defaults to ``PyprojConverter``.
        backend: JSON backend; defaults to ``StdlibJsonBackend``.
        default_properties: Collection ``properties`` (``crs``, ``datum``,
            ``heading``) to use when the document has none, e.g. a bare
            ``Feature`` or geometry.

    Raises:
        IoError: If the file cannot be opened.
        FormatError: If the content is not the accepted GeoJSON profile.
    """
    config, converter, backend = _collaborators.resolve(config, converter, backend)
    path = Path(path)

    try:
        text = path.read_text(encoding=config.encoding)
    except UnicodeDecodeError as exc:
        msg = f"Cannot decode \"{path}\" as {config.encoding}: {exc}"
        raise FormatError(msg) from exc
    except OSError as exc:
        msg = f"Cannot open \"{path}\" for reading: {exc}"
        raise IoError(msg, path=str(path), stage="read") from exc

    fc = loads(
        text,
        config=config,
        converter=converter,
        backend=backend,
        default_properties=default_properties,
    )
    logger.info("Read %d feature(s) from %s", len(fc.features), path)
    return fc


def loads(
    text: str,
    *,
    config: CodecConfig | None = None,
    converter: GeodeticConverter | None = None,
    backend: JsonBackend | None = None,
    default_properties: Mapping[str, Any] | None = None,
) -> FeatureCollection:
    """Parse GeoJSON text into a ``FeatureCollection``.

    Raises:
        FormatError: If the text is not valid JSON or not the accepted
            GeoJSON profile.
    """
    config, converter, backend = _collaborators.resolve(config, converter, backend)
    return from_tree(
        backend.parse(text),
        converter=converter,
        backend=backend,
        default_properties=default_properties,
    )


def from_tree(
    tree: Any,
    *,
    converter: GeodeticConverter | None = None,
    backend: JsonBackend | None = None,
    default_properties: Mapping[str, Any] | None = None,
) -> FeatureCollection:
    """Build a ``FeatureCollection`` from an already-parsed JSON tree.

    Raises:
        FormatError: If the tree is not the accepted GeoJSON profile.
    """
    _, converter, backend = _collaborators.resolve(None, converter, backend)

    envelope = normalize_envelope(tree)
    if "properties" not in envelope and default_properties is not None:
        envelope = {**envelope, "properties": dict(default_properties)}

    props = require_properties(envelope)
    crs = extract_crs(props)
    datum = extract_datum(props)
    heading = extract_heading(props)

    fc = FeatureCollection(
        datum=datum,
        heading=heading,
        features=[],
        global_properties=decode_global_properties(props, backend),
    )

    for idx, entry in enumerate(envelope.get("features", [])):
        if not isinstance(entry, dict):
            msg = f"Feature at index {idx} is not an object"
            raise FormatError(msg)

        geometry = entry.get("geometry")
        if geometry is None:
            logger.debug("Skipping feature %d with null geometry", idx)
            continue

        shapes = decode_geometry(geometry, datum, crs, converter)
        if not shapes:
            continue

        properties = decode_properties(entry.get("properties"), backend)
        for shape in shapes:
            fc.features.append(Feature(geometry=shape, properties=dict(properties)))

    logger.debug("Decoded %d feature(s) in %s frame", len(fc.features), crs.value)
    return fc
