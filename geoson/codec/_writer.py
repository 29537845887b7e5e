"""Feature collection codec: write path.

``FeatureCollection`` -> wire tree (geometry converted back to WGS when
requested) -> JSON text -> file. The output is always a full
``FeatureCollection`` envelope.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from geoson.codec import _collaborators
from geoson.codec._geometry import encode_geometry
from geoson.codec._properties import encode_properties, inject_global_properties
from geoson.core.constants import CRS_KEY, DATUM_KEY, FEATURE, FEATURE_COLLECTION, HEADING_KEY
from geoson.core.exceptions import FormatError, IoError

if TYPE_CHECKING:
    from geoson.adapters.geodetic import GeodeticConverter
    from geoson.adapters.json_tree import JsonBackend
    from geoson.core.config import CodecConfig
    from geoson.models.types import CRS, FeatureCollection

logger = logging.getLogger("geoson.codec")


def write(
    fc: FeatureCollection,
    path: Path | str,
    output_crs: CRS | None = None,
    *,
    config: CodecConfig | None = None,
    converter: GeodeticConverter | None = None,
    backend: JsonBackend | None = None,
) -> None:
    """Write ``fc`` to ``path`` as GeoJSON.

    Args:
        fc: Collection to write.
        path: Destination file; overwritten if it exists.
        output_crs: Wire CRS; defaults to ``config.default_output_crs``
            (WGS unless configured otherwise).
        config: Codec options; defaults to ``CodecConfig()``.
        converter: Geodetic converter; defaults to ``PyprojConverter``.
        backend: JSON backend; defaults to ``StdlibJsonBackend``.

    Raises:
        FormatError: If the document cannot be encoded in
            ``config.encoding``. The destination is left untouched.
        IoError: If the destination cannot be opened for writing.
    """
    config, converter, backend = _collaborators.resolve(config, converter, backend)
    output_crs = output_crs or config.default_output_crs
    text = dumps(fc, output_crs, config=config, converter=converter, backend=backend)

    path = Path(path)
    try:
        data = (text + "\n").encode(config.encoding)
    except UnicodeEncodeError as exc:
        msg = f"Cannot encode output for \"{path}\" as {config.encoding}: {exc}"
        raise FormatError(msg, stage="write") from exc

    try:
        path.write_bytes(data)
    except OSError as exc:
        msg = f"Cannot open \"{path}\" for writing: {exc}"
        raise IoError(msg, path=str(path), stage="write") from exc

    logger.info(
        "Wrote %d feature(s) to %s (crs=%s)",
        len(fc.features),
        path,
        output_crs.wire_name,
    )


def dumps(
    fc: FeatureCollection,
    output_crs: CRS | None = None,
    *,
    config: CodecConfig | None = None,
    converter: GeodeticConverter | None = None,
    backend: JsonBackend | None = None,
) -> str:
    """Serialize ``fc`` to GeoJSON text (no trailing newline)."""
    config, converter, backend = _collaborators.resolve(config, converter, backend)
    output_crs = output_crs or config.default_output_crs
    return backend.serialize(to_tree(fc, output_crs, converter=converter))


def to_tree(
    fc: FeatureCollection,
    output_crs: CRS,
    *,
    converter: GeodeticConverter | None = None,
) -> dict[str, Any]:
    """Build the wire ``FeatureCollection`` tree for ``fc``.

    Raises:
        TypeError: If a feature holds an unsupported geometry object.
    """
    if converter is None:
        converter = _collaborators.default_converter()

    datum = fc.datum
    properties: dict[str, Any] = {
        CRS_KEY: output_crs.wire_name,
        DATUM_KEY: [datum.longitude, datum.latitude, datum.altitude],
        HEADING_KEY: fc.heading.yaw,
    }
    inject_global_properties(properties, fc.global_properties)

    features = [
        {
            "type": FEATURE,
            "properties": encode_properties(feature.properties),
            "geometry": encode_geometry(feature.geometry, datum, output_crs, converter),
        }
        for feature in fc.features
    ]

    return {"type": FEATURE_COLLECTION, "properties": properties, "features": features}
