"""Property (de)serialization helpers.

The in-memory property model is string to string. On read, string values
are kept as is and every other JSON value is stored as its literal JSON
text produced by the backend (``42`` -> ``"42"``, ``true`` -> ``"true"``,
``[1,2]`` -> ``"[1,2]"``). On write, values are emitted as JSON strings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from geoson.core.constants import RESERVED_PROPERTY_KEYS
from geoson.core.exceptions import FormatError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from geoson.adapters.json_tree import JsonBackend

logger = logging.getLogger("geoson.codec")


def stringify_value(value: Any, backend: JsonBackend) -> str:
    """Return ``value`` itself if it is a string, else its JSON literal text."""
    if isinstance(value, str):
        return value
    return backend.serialize_value(value)


def decode_properties(
    props: Any,
    backend: JsonBackend,
    *,
    skip_keys: Iterable[str] = (),
) -> dict[str, str]:
    """Decode a wire ``properties`` object into a string map.

    ``None`` (absent or JSON ``null``) decodes to an empty map.

    Raises:
        FormatError: If ``props`` is neither an object nor null.
    """
    if props is None:
        return {}
    if not isinstance(props, dict):
        msg = f"'properties' must be an object, got {type(props).__name__}"
        raise FormatError(msg)

    skipped = frozenset(skip_keys)
    return {
        str(key): stringify_value(value, backend)
        for key, value in props.items()
        if key not in skipped
    }


def decode_global_properties(props: Mapping[str, Any], backend: JsonBackend) -> dict[str, str]:
    """Decode collection-level properties, dropping ``crs``, ``datum`` and ``heading``."""
    return decode_properties(dict(props), backend, skip_keys=RESERVED_PROPERTY_KEYS)


def encode_properties(props: Mapping[str, str]) -> dict[str, str]:
    """Encode a string map as a flat wire ``properties`` object."""
    return {str(key): str(value) for key, value in props.items()}


def inject_global_properties(target: dict[str, Any], global_properties: Mapping[str, str]) -> None:
    """Copy global properties into a collection ``properties`` object.

    Global keys named ``crs``, ``datum`` or ``heading`` override the values
    already in ``target``.
    """
    for key, value in global_properties.items():
        if key in RESERVED_PROPERTY_KEYS:
            logger.warning("Global property %r overrides the reserved collection key", key)
        target[str(key)] = str(value)
