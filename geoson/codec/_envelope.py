"""Envelope normalization.

Accepts a freshly parsed JSON tree of unknown shape and returns a tree
that is always a ``FeatureCollection`` object with a ``features`` array:

- ``FeatureCollection``: returned as is
- ``Feature``: wrapped in a one-feature collection
- anything else: treated as a bare geometry and wrapped in a
  ``Feature`` with empty properties, then in a collection
"""

from __future__ import annotations

from typing import Any

from geoson.core.constants import FEATURE, FEATURE_COLLECTION
from geoson.core.exceptions import FormatError


def normalize_envelope(tree: Any) -> dict[str, Any]:
    """Return ``tree`` as a ``FeatureCollection``-shaped dict.

    Raises:
        FormatError: If the top-level value is not an object with a
            string ``type``, or a collection's ``features`` is not an array.
    """
    if not isinstance(tree, dict) or not isinstance(tree.get("type"), str):
        msg = "top-level object has no string 'type' field"
        raise FormatError(msg)

    doc_type = tree["type"]
    if doc_type == FEATURE_COLLECTION:
        features = tree.get("features", [])
        if not isinstance(features, list):
            msg = f"'features' must be an array, got {type(features).__name__}"
            raise FormatError(msg)
        return tree

    if doc_type == FEATURE:
        return {"type": FEATURE_COLLECTION, "features": [tree]}

    return {
        "type": FEATURE_COLLECTION,
        "features": [{"type": FEATURE, "geometry": tree, "properties": {}}],
    }
