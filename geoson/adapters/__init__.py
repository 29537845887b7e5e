"""Collaborator adapters injected into the codec.

- json_tree: text <-> generic JSON tree (``JsonBackend``)
- geodetic: geodetic <-> local ENU conversion (``GeodeticConverter``)
"""

from geoson.adapters.geodetic import GeodeticConverter, PyprojConverter
from geoson.adapters.json_tree import JsonBackend, StdlibJsonBackend

__all__ = [
    "GeodeticConverter",
    "JsonBackend",
    "PyprojConverter",
    "StdlibJsonBackend",
]
