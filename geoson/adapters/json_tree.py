"""JSON tree adapter.

The codec never tokenizes JSON itself. It talks to a ``JsonBackend`` that
turns text into a generic tree of dicts, lists, strings, numbers,
booleans and ``None``, and back. ``StdlibJsonBackend`` is the default.

``serialize_value`` is also the canonical stringification used for
non-string property values, so the same backend must be used for a
read and the write that follows it for numeric strings to stay stable.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from geoson.core.exceptions import FormatError

logger = logging.getLogger("geoson.adapters")


class JsonBackend(Protocol):
    """Parse/serialize capability consumed by the codec."""

    def parse(self, text: str) -> Any: ...

    def serialize(self, tree: Any) -> str: ...

    def serialize_value(self, value: Any) -> str: ...


class StdlibJsonBackend:
    """``JsonBackend`` built on the standard library ``json`` module.

    Args:
        indent: Indentation for ``serialize`` (``None`` = compact).
        ensure_ascii: Escape non-ASCII characters on output.
    """

    def __init__(self, *, indent: int | None = None, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def parse(self, text: str) -> Any:
        """Parse ``text`` into a JSON tree.

        ``NaN``/``Infinity`` literals are rejected as they are not JSON.

        Raises:
            FormatError: If the text is not valid JSON.
        """
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            # JSONDecodeError, or an integer literal over the int digit limit
            msg = f"Not valid JSON: {exc}"
            raise FormatError(msg) from exc

    def serialize(self, tree: Any) -> str:
        """Serialize a JSON tree to text.

        Raises:
            ValueError: If the tree holds a non-finite float.
        """
        separators = (",", ":") if self.indent is None else (",", ": ")
        return json.dumps(
            tree,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            allow_nan=False,
            separators=separators,
        )

    def serialize_value(self, value: Any) -> str:
        """Return the compact JSON literal text of a single value."""
        return json.dumps(value, ensure_ascii=self.ensure_ascii, separators=(",", ":"))


def _reject_constant(name: str) -> float:
    msg = f"Not valid JSON: unsupported constant {name}"
    raise FormatError(msg)
