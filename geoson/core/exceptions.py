"""Unified exception taxonomy for geoson.

Every error raised by the read and write paths inherits from
``GeosonError`` and carries structured context fields so that callers
can log or report failures consistently.

Taxonomy categories
-------------------
- ``FormatError``: the document is not the GeoJSON profile we accept
  (unparsable JSON, missing ``type``/``properties``, bad ``crs``/``datum``/
  ``heading``, malformed coordinates). Aborts the whole read.
- ``IoError``: the source cannot be opened for reading or the
  destination cannot be opened for writing.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeosonError(Exception):
    """Base exception for all geoson errors.

    Attributes:
        message: Human-readable error description.
        stage: Codec stage where the error occurred
            (e.g. ``"read"``, ``"write"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"GEOJSON_FORMAT_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, FormatError):
            return "format"
        if isinstance(self, IoError):
            return "io"
        return "config" if self.stage == "config" else "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category classes
# ---------------------------------------------------------------------------


class FormatError(GeosonError):
    """The document does not follow the accepted GeoJSON profile."""

    default_stage = "read"
    default_code = "GEOJSON_FORMAT_INVALID"


class IoError(GeosonError):
    """A file could not be opened for reading or writing.

    Attributes:
        path: The offending filesystem path, as given by the caller.
    """

    default_code = "GEOJSON_IO_FAILED"

    def __init__(self, message: str = "", *, path: str = "", **kwargs: str) -> None:
        self.path = path
        super().__init__(message, **kwargs)
