"""Error types raised by the client and the conversion helpers."""

from __future__ import annotations


class TelegraphError(RuntimeError):
    """Raised for any failed Telegraph API call (transport, HTTP or service error)."""


class ContentStructureError(TypeError):
    """Raised when a caller hands a serializer something that is not a node tree."""
