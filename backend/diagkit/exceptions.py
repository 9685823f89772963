# backend/diagkit/exceptions.py
from __future__ import annotations

"""Exceptions raised by the payload transformers."""

from diagkit.json_types import KeyPath


class DiagkitError(Exception):
    """Base class for diagkit errors."""


class UnsupportedValueError(DiagkitError, TypeError):
    """A value outside the JSON-like domain was found in a payload.

    `path` is the chain of mapping keys / list indexes leading to the
    offending value (empty for the root).
    """

    def __init__(self, value: object, path: KeyPath = (), *, kind: str = "value"):
        self.value_type = type(value).__name__
        self.path = path
        self.kind = kind
        location = "/".join(str(part) for part in path) or "<root>"
        super().__init__(f"Unsupported {kind} of type {self.value_type!r} at {location}")
