"""Exceptions raised by the Delta to HTML conversion."""

from __future__ import annotations


class DeltaError(ValueError):
    """Base class for conversion failures."""


class MalformedDeltaError(DeltaError):
    """The input violates the Delta document contract.

    Raised for a missing or non-list ``ops`` payload, an operation without a
    usable ``insert``, non-mapping ``attributes``, an incomplete mention embed
    and for documents that end with unterminated inline content.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"op {index}: {message}"
        super().__init__(message)
