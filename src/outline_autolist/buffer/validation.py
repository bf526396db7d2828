"""Validation helpers shared across buffer operations."""

from __future__ import annotations

from .document import BufferDocument


class BufferValidationError(RuntimeError):
    """Raised when an edit or cursor move names an offset outside the text."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def ensure_offset(document: BufferDocument, offset: int) -> int:
    if offset < 0 or offset > document.length:
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset
