"""In-memory outline buffer: line storage, point, and edit transactions."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .state import BufferState
from .validation import BufferValidationError, ensure_offset

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Transaction",
    "ensure_offset",
]
