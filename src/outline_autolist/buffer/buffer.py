"""Buffer façade combining the document, point, and instrumented edits."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from outline_autolist.runtime import telemetry

from .document import BufferDocument
from .state import BufferState
from .validation import ensure_offset


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    point: int
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()

    @classmethod
    def from_text(
        cls, text: str, *, point: int = 0, name: str = "default"
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.goto(point)
        return buffer

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def point(self) -> int:
        return self.state.point

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self.document.snapshot())

    def goto(self, offset: int) -> int:
        self.state.set_point(ensure_offset(self.document, offset))
        return self.state.point

    def line_number(self, offset: Optional[int] = None) -> int:
        """1-based number of the line holding ``offset`` (default: point)."""

        return self.document.row_at(self._resolve(offset)) + 1

    def line_beginning(self, offset: Optional[int] = None) -> int:
        row = self.document.row_at(self._resolve(offset))
        return self.document.line_start(row)

    def line_end(self, offset: Optional[int] = None) -> int:
        row = self.document.row_at(self._resolve(offset))
        return self.document.line_end(row)

    def replace_range(
        self, start: int, end: int, text: str, *, label: str
    ) -> BufferDelta:
        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        with Transaction(self, label):
            self.document = self.document.splice(start, end, text)
            self.state.follow_edit(start, end, len(text))

        return BufferDelta(
            version=self.document.version,
            text=self.text,
            point=self.point,
            label=label,
        )

    def insert_text(self, text: str, *, at: Optional[int] = None) -> BufferDelta:
        position = self.point if at is None else at
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: int, end: int) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def get_text_range(self, start: int, end: int) -> str:
        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        return self.text[start:end]

    def _resolve(self, offset: Optional[int]) -> int:
        if offset is None:
            return self.point
        return ensure_offset(self.document, offset)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps a single buffer edit in a ``buffer::<label>`` telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
