"""Line storage addressed by character offsets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Text kept as a list of lines joined by ``"\\n"``.

    Offsets count every character of the joined text, newlines included, so
    offset ``line_end(row) + 1`` is ``line_start(row + 1)``. Edits never mutate
    a document in place; ``splice`` returns the next version instead.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def length(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    def get_line(self, row: int) -> str:
        return self._lines[row]

    def line_start(self, row: int) -> int:
        return sum(len(line) + 1 for line in self._lines[:row])

    def line_end(self, row: int) -> int:
        return self.line_start(row) + len(self._lines[row])

    def row_at(self, offset: int) -> int:
        """Return the 0-based row holding ``offset``."""

        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return row
            running += len(line) + 1
        return len(self._lines) - 1

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with ``[start, end)`` replaced by ``text``."""

        current = self.text
        return BufferDocument.from_text(
            current[:start] + text + current[end:], version=self.version + 1
        )
