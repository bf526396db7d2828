"""Point tracking for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BufferState:
    """Cursor offset ("point") into a document."""

    point: int = 0

    def set_point(self, offset: int) -> None:
        self.point = offset

    def follow_edit(self, start: int, end: int, inserted: int) -> None:
        """Move point the way an editor marker follows a replacement.

        Point before ``start`` stays put, point at or past ``end`` shifts by
        the length delta, and point strictly inside the range collapses to
        ``start``.
        """

        if self.point >= end:
            self.point += inserted - (end - start)
        elif self.point > start:
            self.point = start
