"""Host primitives over an in-memory ``Buffer``.

``OutlineHost`` is the editing environment the autolist handlers talk to. It
never caches list structure: every query re-parses the lines around point,
since the buffer may have been edited by anything between two triggers.
"""

from __future__ import annotations

import re
from typing import Optional

from outline_autolist.buffer import Buffer
from outline_autolist.runtime import telemetry

from .items import (
    ListItem,
    following_siblings,
    indent_width,
    is_blank,
    item_at,
    item_end_row,
    next_bullet,
    parent_item,
    parse_item_line,
)

_LINK_RE = re.compile(
    r"\[\[[^\]\n]+\](?:\[[^\]\n]*\])?\]"  # org: [[target]] or [[target][label]]
    r"|\[[^\]\n]*\]\([^)\n]*\)"  # markdown: [label](target)
    r"|https?://[^\s\]\)>]+"
)

UNCHECKED_BOX = "[ ]"


class OutdentError(RuntimeError):
    """Raised when the item at point cannot move further left."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class OutlineHost:
    """Cursor queries and list edits for one buffer."""

    def __init__(self, buffer: Buffer, *, logger_name: str | None = None) -> None:
        self.buffer = buffer
        self._logger_name = logger_name

    # -- queries ---------------------------------------------------------

    def point(self) -> int:
        return self.buffer.point

    def current_item(self) -> Optional[ListItem]:
        return item_at(self.buffer.document, self.buffer.point)

    def is_cursor_in_list_item(self) -> bool:
        return self.current_item() is not None

    def is_cursor_in_checkbox_item(self) -> bool:
        item = self.current_item()
        return item is not None and item.is_checkbox

    def item_content_boundary(self) -> Optional[int]:
        item = self.current_item()
        return item.content_start if item is not None else None

    def is_cursor_at_line_end(self) -> bool:
        return self.buffer.point == self.buffer.line_end()

    def is_previous_line_blank(self) -> bool:
        row = self.buffer.document.row_at(self.buffer.point)
        if row == 0:
            return False
        return is_blank(self.buffer.document.get_line(row - 1))

    def is_cursor_on_link(self) -> bool:
        start = self.buffer.line_beginning()
        line = self.buffer.text[start : self.buffer.line_end()]
        column = self.buffer.point - start
        return any(m.start() <= column < m.end() for m in _LINK_RE.finditer(line))

    def current_line_number(self) -> int:
        return self.buffer.line_number()

    def line_start_offset(self, relative: int = 0) -> int:
        """Start of the line ``relative`` lines away from point (clamped)."""

        return self.buffer.document.line_start(self._relative_row(relative))

    def line_end_offset(self, relative: int = 0) -> int:
        return self.buffer.document.line_end(self._relative_row(relative))

    # -- edits -------------------------------------------------------------

    def move_cursor_to(self, offset: int) -> None:
        self.buffer.goto(offset)

    def insert_text(self, text: str) -> None:
        self.buffer.insert_text(text)

    def delete_text_range(self, start: int, end: int) -> None:
        self.buffer.delete_range(start, end)

    def outdent_current_item(self) -> None:
        """Move the item at point, with its subtree, to its parent's column."""

        item = self.current_item()
        if item is None:
            raise OutdentError("Not at a list item", line=self.current_line_number())
        lines = self.buffer.lines
        parent = parent_item(lines, item)
        if parent is None:
            raise OutdentError("Cannot outdent beyond margin", line=item.row + 1)

        shift = item.column - parent.column
        last_row = item_end_row(lines, item)
        with telemetry.span(
            "outline::outdent",
            logger_name=self._logger_name,
            component="outline",
            metadata={"line": item.row + 1, "shift": shift},
        ):
            for row in range(item.row, last_row + 1):
                line = lines[row]
                if is_blank(line):
                    continue
                leading = line[: len(line) - len(line.lstrip(" \t"))]
                width = max(0, indent_width(line) - shift)
                start = self.buffer.document.line_start(row)
                self.buffer.replace_range(
                    start, start + len(leading), " " * width, label="outdent_line"
                )

    def insert_sibling_plain_item(self) -> None:
        self._insert_sibling(checkbox=False)

    def insert_sibling_checkbox_item(self) -> None:
        self._insert_sibling(checkbox=True)

    def _insert_sibling(self, *, checkbox: bool) -> None:
        """Open a sibling after the current item's subtree.

        Text between point and the end of point's line moves into the new
        item; the prefix and a continuation line's indentation never do.
        Point ends at the new content boundary.
        """

        item = self.current_item()
        if item is None:
            raise RuntimeError("Cannot insert a sibling outside a list item")

        row = self.buffer.document.row_at(self.buffer.point)
        if row == item.row:
            floor, line_end = item.content_start, item.content_end
        else:
            line = self.buffer.document.get_line(row)
            line_end = self.buffer.document.line_end(row)
            floor = line_end - len(line.lstrip(" \t"))
        split = min(max(self.buffer.point, floor), line_end)
        carried = self.buffer.get_text_range(split, line_end)
        cut = split
        while cut > floor and self.buffer.text[cut - 1] in " \t":
            cut -= 1
        marker = f"{UNCHECKED_BOX} " if checkbox else ""
        prefix = f"{item.indent}{item.next_bullet()} {marker}"

        with telemetry.span(
            "outline::insert_sibling",
            logger_name=self._logger_name,
            component="outline",
            metadata={"line": item.row + 1, "checkbox": checkbox},
        ):
            if carried:
                self.buffer.delete_range(cut, line_end)
            lines = self.buffer.lines
            anchor = self.buffer.document.line_end(item_end_row(lines, item))
            self.buffer.replace_range(
                anchor, anchor, f"\n{prefix}{carried.lstrip()}", label="insert_item"
            )
            boundary = anchor + 1 + len(prefix)
            self.buffer.goto(boundary)
            if item.ordered:
                self._renumber_after(boundary)

    def _renumber_after(self, offset: int) -> None:
        """Renumber the ordered siblings following the item at ``offset``."""

        document = self.buffer.document
        lines = self.buffer.lines
        current = item_at(document, offset)
        if current is None or not current.ordered:
            return
        expected = current.next_bullet()
        for row in following_siblings(lines, current):
            sibling = parse_item_line(
                self.buffer.document.get_line(row),
                row=row,
                line_start=self.buffer.document.line_start(row),
            )
            if sibling is None or not sibling.ordered:
                break
            if sibling.bullet != expected:
                start = sibling.line_start + len(sibling.indent)
                self.buffer.replace_range(
                    start, start + len(sibling.bullet), expected, label="renumber_item"
                )
            expected = next_bullet(expected)

    def _relative_row(self, relative: int) -> int:
        row = self.buffer.document.row_at(self.buffer.point) + relative
        return max(0, min(row, self.buffer.document.line_count - 1))


__all__ = ["OutdentError", "OutlineHost", "UNCHECKED_BOX"]
