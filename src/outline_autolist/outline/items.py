"""Recognise list items on outline lines and walk list structure."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from outline_autolist.buffer import BufferDocument

TAB_WIDTH = 4

# indent, bullet, gap, then an optional checkbox with its own gap
_ITEM_RE = re.compile(
    r"^(?P<indent>[ \t]*)"
    r"(?P<bullet>[-+*]|\d+[.)])"
    r"(?P<gap>[ \t]+|$)"
    r"(?:(?P<checkbox>\[[ xX-]\])(?P<checkbox_gap>[ \t]+|$))?"
)
_ORDERED_RE = re.compile(r"^(?P<number>\d+)(?P<delimiter>[.)])$")


def indent_width(line: str) -> int:
    """Column of the first non-blank character, tabs counted as TAB_WIDTH."""

    leading = line[: len(line) - len(line.lstrip(" \t"))]
    return len(leading.expandtabs(TAB_WIDTH))


def is_blank(line: str) -> bool:
    return not line.strip()


@dataclass(frozen=True, slots=True)
class ListItem:
    """Bullet line of a list item, located in buffer offsets.

    ``content_start`` is the content boundary: the first offset after the
    indentation, bullet, optional checkbox, and the whitespace between them.
    """

    row: int
    indent: str
    bullet: str
    checkbox: Optional[str]
    line_start: int
    content_start: int
    content_end: int

    @property
    def column(self) -> int:
        return len(self.indent.expandtabs(TAB_WIDTH))

    @property
    def ordered(self) -> bool:
        return _ORDERED_RE.match(self.bullet) is not None

    @property
    def is_checkbox(self) -> bool:
        return self.checkbox is not None

    def next_bullet(self) -> str:
        return next_bullet(self.bullet)


def next_bullet(bullet: str) -> str:
    """Bullet for the following sibling: ordered markers count up."""

    match = _ORDERED_RE.match(bullet)
    if match is None:
        return bullet
    return f"{int(match.group('number')) + 1}{match.group('delimiter')}"


def parse_item_line(
    line: str, *, row: int = 0, line_start: int = 0
) -> Optional[ListItem]:
    match = _ITEM_RE.match(line)
    if match is None:
        return None
    # an unindented star opens a heading, not a list item
    if match.group("bullet") == "*" and not match.group("indent"):
        return None
    return ListItem(
        row=row,
        indent=match.group("indent"),
        bullet=match.group("bullet"),
        checkbox=match.group("checkbox"),
        line_start=line_start,
        content_start=line_start + match.end(),
        content_end=line_start + len(line),
    )


def item_on_row(document: BufferDocument, row: int) -> Optional[ListItem]:
    return parse_item_line(
        document.get_line(row), row=row, line_start=document.line_start(row)
    )


def item_at(document: BufferDocument, offset: int) -> Optional[ListItem]:
    """Item owning the line at ``offset``.

    A bullet line owns itself. An indented text line belongs to the nearest
    item above whose subtree reaches it, so continuation text resolves to the
    bullet line it continues. Blank lines belong to no item.
    """

    row = document.row_at(offset)
    item = item_on_row(document, row)
    if item is not None:
        return item
    line = document.get_line(row)
    if is_blank(line):
        return None
    owner = _enclosing_row(document.snapshot(), row, indent_width(line))
    return item_on_row(document, owner) if owner is not None else None


def item_end_row(lines: Sequence[str], item: ListItem) -> int:
    """Last row of ``item`` including nested items and continuation text."""

    end = item.row
    for row in range(item.row + 1, len(lines)):
        line = lines[row]
        if is_blank(line):
            continue
        if indent_width(line) <= item.column:
            break
        end = row
    return end


def parent_item(lines: Sequence[str], item: ListItem) -> Optional[ListItem]:
    """Nearest enclosing item, or None when ``item`` sits at the list margin."""

    row = _enclosing_row(lines, item.row, item.column)
    if row is None:
        return None
    return parse_item_line(lines[row], row=row)


def _enclosing_row(lines: Sequence[str], row: int, column: int) -> Optional[int]:
    # lines between the enclosing item and ``row`` all sit deeper than it
    limit = column
    for above in range(row - 1, -1, -1):
        if limit == 0:
            return None
        line = lines[above]
        if is_blank(line):
            continue
        width = indent_width(line)
        if width >= limit:
            continue
        if parse_item_line(line) is not None:
            return above
        limit = width
    return None


def following_siblings(lines: Sequence[str], item: ListItem) -> list[int]:
    """Rows of the items after ``item`` that share its list level."""

    rows: list[int] = []
    row = item_end_row(lines, item) + 1
    while row < len(lines):
        line = lines[row]
        if is_blank(line):
            row += 1
            continue
        sibling = parse_item_line(line, row=row)
        if sibling is None or sibling.column != item.column:
            break
        rows.append(row)
        row = item_end_row(lines, sibling) + 1
    return rows


__all__ = [
    "ListItem",
    "TAB_WIDTH",
    "following_siblings",
    "indent_width",
    "is_blank",
    "item_at",
    "item_end_row",
    "item_on_row",
    "next_bullet",
    "parent_item",
    "parse_item_line",
]
