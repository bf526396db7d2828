import pytest

from outline_autolist.buffer import BufferDocument
from outline_autolist.outline import (
    following_siblings,
    indent_width,
    item_at,
    item_end_row,
    next_bullet,
    parent_item,
    parse_item_line,
)


@pytest.mark.parametrize(
    ("line", "bullet", "checkbox", "boundary"),
    [
        ("- one", "-", None, 2),
        ("-", "-", None, 1),
        ("-   ", "-", None, 4),
        ("  + [ ] todo", "+", "[ ]", 8),
        ("\t* [X]", "*", "[X]", 6),
        ("12) twelve", "12)", None, 4),
        ("3. [x] three", "3.", "[x]", 7),
        ("- [ ]tight", "-", None, 2),
    ],
)
def test_parse_item_line(line, bullet, checkbox, boundary) -> None:
    item = parse_item_line(line)

    assert item is not None
    assert item.bullet == bullet
    assert item.checkbox == checkbox
    assert item.content_start == boundary
    assert item.content_end == len(line)


@pytest.mark.parametrize("line", ["* Heading", "-one", "1.5 units", "text", ""])
def test_parse_item_line_rejects_non_items(line) -> None:
    assert parse_item_line(line) is None


def test_item_offsets_follow_line_start() -> None:
    document = BufferDocument.from_text("intro\n  - item")

    item = item_at(document, 9)

    assert item is not None
    assert item.row == 1
    assert item.line_start == 6
    assert item.content_start == 10
    assert item.column == 2


def test_item_at_resolves_continuation_lines() -> None:
    document = BufferDocument.from_text("- item\n  continued\n\ntext")

    item = item_at(document, 10)

    assert item is not None
    assert item.row == 0
    assert item.content_start == 2
    assert item_at(document, 19) is None
    assert item_at(document, 22) is None


def test_next_bullet() -> None:
    assert next_bullet("-") == "-"
    assert next_bullet("9)") == "10)"
    assert next_bullet("1.") == "2."


def test_indent_width_counts_tabs() -> None:
    assert indent_width("\t  - x") == 6
    assert indent_width("x") == 0


def test_structure_walkers() -> None:
    lines = ["- a", "  - b", "", "    body", "", "  - c", "- d"]
    b = parse_item_line(lines[1], row=1)
    c = parse_item_line(lines[5], row=5)
    assert b is not None and c is not None

    assert item_end_row(lines, b) == 3
    assert parent_item(lines, c).row == 0  # type: ignore[union-attr]
    assert following_siblings(lines, b) == [5]
    assert following_siblings(lines, c) == []


def test_walkers_span_continuation_text() -> None:
    lines = ["- a", "  more of a", "    - b", "  - c", "text", "  - d"]
    a = parse_item_line(lines[0], row=0)
    b = parse_item_line(lines[2], row=2)
    c = parse_item_line(lines[3], row=3)
    d = parse_item_line(lines[5], row=5)
    assert a is not None and b is not None and c is not None and d is not None

    assert item_end_row(lines, a) == 3
    assert parent_item(lines, b).row == 0  # type: ignore[union-attr]
    assert parent_item(lines, c).row == 0  # type: ignore[union-attr]
    assert parent_item(lines, d) is None
