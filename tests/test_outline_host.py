from __future__ import annotations

from typing import Optional, Sequence

import pytest

from outline_autolist.buffer import Buffer
from outline_autolist.outline import OutdentError, OutlineHost


def make_host(
    lines: Sequence[str], line: int, column: Optional[int] = None
) -> OutlineHost:
    start = sum(len(text) + 1 for text in lines[: line - 1])
    point = start + (len(lines[line - 1]) if column is None else column)
    return OutlineHost(Buffer.from_text("\n".join(lines), point=point))


def test_list_item_queries() -> None:
    host = make_host(["* Heading", "  - [X] task"], line=2, column=0)

    assert host.is_cursor_in_list_item()
    assert host.is_cursor_in_checkbox_item()
    assert host.item_content_boundary() == 10 + 8
    assert not host.is_cursor_at_line_end()
    assert host.current_line_number() == 2


def test_continuation_line_queries_use_owning_item() -> None:
    host = make_host(["- [X] task", "  details"], line=2, column=0)

    assert host.is_cursor_in_list_item()
    assert host.is_cursor_in_checkbox_item()
    assert host.item_content_boundary() == 6
    assert not host.is_cursor_at_line_end()
    assert host.current_line_number() == 2


def test_unindented_star_is_a_heading() -> None:
    host = make_host(["* Heading"], line=1)

    assert not host.is_cursor_in_list_item()
    assert host.item_content_boundary() is None


def test_previous_line_blank() -> None:
    assert make_host(["- a", "   ", "- b"], line=3).is_previous_line_blank()
    assert not make_host(["- a", "- b"], line=2).is_previous_line_blank()
    assert not make_host(["- a"], line=1).is_previous_line_blank()


@pytest.mark.parametrize(
    ("line", "column", "expected"),
    [
        ("- see [docs](https://example.org) now", 8, True),
        ("- visit https://example.org", 12, True),
        ("- see [[target][label]]", 10, True),
        ("- see [[target]]", 16, False),
        ("- no link here", 5, False),
    ],
)
def test_cursor_on_link(line: str, column: int, expected: bool) -> None:
    assert make_host([line], line=1, column=column).is_cursor_on_link() is expected


def test_relative_line_offsets_are_clamped() -> None:
    host = make_host(["- a", "- bb"], line=2)

    assert host.line_start_offset() == 4
    assert host.line_end_offset(-1) == 3
    assert host.line_start_offset(-5) == 0
    assert host.line_end_offset(3) == 8


def test_outdent_moves_subtree_to_parent_column() -> None:
    host = make_host(["- a", "  - b", "    - c", "", "      more", "- d"], line=2)

    host.outdent_current_item()

    assert host.buffer.lines == ("- a", "- b", "  - c", "", "    more", "- d")
    assert host.buffer.point == 3 + 1 + 3


def test_outdent_expands_tab_indentation() -> None:
    host = make_host(["- a", "\t- b"], line=2)

    host.outdent_current_item()

    assert host.buffer.lines == ("- a", "- b")


def test_outdent_at_margin_raises() -> None:
    host = make_host(["text", "- a"], line=2)

    with pytest.raises(OutdentError) as excinfo:
        host.outdent_current_item()

    assert excinfo.value.line == 2
    assert host.buffer.text == "text\n- a"


def test_outdent_stops_at_surrounding_paragraph() -> None:
    host = make_host(["- a", "text", "  - b"], line=3)

    with pytest.raises(OutdentError):
        host.outdent_current_item()


def test_insert_sibling_keeps_indentation_and_bullet() -> None:
    host = make_host(["- a", "  + b"], line=2)

    host.insert_sibling_plain_item()

    assert host.buffer.lines == ("- a", "  + b", "  + ")
    assert host.buffer.point == len(host.buffer.text)


def test_insert_checkbox_sibling_is_unchecked() -> None:
    host = make_host(["1) [-] partly"], line=1)

    host.insert_sibling_checkbox_item()

    assert host.buffer.lines == ("1) [-] partly", "2) [ ] ")


def test_insert_ordered_sibling_renumbers_following_items() -> None:
    host = make_host(["1. a", "   - note", "2. b", "3. c", "", "text"], line=1)

    host.insert_sibling_plain_item()

    assert host.buffer.lines == (
        "1. a",
        "   - note",
        "2. ",
        "3. b",
        "4. c",
        "",
        "text",
    )
    assert host.current_line_number() == 3


def test_renumber_widens_markers() -> None:
    lines = [f"{n}. item" for n in range(1, 10)]
    host = make_host(lines, line=8)

    host.insert_sibling_plain_item()

    assert host.buffer.lines[8] == "9. "
    assert host.buffer.lines[9] == "10. item"
    assert host.buffer.point == host.buffer.document.line_start(8) + 3


def test_insert_sibling_outside_item_raises() -> None:
    host = make_host(["text"], line=1)

    with pytest.raises(RuntimeError):
        host.insert_sibling_plain_item()
