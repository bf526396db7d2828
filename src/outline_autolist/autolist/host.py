"""Primitives the autolist core expects from its editing host."""

from __future__ import annotations

from typing import Optional, Protocol

from outline_autolist.outline.host import OutdentError


class ListHost(Protocol):
    """Cursor queries and edits provided by the host environment.

    ``OutlineHost`` is the in-memory implementation; an editor integration
    supplies its own. ``outdent_current_item`` must raise ``OutdentError``
    when the item already sits at the outermost level.
    """

    def point(self) -> int: ...

    def is_cursor_in_list_item(self) -> bool: ...

    def is_cursor_in_checkbox_item(self) -> bool: ...

    def item_content_boundary(self) -> Optional[int]: ...

    def is_cursor_at_line_end(self) -> bool: ...

    def is_previous_line_blank(self) -> bool: ...

    def is_cursor_on_link(self) -> bool: ...

    def current_line_number(self) -> int: ...

    def line_start_offset(self, relative: int = 0) -> int: ...

    def line_end_offset(self, relative: int = 0) -> int: ...

    def outdent_current_item(self) -> None: ...

    def insert_sibling_checkbox_item(self) -> None: ...

    def insert_sibling_plain_item(self) -> None: ...

    def delete_text_range(self, start: int, end: int) -> None: ...

    def insert_text(self, text: str) -> None: ...

    def move_cursor_to(self, offset: int) -> None: ...


__all__ = ["ListHost", "OutdentError"]
