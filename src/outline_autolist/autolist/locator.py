"""Item-boundary lookup."""

from __future__ import annotations

from typing import Optional

from .host import ListHost


def locate_item_boundary(host: ListHost) -> Optional[int]:
    """Offset where the content of the item at point begins, else None.

    Queried afresh on every trigger; the buffer can change between
    keystrokes through edits this package never sees.
    """

    if not host.is_cursor_in_list_item():
        return None
    return host.item_content_boundary()


__all__ = ["locate_item_boundary"]
