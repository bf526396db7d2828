"""List structure recognition and the host primitives built on it."""

from .host import OutdentError, OutlineHost, UNCHECKED_BOX
from .items import (
    ListItem,
    following_siblings,
    indent_width,
    item_at,
    item_end_row,
    next_bullet,
    parent_item,
    parse_item_line,
)

__all__ = [
    "ListItem",
    "OutdentError",
    "OutlineHost",
    "UNCHECKED_BOX",
    "following_siblings",
    "indent_width",
    "item_at",
    "item_end_row",
    "next_bullet",
    "parent_item",
    "parse_item_line",
]
