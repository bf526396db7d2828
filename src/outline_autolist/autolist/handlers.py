"""Extend and delete-back overrides for list items.

Each trigger is handled in two steps: ``classify_*`` reads the host and picks
an action from a small decision table, then the matching effect edits the
buffer. Passthrough runs the host's own command untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from outline_autolist.commands import Continuation
from outline_autolist.config import AutolistConfig
from outline_autolist.runtime import telemetry

from .host import ListHost, OutdentError
from .locator import locate_item_boundary


class ExtendAction(str, Enum):
    PASSTHROUGH = "passthrough"
    OUTDENT = "outdent"
    INSERT_CHECKBOX = "insert_checkbox"
    INSERT_PLAIN = "insert_plain"


class DeleteBackAction(str, Enum):
    PASSTHROUGH = "passthrough"
    JOIN_BLANK_LINE = "join_blank_line"
    STRIP_PREFIX = "strip_prefix"
    MERGE_INTO_PREVIOUS = "merge_into_previous"


_DEFAULT_CONFIG = AutolistConfig()


def classify_extend(
    host: ListHost, boundary: Optional[int], config: AutolistConfig = _DEFAULT_CONFIG
) -> ExtendAction:
    if boundary is None:
        return ExtendAction.PASSTHROUGH
    if config.links_fall_through and host.is_cursor_on_link():
        return ExtendAction.PASSTHROUGH
    # "<=" keeps whitespace-padded empty items on the outdent path
    if host.is_cursor_at_line_end() and host.point() <= boundary:
        return ExtendAction.OUTDENT
    if host.is_cursor_in_checkbox_item():
        return ExtendAction.INSERT_CHECKBOX
    return ExtendAction.INSERT_PLAIN


def classify_delete_back(
    host: ListHost, boundary: Optional[int], config: AutolistConfig = _DEFAULT_CONFIG
) -> DeleteBackAction:
    if not config.enable_delete or boundary is None or host.point() > boundary:
        return DeleteBackAction.PASSTHROUGH
    if host.is_previous_line_blank():
        return DeleteBackAction.JOIN_BLANK_LINE
    if host.current_line_number() == 1:
        return DeleteBackAction.STRIP_PREFIX
    return DeleteBackAction.MERGE_INTO_PREVIOUS


def _outdent_or_clear(host: ListHost, boundary: int) -> str:
    try:
        host.outdent_current_item()
    except OutdentError:
        host.delete_text_range(host.line_start_offset(), host.line_end_offset())
        return "delete_item"
    return ExtendAction.OUTDENT.value


def _insert_checkbox(host: ListHost, boundary: int) -> str:
    host.insert_sibling_checkbox_item()
    return ExtendAction.INSERT_CHECKBOX.value


def _insert_plain(host: ListHost, boundary: int) -> str:
    host.insert_sibling_plain_item()
    return ExtendAction.INSERT_PLAIN.value


def _settle_on_boundary(host: ListHost, boundary: int) -> None:
    # point inside the prefix (e.g. within "[ ]") deletes from the boundary
    if not host.is_cursor_at_line_end():
        host.move_cursor_to(boundary)


def _join_blank_line(host: ListHost, boundary: int) -> str:
    host.delete_text_range(host.line_start_offset(-1), host.line_start_offset())
    return DeleteBackAction.JOIN_BLANK_LINE.value


def _strip_prefix(host: ListHost, boundary: int) -> str:
    _settle_on_boundary(host, boundary)
    host.delete_text_range(host.line_start_offset(), host.point())
    return DeleteBackAction.STRIP_PREFIX.value


def _merge_into_previous(host: ListHost, boundary: int) -> str:
    _settle_on_boundary(host, boundary)
    host.delete_text_range(host.line_end_offset(-1), host.point())
    return DeleteBackAction.MERGE_INTO_PREVIOUS.value


Effect = Callable[[ListHost, int], str]

EXTEND_EFFECTS: Dict[ExtendAction, Effect] = {
    ExtendAction.OUTDENT: _outdent_or_clear,
    ExtendAction.INSERT_CHECKBOX: _insert_checkbox,
    ExtendAction.INSERT_PLAIN: _insert_plain,
}

DELETE_BACK_EFFECTS: Dict[DeleteBackAction, Effect] = {
    DeleteBackAction.JOIN_BLANK_LINE: _join_blank_line,
    DeleteBackAction.STRIP_PREFIX: _strip_prefix,
    DeleteBackAction.MERGE_INTO_PREVIOUS: _merge_into_previous,
}


def handle_extend(
    host: ListHost,
    default_action: Continuation,
    *,
    config: Optional[AutolistConfig] = None,
) -> None:
    """Run the list-aware extend for the item at point.

    Empty items (point at line end and not past the content boundary) are
    outdented, or cleared when already at the margin. Items with content get
    a new sibling, a checkbox one when the current item has a checkbox.
    Anywhere else the host's own command runs.
    """

    boundary = locate_item_boundary(host)
    action = classify_extend(host, boundary, config or _DEFAULT_CONFIG)
    if action is ExtendAction.PASSTHROUGH or boundary is None:
        default_action()
        return
    _apply("autolist::extend", EXTEND_EFFECTS[action], host, boundary)


def handle_delete_back(
    host: ListHost,
    default_action: Continuation,
    *,
    config: Optional[AutolistConfig] = None,
) -> None:
    """Run the list-aware delete-back when point is at or before the boundary.

    A blank line above is removed first. Otherwise the prefix goes, and the
    content joins the end of the previous line unless this is line 1.
    """

    boundary = locate_item_boundary(host)
    action = classify_delete_back(host, boundary, config or _DEFAULT_CONFIG)
    if action is DeleteBackAction.PASSTHROUGH or boundary is None:
        default_action()
        return
    _apply("autolist::delete_back", DELETE_BACK_EFFECTS[action], host, boundary)


def _apply(name: str, effect: Effect, host: ListHost, boundary: int) -> None:
    with telemetry.span(
        name,
        component="autolist",
        metadata={"line": host.current_line_number(), "boundary": boundary},
    ) as handle:
        handle.add_metadata("action", effect(host, boundary))


__all__ = [
    "DELETE_BACK_EFFECTS",
    "DeleteBackAction",
    "EXTEND_EFFECTS",
    "ExtendAction",
    "classify_delete_back",
    "classify_extend",
    "handle_delete_back",
    "handle_extend",
]
