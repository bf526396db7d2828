"""Native editing commands the autolist advice wraps."""

from __future__ import annotations

from typing import Any

from .models import CommandRef
from .registry import CommandRegistry

EXTEND = "extend"
DELETE_BACK = "delete-back"


def newline(host: Any) -> None:
    """Split the line at point."""

    host.insert_text("\n")


def delete_backward_char(host: Any) -> None:
    """Delete the character before point; nothing happens at buffer start."""

    point = host.point()
    if point > 0:
        host.delete_text_range(point - 1, point)


DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(id=EXTEND, handler=newline, description="Insert a line break"),
    CommandRef(
        id=DELETE_BACK,
        handler=delete_backward_char,
        description="Delete the previous character",
    ),
)


def load_default_commands(
    registry: CommandRegistry, *, replace: bool = False
) -> None:
    """Register the native ``extend`` and ``delete-back`` commands."""

    for command in DEFAULT_COMMANDS:
        registry.register_command(command, replace=replace)


__all__ = [
    "DEFAULT_COMMANDS",
    "DELETE_BACK",
    "EXTEND",
    "delete_backward_char",
    "load_default_commands",
    "newline",
]
