"""Dataclasses describing native commands and the advice wrapped around them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Continuation = Callable[[], object]
CommandHandler = Callable[[Any], object]
AdviceHandler = Callable[[Any, Continuation], object]


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Native editing command a trigger runs when no advice intervenes."""

    id: str
    handler: CommandHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, host: Any) -> object:
        return self.handler(host)


@dataclass(frozen=True, slots=True)
class Advice:
    """Override wrapped around a command.

    The handler receives the host and a continuation running the rest of the
    chain (inner advice, then the command). Skipping the continuation
    replaces the command for that invocation.
    """

    id: str
    command_id: str
    handler: AdviceHandler
    priority: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Advice id cannot be empty")
        if not self.command_id:
            raise ValueError("Advice command_id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, host: Any, proceed: Continuation) -> object:
        return self.handler(host, proceed)


__all__ = [
    "Advice",
    "AdviceHandler",
    "CommandHandler",
    "CommandRef",
    "Continuation",
]
