"""Command registry owning native commands and their advice chains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from outline_autolist.runtime.telemetry import span

from .models import Advice, CommandRef, Continuation


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    advice_count: int
    advised_commands: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a command or advice id is registered twice."""

    def __init__(self, kind: str, item_id: str) -> None:
        super().__init__(f"{kind.capitalize()} '{item_id}' already registered")
        self.kind = kind
        self.item_id = item_id


class CommandRegistry:
    """Maps trigger names to commands and runs them through their advice."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._advice: Dict[str, Advice] = {}
        self._order: Dict[str, int] = {}
        self._logger_name = logger_name
        self._revision = 0
        self._sequence = 0

    def revision(self) -> int:
        return self._revision

    def get_command(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register_command(
        self, command: CommandRef, *, replace: bool = False
    ) -> CommandRef:
        with span(
            "commands::register_command",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ):
            if not replace and command.id in self._commands:
                raise CommandConflictError("command", command.id)
            self._commands[command.id] = command
            self._touch()
            return command

    def add_advice(self, advice: Advice, *, replace: bool = False) -> Advice:
        with span(
            "commands::add_advice",
            logger_name=self._logger_name,
            component="commands",
            metadata={"advice_id": advice.id, "command_id": advice.command_id},
        ) as handle:
            if advice.command_id not in self._commands:
                handle.add_metadata("missing_command", advice.command_id)
                raise KeyError(
                    f"Advice '{advice.id}' targets unknown command '{advice.command_id}'"
                )
            if advice.id in self._advice and not replace:
                raise CommandConflictError("advice", advice.id)

            if advice.id not in self._order:
                self._sequence += 1
                self._order[advice.id] = self._sequence
            self._advice[advice.id] = advice
            self._touch()
            return advice

    def remove_advice(self, advice_id: str) -> Optional[Advice]:
        with span(
            "commands::remove_advice",
            logger_name=self._logger_name,
            component="commands",
            metadata={"advice_id": advice_id},
        ):
            advice = self._advice.pop(advice_id, None)
            if advice is None:
                return None
            self._order.pop(advice_id, None)
            self._touch()
            return advice

    def has_advice(self, advice_id: str) -> bool:
        return advice_id in self._advice

    def advice_for(self, command_id: str) -> tuple[Advice, ...]:
        """Advice around ``command_id``, outermost first."""

        chain = [a for a in self._advice.values() if a.command_id == command_id]
        chain.sort(key=lambda a: (-a.priority, self._order[a.id]))
        return tuple(chain)

    def invoke(self, command_id: str, host: Any) -> object:
        """Run ``command_id`` for ``host`` through every advice wrapped around it."""

        command = self.get_command(command_id)
        chain = self.advice_for(command_id)
        with span(
            "commands::invoke",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id, "advice": len(chain)},
        ):
            return _continuation(chain, command, host)()

    def stats(self) -> RegistryStats:
        advised = sorted({advice.command_id for advice in self._advice.values()})
        return RegistryStats(
            command_count=len(self._commands),
            advice_count=len(self._advice),
            advised_commands=tuple(advised),
        )

    def _touch(self) -> None:
        self._revision += 1


def _continuation(
    chain: tuple[Advice, ...], command: CommandRef, host: Any
) -> Continuation:
    if not chain:
        return lambda: command(host)
    head, rest = chain[0], chain[1:]
    proceed = _continuation(rest, command, host)
    return lambda: head(host, proceed)


__all__ = [
    "CommandConflictError",
    "CommandRegistry",
    "RegistryStats",
]
