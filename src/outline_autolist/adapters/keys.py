"""Translate host key names into triggers and run them through the registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from outline_autolist.commands import DELETE_BACK, EXTEND, CommandRegistry
from outline_autolist.runtime import telemetry

DEFAULT_KEY_TRIGGERS: Mapping[str, str] = {
    "enter": EXTEND,
    "return": EXTEND,
    "ctrl+m": EXTEND,
    "backspace": DELETE_BACK,
    "ctrl+h": DELETE_BACK,
}


def normalize_key(key: str, modifiers: Iterable[str] = ()) -> str:
    """``("Enter", ["CTRL"])`` -> ``"ctrl+enter"``; modifiers sorted, lowercased."""

    mods = sorted({str(mod).strip().lower() for mod in modifiers if str(mod).strip()})
    name = key.strip().lower().strip("<>")
    return "+".join([*mods, name]) if mods else name


@dataclass(slots=True)
class DispatchResult:
    consumed: bool
    key: str
    trigger: Optional[str] = None
    outcome: object = None


class KeyDispatcher:
    """Runs the trigger bound to a key for one host."""

    def __init__(
        self,
        registry: CommandRegistry,
        host: Any,
        *,
        key_triggers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.registry = registry
        self.host = host
        self.key_triggers = dict(
            DEFAULT_KEY_TRIGGERS if key_triggers is None else key_triggers
        )
        self.logger = telemetry.get_logger("outline_autolist.adapters.keys")

    def handle_key(self, key: str, *, modifiers: Iterable[str] = ()) -> DispatchResult:
        token = normalize_key(key, modifiers)
        trigger = self.key_triggers.get(token)
        if trigger is None:
            return DispatchResult(consumed=False, key=token)
        outcome = self.registry.invoke(trigger, self.host)
        self.logger.debug(f"key {token} -> {trigger} point={self.host.point()}")
        return DispatchResult(
            consumed=True, key=token, trigger=trigger, outcome=outcome
        )


__all__ = ["DEFAULT_KEY_TRIGGERS", "DispatchResult", "KeyDispatcher", "normalize_key"]
