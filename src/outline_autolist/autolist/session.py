"""Per-session switch installing the autolist advice around native commands."""

from __future__ import annotations

from typing import Optional

from outline_autolist.commands import (
    DELETE_BACK,
    EXTEND,
    Advice,
    CommandRegistry,
    Continuation,
)
from outline_autolist.config import AutolistConfig
from outline_autolist.runtime import telemetry

from .handlers import handle_delete_back, handle_extend
from .host import ListHost

EXTEND_ADVICE_ID = "autolist.extend"
DELETE_BACK_ADVICE_ID = "autolist.delete_back"


class AutolistSession:
    """Owns whether the list overrides are installed in one registry.

    ``enable`` and ``disable`` are idempotent and report whether they changed
    anything, so hosts can call them freely from a toggle command.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        config: Optional[AutolistConfig] = None,
        logger_name: str | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or AutolistConfig.from_env()
        self.logger = telemetry.get_logger(logger_name or "outline_autolist.session")
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def on_extend_trigger(self, host: ListHost, default_action: Continuation) -> None:
        handle_extend(host, default_action, config=self.config)

    def on_delete_back_trigger(
        self, host: ListHost, default_action: Continuation
    ) -> None:
        handle_delete_back(host, default_action, config=self.config)

    def enable(self) -> bool:
        if self._enabled:
            return False
        for advice in self._advice():
            if not self.registry.has_advice(advice.id):
                self.registry.add_advice(advice)
        self._enabled = True
        self.logger.info("Outline autolist enabled")
        telemetry.record_event(
            "autolist.enabled",
            data={"enable_delete": self.config.enable_delete},
        )
        return True

    def disable(self) -> bool:
        if not self._enabled:
            return False
        for advice_id in (EXTEND_ADVICE_ID, DELETE_BACK_ADVICE_ID):
            self.registry.remove_advice(advice_id)
        self._enabled = False
        self.logger.info("Outline autolist disabled")
        telemetry.record_event("autolist.disabled")
        return True

    def toggle(self, enabled: Optional[bool] = None) -> bool:
        """Flip the switch, or force it with ``enabled``; returns the new state."""

        target = not self._enabled if enabled is None else enabled
        if target:
            self.enable()
        else:
            self.disable()
        return self._enabled

    def _advice(self) -> tuple[Advice, ...]:
        return (
            Advice(
                id=EXTEND_ADVICE_ID,
                command_id=EXTEND,
                handler=self.on_extend_trigger,
                description="Continue, outdent, or close list items",
            ),
            Advice(
                id=DELETE_BACK_ADVICE_ID,
                command_id=DELETE_BACK,
                handler=self.on_delete_back_trigger,
                description="Remove list prefixes and join items upward",
            ),
        )


__all__ = ["AutolistSession", "DELETE_BACK_ADVICE_ID", "EXTEND_ADVICE_ID"]
