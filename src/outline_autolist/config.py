"""Environment-driven settings for the autolist behaviour."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "OUTLINE_AUTOLIST_"

_TRUTHY = {"1", "true", "yes", "on"}


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class AutolistConfig:
    """Switches consulted by the handlers on every trigger.

    ``enable_delete`` gates the delete-back override as a whole, while
    ``links_fall_through`` lets the native extend command run when the
    cursor rests on a link inside an item.
    """

    enable_delete: bool = True
    links_fall_through: bool = True

    @classmethod
    def from_env(cls) -> "AutolistConfig":
        return cls(
            enable_delete=env_flag("ENABLE_DELETE", True),
            links_fall_through=env_flag("LINKS_FALL_THROUGH", True),
        )


__all__ = ["AutolistConfig", "ENV_PREFIX", "env", "env_flag"]
