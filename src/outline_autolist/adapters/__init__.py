"""Bridges from host key events to registry triggers."""

from .keys import DEFAULT_KEY_TRIGGERS, DispatchResult, KeyDispatcher, normalize_key

__all__ = ["DEFAULT_KEY_TRIGGERS", "DispatchResult", "KeyDispatcher", "normalize_key"]
