"""Decorator-over-command dispatch: native commands plus ordered advice."""

from .models import Advice, CommandRef, Continuation
from .registry import CommandConflictError, CommandRegistry, RegistryStats
from .defaults import DELETE_BACK, EXTEND, load_default_commands

__all__ = [
    "Advice",
    "CommandRef",
    "Continuation",
    "CommandConflictError",
    "CommandRegistry",
    "RegistryStats",
    "DELETE_BACK",
    "EXTEND",
    "load_default_commands",
]
