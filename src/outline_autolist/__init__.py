"""List-editing behaviour for plain-text outline buffers."""

__all__ = [
    "adapters",
    "autolist",
    "buffer",
    "commands",
    "config",
    "outline",
    "runtime",
]

__version__ = "0.1.0"
