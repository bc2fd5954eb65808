"""Regex-driven structural edits for C# code with snapshot history."""

__all__ = [
    "adapters",
    "history",
    "runtime",
    "seed",
    "session",
    "transforms",
]

__version__ = "0.1.0"
