"""User-level utilities and kernel bookkeeping models of a small teaching Unix."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "status",
    "printf",
    "ulib",
    "umalloc",
    "grep",
    "textutils",
    "shell",
    "fdtable",
    "memory",
]