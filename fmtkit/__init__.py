"""A printf-style formatter with string, byte-buffer, file-descriptor and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "strings", "memory", "fdio", "linked", "formatter"]