"""Writing characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Union

from fmtkit.chars import itoa

Char = Union[str, int]


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _char_bytes(char: Char) -> bytes:
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        return bytes([char & 0xFF])
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)} characters")
        return char.encode("utf-8")
    raise TypeError("expected a one-character string or an integer code")


def put_char(char: Char, fd: int) -> int:
    """Write one character to ``fd``; return the number of bytes written."""
    return _write_all(fd, _char_bytes(char))


def put_str(text: str, fd: int) -> int:
    """Write ``text`` to ``fd``; return the number of bytes written."""
    return _write_all(fd, text.encode("utf-8"))


def put_endl(text: str, fd: int) -> int:
    """Write ``text`` followed by a newline to ``fd``; return the number of bytes written."""
    return _write_all(fd, text.encode("utf-8") + b"\n")


def put_number(number: int, fd: int) -> int:
    """Write a signed 32-bit integer in decimal to ``fd``; return the number of bytes written."""
    return _write_all(fd, itoa(number).encode("ascii"))