"""String searching, comparison, splitting and bounded copying helpers."""

from __future__ import annotations

from itertools import chain, islice
from typing import Callable, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(char: Char) -> str:
    """Normalise a one-character string or an integer code to a string."""
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        # The code is narrowed to a byte, as a C char conversion would.
        return chr(char & 0xFF)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)} characters")
        return char
    raise TypeError("expected a one-character string or an integer code")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(text: str, sep: Char) -> list[str]:
    """Split ``text`` on every ``sep`` character, dropping empty words."""
    separator = _as_char(sep)
    return [word for word in text.split(separator) if word]


def find_char(text: str, char: Char) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(char)
    index = text.find(target)
    if index >= 0:
        return index
    return len(text) if target == _NUL else None


def rfind_char(text: str, char: Char) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns zero when they match, otherwise the difference between the codes
    of the first differing characters (the end of a string counts as code 0).
    """
    _check_size(limit, "limit")
    pairs = zip(chain(first, _NUL), chain(second, _NUL))
    for left, right in islice(pairs, limit):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            return 0
    return 0


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly inside the first ``limit`` characters.

    An empty needle is always found at index 0.
    """
    _check_size(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``source``. With a size of
    zero nothing is copied.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the length of ``dest``, ``dest``
    is left unchanged and ``size + len(source)`` is reported.
    """
    _check_size(size, "size")
    if size <= len(dest):
        return dest, size + len(source)
    room = size - 1 - len(dest)
    return dest + source[:room], len(dest) + len(source)