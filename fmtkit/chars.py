"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(char: Char) -> int:
    """Return the integer code of a one-character string or an integer code."""
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)} characters")
        return ord(char)
    raise TypeError("expected a one-character string or an integer code")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(char: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(char: Char) -> bool:
    """True for ASCII digits 0-9."""
    code = _code(char)
    return ord("0") <= code <= ord("9")


def is_alnum(char: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(char) <= 127


def is_print(char: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(char) <= 126


def to_upper(char: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return _same_kind(char, code - 32)
    return char


def to_lower(char: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(char, code + 32)
    return char


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0. The
    result wraps around to a signed 32-bit integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    if not digits:
        return 0
    return _wrap_int32(int(digits) * sign)


def itoa(number: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa() expects an int")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a signed 32-bit integer")
    magnitude = abs(number)
    digits = []
    while True:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(_DIGITS[remainder])
        if not magnitude:
            break
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))