"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

from fmtkit.chars import INT_MAX, itoa

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_SPEC = re.compile(r"%([cspdiuxX%]|\Z)")


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def format_char(value: Any) -> str:
    """A single character from a one-character string or a code narrowed to a byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_require_int(value, "%c") & 0xFF)


def format_str(value: Optional[str]) -> str:
    """The string itself, or ``(null)`` for None."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def format_decimal(value: int) -> str:
    """Signed decimal of ``value`` taken as a 32-bit int."""
    value = _require_int(value, "%d") & _UINT_MASK
    if value > INT_MAX:
        value -= 1 << 32
    return itoa(value)


def format_unsigned(value: int) -> str:
    """Unsigned decimal of ``value`` taken as a 32-bit unsigned int."""
    return str(_require_int(value, "%u") & _UINT_MASK)


def format_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal of ``value`` taken as a 64-bit unsigned integer."""
    value = _require_int(value, "hex") & _ULONG_MASK
    return format(value, "X" if upper else "x")


def format_pointer(value: Any) -> str:
    """``0x`` and the address in lowercase hex, or ``(nil)`` for a null pointer.

    An int is taken as the address; any other object uses its identity.
    """
    if value is None or value == 0 and isinstance(value, int) and not isinstance(value, bool):
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format_hex(address)


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        argument = next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return format_char(argument)
    if spec == "s":
        return format_str(argument)
    if spec == "p":
        return format_pointer(argument)
    if spec in "di":
        return format_decimal(argument)
    if spec == "u":
        return format_unsigned(argument)
    return format_hex(_require_int(argument, f"%{spec}") & _UINT_MASK, upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``.

    A ``%`` not followed by a known conversion is copied as is. A ``%`` at
    the very end of the format is an error, as is running out of arguments;
    surplus arguments are ignored.
    """
    arguments = iter(args)

    def replace(match: re.Match) -> str:
        spec = match.group(1)
        if not spec:
            raise ValueError("format ends with a lone '%'")
        return _convert(spec, arguments)

    return _SPEC.sub(replace, fmt)


def print_format(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expanded format to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)