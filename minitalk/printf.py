"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Optional, TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_UINT_BITS = 32
_POINTER_BITS = 64

_DIRECTIVE = re.compile(r"%([cspdiuxX%])?")


def _wrap_signed(value: int, bits: int) -> int:
    value %= 1 << bits
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def itoa(n: int) -> str:
    """Return the decimal text of a value in the range of a 32-bit int."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def to_hex(value: int, upper: bool = False) -> str:
    """Return ``value`` in hexadecimal without prefix or padding."""
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"cannot convert negative value {value} to hexadecimal")
    return format(value, "X" if upper else "x")


def _convert(conversion: str, arg: Any) -> str:
    if conversion == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c requires a single character")
            return arg
        return chr(operator.index(arg) & 0xFF)
    if conversion == "s":
        if arg is None:
            return "(null)"
        if not isinstance(arg, str):
            raise TypeError("%s requires a string")
        return arg
    if conversion == "p":
        if arg is None or operator.index(arg) == 0:
            return "(nil)"
        return "0x" + to_hex(_wrap_unsigned(operator.index(arg), _POINTER_BITS))
    value = operator.index(arg)
    if conversion in "di":
        return itoa(_wrap_signed(value, _UINT_BITS))
    if conversion == "u":
        return str(_wrap_unsigned(value, _UINT_BITS))
    return to_hex(_wrap_unsigned(value, _UINT_BITS), upper=conversion == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A '%' followed by an unknown conversion is dropped and the character
    after it is kept; a trailing '%' is dropped. Integer conversions take
    their argument modulo 32 bits, as a C int would.
    """
    values = iter(args)

    def replace(match: "re.Match[str]") -> str:
        conversion = match.group(1)
        if conversion is None:
            return ""
        if conversion == "%":
            return "%"
        try:
            arg = next(values)
        except StopIteration:
            raise TypeError(f"missing argument for %{conversion}") from None
        return _convert(conversion, arg)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)