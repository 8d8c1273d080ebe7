"""String helpers: integer parsing, splitting, trimming and searching."""

from __future__ import annotations

import operator
from typing import List, Optional

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    value %= 1 << _INT_BITS
    return value - (1 << _INT_BITS) if value >= 1 << (_INT_BITS - 1) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits gives 0. The result
    wraps around as a 32-bit int would.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(-value if negative else value)


def split(text: str, sep: str) -> List[str]:
    """Return the non-empty words of ``text`` separated by the character ``sep``."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    if not charset:
        return text
    return text.lstrip(charset).rstrip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end gives an empty string.
    """
    start = operator.index(start)
    length = operator.index(length)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first occurrence that lies wholly inside that
    window, 0 for an empty needle, and None when there is no such occurrence.
    """
    length = operator.index(length)
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index