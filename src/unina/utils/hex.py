"""
Hexadecimal codec for code points and name counters.

Code points are written in at least four uppercase hex digits
(``0041``, ``1F600``, ``10FFFF``).
"""

import re
from typing import Optional

HEX_BASE = 16

# Four digits is the minimum standard length with which code points are written.
MIN_CODE_POINT_HEX_DIGITS = 4

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")


def get_integer(hex_string: str) -> Optional[int]:
    """
    Convert a string of hex digits into an integer.

    Unlike ``int(s, 16)``, signs, whitespace, underscores and ``0x`` prefixes
    are rejected.

    Args:
        hex_string: Hex digits such as ``"4E00"``

    Returns:
        The integer value, or None if the string is empty or has a non-hex character.

    Examples:
        >>> get_integer("4E00")
        19968
        >>> get_integer("12XY") is None
        True
    """
    if not _HEX_DIGITS_RE.fullmatch(hex_string):
        return None
    return int(hex_string, HEX_BASE)


def from_integer(value: int) -> str:
    """Uppercase hex digits of a non-negative integer, without padding."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeError(f"Hex number {value!r} must be a non-negative integer.")
    return format(value, "X")


def from_integer_with_padding(value: int, min_digits: int) -> str:
    """Uppercase hex digits of ``value``, left-padded with zeroes to ``min_digits``."""
    return from_integer(value).rjust(min_digits, "0")


def from_code_point(code_point: int) -> str:
    """
    Hex form of a code point, padded to at least four digits.

    Examples:
        >>> from_code_point(0x20)
        '0020'
        >>> from_code_point(0x10FFFF)
        '10FFFF'
    """
    return from_integer_with_padding(code_point, MIN_CODE_POINT_HEX_DIGITS)
