"""
Name counters: the variable endings of algorithmically generated names.

A name range's names are its name stem followed by a name counter, derived
from the head point of each value the range covers:

- hyphen-hex: ``CJK UNIFIED IDEOGRAPH`` + ``-4E00`` for U+4E00
- Hangul syllable: ``HANGUL SYLLABLE`` + `` GA`` for U+AC00
- none: singleton ranges, whose name is the bare stem

A counter always follows an alphanumeric character in the full name, so fuzzy
folding strips the space or medial hyphen that starts it. ``parse`` therefore
receives the folded counter without that separator (``"4E00"``, ``"GA"``).
The name-counter value is the head point itself.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from unina.domain import hangul_syllable
from unina.utils import hex as hex_codec

CJK_UNIFIED_NAME_STEM = "CJK UNIFIED IDEOGRAPH"
CJK_COMPATIBILITY_NAME_STEM = "CJK COMPATIBILITY IDEOGRAPH"
TANGUT_NAME_STEM = "TANGUT IDEOGRAPH"
KHITAN_SMALL_SCRIPT_NAME_STEM = "KHITAN SMALL SCRIPT CHARACTER"
NUSHU_NAME_STEM = "NUSHU CHARACTER"
HANGUL_SYLLABLE_NAME_STEM = "HANGUL SYLLABLE"
CONTROL_NAME_STEM = "CONTROL"
PRIVATE_USE_NAME_STEM = "PRIVATE-USE"
NONCHARACTER_NAME_STEM = "NONCHARACTER"
SURROGATE_NAME_STEM = "SURROGATE"


class NameCounterType(str, Enum):
    """Algorithms that encode a head point into a name counter."""

    HYPHEN_HEX = "hyphenHex"
    HANGUL_SYLLABLE = "hangulSyllable"


def _parse_hyphen_hex(fuzzy_counter: str) -> Optional[int]:
    num_digits = len(fuzzy_counter)
    if num_digits < hex_codec.MIN_CODE_POINT_HEX_DIGITS:
        return None
    # Only the four-digit form may be zero-padded.
    if num_digits > hex_codec.MIN_CODE_POINT_HEX_DIGITS and fuzzy_counter.startswith("0"):
        return None
    return hex_codec.get_integer(fuzzy_counter)


def _derive_hyphen_hex(value: int) -> str:
    return "-" + hex_codec.from_code_point(value)


def _derive_hangul_syllable(value: int) -> str:
    return " " + hangul_syllable.derive_sound(value)


_PARSERS: Dict[NameCounterType, Callable[[str], Optional[int]]] = {
    NameCounterType.HYPHEN_HEX: _parse_hyphen_hex,
    NameCounterType.HANGUL_SYLLABLE: hangul_syllable.match_sound,
}

_DERIVERS: Dict[NameCounterType, Callable[[int], str]] = {
    NameCounterType.HYPHEN_HEX: _derive_hyphen_hex,
    NameCounterType.HANGUL_SYLLABLE: _derive_hangul_syllable,
}


def parse(
    fuzzy_counter: str,
    counter_type: Optional[NameCounterType],
    initial_value: int,
    length: int = 1,
) -> Optional[int]:
    """
    Decode a folded name counter into a name-counter value.

    Args:
        fuzzy_counter: What remains of a folded name after its folded stem
        counter_type: The range's counter algorithm, or None for a singleton range
        initial_value: First value of the range
        length: Number of values in the range

    Returns:
        The decoded value if it lies in ``[initial_value, initial_value + length)``,
        otherwise None. Malformed counters yield None and never raise.

    Examples:
        >>> parse("0020", NameCounterType.HYPHEN_HEX, 0, 0x110000)
        32
        >>> parse("020", NameCounterType.HYPHEN_HEX, 0, 0x110000) is None
        True
        >>> parse("", None, 0x41)
        65
    """
    if counter_type is None:
        # The name must match the stem exactly; anything left over is extraneous.
        return initial_value if not fuzzy_counter else None

    value = _PARSERS[NameCounterType(counter_type)](fuzzy_counter)
    if value is None or not initial_value <= value < initial_value + length:
        return None
    return value


def derive(value: int, counter_type: Optional[NameCounterType]) -> str:
    """
    Encode a name-counter value in its standard (unfolded) form.

    Returns:
        The counter including its leading separator (``"-4E00"``, ``" GA"``),
        or ``""`` when ``counter_type`` is None.
    """
    if counter_type is None:
        return ""
    return _DERIVERS[NameCounterType(counter_type)](value)
