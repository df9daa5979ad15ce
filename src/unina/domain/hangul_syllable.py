"""
Romanized names of precomposed Hangul syllables (The Unicode Standard, § 3.12).

The 11,172 syllables from U+AC00 form a grid ordered first by leading jamo,
then by vowel jamo, then by trailing jamo::

    (((GA GAG GAGG GAGS GAN ... GAH) (GAE GAEG ... GAEH) ... (GI ... GIH))
     ...
     ((HA ... HAH) ... (HI ... HIH)))

``derive_sound`` walks the grid arithmetically; ``match_sound`` parses a sound
back into its scalar with a PEG built from the same tables.
"""

from typing import Final, List, Optional, Sequence, Tuple

from unina.utils import peg

BASE_POINT: Final[int] = 0xAC00

LEADING_SOUNDS: Final[Tuple[str, ...]] = (
    "G", "GG", "N", "D", "DD", "R", "M", "B", "BB",
    "S", "SS", "", "J", "JJ", "C", "K", "T", "P", "H",
)
VOWEL_SOUNDS: Final[Tuple[str, ...]] = (
    "A", "AE", "YA", "YAE", "EO", "E", "YEO", "YE", "O",
    "WA", "WAE", "OE", "YO", "U", "WEO", "WE", "WI",
    "YU", "EU", "YI", "I",
)
TRAILING_SOUNDS: Final[Tuple[str, ...]] = (
    "", "G", "GG", "GS", "N", "NJ", "NH", "D", "L", "LG", "LM",
    "LB", "LS", "LT", "LP", "LH", "M", "B", "BS",
    "S", "SS", "NG", "J", "C", "K", "T", "P", "H",
)

NUM_LEADING: Final[int] = len(LEADING_SOUNDS)  # 19
NUM_VOWELS: Final[int] = len(VOWEL_SOUNDS)  # 21
NUM_TRAILING: Final[int] = len(TRAILING_SOUNDS)  # 28
SYLLABLES_PER_LEADING: Final[int] = NUM_VOWELS * NUM_TRAILING  # 588
NUM_SYLLABLES: Final[int] = NUM_LEADING * SYLLABLES_PER_LEADING  # 11172


def is_syllable(code_point: int) -> bool:
    return BASE_POINT <= code_point < BASE_POINT + NUM_SYLLABLES


def decompose(code_point: int) -> Tuple[int, int, int]:
    """
    Split a syllable scalar into its (leading, vowel, trailing) jamo indices.

    Raises:
        ValueError: If ``code_point`` is not a precomposed Hangul syllable.
    """
    if not is_syllable(code_point):
        raise ValueError(f"U+{code_point:04X} is not a precomposed Hangul syllable")
    syllable_index = code_point - BASE_POINT
    return (
        syllable_index // SYLLABLES_PER_LEADING,
        (syllable_index % SYLLABLES_PER_LEADING) // NUM_TRAILING,
        syllable_index % NUM_TRAILING,
    )


def compose(leading_index: int, vowel_index: int, trailing_index: int) -> int:
    """Combine jamo indices into the scalar of a precomposed Hangul syllable."""
    return (
        BASE_POINT
        + (leading_index * NUM_VOWELS + vowel_index) * NUM_TRAILING
        + trailing_index
    )


def derive_sound(code_point: int) -> str:
    """
    Romanized sound of a precomposed Hangul syllable.

    Examples:
        >>> derive_sound(0xAC00)
        'GA'
        >>> derive_sound(0xD7A3)
        'HIH'
    """
    leading_index, vowel_index, trailing_index = decompose(code_point)
    return (
        LEADING_SOUNDS[leading_index]
        + VOWEL_SOUNDS[vowel_index]
        + TRAILING_SOUNDS[trailing_index]
    )


def _jamo_parser(sounds: Sequence[str]) -> peg.Parser:
    # Some sounds are prefixes of others ("G" and "GG"), and ``choice`` keeps
    # the first success, so the alternatives go longest first. The sort is
    # stable, which keeps the empty sound last.
    entries: List[Tuple[int, str]] = sorted(
        enumerate(sounds), key=lambda entry: len(entry[1]), reverse=True
    )
    return peg.choice(*(peg.term(sound, index) for index, sound in entries))


_parse_sound = peg.sequence(
    _jamo_parser(LEADING_SOUNDS),
    _jamo_parser(VOWEL_SOUNDS),
    _jamo_parser(TRAILING_SOUNDS),
    peg.end_of_input,
)


def match_sound(sound: str) -> Optional[int]:
    """
    Scalar of the Hangul syllable whose romanized sound is ``sound``.

    ``sound`` must be uppercase, as produced by fuzzy folding.

    Returns:
        The syllable's code point, or None if ``sound`` names no syllable.

    Examples:
        >>> hex(match_sound("PWILH"))
        '0xd4db'
        >>> match_sound("XYZ") is None
        True
    """
    match = _parse_sound(sound, 0)
    if match is None:
        return None
    leading_index, vowel_index, trailing_index, _ = match.meaning
    return compose(leading_index, vowel_index, trailing_index)
