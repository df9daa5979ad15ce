"""
Fuzzy folding of Unicode names (Unicode loose matching rule UAX44-LM2).

Two names match loosely exactly when their folded forms are equal. Folding:

1. Uppercases ASCII letters
2. Removes medial hyphens, i.e. hyphens whose two immediate neighbours in the
   input are both ASCII letters or digits
3. Removes every space and underscore

Other hyphens survive, so ``"T - EST"`` folds to ``"T-EST"`` and
``"T--EST"`` stays ``"T--EST"``.

``HANGUL JUNGSEONG O-E`` (U+1180) is the one name whose medial hyphen is kept,
so that it does not collide with ``HANGUL JUNGSEONG OE`` (U+116C).
"""

import re
import string
from typing import Final

_ASCII_UPPERCASE_TABLE: Final = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

# Evaluated on the uppercased input, before padding is removed, so that the
# neighbours checked are the original ones.
_MEDIAL_HYPHEN_RE: Final = re.compile(r"(?<=[A-Z0-9])-(?=[A-Z0-9])")
_PADDING_RE: Final = re.compile(r"[ _]")

SPECIAL_HANGUL_FOLDED_NAME: Final[str] = "HANGULJUNGSEONGO-E"


def fold(name: str) -> str:
    """
    Fold a name for loose comparison.

    Args:
        name: Name as typed by a caller or as stored in a name range

    Returns:
        Folded name

    Examples:
        >>> fold("Latin small letter a")
        'LATINSMALLLETTERA'
        >>> fold("T-EST"), fold("T - EST"), fold("T--EST")
        ('TEST', 'T-EST', 'T--EST')
        >>> fold("hangul jungseong o-e")
        'HANGULJUNGSEONGO-E'
    """
    uppercased = name.translate(_ASCII_UPPERCASE_TABLE)
    if _PADDING_RE.sub("", uppercased) == SPECIAL_HANGUL_FOLDED_NAME:
        return SPECIAL_HANGUL_FOLDED_NAME
    return _PADDING_RE.sub("", _MEDIAL_HYPHEN_RE.sub("", uppercased))
