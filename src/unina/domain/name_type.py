"""
Name types and the ordering of name entries.

A name type classifies a Unicode name. ``None`` stands for a strict character
name (the Name property); the other kinds come from NameAliases.txt, named
sequences and code-point labels.

Entries for one value are sorted by name-type preference and then by name,
using Default Unicode Collation (so ``"SINGLE SHIFT THREE"`` sorts before
``"SINGLE-SHIFT-3"``: space precedes hyphen).
"""

from enum import Enum
from functools import cmp_to_key, lru_cache
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

from pyuca import Collator


class NameType(str, Enum):
    """Kinds of names other than strict character names.

    Values:
        CORRECTION: Correction alias for an erroneous strict name
        SEQUENCE: Name of a named character sequence
        CONTROL: Control-code alias
        ALTERNATE: Alternate alias
        LABEL: Code-point label such as ``CONTROL-0000`` or ``SURROGATE-D800``
        FIGMENT: Figment alias (documented but never actually standardized)
        ABBREVIATION: Abbreviation alias such as ``NUL``
    """

    CORRECTION = "correction"
    SEQUENCE = "sequence"
    CONTROL = "control"
    ALTERNATE = "alternate"
    LABEL = "label"
    FIGMENT = "figment"
    ABBREVIATION = "abbreviation"


# Highest preference first; None is a strict character name.
NAME_TYPE_ORDER: Tuple[Optional[NameType], ...] = (
    NameType.CORRECTION,
    None,
    NameType.SEQUENCE,
    NameType.CONTROL,
    NameType.ALTERNATE,
    NameType.LABEL,
    NameType.FIGMENT,
    NameType.ABBREVIATION,
)


class NameEntry(NamedTuple):
    """One name of a Unicode value, as returned by lookups."""

    name: str
    name_type: Optional[NameType]


def name_type_rank(name_type: Optional[Any]) -> int:
    """
    Position of ``name_type`` in the preference order (0 is most preferred).

    Plain strings equal to a NameType value are accepted.

    Raises:
        ValueError: If ``name_type`` is neither None nor a NameType value.
    """
    if name_type is None:
        return NAME_TYPE_ORDER.index(None)
    try:
        return NAME_TYPE_ORDER.index(NameType(name_type))
    except ValueError:
        raise ValueError(f"Unknown name type: {name_type!r}") from None


def compare_types(name_type_a: Optional[Any], name_type_b: Optional[Any]) -> int:
    """
    Compare two name types by preference.

    Returns:
        0 if equal, negative if ``name_type_a`` is preferred, positive otherwise.
    """
    return name_type_rank(name_type_a) - name_type_rank(name_type_b)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table is slow; do it once, on first comparison.
    return Collator()


def collation_key(name: str) -> Tuple[int, ...]:
    """Default Unicode Collation sort key of ``name``."""
    return _collator().sort_key(name)


def compare_names(name_a: str, name_b: str) -> int:
    """Compare two names by Default Unicode Collation, then by code points."""
    key_a, key_b = collation_key(name_a), collation_key(name_b)
    if key_a != key_b:
        return -1 if key_a < key_b else 1
    if name_a != name_b:
        return -1 if name_a < name_b else 1
    return 0


def compare_entries(entry_a: Tuple[str, Any], entry_b: Tuple[str, Any]) -> int:
    """
    Compare two ``(name, name_type)`` entries.

    Name-type preference is the primary key; the names break ties.

    Examples:
        >>> compare_entries(("SINGLE SHIFT THREE", "control"), ("control-008F", "label")) < 0
        True
        >>> compare_entries(("SINGLE SHIFT THREE", "control"), ("SINGLE-SHIFT-3", "control")) < 0
        True
    """
    name_a, name_type_a = entry_a
    name_b, name_type_b = entry_b
    return compare_types(name_type_a, name_type_b) or compare_names(name_a, name_b)


def sort_entries(entries: Iterable[Tuple[str, Any]]) -> List[NameEntry]:
    """Sort entries with ``compare_entries``, returning them as NameEntry tuples."""
    return sorted(
        (
            NameEntry(name, None if name_type is None else NameType(name_type))
            for name, name_type in entries
        ),
        key=cmp_to_key(compare_entries),
    )
