"""
Name-range store: name-to-value and value-to-names lookup.

The store scans an ordered, immutable sequence of name ranges. Both lookups are
linear in the number of ranges, which is small because algorithmically named
blocks (CJK ideographs, Hangul syllables, private use, ...) each take a single
range.

Stems are kept unfolded so that ``get_name_entries`` can return standard
names; ``get`` folds them as it goes.
"""

from typing import Iterable, List, Optional, Tuple

from unina.domain import name_counter
from unina.domain.fuzzy_fold import fold
from unina.domain.name_range import NameRange
from unina.domain.name_type import NameEntry, NameType, sort_entries


class NameRangeStore:
    """
    Read-only lookup engine over name ranges.

    The ranges must follow the loader contract: sorted by
    ``name_range_sort_key``, and disjoint by folded-stem prefix for the names
    used to resolve values, since ``get`` returns the first match.
    """

    def __init__(self, name_ranges: Iterable[NameRange]):
        self._name_ranges: Tuple[NameRange, ...] = tuple(name_ranges)

    @property
    def name_ranges(self) -> Tuple[NameRange, ...]:
        return self._name_ranges

    def __len__(self) -> int:
        return len(self._name_ranges)

    def get(self, fuzzy_name: str) -> Optional[str]:
        """
        Find the value named by an already folded name.

        Args:
            fuzzy_name: Output of ``fold``

        Returns:
            The named character or named sequence, or None.
        """
        for name_range in self._name_ranges:
            fuzzy_stem = fold(name_range.name_stem)
            if not fuzzy_name.startswith(fuzzy_stem):
                continue

            head_point = name_counter.parse(
                fuzzy_name[len(fuzzy_stem):],
                name_range.name_counter_type,
                name_range.initial_head_point,
                name_range.length,
            )
            # A counter that does not parse, or parses outside this range,
            # simply means another range has to match.
            if head_point is not None:
                return name_range.value_at(head_point)

        return None

    def get_name_entries(self, value: str) -> List[NameEntry]:
        """
        Collect every name of ``value``, sorted by preference.

        Args:
            value: A character, or a head character followed by tail scalars

        Returns:
            Sorted name entries; empty when ``value`` is unnamed or empty.
        """
        if not value:
            return []

        head_point = ord(value[0])
        tail = value[1:]
        entries: List[Tuple[str, Optional[NameType]]] = [
            (name_range.name_at(head_point), name_range.name_type)
            for name_range in self._name_ranges
            if name_range.contains(head_point, tail)
        ]
        return sort_entries(entries)
