"""
Domain layer: name ranges, name types, name counters and fuzzy folding.

Nothing here performs I/O; every function is a pure transformation.
"""

from unina.domain.fuzzy_fold import fold
from unina.domain.name_counter import NameCounterType
from unina.domain.name_range import (
    NameDatum,
    NameRange,
    group_name_entries,
    iter_name_data,
    name_range_sort_key,
    sort_name_ranges,
)
from unina.domain.name_type import (
    NameEntry,
    NameType,
    compare_entries,
    compare_types,
    sort_entries,
)

__all__ = [
    "NameCounterType",
    "NameDatum",
    "NameEntry",
    "NameRange",
    "NameType",
    "compare_entries",
    "compare_types",
    "fold",
    "group_name_entries",
    "iter_name_data",
    "name_range_sort_key",
    "sort_entries",
    "sort_name_ranges",
]
