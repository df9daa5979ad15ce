"""
Name ranges: compact records standing in for many Unicode names.

A name range covers a contiguous run of head points (or a single named
sequence) that share one naming rule. Its names are ``name_stem`` followed by
the name counter derived from each head point; ``tail_scalars`` follow the head
point in every value it covers.

Example ranges::

    NameRange(initial_head_point=0x41, name_stem="LATIN CAPITAL LETTER A")
    NameRange(initial_head_point=0x4E00, length=0x5200,
              name_stem="CJK UNIFIED IDEOGRAPH",
              name_counter_type=NameCounterType.HYPHEN_HEX)
    NameRange(initial_head_point=0x0, name_stem="NULL", name_type=NameType.CONTROL)
"""

from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from unina.domain import hangul_syllable, name_counter
from unina.domain.name_counter import NameCounterType
from unina.domain.name_type import NameEntry, NameType, name_type_rank, sort_entries

MAX_SCALAR = 0x10FFFF


class NameRange(BaseModel):
    """Immutable record describing a group of values sharing one naming rule."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_head_point: int = Field(..., ge=0, le=MAX_SCALAR, description="First head point covered")
    length: int = Field(default=1, ge=1, description="Number of consecutive head points covered")
    name_stem: str = Field(..., min_length=1, description="Fixed name prefix, e.g. 'CJK UNIFIED IDEOGRAPH'")
    name_counter_type: Optional[NameCounterType] = Field(
        default=None, description="Counter algorithm; None for singleton ranges"
    )
    name_type: Optional[NameType] = Field(
        default=None, description="Name type; None for strict character names"
    )
    tail_scalars: Tuple[int, ...] = Field(
        default=(), description="Scalars following the head point (named sequences)"
    )

    @field_validator("tail_scalars")
    @classmethod
    def validate_tail_scalars(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        for scalar in v:
            if not 0 <= scalar <= MAX_SCALAR:
                raise ValueError(f"Tail scalar {scalar:#x} is outside the Unicode codespace")
        return v

    @model_validator(mode="after")
    def validate_extent(self) -> "NameRange":
        if self.name_counter_type is None and self.length != 1:
            raise ValueError(
                f"Name range {self.name_stem!r} has no name counter but covers {self.length} head points"
            )
        if self.final_head_point > MAX_SCALAR:
            raise ValueError(
                f"Name range {self.name_stem!r} ends at {self.final_head_point:#x}, "
                "beyond the Unicode codespace"
            )
        if self.name_counter_type is NameCounterType.HANGUL_SYLLABLE and not (
            hangul_syllable.is_syllable(self.initial_head_point)
            and hangul_syllable.is_syllable(self.final_head_point)
        ):
            raise ValueError(
                f"Name range {self.name_stem!r} uses Hangul syllable names outside "
                f"U+{hangul_syllable.BASE_POINT:04X}..U+"
                f"{hangul_syllable.BASE_POINT + hangul_syllable.NUM_SYLLABLES - 1:04X}"
            )
        return self

    @property
    def final_head_point(self) -> int:
        return self.initial_head_point + self.length - 1

    @property
    def tail(self) -> str:
        return "".join(map(chr, self.tail_scalars))

    def contains(self, head_point: int, tail: str = "") -> bool:
        """Whether the value ``chr(head_point) + tail`` is covered by this range."""
        return (
            self.initial_head_point <= head_point <= self.final_head_point
            and tail == self.tail
        )

    def value_at(self, head_point: int) -> str:
        return chr(head_point) + self.tail

    def name_at(self, head_point: int) -> str:
        return self.name_stem + name_counter.derive(head_point, self.name_counter_type)


def name_range_sort_key(name_range: NameRange) -> Tuple[int, Tuple[int, ...], int]:
    """
    Sort key of the loader contract: head point, then tail, then name-type preference.

    Single-scalar ranges (empty tail) precede named sequences with the same head.
    """
    return (
        name_range.initial_head_point,
        name_range.tail_scalars,
        name_type_rank(name_range.name_type),
    )


def sort_name_ranges(name_ranges: Iterable[NameRange]) -> Tuple[NameRange, ...]:
    return tuple(sorted(name_ranges, key=name_range_sort_key))


class NameDatum(NamedTuple):
    """One name of one value, enumerated from a name range."""

    value: str
    name: str
    name_type: Optional[NameType]


def iter_name_data(name_range: NameRange) -> Iterator[NameDatum]:
    """
    Yield a NameDatum for every value the range covers, by ascending head point.

    Example:
        >>> list(iter_name_data(NameRange(initial_head_point=0, name_stem="NULL",
        ...                               name_type=NameType.CONTROL)))
        [NameDatum(value='\\x00', name='NULL', name_type=<NameType.CONTROL: 'control'>)]
    """
    for head_point in range(name_range.initial_head_point, name_range.final_head_point + 1):
        yield NameDatum(
            value=name_range.value_at(head_point),
            name=name_range.name_at(head_point),
            name_type=name_range.name_type,
        )


def group_name_entries(name_data: Iterable[NameDatum]) -> Dict[str, List[NameEntry]]:
    """Group name data by value; each value's entries are sorted by preference."""
    grouped: Dict[str, List[Tuple[str, Optional[NameType]]]] = defaultdict(list)
    for datum in name_data:
        grouped[datum.value].append((datum.name, datum.name_type))
    return {value: sort_entries(entries) for value, entries in grouped.items()}
