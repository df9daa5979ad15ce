"""Unit tests for the NameRange model and name enumeration."""

import pytest
from pydantic import ValidationError

from unina.domain.name_counter import NameCounterType
from unina.domain.name_range import (
    NameDatum,
    NameRange,
    group_name_entries,
    iter_name_data,
    name_range_sort_key,
    sort_name_ranges,
)
from unina.domain.name_type import NameEntry, NameType

HEX = NameCounterType.HYPHEN_HEX


@pytest.mark.unit
class TestNameRangeValidation:
    """Test cases for NameRange construction."""

    def test_defaults(self):
        name_range = NameRange(initial_head_point=0x41, name_stem="LATIN CAPITAL LETTER A")
        assert name_range.length == 1
        assert name_range.name_counter_type is None
        assert name_range.name_type is None
        assert name_range.tail_scalars == ()
        assert name_range.final_head_point == 0x41

    def test_string_enums_are_coerced(self):
        name_range = NameRange(
            initial_head_point=0,
            length=0x20,
            name_stem="CONTROL",
            name_counter_type="hyphenHex",
            name_type="label",
        )
        assert name_range.name_counter_type is HEX
        assert name_range.name_type is NameType.LABEL

    def test_frozen(self):
        name_range = NameRange(initial_head_point=0x41, name_stem="A")
        with pytest.raises(ValidationError):
            name_range.length = 2

    def test_hangul_range_inside_syllable_block(self):
        """A Hangul-counter range may cover any part of U+AC00..U+D7A3."""
        name_range = NameRange(
            initial_head_point=0xD7A0,
            length=4,
            name_stem="HANGUL SYLLABLE",
            name_counter_type=NameCounterType.HANGUL_SYLLABLE,
        )
        assert name_range.name_at(0xD7A3) == "HANGUL SYLLABLE HIH"

    def test_hashable(self):
        first = NameRange(initial_head_point=0x41, name_stem="A", tail_scalars=(0x300,))
        second = NameRange(initial_head_point=0x41, name_stem="A", tail_scalars=[0x300])
        assert first == second
        assert len({first, second}) == 1

    @pytest.mark.parametrize(
        "fields",
        [
            {"initial_head_point": -1, "name_stem": "X"},
            {"initial_head_point": 0x110000, "name_stem": "X"},
            {"initial_head_point": 0, "name_stem": ""},
            {"initial_head_point": 0, "length": 0, "name_stem": "X", "name_counter_type": "hyphenHex"},
            {"initial_head_point": 0, "length": 2, "name_stem": "X"},
            {"initial_head_point": 0x10FFFF, "length": 2, "name_stem": "X", "name_counter_type": "hyphenHex"},
            {"initial_head_point": 0, "name_stem": "X", "tail_scalars": (0x110000,)},
            {"initial_head_point": 0, "name_stem": "X", "name_type": "strict"},
            {"initial_head_point": 0, "name_stem": "X", "unknown_field": 1},
            {"initial_head_point": 0x41, "length": 3, "name_stem": "HANGUL SYLLABLE", "name_counter_type": "hangulSyllable"},
            {"initial_head_point": 0xD7A0, "length": 8, "name_stem": "HANGUL SYLLABLE", "name_counter_type": "hangulSyllable"},
        ],
    )
    def test_invalid_ranges(self, fields):
        with pytest.raises(ValidationError):
            NameRange(**fields)


@pytest.mark.unit
class TestNameRangeAccessors:
    def test_contains_checks_head_and_tail(self):
        cjk = NameRange(
            initial_head_point=0x4E00, length=0x5200, name_stem="CJK UNIFIED IDEOGRAPH", name_counter_type=HEX
        )
        assert cjk.contains(0x4E00)
        assert cjk.contains(0x9FFF)
        assert not cjk.contains(0x4DFF)
        assert not cjk.contains(0xA000)
        assert not cjk.contains(0x4E00, "\u0300")

    def test_sequence_value_and_name(self):
        sequence = NameRange(
            initial_head_point=0x23,
            name_stem="KEYCAP NUMBER SIGN",
            name_type=NameType.SEQUENCE,
            tail_scalars=(0xFE0F, 0x20E3),
        )
        assert sequence.tail == "\ufe0f\u20e3"
        assert sequence.value_at(0x23) == "#\ufe0f\u20e3"
        assert sequence.name_at(0x23) == "KEYCAP NUMBER SIGN"
        assert sequence.contains(0x23, "\ufe0f\u20e3")
        assert not sequence.contains(0x23)

    def test_counter_names(self):
        cjk = NameRange(initial_head_point=0x4E00, length=0x5200, name_stem="CJK UNIFIED IDEOGRAPH", name_counter_type=HEX)
        hangul = NameRange(
            initial_head_point=0xAC00,
            length=11172,
            name_stem="HANGUL SYLLABLE",
            name_counter_type=NameCounterType.HANGUL_SYLLABLE,
        )
        assert cjk.name_at(0x4E01) == "CJK UNIFIED IDEOGRAPH-4E01"
        assert hangul.name_at(0xAC00) == "HANGUL SYLLABLE GA"


@pytest.mark.unit
class TestSorting:
    def test_sort_key_orders_head_then_tail_then_type(self):
        nul = NameRange(initial_head_point=0, name_stem="NUL", name_type="abbreviation")
        null = NameRange(initial_head_point=0, name_stem="NULL", name_type="control")
        label = NameRange(
            initial_head_point=0, length=0x20, name_stem="CONTROL", name_counter_type=HEX, name_type="label"
        )
        letter = NameRange(initial_head_point=0x100, name_stem="LATIN CAPITAL LETTER A WITH MACRON")
        sequence = NameRange(
            initial_head_point=0x100,
            name_stem="LATIN CAPITAL LETTER A WITH MACRON AND GRAVE",
            name_type="sequence",
            tail_scalars=(0x300,),
        )

        assert sort_name_ranges([sequence, letter, nul, label, null]) == (
            null,
            label,
            nul,
            letter,
            sequence,
        )
        assert name_range_sort_key(sequence) == (0x100, (0x300,), 2)

    def test_sort_is_stable(self):
        first = NameRange(initial_head_point=0, name_stem="B")
        second = NameRange(initial_head_point=0, name_stem="A")
        assert sort_name_ranges([first, second]) == (first, second)


@pytest.mark.unit
class TestNameData:
    def test_iter_name_data_enumerates_every_head_point(self):
        noncharacters = NameRange(
            initial_head_point=0xFFFE, length=2, name_stem="NONCHARACTER", name_counter_type=HEX, name_type="label"
        )
        assert list(iter_name_data(noncharacters)) == [
            NameDatum("\ufffe", "NONCHARACTER-FFFE", NameType.LABEL),
            NameDatum("\uffff", "NONCHARACTER-FFFF", NameType.LABEL),
        ]

    def test_group_name_entries(self):
        data = [
            NameDatum("\x00", "NUL", NameType.ABBREVIATION),
            NameDatum("\x00", "NULL", NameType.CONTROL),
            NameDatum("A", "LATIN CAPITAL LETTER A", None),
        ]
        assert group_name_entries(data) == {
            "\x00": [NameEntry("NULL", NameType.CONTROL), NameEntry("NUL", NameType.ABBREVIATION)],
            "A": [NameEntry("LATIN CAPITAL LETTER A", None)],
        }
