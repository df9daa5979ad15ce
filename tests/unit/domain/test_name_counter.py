"""Unit tests for name counters."""

import pytest

from unina.domain import name_counter
from unina.domain.name_counter import NameCounterType

HEX = NameCounterType.HYPHEN_HEX
HANGUL = NameCounterType.HANGUL_SYLLABLE
CODESPACE = 0x110000


@pytest.mark.unit
class TestParseHyphenHex:
    """Test cases for hyphen-hex counters."""

    @pytest.mark.parametrize(
        "fuzzy_counter, expected",
        [
            ("0000", 0x0),
            ("0020", 0x20),
            ("0FFF", 0xFFF),
            ("FFFF", 0xFFFF),
            ("1F600", 0x1F600),
            ("10FFFF", 0x10FFFF),
        ],
    )
    def test_valid_counters(self, fuzzy_counter, expected):
        assert name_counter.parse(fuzzy_counter, HEX, 0, CODESPACE) == expected

    @pytest.mark.parametrize(
        "fuzzy_counter",
        ["", "020", "FFF", "00020", "0FFFF", "010FFFF", "12XY", "-0020", "0020 "],
    )
    def test_malformed_counters(self, fuzzy_counter):
        """Too few digits, padded long forms and non-hex text never match."""
        assert name_counter.parse(fuzzy_counter, HEX, 0, CODESPACE) is None

    def test_range_bounds(self):
        assert name_counter.parse("4E00", HEX, 0x4E00, 0x5200) == 0x4E00
        assert name_counter.parse("9FFF", HEX, 0x4E00, 0x5200) == 0x9FFF
        assert name_counter.parse("4DFF", HEX, 0x4E00, 0x5200) is None
        assert name_counter.parse("A000", HEX, 0x4E00, 0x5200) is None

    def test_string_counter_type_is_accepted(self):
        assert name_counter.parse("0041", "hyphenHex", 0, CODESPACE) == 0x41


@pytest.mark.unit
class TestParseHangulSyllable:
    def test_in_range(self):
        assert name_counter.parse("GA", HANGUL, 0xAC00, 11172) == 0xAC00
        assert name_counter.parse("HIH", HANGUL, 0xAC00, 11172) == 0xD7A3

    def test_out_of_range(self):
        assert name_counter.parse("HIH", HANGUL, 0xAC00, 100) is None

    def test_malformed(self):
        assert name_counter.parse("XYZ", HANGUL, 0xAC00, 11172) is None


@pytest.mark.unit
class TestParseWithoutCounter:
    def test_empty_remainder_matches_initial_value(self):
        assert name_counter.parse("", None, 0x41) == 0x41

    def test_extraneous_text_fails(self):
        assert name_counter.parse("X", None, 0x41) is None


@pytest.mark.unit
class TestDerive:
    @pytest.mark.parametrize(
        "value, counter_type, expected",
        [
            (0x0, HEX, "-0000"),
            (0x4E00, HEX, "-4E00"),
            (0x10FFFF, HEX, "-10FFFF"),
            (0xAC00, HANGUL, " GA"),
            (0xD4DB, HANGUL, " PWILH"),
            (0x41, None, ""),
        ],
    )
    def test_standard_forms(self, value, counter_type, expected):
        assert name_counter.derive(value, counter_type) == expected

    def test_hangul_outside_block_raises(self):
        with pytest.raises(ValueError):
            name_counter.derive(0x41, HANGUL)
