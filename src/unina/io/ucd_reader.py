"""
Unicode Character Database (UCD) reader.

This module turns the UCD name files into name ranges:

- UnicodeData.txt: strict names, plus ``<control>`` and ``<..., First>`` /
  ``<..., Last>`` meta-labels that become label ranges and algorithmic ranges
- NameAliases.txt: correction, control, alternate, figment and abbreviation aliases
- NamedSequences.txt: named character sequences

Noncharacter labels (``NONCHARACTER-FFFE``) appear in none of these files and
are generated by ``iter_noncharacter_ranges``.

Fetching the files is not handled here; ``extract_name_ranges`` reads them
from a local directory.
"""

import re
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

import structlog
from pydantic import ValidationError

from unina.domain.name_counter import (
    CJK_UNIFIED_NAME_STEM,
    CONTROL_NAME_STEM,
    HANGUL_SYLLABLE_NAME_STEM,
    NONCHARACTER_NAME_STEM,
    PRIVATE_USE_NAME_STEM,
    SURROGATE_NAME_STEM,
    TANGUT_NAME_STEM,
    NameCounterType,
)
from unina.domain.name_range import NameRange, sort_name_ranges
from unina.domain.name_type import NameType
from unina.utils import hex as hex_codec

logger = structlog.get_logger(__name__)

UNICODE_DATA_FILENAME = "UnicodeData.txt"
NAME_ALIASES_FILENAME = "NameAliases.txt"
NAMED_SEQUENCES_FILENAME = "NamedSequences.txt"

# UCD files use space-padded semicolons between fields and spaces between the
# hexes of a sequence.
_FIELD_DELIMITER_RE = re.compile(r"\s*;\s*")
_COMMENT_RE = re.compile(r"#.*")

_META_LABEL_RE = re.compile(r"^<(?P<label>[^,>]+)(?:, (?P<bound>First|Last))?>$")
_CONTROL_LABEL = "control"
_CJK_EXTENSION_LABEL_PREFIX = "CJK Ideograph Extension"

PLANE_SIZE = 0x1_0000
NUM_PLANES = 0x11


class UcdFormatError(Exception):
    """Raised when a UCD file does not have the expected structure."""

    pass


class _RangeRule(NamedTuple):
    name_stem: str
    name_counter_type: NameCounterType
    name_type: Optional[NameType]


_HEX = NameCounterType.HYPHEN_HEX
_SURROGATE_RULE = _RangeRule(SURROGATE_NAME_STEM, _HEX, NameType.LABEL)
_PRIVATE_USE_RULE = _RangeRule(PRIVATE_USE_NAME_STEM, _HEX, NameType.LABEL)
_CJK_RULE = _RangeRule(CJK_UNIFIED_NAME_STEM, _HEX, None)
_TANGUT_RULE = _RangeRule(TANGUT_NAME_STEM, _HEX, None)

# Meta-labels of UnicodeData.txt First/Last pairs, by label text.
_RANGE_RULES = {
    "CJK Ideograph": _CJK_RULE,
    "Hangul Syllable": _RangeRule(
        HANGUL_SYLLABLE_NAME_STEM, NameCounterType.HANGUL_SYLLABLE, None
    ),
    "Non Private Use High Surrogate": _SURROGATE_RULE,
    "Private Use High Surrogate": _SURROGATE_RULE,
    "Low Surrogate": _SURROGATE_RULE,
    "Private Use": _PRIVATE_USE_RULE,
    "Plane 15 Private Use": _PRIVATE_USE_RULE,
    "Plane 16 Private Use": _PRIVATE_USE_RULE,
    "Tangut Ideograph": _TANGUT_RULE,
    "Tangut Ideograph Supplement": _TANGUT_RULE,
}

SourceLines = Iterable[str]


def _range_rule(label: str) -> Optional[_RangeRule]:
    # New CJK extensions keep being added with new letters.
    if label.startswith(_CJK_EXTENSION_LABEL_PREFIX):
        return _CJK_RULE
    return _RANGE_RULES.get(label)


def _iter_fields(lines: SourceLines) -> Iterator[List[str]]:
    """Yield the fields of each non-blank line, with comments and padding stripped."""
    for line in lines:
        stripped = _COMMENT_RE.sub("", line).strip()
        if stripped:
            yield _FIELD_DELIMITER_RE.split(stripped)


def _parse_scalar(hex_field: str, source: str) -> int:
    scalar = hex_codec.get_integer(hex_field)
    if scalar is None:
        raise UcdFormatError(f"Invalid code point {hex_field!r} in {source}")
    return scalar


def _build_range(source: str, **fields) -> NameRange:
    try:
        return NameRange(**fields)
    except ValidationError as e:
        raise UcdFormatError(f"Invalid name range in {source}: {e}") from e


def iter_unicode_data(lines: SourceLines) -> Iterator[NameRange]:
    """
    Yield name ranges from the lines of UnicodeData.txt.

    Raises:
        UcdFormatError: On an unknown meta-label, a ``Last`` line that does not
            close the preceding ``First`` line, or a ``First`` line left open.
    """
    pending_first: Optional[Tuple[str, int]] = None  # (label, head point)

    for fields in _iter_fields(lines):
        if len(fields) < 2:
            raise UcdFormatError(f"Too few fields in {UNICODE_DATA_FILENAME}: {fields!r}")
        head_point = _parse_scalar(fields[0], UNICODE_DATA_FILENAME)
        name = fields[1]
        meta_match = _META_LABEL_RE.match(name)

        if pending_first is not None:
            first_label, first_head_point = pending_first
            if meta_match is None or meta_match["bound"] != "Last" or meta_match["label"] != first_label:
                raise UcdFormatError(
                    f"Invalid name label in {UNICODE_DATA_FILENAME} {name!r} "
                    f"following '<{first_label}, First>'"
                )
            rule = _range_rule(first_label)
            yield _build_range(
                UNICODE_DATA_FILENAME,
                initial_head_point=first_head_point,
                length=head_point - first_head_point + 1,
                name_stem=rule.name_stem,
                name_counter_type=rule.name_counter_type,
                name_type=rule.name_type,
            )
            pending_first = None
            continue

        if meta_match is None:
            yield _build_range(UNICODE_DATA_FILENAME, initial_head_point=head_point, name_stem=name)
            continue

        label, bound = meta_match["label"], meta_match["bound"]
        if label == _CONTROL_LABEL and bound is None:
            yield _build_range(
                UNICODE_DATA_FILENAME,
                initial_head_point=head_point,
                name_stem=CONTROL_NAME_STEM,
                name_counter_type=NameCounterType.HYPHEN_HEX,
                name_type=NameType.LABEL,
            )
        elif bound == "First" and _range_rule(label) is not None:
            pending_first = (label, head_point)
        else:
            raise UcdFormatError(f"Unknown name label in {UNICODE_DATA_FILENAME} {name!r}")

    if pending_first is not None:
        raise UcdFormatError(
            f"Invalid name label in {UNICODE_DATA_FILENAME}; "
            f"'<{pending_first[0]}, First>' is not followed by an ending line"
        )


def iter_name_aliases(lines: SourceLines) -> Iterator[NameRange]:
    """Yield one singleton name range per line of NameAliases.txt."""
    for fields in _iter_fields(lines):
        if len(fields) < 3:
            raise UcdFormatError(f"Too few fields in {NAME_ALIASES_FILENAME}: {fields!r}")
        hex_field, alias, alias_type = fields[:3]
        yield _build_range(
            NAME_ALIASES_FILENAME,
            initial_head_point=_parse_scalar(hex_field, NAME_ALIASES_FILENAME),
            name_stem=alias,
            name_type=alias_type,
        )


def iter_named_sequences(lines: SourceLines) -> Iterator[NameRange]:
    """Yield one sequence name range per line of NamedSequences.txt."""
    for fields in _iter_fields(lines):
        if len(fields) < 2:
            raise UcdFormatError(f"Too few fields in {NAMED_SEQUENCES_FILENAME}: {fields!r}")
        name, hexes = fields[:2]
        if not hexes.split():
            raise UcdFormatError(f"Named sequence {name!r} has no code points")
        head_point, *tail_scalars = (
            _parse_scalar(hex_field, NAMED_SEQUENCES_FILENAME) for hex_field in hexes.split()
        )
        yield _build_range(
            NAMED_SEQUENCES_FILENAME,
            initial_head_point=head_point,
            name_stem=name,
            name_type=NameType.SEQUENCE,
            tail_scalars=tuple(tail_scalars),
        )


def iter_noncharacter_ranges() -> Iterator[NameRange]:
    """
    Yield label ranges for all 66 noncharacters.

    These are U+FDD0..U+FDEF and the last two code points of each of the 17
    planes (U+FFFE, U+FFFF, U+1FFFE, ..., U+10FFFF).
    """
    yield NameRange(
        initial_head_point=0xFDD0,
        length=0x20,
        name_stem=NONCHARACTER_NAME_STEM,
        name_counter_type=NameCounterType.HYPHEN_HEX,
        name_type=NameType.LABEL,
    )
    for plane_index in range(NUM_PLANES):
        yield NameRange(
            initial_head_point=plane_index * PLANE_SIZE + PLANE_SIZE - 2,
            length=2,
            name_stem=NONCHARACTER_NAME_STEM,
            name_counter_type=NameCounterType.HYPHEN_HEX,
            name_type=NameType.LABEL,
        )


def _read_lines(path: Path) -> List[str]:
    if not path.exists():
        logger.error("ucd_reader.file_not_found", file_path=str(path))
        raise FileNotFoundError(f"UCD file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.readlines()


def extract_name_ranges(ucd_dir: Union[str, Path]) -> List[NameRange]:
    """
    Read the UCD name files in ``ucd_dir`` and return sorted name ranges.

    Args:
        ucd_dir: Directory containing UnicodeData.txt, NameAliases.txt and
            NamedSequences.txt

    Returns:
        All name ranges, sorted by ``name_range_sort_key``

    Raises:
        FileNotFoundError: If one of the files is missing
        UcdFormatError: If a file is malformed
    """
    ucd_path = Path(ucd_dir)
    sources: List[Tuple[str, Callable[[SourceLines], Iterator[NameRange]]]] = [
        (UNICODE_DATA_FILENAME, iter_unicode_data),
        (NAME_ALIASES_FILENAME, iter_name_aliases),
        (NAMED_SEQUENCES_FILENAME, iter_named_sequences),
    ]

    name_ranges: List[NameRange] = []
    for filename, reader in sources:
        file_ranges = list(reader(_read_lines(ucd_path / filename)))
        logger.info("ucd_reader.file_read", filename=filename, range_count=len(file_ranges))
        name_ranges.extend(file_ranges)
    name_ranges.extend(iter_noncharacter_ranges())

    sorted_ranges = list(sort_name_ranges(name_ranges))
    logger.info("ucd_reader.extracted", ucd_dir=str(ucd_path), range_count=len(sorted_ranges))
    return sorted_ranges
