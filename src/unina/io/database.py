"""
Compiled name-range database: writing and reading.

The database is the ordered list of name ranges, stored as JSON (``.json``) or
YAML (``.yml`` / ``.yaml``). Each record holds the NameRange fields, with
default values omitted::

    [
      {"initial_head_point": 0, "name_stem": "NULL", "name_type": "control"},
      {"initial_head_point": 0, "name_stem": "CONTROL",
       "name_counter_type": "hyphenHex", "name_type": "label"},
      ...
    ]

Records are validated on load but not re-sorted: the writer is expected to
have produced them in loader-contract order.
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

import structlog
import yaml
from pydantic import ValidationError

from unina.domain.name_range import NameRange

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


class DatabaseLoaderError(Exception):
    """Raised when a name-range database cannot be read or is invalid."""

    pass


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def serialize_name_range(name_range: NameRange) -> dict:
    """Plain-data form of a name range, without default-valued fields."""
    return name_range.model_dump(mode="json", exclude_defaults=True)


def write_database(name_ranges: Iterable[NameRange], path: Union[str, Path]) -> Path:
    """
    Write name ranges to a database file, creating parent directories.

    Args:
        name_ranges: Ranges in loader-contract order
        path: Destination; the suffix selects JSON or YAML

    Returns:
        The path written
    """
    db_path = Path(path)
    records = [serialize_name_range(name_range) for name_range in name_ranges]
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with open(db_path, "w", encoding="utf-8") as f:
        if _is_yaml(db_path):
            yaml.safe_dump(records, f, allow_unicode=True, sort_keys=False)
        else:
            json.dump(records, f, ensure_ascii=False, separators=(",", ":"))

    logger.info("database.written", database_path=str(db_path), range_count=len(records))
    return db_path


def _read_records(db_path: Path) -> Any:
    try:
        with open(db_path, "r", encoding="utf-8") as f:
            if _is_yaml(db_path):
                return yaml.safe_load(f)
            return json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error("database.parse_error", database_path=str(db_path), error=str(e))
        raise DatabaseLoaderError(f"Invalid name-range database {db_path}: {e}") from e


def load_database(path: Union[str, Path]) -> Tuple[NameRange, ...]:
    """
    Read and validate a name-range database.

    Behavior:
    - Missing file: Raises DatabaseLoaderError
    - Empty file (YAML) or empty list: Returns an empty tuple
    - Invalid JSON/YAML, non-list content or an invalid record: Raises
      DatabaseLoaderError naming the file (and the record index)

    Args:
        path: Database file path

    Returns:
        The name ranges, in file order
    """
    db_path = Path(path)
    if not db_path.exists():
        logger.error("database.file_not_found", database_path=str(db_path))
        raise DatabaseLoaderError(
            f"Name-range database not found: {db_path}. "
            "Build one with `python -m unina.cli build --ucd-dir <dir>`."
        )

    records = _read_records(db_path)
    if records is None:
        records = []
    if not isinstance(records, list):
        error_msg = (
            f"Invalid name-range database {db_path}: "
            f"expected list, got {type(records).__name__}"
        )
        logger.error("database.invalid_format", database_path=str(db_path))
        raise DatabaseLoaderError(error_msg)

    name_ranges: List[NameRange] = []
    for index, record in enumerate(records):
        try:
            name_ranges.append(NameRange.model_validate(record))
        except ValidationError as e:
            logger.error(
                "database.invalid_record",
                database_path=str(db_path),
                record_index=index,
                error_count=e.error_count(),
            )
            raise DatabaseLoaderError(
                f"Invalid name range #{index} in {db_path}: {e}"
            ) from e

    logger.info("database.loaded", database_path=str(db_path), range_count=len(name_ranges))
    return tuple(name_ranges)
