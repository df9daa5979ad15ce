"""
Public lookup facade.

``NameLibrary`` wraps a NameRangeStore with argument checking, fuzzy folding
and concatenation of multiple names. The module-level default library is
loaded lazily from ``Settings.database_path``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Union

import structlog

from unina.config import get_settings
from unina.domain.fuzzy_fold import fold
from unina.domain.name_range import NameRange
from unina.domain.name_type import NameEntry
from unina.infrastructure.name_range_store import NameRangeStore
from unina.io.database import load_database

logger = structlog.get_logger(__name__)


def _require_str(operation: str, argument: str, *values: object) -> None:
    """Raise TypeError unless every value is a string."""
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"Invalid {argument} given to {operation} ({value!r}).")


class NameLibrary:
    """Resolve Unicode names to values and values to names."""

    def __init__(self, name_ranges: Iterable[NameRange]):
        self._store = NameRangeStore(name_ranges)

    @classmethod
    def from_database(cls, path: Union[str, Path]) -> "NameLibrary":
        """Build a library from a database written by ``write_database``."""
        return cls(load_database(path))

    @property
    def store(self) -> NameRangeStore:
        return self._store

    def get(self, name: str, *more_names: str) -> Optional[str]:
        """
        Resolve one or more names, loosely matched, into a string.

        Args:
            name: A character name, alias, label or named-sequence name
            *more_names: Further names whose values are appended in order

        Returns:
            The concatenated values, or None if any name is unknown.

        Raises:
            TypeError: If any argument is not a string. All arguments are
                checked before any lookup.

        Examples:
            >>> library.get("latin small letter a", "COMBINING ACUTE ACCENT")
            'á'
        """
        names = (name, *more_names)
        _require_str("get", "name", *names)

        values: List[str] = []
        for each_name in names:
            value = self._store.get(fold(each_name))
            if value is None:
                return None
            values.append(value)
        return "".join(values)

    def get_name_entries(self, value: str) -> List[NameEntry]:
        """
        All names of a character or named sequence, most preferred first.

        Raises:
            TypeError: If ``value`` is not a string.
        """
        _require_str("get_name_entries", "value", value)
        return self._store.get_name_entries(value)

    def get_preferred_name(self, value: str) -> Optional[str]:
        """
        The most preferred name of a value, or None if it has none.

        Raises:
            TypeError: If ``value`` is not a string.
        """
        _require_str("get_preferred_name", "value", value)
        entries = self._store.get_name_entries(value)
        return entries[0].name if entries else None


@lru_cache(maxsize=1)
def get_default_library() -> NameLibrary:
    """
    Library loaded from the configured database, once per process.

    Raises:
        DatabaseLoaderError: If the configured database is missing or invalid.
    """
    database_path = get_settings().database_path
    logger.info("library.loading", database_path=database_path)
    return NameLibrary.from_database(database_path)


def reset_default_library() -> None:
    """Forget the default library so the next call reloads it from settings."""
    get_default_library.cache_clear()


def get(name: str, *more_names: str) -> Optional[str]:
    """``NameLibrary.get`` on the default library."""
    _require_str("get", "name", name, *more_names)
    return get_default_library().get(name, *more_names)


def get_name_entries(value: str) -> List[NameEntry]:
    """``NameLibrary.get_name_entries`` on the default library."""
    _require_str("get_name_entries", "value", value)
    return get_default_library().get_name_entries(value)


def get_preferred_name(value: str) -> Optional[str]:
    """``NameLibrary.get_preferred_name`` on the default library."""
    _require_str("get_preferred_name", "value", value)
    return get_default_library().get_preferred_name(value)
