"""Pytest configuration shared by the unina test suite.

Settings, the default library and the structlog/stdlib logging setup are
process-wide; the autouse fixture below resets them so that environment patches in one test
never leak into another.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator, Tuple

import pytest

from unina.config import get_settings
from unina.domain.name_range import NameRange
from unina.io.database import write_database
from unina.library import NameLibrary, reset_default_library
from unina.utils.logging import reset_logging

from tests.fixtures.name_ranges import sample_ranges, write_ucd_dir


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached settings/library and drop UNINA_* variables around each test."""
    for key in list(os.environ):
        if key.startswith("UNINA_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    reset_default_library()
    reset_logging()
    yield
    get_settings.cache_clear()
    reset_default_library()
    reset_logging()


@pytest.fixture
def name_ranges() -> Tuple[NameRange, ...]:
    """Sample ranges in loader-contract order."""
    return sample_ranges()


@pytest.fixture
def library(name_ranges) -> NameLibrary:
    return NameLibrary(name_ranges)


@pytest.fixture
def database_file(tmp_path: Path, name_ranges) -> Path:
    """Sample ranges written to a JSON database."""
    return write_database(name_ranges, tmp_path / "database.json")


@pytest.fixture
def ucd_dir(tmp_path: Path) -> Path:
    """Directory holding small UnicodeData/NameAliases/NamedSequences excerpts."""
    return write_ucd_dir(tmp_path / "ucd")
