"""
unina - Unicode name resolution.

Resolves character names, aliases, code-point labels and named sequences to
strings (with loose matching), and lists every name of a character or named
sequence.

    >>> import unina
    >>> unina.get("latin small letter a with grave")
    'à'
    >>> unina.get_preferred_name("\\x00")
    'NULL'
"""

__version__ = "0.1.0"

# Installs the stdlib-backed structlog routing before any module logs.
from unina.utils import logging as _logging  # noqa: F401

from unina.domain import NameCounterType, NameEntry, NameRange, NameType
from unina.library import (
    NameLibrary,
    get,
    get_default_library,
    get_name_entries,
    get_preferred_name,
    reset_default_library,
)

__all__ = [
    "NameCounterType",
    "NameEntry",
    "NameLibrary",
    "NameRange",
    "NameType",
    "__version__",
    "get",
    "get_default_library",
    "get_name_entries",
    "get_preferred_name",
    "reset_default_library",
]
