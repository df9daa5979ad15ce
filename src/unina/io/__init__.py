"""
I/O layer: reading UCD source files and the compiled name-range database.
"""

from unina.io.database import DatabaseLoaderError, load_database, write_database
from unina.io.ucd_reader import UcdFormatError, extract_name_ranges

__all__ = [
    "DatabaseLoaderError",
    "UcdFormatError",
    "extract_name_ranges",
    "load_database",
    "write_database",
]
