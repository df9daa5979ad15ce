"""
Unified CLI entry point for unina.

Usage:
    python -m unina.cli <command> [options]

Available commands:
    build  - Compile the UCD name files into a name-range database
    get    - Resolve names to code points
    names  - List every name of a character or named sequence

Examples:
    # Compile the database from a local UCD directory
    python -m unina.cli build --ucd-dir ./ucd --output ./build/database.json

    # Resolve names (loosely matched)
    python -m unina.cli get "latin small letter a" "combining acute accent"

    # List names of U+0000
    python -m unina.cli names --hex 0000
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from unina.config import get_settings
from unina.domain.name_type import NameEntry
from unina.io.database import DatabaseLoaderError, write_database
from unina.io.ucd_reader import UcdFormatError, extract_name_ranges
from unina.library import NameLibrary, get_default_library
from unina.utils import hex as hex_codec
from unina.utils.logging import bind_context, configure_logging

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_LOAD_ERROR = 2

# Type column shown for strict character names
STRICT_NAME_TYPE_LABEL = "name"


def _format_code_points(value: str) -> str:
    return " ".join(f"U+{hex_codec.from_code_point(ord(char))}" for char in value)


def _format_entry(entry: NameEntry) -> str:
    name_type = STRICT_NAME_TYPE_LABEL if entry.name_type is None else entry.name_type.value
    return f"{entry.name}\t{name_type}"


def _load_library(database: Optional[str]) -> NameLibrary:
    if database:
        return NameLibrary.from_database(database)
    return get_default_library()


def _parse_hex_value(text: str) -> Optional[str]:
    chars = []
    for hex_field in text.split():
        code_point = hex_codec.get_integer(hex_field)
        if code_point is None or code_point > 0x10FFFF:
            return None
        chars.append(chr(code_point))
    return "".join(chars) or None


def _execute_build(args: argparse.Namespace) -> int:
    """
    Extract name ranges from the UCD directory and write the database.

    Returns:
        Exit code (0 for success, 2 for unreadable or malformed input)
    """
    settings = get_settings()
    ucd_dir = args.ucd_dir or settings.ucd_dir
    output = args.output or settings.database_path
    logger = bind_context(command="build", ucd_dir=ucd_dir, database_path=output)

    try:
        name_ranges = extract_name_ranges(ucd_dir)
    except (FileNotFoundError, UcdFormatError) as e:
        logger.error("cli.build_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    write_database(name_ranges, output)
    print(f"Wrote {len(name_ranges)} name ranges to {output}")
    return EXIT_OK


def _execute_get(args: argparse.Namespace) -> int:
    """
    Print the code points of the string the names resolve to.

    Returns:
        Exit code (0 when every name resolves, 1 otherwise)
    """
    library = _load_library(args.database)
    value = library.get(*args.names)
    if value is None:
        print("No match", file=sys.stderr)
        return EXIT_NO_MATCH

    print(_format_code_points(value))
    return EXIT_OK


def _execute_names(args: argparse.Namespace) -> int:
    """
    Print one ``name<TAB>type`` line per name of the value.

    Returns:
        Exit code (0 when the value has names, 1 when it has none, 2 for a
        malformed ``--hex`` value)
    """
    if args.hex:
        value = _parse_hex_value(args.value)
        if value is None:
            print(f"Error: invalid code points {args.value!r}", file=sys.stderr)
            return EXIT_LOAD_ERROR
    else:
        value = args.value

    library = _load_library(args.database)
    entries = library.get_name_entries(value)
    if not entries:
        print("No names", file=sys.stderr)
        return EXIT_NO_MATCH

    for entry in entries:
        print(_format_entry(entry))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unina.cli",
        description="unina CLI - Unicode name resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m unina.cli build --ucd-dir ./ucd
  python -m unina.cli get "latin small letter a" "combining acute accent"
  python -m unina.cli names --hex "0041 030A"
        """,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    build_command = subparsers.add_parser(
        "build",
        help="Compile the UCD name files into a database",
        description="Read UnicodeData.txt, NameAliases.txt and NamedSequences.txt",
    )
    build_command.add_argument(
        "--ucd-dir", help="Directory with the UCD files (default: UNINA_UCD_DIR)"
    )
    build_command.add_argument(
        "--output",
        help="Database file to write, .json or .yaml (default: UNINA_DATABASE_PATH)",
    )

    get_command = subparsers.add_parser(
        "get",
        help="Resolve names to code points",
        description="Resolve one or more names, loosely matched, and print the code points",
    )
    get_command.add_argument("names", nargs="+", metavar="NAME")
    get_command.add_argument("--database", help="Database file to read")

    names_command = subparsers.add_parser(
        "names",
        help="List the names of a value",
        description="List every name of a character or named sequence, most preferred first",
    )
    names_command.add_argument("value", metavar="VALUE")
    names_command.add_argument(
        "--hex",
        action="store_true",
        help="Treat VALUE as space-separated hex code points",
    )
    names_command.add_argument("--database", help="Database file to read")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for no match, 2 for configuration or
        database errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging()
        if args.command == "build":
            return _execute_build(args)
        elif args.command == "get":
            return _execute_get(args)
        elif args.command == "names":
            return _execute_names(args)
        else:
            parser.print_help()
            return EXIT_NO_MATCH
    except (DatabaseLoaderError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
