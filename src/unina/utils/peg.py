"""
Minimal parsing-expression-grammar (PEG) combinators.

A parser is a callable ``(text, index) -> Optional[Match]``. It returns a
``Match`` when it succeeds at ``index`` and None when it fails. Parsers are
pure and immutable once built, so a grammar can be constructed once at import
time and shared freely.

Usage:
    >>> parse_ab = sequence(term("A", 1), term("B", 2), end_of_input)
    >>> parse_ab("AB", 0)
    Match(meaning=[1, 2, None], index=2)
"""

from typing import Any, Callable, NamedTuple, Optional


class Match(NamedTuple):
    """Successful parse: what was matched and where parsing continues."""

    meaning: Any
    index: int


Parser = Callable[[str, int], Optional[Match]]


def term(literal: str, meaning: Any) -> Parser:
    """Create a parser that matches ``literal`` at the current index."""

    def parse_term(text: str, index: int) -> Optional[Match]:
        if text.startswith(literal, index):
            return Match(meaning, index + len(literal))
        return None

    return parse_term


def end_of_input(text: str, index: int) -> Optional[Match]:
    """Succeed only when ``index`` is at the end of ``text``."""
    if index == len(text):
        return Match(None, index)
    return None


def choice(*parsers: Parser) -> Parser:
    """
    Create a parser that tries each parser at the same index, in order.

    The first success wins; there is no backtracking into a later alternative
    once an earlier one has matched. Grammars that need the longest match must
    pass their alternatives longest first.
    """

    def parse_choice(text: str, index: int) -> Optional[Match]:
        for parser in parsers:
            match = parser(text, index)
            if match is not None:
                return match
        return None

    return parse_choice


def sequence(*parsers: Parser) -> Parser:
    """
    Create a parser that applies each parser consecutively.

    The match's meaning is the list of the sub-matches' meanings. Parsing
    stops at the first failing sub-parser.
    """

    def parse_sequence(text: str, index: int) -> Optional[Match]:
        meanings = []
        for parser in parsers:
            match = parser(text, index)
            if match is None:
                return None
            meanings.append(match.meaning)
            index = match.index
        return Match(meanings, index)

    return parse_sequence
