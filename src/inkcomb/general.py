"""
General purpose parsers, built only out of the main parsers and combinators.

Can be used as examples of writing grammars.
"""

from __future__ import annotations
from typing import Callable, TypeVar

from collections.abc import Iterable
import logging

import inkcomb.const as const
from inkcomb.main import (
    Input,
    Parser,
    ParseError,
    Zero,
    Return,
    Item,
    Take,
)


logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def sat(predicate: Callable[[str], bool]) -> Parser[str]:
    """Parser factory. Consumes one character if it satisfies `predicate`."""
    return Item().bind(lambda c: Return(c) if predicate(c) else Zero())

def char(value: str) -> Parser[str]:
    """Parser factory. Matches the given character. Case sensitive."""
    if len(value) != 1:
        raise ValueError(f"Expected a single character, got {value!r}.")
    return sat(lambda c: c == value)

def one_of(chars: Iterable[str]) -> Parser[str]:
    """Parser factory. Matches any one of the given characters."""
    options = frozenset(chars)
    if len(options) <= 0:
        raise ValueError("At least one character required.")
    return sat(lambda c: c in options)

digit: Parser[str] = one_of(const.DECIMAL)
"""A pre-defined parser (not a factory) for a single decimal digit."""
letter: Parser[str] = one_of(const.ALPHABETIC)
"""A pre-defined parser (not a factory) for a single ASCII letter."""
whitespace: Parser[str] = one_of(const.WHITESPACES)
"""A pre-defined parser (not a factory) for a single whitespace character."""


def seq(*parsers: Parser[_T]) -> Parser[list[_T]]:
    """
    Parser factory.

    All the given parsers must match in sequence for the parser to succeed. Returns the list of their values.
    """
    if len(parsers) <= 0:
        raise ValueError("At least one parser required.")
    if len(parsers) == 1:
        return parsers[0].map(lambda value: [value])
    # split in halves, so calling recurses log(n) levels deep instead of n
    middle = len(parsers) // 2
    right = seq(*parsers[middle:])
    return seq(*parsers[:middle]).bind(lambda values: right.map(lambda rest: values + rest))

def literal(text: str) -> Parser[str]:
    """Parser factory. Matches the given string. Case sensitive."""
    if len(text) <= 0:
        raise ValueError("At least one character required.")
    return Take(len(text), Item()).bind(lambda chars: Return(text) if "".join(chars) == text else Zero())

def integer(width: int) -> Parser[int]:
    """
    Parser factory. Matches exactly `width` decimal digits.

    No sign, no base prefixes.
    """
    if width <= 0:
        raise ValueError(f"Width must be positive, got {width}.")
    return Take(width, digit).map(lambda digits: int("".join(digits)))


def parse_all(parser: Parser[_T], text: Input | str) -> _T:
    """
    Runs the parser and requires it to consume the whole input.

    Returns the parsed value. Raises `ParseError` if the parser fails or leaves input behind.
    """
    r = parser.call(text)
    if not r:
        logger.debug("%r failed", parser)
        raise ParseError("The parser didn't match.")
    if r.remaining:
        logger.debug("%r left %d characters", parser, len(r.remaining))
        raise ParseError(f"Unexpected leftover input: {str(r.remaining)!r}")
    return r.value
