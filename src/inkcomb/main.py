"""
The implementations of the main classes.
"""

from __future__ import annotations
from typing import Any, Literal, TypeVar, Generic, SupportsIndex, Final, Callable
from abc import ABC, abstractmethod

from collections.abc import Iterator
import logging
import operator


logger = logging.getLogger(__name__)


_T = TypeVar("_T")
_InT = TypeVar("_InT")
_OutT = TypeVar("_OutT")
_OutCovT = TypeVar("_OutCovT", covariant=True)



class Input:
    """
    An immutable view over the unconsumed part of a string.

    Consuming never changes a view. `advance()` returns a new view that shares the same underlying string:
    ```
    src = Input("hello")
    rest = src.advance(1)
    str(src)    # "hello"
    str(rest)   # "ello"
    ```
    """
    __slots__ = ("src", "pos")

    def __init__(self, src: str, pos: int = 0) -> None:
        """
        `src`: The whole string.
        `pos`: Where the view starts within `src`.
        """
        if not 0 <= pos <= len(src):
            raise ValueError(f"Position {pos} is outside of the string.")
        self.src: Final[str] = src
        """The string that's being parsed. Shared between all views."""
        self.pos: Final[int] = pos
        """The position of the first unconsumed character."""

    def __len__(self) -> int:
        """The amount of characters left."""
        return len(self.src) - self.pos

    def __bool__(self) -> bool:
        """Whether there are any characters left."""
        return self.pos < len(self.src)

    def __getitem__(self, key: SupportsIndex | slice) -> str:
        """Indexes relative to the start of the view."""
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            stop += self.pos
            return self.src[self.pos + start : stop if stop >= 0 else None : step]
        index = operator.index(key)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("Input index out of range.")
        return self.src[self.pos + index]

    def advance(self, amount: int) -> Input:
        """
        Returns a new view with `amount` characters consumed from the front.

        The original view is left as-is.
        """
        if not 0 <= amount <= len(self):
            raise ValueError(f"Can't advance by {amount}, only {len(self)} characters left.")
        return Input(self.src, self.pos + amount)

    def __str__(self) -> str:
        return self.src[self.pos:]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Input):
            return str(self) == str(other)
        elif isinstance(other, str):
            return str(self) == other
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"<Input {self.pos}..{len(self.src)} {str(self)!r}>"

def as_input(value: Input | str) -> Input:
    """Creates the initial `Input` view for a string. Views are returned as-is."""
    if isinstance(value, Input):
        return value
    elif isinstance(value, str):
        return Input(value)
    else:
        raise TypeError(f"Expected a string or an Input, got {type(value).__name__}.")



class Success(Generic[_OutCovT]):
    """
    Returned from `Parser.call()` when the parser matched.

    ```
    r = parser.call("blablabla")
    if r:
        value, rest = r     # `r` is a `Success` object
    else:
        ...                 # `r` is a `Failure` object
    ```
    """
    __slots__ = ("value", "remaining")

    def __init__(self, value: _OutCovT, remaining: Input) -> None:
        self.value: Final[_OutCovT] = value
        """The produced value."""
        self.remaining: Final[Input] = remaining
        """The input left after the parser consumed what it matched."""

    def __bool__(self) -> Literal[True]:
        return True

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.remaining

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self.value == other.value and self.remaining == other.remaining
        return NotImplemented

    __hash__ = None # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Success {self.value!r} {str(self.remaining)!r}>"

class Failure:
    """
    Returned from `Parser.call()` when the parser didn't match.

    Carries nothing. There is no way to tell why a parser failed.
    """
    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Failure)

    def __repr__(self) -> str:
        return "<Failure>"

ParseOutcome = Success[_T] | Failure

class ParseError(Exception):
    """
    Raised by helpers like `inkcomb.general.parse_all()` that turn a `Failure` into an exception.

    Parsers themselves never raise this, they return `Failure`.
    """



class Parser(ABC, Generic[_OutCovT]):
    """
    The base of every parser.

    Parsers are values. Building one doesn't run anything, and calling one doesn't change it, so the same parser can be called any number of times:
    ```
    p = Item().map(str.upper)
    p.call("hello")     # <Success 'H' 'ello'>
    p.call("")          # <Failure>
    ```

    Subclasses implement `_call()`.
    """

    def call(self, input: Input | str) -> ParseOutcome[_OutCovT]:
        """
        Runs the parser.

        Strings are converted to an `Input` first.
        """
        return self._call(as_input(input))

    @abstractmethod
    def _call(self, input: Input) -> ParseOutcome[_OutCovT]: ...

    def map(self, func: Callable[[_OutCovT], _T]) -> Map[_OutCovT, _T]:
        """Same as `Map(self, func)`."""
        return Map(self, func)

    def bind(self, func: Callable[[_OutCovT], Parser[_T]]) -> Bind[_OutCovT, _T]:
        """Same as `Bind(self, func)`."""
        return Bind(self, func)


class Zero(Parser[_T]):
    """Always fails."""

    def _call(self, input: Input) -> ParseOutcome[_T]:
        return Failure()

    def __repr__(self) -> str:
        return "Zero()"

class Return(Parser[_T]):
    """Always succeeds with `value`, without consuming anything."""

    def __init__(self, value: _T) -> None:
        self.value: Final[_T] = value

    def _call(self, input: Input) -> ParseOutcome[_T]:
        return Success(self.value, input)

    def __repr__(self) -> str:
        return f"Return({self.value!r})"

class Item(Parser[str]):
    """
    Consumes a single character and returns it.

    Fails if the input is empty.
    """

    def _call(self, input: Input) -> ParseOutcome[str]:
        if not input:
            return Failure()
        return Success(input[0], input.advance(1))

    def __repr__(self) -> str:
        return "Item()"


class Map(Parser[_OutT], Generic[_InT, _OutT]):
    """
    Transforms the value of a successful parser with `func`.

    `func` should never fail. The remaining input and failures are passed through untouched.
    """

    def __init__(self, parser: Parser[_InT], func: Callable[[_InT], _OutT]) -> None:
        self.parser: Final[Parser[_InT]] = parser
        self.func: Final[Callable[[_InT], _OutT]] = func

    def _call(self, input: Input) -> ParseOutcome[_OutT]:
        r = self.parser.call(input)
        if not r:
            return r
        return Success(self.func(r.value), r.remaining)

    def __repr__(self) -> str:
        return f"Map({self.parser!r}, {self.func!r})"

class Bind(Parser[_OutT], Generic[_InT, _OutT]):
    """
    Runs `parser`, then passes its value to `func` and runs the parser that `func` returns on the rest of the input.

    Lets the next step depend on what was already parsed:
    ```
    # a digit `n`, then `n` more characters
    Item().bind(lambda n: Take(int(n), Item()))
    ```

    If `parser` fails, `func` isn't called.
    """

    def __init__(self, parser: Parser[_InT], func: Callable[[_InT], Parser[_OutT]]) -> None:
        self.parser: Final[Parser[_InT]] = parser
        self.func: Final[Callable[[_InT], Parser[_OutT]]] = func

    def _call(self, input: Input) -> ParseOutcome[_OutT]:
        r = self.parser.call(input)
        if not r:
            return r
        return self.func(r.value).call(r.remaining)

    def __repr__(self) -> str:
        return f"Bind({self.parser!r}, {self.func!r})"


class Take(Parser[list[_T]]):
    """
    Runs `parser` exactly `count` times in a row and collects the values into a list.

    Either all `count` runs match, or the whole thing fails. A zero count always succeeds with an empty list without running `parser`.

    Raises `ValueError` if `count` is negative, `TypeError` if it isn't an integer.
    """

    def __init__(self, count: SupportsIndex, parser: Parser[_T]) -> None:
        count = operator.index(count)
        if count < 0:
            logger.debug("Rejected repetition count %d for %r", count, parser)
            raise ValueError(f"Repetition count can't be negative, got {count}.")
        self.count: Final[int] = count
        self.parser: Final[Parser[_T]] = parser

    def _call(self, input: Input) -> ParseOutcome[list[_T]]:
        # iterative form of `unfold()`, doesn't grow the stack with `count`
        values: list[_T] = []
        rest = input
        for _ in range(self.count):
            r = self.parser.call(rest)
            if not r:
                return Failure()
            values.append(r.value)
            rest = r.remaining
        return Success(values, rest)

    def unfold(self) -> Parser[list[_T]]:
        """
        Builds the same parser out of `Return` and `Bind` only.

        The result nests `count` binds, so calling it recurses `count` levels deep.
        """
        parser = self.parser

        def step(values: tuple[_T, ...]) -> Parser[tuple[_T, ...]]:
            return parser.bind(lambda value: Return(values + (value,)))

        composed: Parser[tuple[_T, ...]] = Return(())
        for _ in range(self.count):
            composed = composed.bind(step)
        # a new list per call
        return composed.bind(lambda values: Return(list(values)))

    def __repr__(self) -> str:
        return f"Take({self.count}, {self.parser!r})"
