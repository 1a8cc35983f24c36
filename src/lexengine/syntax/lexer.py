"""Lexer facade: pull-based token stream with unbounded lookahead.

The lexer owns a PositionTracker, a FIFO lookahead buffer of already
produced outputs, and a tokenization strategy. Every production step is
"skip whitespace and comments, then ask the strategy for one output".

Lookahead States:
    The state is implicit in buffer occupancy: empty or buffered(k).
    peek(n) grows the buffer to n+1 entries; pop() shrinks it from the
    front. Entries are kept in source order, never reordered or
    duplicated.

Thread Safety:
    Not thread-safe. Use one Lexer per thread over its own source.

Python 3.13+.
"""

import logging
from collections import deque
from collections.abc import Iterator

from lexengine.constants import MAX_SOURCE_SIZE
from lexengine.diagnostics import (
    EndOfStreamError,
    ErrorTemplate,
    LexerError,
    SourceLocation,
)
from lexengine.syntax.cursor import Buffer, as_buffer
from lexengine.syntax.elements import ElementClasses
from lexengine.syntax.position import PositionTracker
from lexengine.syntax.strategy import (
    DispatchStrategy,
    FunctionStrategy,
    ProduceFunction,
    TokenizationStrategy,
)
from lexengine.syntax.tokens import Output
from lexengine.syntax.whitespace import CommentSyntax, skip_trivia

__all__ = ["Lexer"]

logger = logging.getLogger(__name__)


class Lexer[T]:
    """Token stream over a source buffer.

    Design:
    - Work is demand-driven: the lexer tokenizes only as far as the
      deepest lookahead requested so far
    - Errors propagate out of the peek()/pop() call that hit them; no
      recovery or resynchronization is attempted
    - last_location is the start of the most recently popped token, for
      reporting parser errors against "the last good token"

    Example:
        >>> lexer = Lexer("ab\\ncd")
        >>> lexer.peek(1).location
        SourceLocation(line=2, column=1, offset=3)
        >>> token, location = lexer.pop()
        >>> str(token), str(location)
        ('identifier(ab)', '1:1')
        >>> lexer.last_location
        SourceLocation(line=1, column=1, offset=0)
    """

    __slots__ = (
        "_last_location",
        "_lookahead",
        "_strategy",
        "_tracker",
    )

    def __init__(
        self,
        source: str | bytes | bytearray | memoryview,
        strategy: TokenizationStrategy[T] | ProduceFunction[T] | None = None,
        *,
        classes: ElementClasses | None = None,
        comments: CommentSyntax | None = None,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize lexer at the start of source.

        Args:
            source: Text (unicode scalar elements) or bytes (byte
                elements). Bytes-like input is copied.
            strategy: Tokenization strategy, or a plain function with
                the same signature as TokenizationStrategy.produce
                (default: DispatchStrategy with empty tables)
            classes: Element classification (default: matches source type)
            comments: Comment delimiters (default: // and nested /* */)
            max_source_size: Maximum source length in elements
                (default: 10 MB). Set to 0 to disable the limit.

        Raises:
            ValueError: If source exceeds max_source_size, classes were
                built for the other buffer type, or a comment delimiter
                is non-ASCII for a bytes buffer
            TypeError: If strategy is neither a strategy nor callable
        """
        buffer = as_buffer(source)
        limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        if limit > 0 and len(buffer) > limit:
            msg = (
                f"Source size ({len(buffer):,} elements) exceeds maximum "
                f"({limit:,} elements). "
                "Configure max_source_size in Lexer constructor to increase limit."
            )
            raise ValueError(msg)

        self._tracker = PositionTracker(buffer, classes, comments)
        self._strategy: TokenizationStrategy[T] = _as_strategy(strategy)
        self._lookahead: deque[Output[T]] = deque()
        self._last_location = self._tracker.position

        logger.debug(
            "Lexer initialized: %d %s element(s), strategy=%s",
            len(buffer),
            "byte" if self._tracker.classes.is_bytes else "text",
            type(self._strategy).__name__,
        )

    @property
    def source(self) -> Buffer:
        """The immutable buffer being tokenized."""
        return self._tracker.buffer

    @property
    def strategy(self) -> TokenizationStrategy[T]:
        """Tokenization strategy in use."""
        return self._strategy

    @property
    def last_location(self) -> SourceLocation:
        """Start of the most recently popped token.

        (1, 1) until the first pop.
        """
        return self._last_location

    @property
    def position(self) -> SourceLocation:
        """Scan position, past every buffered token."""
        return self._tracker.position

    @property
    def buffered(self) -> int:
        """Number of produced but not yet popped outputs."""
        return len(self._lookahead)

    def next_output(self) -> Output[T] | None:
        """Run one "skip, then tokenize" step, bypassing the lookahead buffer.

        Parsers should use peek()/pop(); calling this while outputs are
        buffered skips past them.

        Returns:
            The produced output, or None at end of input

        Raises:
            LexerError: From the skipper or the strategy
            RuntimeError: If the strategy returned a token without
                consuming any input
        """
        tracker = self._tracker
        try:
            skip_trivia(tracker)
            start = tracker.offset
            output = self._strategy.produce(tracker)
        except LexerError as e:
            logger.debug("Tokenization failed at %s: %s", e.location, e.kind.name)
            raise

        if output is None:
            logger.debug("End of input at %s", tracker.position)
            return None
        if tracker.offset == start:
            msg = (
                f"{type(self._strategy).__name__} produced {output.token!r} "
                f"at {output.location} without consuming input"
            )
            raise RuntimeError(msg)
        return output

    def peek(self, ahead_by: int = 0) -> Output[T] | None:
        """Return the output ahead_by positions ahead without consuming it.

        Args:
            ahead_by: Lookahead distance (0 = next output)

        Returns:
            The output, or None if input ends first

        Raises:
            ValueError: If ahead_by is negative
            LexerError: If tokenizing up to ahead_by fails. Outputs
                buffered before the failure are kept.
        """
        if ahead_by < 0:
            msg = f"ahead_by must be >= 0, got {ahead_by}"
            raise ValueError(msg)
        while len(self._lookahead) <= ahead_by:
            output = self.next_output()
            if output is None:
                return None
            self._lookahead.append(output)
        return self._lookahead[ahead_by]

    def pop(self) -> Output[T] | None:
        """Remove and return the next output.

        Returns:
            The next output, or None at end of input (last_location is
            then left unchanged)

        Raises:
            LexerError: If tokenizing the next output fails
        """
        if self._lookahead:
            output = self._lookahead.popleft()
        else:
            output = self.next_output()
            if output is None:
                return None
        self._last_location = output.location
        return output

    def pop_checked(self) -> Output[T]:
        """Like pop(), but end of input raises EndOfStreamError.

        Raises:
            EndOfStreamError: At end of input
            LexerError: If tokenizing the next output fails
        """
        output = self.pop()
        if output is None:
            raise EndOfStreamError(ErrorTemplate.end_of_stream(self._tracker.position))
        return output

    def __iter__(self) -> Iterator[Output[T]]:
        """Drain remaining outputs via pop()."""
        return self

    def __next__(self) -> Output[T]:
        output = self.pop()
        if output is None:
            raise StopIteration
        return output


def _as_strategy[T](
    strategy: TokenizationStrategy[T] | ProduceFunction[T] | None,
) -> TokenizationStrategy[T]:
    """Normalize the strategy argument accepted by Lexer."""
    if strategy is None:
        return DispatchStrategy()  # type: ignore[return-value]
    if hasattr(strategy, "produce"):
        return strategy  # type: ignore[return-value]
    if callable(strategy):
        return FunctionStrategy(strategy)
    msg = f"strategy must provide produce() or be callable, got {type(strategy).__name__}"
    raise TypeError(msg)
