"""Position tracking over a Cursor.

PositionTracker converts raw cursor advances into (line, column)
coordinates incrementally, and offers the run-consuming helpers that
tokenization strategies are written against. Also provides helpers for
rendering a SourceLocation with surrounding source lines.
"""

from collections.abc import Callable, Collection

from lexengine.diagnostics import EndOfStreamError, ErrorTemplate, SourceLocation
from lexengine.syntax.cursor import Buffer, Cursor, Element, as_buffer
from lexengine.syntax.elements import DEFAULT_COMMENTS, CommentSyntax, ElementClasses

__all__ = [
    "PositionTracker",
    "format_position",
    "get_error_context",
    "get_line_content",
]


class PositionTracker:
    """Cursor wrapper that keeps the current SourceLocation.

    Locations are 1-based. Consuming a newline element increments the line
    and resets the column to 1; any other element increments the column.
    peek() never changes the position.

    Example:
        >>> tracker = PositionTracker("ab\\ncd")
        >>> tracker.consume(3)
        'ab\\n'
        >>> tracker.position
        SourceLocation(line=2, column=1, offset=3)
    """

    __slots__ = ("_classes", "_column", "_comments", "_cursor", "_line")

    def __init__(
        self,
        source: str | bytes | bytearray | memoryview,
        classes: ElementClasses | None = None,
        comments: CommentSyntax | None = None,
    ) -> None:
        """Initialize tracker at line 1, column 1.

        Args:
            source: Text or bytes to scan (bytes-like input is copied)
            classes: Element classification (default: matches source type)
            comments: Comment delimiters (default: // and nested /* */)

        Raises:
            ValueError: If classes were built for the other buffer type,
                or a comment delimiter is non-ASCII for a bytes buffer
        """
        buffer = as_buffer(source)
        if classes is None:
            classes = ElementClasses.for_buffer(buffer)
        elif not classes.matches(buffer):
            kind = "bytes" if classes.is_bytes else "text"
            msg = f"ElementClasses built for {kind} cannot scan {type(buffer).__name__}"
            raise ValueError(msg)
        if comments is None:
            comments = DEFAULT_COMMENTS
        elif classes.is_bytes:
            comments.require_ascii()
        self._cursor = Cursor(buffer)
        self._classes = classes
        self._comments = comments
        self._line = 1
        self._column = 1

    @property
    def classes(self) -> ElementClasses:
        """Element classification in use."""
        return self._classes

    @property
    def comments(self) -> CommentSyntax:
        """Comment delimiters skipped between tokens."""
        return self._comments

    @property
    def buffer(self) -> Buffer:
        """The immutable buffer being scanned."""
        return self._cursor.buffer

    @property
    def position(self) -> SourceLocation:
        """Location of the next element to be popped."""
        return SourceLocation(self._line, self._column, self._cursor.index)

    @property
    def offset(self) -> int:
        """Element index of the next element to be popped."""
        return self._cursor.index

    @property
    def is_eof(self) -> bool:
        """True once every element has been popped."""
        return self._cursor.is_eof

    def peek(self, offset: int = 0) -> Element | None:
        """Element offset positions ahead, or None beyond the end."""
        return self._cursor.peek(offset)

    def has_prefix(self, prefix: str | bytes) -> bool:
        """Compare upcoming elements against a literal without consuming."""
        return self._cursor.has_prefix(prefix)

    def prefix(self, n: int) -> str:
        """Up to n upcoming elements as text, without consuming."""
        return self._classes.decode(self._cursor.prefix(n))

    def at_comment(self) -> bool:
        """True if a comment opener starts at the current position."""
        return any(self._cursor.has_prefix(opener) for opener in self._comments.openers)

    def pop(self) -> Element:
        """Pop one element and update line/column.

        Precondition:
            Not at end of input.

        Raises:
            IndexError: At end of input (position is left unchanged)
        """
        element = self._cursor.pop()
        if element == self._classes.newline:
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return element

    def pop_checked(self) -> Element:
        """Like pop(), but end of input raises EndOfStreamError."""
        if self._cursor.is_eof:
            raise EndOfStreamError(ErrorTemplate.end_of_stream(self.position))
        return self.pop()

    def advance(self, count: int = 1) -> None:
        """Pop count elements, accounting for every newline among them.

        Raises:
            IndexError: If fewer than count elements remain (position is
                left unchanged)
        """
        if count < 0 or count > self._cursor.remaining:
            msg = f"Cannot advance by {count}: {self._cursor.remaining} element(s) remain"
            raise IndexError(msg)
        for _ in range(count):
            self.pop()

    # ------------------------------------------------------------------
    # Run consumption
    # ------------------------------------------------------------------

    def consume(self, count: int) -> str:
        """Pop count elements and return them as text."""
        start = self._cursor.index
        self.advance(count)
        return self._classes.decode(self._cursor.slice_from(start))

    def consume_while(self, predicate: Callable[[Element], bool]) -> str:
        """Pop the maximal run of elements satisfying predicate."""
        start = self._cursor.index
        while (element := self._cursor.peek()) is not None and predicate(element):
            self.pop()
        return self._classes.decode(self._cursor.slice_from(start))

    def consume_run(self, elements: Collection[Element]) -> str:
        """Pop the maximal run of elements contained in elements."""
        return self.consume_while(elements.__contains__)

    def consume_until(self, target: Element) -> str:
        """Pop elements up to, but excluding, target or end of input."""
        return self.consume_while(lambda element: element != target)


def _lines(source: str | bytes) -> list[str]:
    """Split source into lines on \\n only, matching the tracker's rule."""
    if isinstance(source, bytes | bytearray):
        source = bytes(source).decode("utf-8", errors="replace")
    return source.split("\n")


def format_position(location: SourceLocation, zero_based: bool = False) -> str:
    """Format location as a line:column string.

    Example:
        >>> format_position(SourceLocation(2, 1))
        '2:1'
        >>> format_position(SourceLocation(2, 1), zero_based=True)
        '1:0'
    """
    if zero_based:
        return f"{location.line - 1}:{location.column - 1}"
    return f"{location.line}:{location.column}"


def get_line_content(source: str | bytes, line: int) -> str:
    """Extract the content of a 1-based line, without its newline.

    Raises:
        ValueError: If line is out of range
    """
    lines = _lines(source)
    if not 1 <= line <= len(lines):
        msg = f"Line {line} out of range (source has {len(lines)} lines)"
        raise ValueError(msg)
    return lines[line - 1]


def get_error_context(
    source: str | bytes,
    location: SourceLocation,
    context_lines: int = 2,
    marker: str = "^",
) -> str:
    """Render source lines around location with a marker under it.

    Args:
        source: The scanned buffer
        location: Error location
        context_lines: Number of lines to show before/after the error
        marker: Character placed under the error column

    Returns:
        Formatted context with line numbers

    Example:
        >>> print(get_error_context("a\\nb = ?\\nc", SourceLocation(2, 5), context_lines=1))
           1 | a
           2 | b = ?
                   ^
           3 | c
    """
    lines = _lines(source)
    start_line = max(1, location.line - context_lines)
    end_line = min(len(lines), location.line + context_lines)

    result_lines = []
    for i in range(start_line, end_line + 1):
        line_num_str = f"{i:4} | "
        result_lines.append(line_num_str + lines[i - 1])
        if i == location.line:
            result_lines.append(" " * (len(line_num_str) + location.column - 1) + marker)
    return "\n".join(result_lines)
