"""Cursor infrastructure over an immutable element buffer.

A cursor is a plain integer index into a buffer owned for the whole
lexing session. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Buffer is immutable (str or bytes), copied once at construction
    - Index is the only mutable state; it only moves forward
    - peek() never mutates, pop() always does
    - All branching is resolved by peeking before committing to a pop,
      so no layer above needs backtracking

Element Types:
    - str buffer: elements are 1-character strings (unicode scalars)
    - bytes buffer: elements are ints (raw bytes). Callers classify
      UTF-8 continuation bytes themselves.

Line Ending Support:
    compute_line_col() uses \\n as the line delimiter, so LF and CRLF
    sources both report correct lines. CR-only sources do not.
"""

from dataclasses import dataclass

from lexengine.diagnostics import EndOfStreamError, ErrorTemplate, SourceLocation

__all__ = ["Buffer", "Cursor", "Element", "as_buffer"]

type Buffer = str | bytes
type Element = str | int


def as_buffer(source: str | bytes | bytearray | memoryview) -> Buffer:
    """Return an immutable buffer for source.

    Mutable byte sequences are copied so no caller keeps a writable view
    of the text being scanned.

    Raises:
        TypeError: If source is not text or bytes-like
    """
    if isinstance(source, str | bytes):
        return source
    if isinstance(source, bytearray | memoryview):
        return bytes(source)
    msg = f"Source must be str or bytes-like, got {type(source).__name__}"
    raise TypeError(msg)


@dataclass(slots=True)
class Cursor:
    """Forward-only index into an immutable buffer.

    Mutability Note:
        Intentionally mutable (not frozen=True): pop() advances the
        index in place so scanning allocates nothing per element.
        The buffer itself is never written.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.peek()
        'h'
        >>> cursor.peek(1)
        'e'
        >>> cursor.pop()
        'h'
        >>> cursor.index
        1
        >>> Cursor(b"hi").pop()
        104
    """

    buffer: Buffer
    index: int = 0

    def __post_init__(self) -> None:
        """Copy mutable byte input and validate the starting index.

        Raises:
            ValueError: If index is outside 0..len(buffer)
        """
        self.buffer = as_buffer(self.buffer)
        if not 0 <= self.index <= len(self.buffer):
            msg = f"Cursor index must be in 0..{len(self.buffer)}, got {self.index}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True once every element has been popped."""
        return self.index >= len(self.buffer)

    @property
    def remaining(self) -> int:
        """Number of elements not yet popped."""
        return len(self.buffer) - self.index

    def peek(self, offset: int = 0) -> Element | None:
        """Return the element offset positions ahead, or None beyond the end.

        Args:
            offset: Distance from the current element (0 = current)

        Example:
            >>> cursor = Cursor("ab")
            >>> cursor.peek(1)
            'b'
            >>> cursor.peek(2) is None
            True
        """
        target = self.index + offset
        if target >= len(self.buffer):
            return None
        return self.buffer[target]

    def pop(self) -> Element:
        """Return the current element and advance by one.

        Precondition:
            Not at end of input. Check with peek() or is_eof first;
            popping past the end is a programming error.

        Raises:
            IndexError: At end of input (index is left unchanged)
        """
        element = self.buffer[self.index]
        self.index += 1
        return element

    def pop_checked(self) -> Element:
        """Like pop(), but end of input is a recoverable LexerError.

        Raises:
            EndOfStreamError: At end of input
        """
        if self.is_eof:
            line, column = self.compute_line_col()
            location = SourceLocation(line, column, self.index)
            raise EndOfStreamError(ErrorTemplate.end_of_stream(location))
        return self.pop()

    def advance(self, count: int = 1) -> None:
        """Pop count elements without returning them.

        Raises:
            IndexError: If fewer than count elements remain (index is
                left unchanged)
        """
        if count < 0 or count > self.remaining:
            msg = f"Cannot advance by {count}: {self.remaining} element(s) remain"
            raise IndexError(msg)
        self.index += count

    def has_prefix(self, prefix: str | bytes) -> bool:
        """Compare upcoming elements against a literal without consuming.

        Text literals are UTF-8 encoded when the buffer holds bytes.

        Example:
            >>> Cursor("// note").has_prefix("//")
            True
            >>> Cursor(b"/* x */").has_prefix("/*")
            True
        """
        if isinstance(self.buffer, bytes):
            if isinstance(prefix, str):
                prefix = prefix.encode("utf-8")
            return self.buffer.startswith(prefix, self.index)
        if isinstance(prefix, bytes):
            prefix = prefix.decode("utf-8")
        return self.buffer.startswith(prefix, self.index)

    def prefix(self, n: int) -> Buffer:
        """Return up to n upcoming elements without consuming them.

        May return fewer elements near the end of input.

        Example:
            >>> Cursor("hello").prefix(3)
            'hel'
            >>> Cursor("hi").prefix(10)
            'hi'
        """
        return self.buffer[self.index : self.index + n]

    def slice_from(self, start: int) -> Buffer:
        """Return the elements between start and the current index.

        Useful for extracting matched text after popping a run.
        """
        return self.buffer[start : self.index]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for the current index.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current index. PositionTracker keeps these
            incrementally; use this only where no tracker exists.

        Example:
            >>> Cursor("ab\\ncd", 3).compute_line_col()
            (2, 1)
        """
        newline: str | bytes = b"\n" if isinstance(self.buffer, bytes) else "\n"
        line = self.buffer.count(newline, 0, self.index) + 1  # type: ignore[arg-type]
        last_newline = self.buffer.rfind(newline, 0, self.index)  # type: ignore[arg-type]
        col = self.index - last_newline if last_newline >= 0 else self.index + 1
        return (line, col)
