"""Element classification for text and byte buffers.

One lexer engine serves both buffer types. Everything that depends on
the element type (membership tests, decoding a run back to text) goes
through an ElementClasses instance, built from plain strings by
for_text() or for_bytes().

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from lexengine.constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    DEFAULT_DIGITS,
    DEFAULT_DIRECTIVE_MARKER,
    DEFAULT_IDENTIFIER_START,
    DEFAULT_OPERATOR_CHARS,
    DEFAULT_QUOTE,
    DEFAULT_WHITESPACE,
    LINE_COMMENT,
    NEWLINE,
)
from lexengine.syntax.cursor import Buffer, Element

__all__ = ["DEFAULT_COMMENTS", "PUNCTUATION", "CommentSyntax", "ElementClasses"]

# Single-element punctuation recognized by exact match.
PUNCTUATION: str = "()[]{}:,."


def _to_bytes(chars: str) -> frozenset[int]:
    """Encode an ASCII character set as byte values.

    Raises:
        ValueError: If a character does not fit in one byte of UTF-8
    """
    encoded = chars.encode("utf-8")
    if len(encoded) != len(chars):
        msg = f"Byte element classes must be ASCII, got {chars!r}"
        raise ValueError(msg)
    return frozenset(encoded)


def _check_punctuation(punctuation: str) -> str:
    """Reject punctuation without a dispatch token kind.

    Raises:
        ValueError: If punctuation contains a character outside PUNCTUATION
    """
    unknown = sorted(set(punctuation) - set(PUNCTUATION))
    if unknown:
        msg = f"punctuation must be a subset of {PUNCTUATION!r}, got {''.join(unknown)!r}"
        raise ValueError(msg)
    return punctuation


@dataclass(frozen=True, slots=True)
class CommentSyntax:
    """Comment delimiters recognized by the skipper.

    Attributes:
        line: Line comment opener, terminated by newline or end of input.
            None disables line comments.
        block_open: Block comment opener. None disables block comments.
        block_close: Block comment closer.
    """

    line: str | None = LINE_COMMENT
    block_open: str | None = BLOCK_COMMENT_OPEN
    block_close: str = BLOCK_COMMENT_CLOSE

    def __post_init__(self) -> None:
        """Reject empty delimiters, which would match everywhere.

        Raises:
            ValueError: If a delimiter is the empty string
        """
        for name in ("line", "block_open", "block_close"):
            if getattr(self, name) == "":
                msg = f"CommentSyntax.{name} must not be empty"
                raise ValueError(msg)

    @property
    def openers(self) -> tuple[str, ...]:
        """Enabled delimiters that start a comment."""
        return tuple(d for d in (self.line, self.block_open) if d is not None)

    def require_ascii(self) -> None:
        """Check the delimiters can be matched element by element in bytes.

        Raises:
            ValueError: If an enabled delimiter contains a non-ASCII character
        """
        for name in ("line", "block_open", "block_close"):
            value = getattr(self, name)
            if value is not None and not value.isascii():
                msg = f"CommentSyntax.{name} must be ASCII to scan bytes, got {value!r}"
                raise ValueError(msg)


DEFAULT_COMMENTS = CommentSyntax()


@dataclass(frozen=True, slots=True)
class ElementClasses:
    """Classification of buffer elements.

    Elements are 1-character strings for text buffers and ints for byte
    buffers; all sets hold elements of the matching type.

    Attributes:
        is_bytes: True when classifying bytes buffers
        whitespace: Elements skipped before every token
        identifier_start: Elements that may begin an identifier
        identifier_chars: Elements that may continue an identifier
        digits: Elements of an integer literal
        operator_chars: Elements of an operator run
        punctuation: Single-element punctuation
        newline: The line delimiter
        quote: String literal delimiter
        directive_marker: Element introducing a directive
    """

    is_bytes: bool
    whitespace: frozenset[Element]
    identifier_start: frozenset[Element]
    identifier_chars: frozenset[Element]
    digits: frozenset[Element]
    operator_chars: frozenset[Element]
    punctuation: frozenset[Element]
    newline: Element
    quote: Element
    directive_marker: Element

    @classmethod
    def for_text(
        cls,
        *,
        whitespace: str = DEFAULT_WHITESPACE,
        identifier_start: str = DEFAULT_IDENTIFIER_START,
        digits: str = DEFAULT_DIGITS,
        operator_chars: str = DEFAULT_OPERATOR_CHARS,
        punctuation: str = PUNCTUATION,
        quote: str = DEFAULT_QUOTE,
        directive_marker: str = DEFAULT_DIRECTIVE_MARKER,
    ) -> "ElementClasses":
        """Build classes for str buffers (unicode scalar elements).

        Non-ASCII characters are allowed, e.g. identifier_start may
        include Greek letters.

        Raises:
            ValueError: If punctuation is not a subset of PUNCTUATION
        """
        return cls(
            is_bytes=False,
            whitespace=frozenset(whitespace),
            identifier_start=frozenset(identifier_start),
            identifier_chars=frozenset(identifier_start + digits),
            digits=frozenset(digits),
            operator_chars=frozenset(operator_chars),
            punctuation=frozenset(_check_punctuation(punctuation)),
            newline=NEWLINE,
            quote=quote,
            directive_marker=directive_marker,
        )

    @classmethod
    def for_bytes(
        cls,
        *,
        whitespace: str = DEFAULT_WHITESPACE,
        identifier_start: str = DEFAULT_IDENTIFIER_START,
        digits: str = DEFAULT_DIGITS,
        operator_chars: str = DEFAULT_OPERATOR_CHARS,
        punctuation: str = PUNCTUATION,
        quote: str = DEFAULT_QUOTE,
        directive_marker: str = DEFAULT_DIRECTIVE_MARKER,
    ) -> "ElementClasses":
        """Build classes for bytes buffers (raw byte elements).

        Every class must be ASCII: a multi-byte UTF-8 character is not a
        single element.

        Raises:
            ValueError: If any class contains a non-ASCII character, or
                punctuation is not a subset of PUNCTUATION
        """
        (newline,) = _to_bytes(NEWLINE)
        (quote_byte,) = _to_bytes(quote)
        (marker_byte,) = _to_bytes(directive_marker)
        return cls(
            is_bytes=True,
            whitespace=_to_bytes(whitespace),
            identifier_start=_to_bytes(identifier_start),
            identifier_chars=_to_bytes(identifier_start + digits),
            digits=_to_bytes(digits),
            operator_chars=_to_bytes(operator_chars),
            punctuation=_to_bytes(_check_punctuation(punctuation)),
            newline=newline,
            quote=quote_byte,
            directive_marker=marker_byte,
        )

    @classmethod
    def for_buffer(cls, buffer: Buffer) -> "ElementClasses":
        """Default classes matching the buffer's element type."""
        if isinstance(buffer, bytes):
            return _DEFAULT_BYTES
        return _DEFAULT_TEXT

    def matches(self, buffer: Buffer) -> bool:
        """True if these classes describe elements of buffer."""
        return self.is_bytes == isinstance(buffer, bytes)

    def element(self, char: str) -> Element:
        """Convert a single ASCII character to an element of this type."""
        if self.is_bytes:
            return ord(char)
        return char

    def decode(self, run: Buffer | Iterable[Element]) -> str:
        """Convert a run of elements back to text.

        Invalid UTF-8 in byte buffers is replaced with U+FFFD rather than
        raising, so error messages can always show the offending run.
        """
        if isinstance(run, str):
            return run
        if isinstance(run, bytes):
            return run.decode("utf-8", errors="replace")
        if self.is_bytes:
            return bytes(run).decode("utf-8", errors="replace")  # type: ignore[arg-type]
        return "".join(run)  # type: ignore[arg-type]


_DEFAULT_TEXT = ElementClasses.for_text()
_DEFAULT_BYTES = ElementClasses.for_bytes()
