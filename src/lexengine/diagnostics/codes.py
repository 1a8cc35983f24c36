"""Diagnostic codes and data structures.

Defines error codes, source locations, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceLocation",
]


class DiagnosticCode(Enum):
    """Error kinds with unique identifiers.

    Organized by category:
        3000-3099: Tokenization errors (skipper and tokenization strategy)
    """

    UNTERMINATED_STRING = 3001
    UNKNOWN_DIRECTIVE = 3002
    INVALID_TOKEN = 3003
    UNMATCHED_BLOCK_COMMENT = 3004
    # Only raised by the checked pop variants
    END_OF_STREAM = 3005


@dataclass(frozen=True, slots=True, order=True)
class SourceLocation:
    """Position of an element in the source buffer.

    Locations are ordered by (line, column), which lets callers assert
    that positions never move backwards while scanning.

    Note:
        Columns count elements, not characters. For a bytes buffer a
        multi-byte UTF-8 sequence advances the column once per byte.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Element index into the buffer (0-indexed). Not part of
            equality or ordering; used to render source context.
    """

    line: int
    column: int
    offset: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are
                1-indexed), or offset is negative.
        """
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceLocation.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)
        if self.offset < 0:
            msg = f"SourceLocation.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return ``line:column``."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Error kind
        message: Human-readable error description
        location: Where the error was detected
        hint: Suggestion for fixing the error
        text: Offending source text, when the error carries one
    """

    code: DiagnosticCode
    message: str
    location: SourceLocation
    hint: str | None = None
    text: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[UNTERMINATED_STRING]: Unterminated string literal
              --> line 3, column 9
              = help: Add a closing '"' before the end of input

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
