"""Lexer exception hierarchy with structured diagnostics.

Every exception stores the Diagnostic it was built from, so callers can
read the error kind and location without parsing the message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation

__all__ = [
    "EndOfStreamError",
    "InvalidTokenError",
    "LexerError",
    "UnknownDirectiveError",
    "UnmatchedBlockCommentError",
    "UnterminatedStringError",
]


class LexerError(Exception):
    """Base exception for all tokenization failures.

    The engine performs no recovery: the error propagates out of the
    peek()/pop() call that triggered it. Resynchronization belongs to
    the embedding parser.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize LexerError.

        Args:
            diagnostic: Diagnostic built by ErrorTemplate
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.format_error())

    @property
    def kind(self) -> DiagnosticCode:
        """Error kind tag."""
        return self.diagnostic.code

    @property
    def message(self) -> str | None:
        """Human-readable description."""
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        """Position at which the error was detected."""
        return self.diagnostic.location

    def format_with_context(self, source: str | bytes, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            source: The buffer the lexer was scanning
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> lexer = Lexer('x = "abc')
            >>> try:
            ...     list(lexer)
            ... except LexerError as error:
            ...     print(error.format_with_context('x = "abc'))
            1:5: Unterminated string literal
            <BLANKLINE>
               1 | x = "abc
                       ^
        """
        from lexengine.syntax.position import get_error_context  # noqa: PLC0415 - circular

        header = f"{self.location}: {self.message}"
        context = get_error_context(source, self.location, context_lines=context_lines)
        return f"{header}\n\n{context}"


class UnterminatedStringError(LexerError):
    """Opening quote never closed before end of input."""


class UnknownDirectiveError(LexerError):
    """Directive symbol not present in the caller-supplied directive table.

    Attributes:
        directive: The unmatched symbol (without the marker)
    """

    @property
    def directive(self) -> str:
        """The unmatched directive symbol."""
        return self.diagnostic.text or ""


class InvalidTokenError(LexerError):
    """Input matches none of the recognized token shapes.

    Attributes:
        text: The unrecognized run of elements
    """

    @property
    def text(self) -> str:
        """The offending run."""
        return self.diagnostic.text or ""


class UnmatchedBlockCommentError(LexerError):
    """Block comment opened but never closed before end of input."""


class EndOfStreamError(LexerError):
    """Checked pop requested with no further input."""
