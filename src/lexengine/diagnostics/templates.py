"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unterminated_string(location: SourceLocation, quote: str = '"') -> Diagnostic:
        """String literal opened but never closed.

        Args:
            location: Position of the opening quote
            quote: The quote spelling

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated string literal",
            location=location,
            hint=f"Add a closing '{quote}' before the end of input",
        )

    @staticmethod
    def unknown_directive(directive: str, location: SourceLocation) -> Diagnostic:
        """Directive symbol missing from the directive table.

        Args:
            directive: The symbol following the directive marker
            location: Position of the directive marker

        Returns:
            Diagnostic for UNKNOWN_DIRECTIVE
        """
        msg = f"Unknown directive '{directive}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_DIRECTIVE,
            message=msg,
            location=location,
            hint="Check the spelling against the supported directives",
            text=directive,
        )

    @staticmethod
    def invalid_token(text: str, location: SourceLocation) -> Diagnostic:
        """Input matches none of the recognized token shapes.

        Args:
            text: The unrecognized run of elements
            location: Position of the run's first element

        Returns:
            Diagnostic for INVALID_TOKEN
        """
        msg = f"Invalid token '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TOKEN,
            message=msg,
            location=location,
            text=text,
        )

    @staticmethod
    def unmatched_block_comment(
        location: SourceLocation, close: str = "*/"
    ) -> Diagnostic:
        """Block comment opened but never closed.

        Args:
            location: Position of the outermost opening delimiter
            close: The closing delimiter spelling

        Returns:
            Diagnostic for UNMATCHED_BLOCK_COMMENT
        """
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_BLOCK_COMMENT,
            message="Unmatched block comment",
            location=location,
            hint=f"Every nested block comment needs its own '{close}'",
        )

    @staticmethod
    def end_of_stream(location: SourceLocation) -> Diagnostic:
        """Checked pop requested with no further input.

        Args:
            location: Position at which input ended

        Returns:
            Diagnostic for END_OF_STREAM
        """
        return Diagnostic(
            code=DiagnosticCode.END_OF_STREAM,
            message="Unexpected end of input",
            location=location,
            hint="Check for end of input with peek() before popping",
        )
