"""Diagnostic system for tokenization errors.

Provides structured error diagnostics with codes, locations, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation
from .errors import (
    EndOfStreamError,
    InvalidTokenError,
    LexerError,
    UnknownDirectiveError,
    UnmatchedBlockCommentError,
    UnterminatedStringError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EndOfStreamError",
    "ErrorTemplate",
    "InvalidTokenError",
    "LexerError",
    "OutputFormat",
    "SourceLocation",
    "UnknownDirectiveError",
    "UnmatchedBlockCommentError",
    "UnterminatedStringError",
]
