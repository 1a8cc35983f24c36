"""Shared constants for lexengine.

This module provides centralized configuration constants used across
the cursor, skipper, and lexer layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Element classes: Default classification of text elements
- Comment delimiters: Default line/block comment spelling

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Element classes
    "NEWLINE",
    "DEFAULT_WHITESPACE",
    "DEFAULT_IDENTIFIER_START",
    "DEFAULT_DIGITS",
    "DEFAULT_OPERATOR_CHARS",
    "DEFAULT_QUOTE",
    "DEFAULT_DIRECTIVE_MARKER",
    "DEFAULT_UNDERSCORE",
    "DEFAULT_EQUALS",
    # Comment delimiters
    "LINE_COMMENT",
    "BLOCK_COMMENT_OPEN",
    "BLOCK_COMMENT_CLOSE",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in elements (10 MB of text or bytes).
# Prevents unbounded memory allocation when the buffer is copied.
# Set max_source_size=0 on the Lexer to disable the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# ELEMENT CLASSES
# ============================================================================

# The single line delimiter. CRLF input works because \n is still present;
# the \r is skipped as whitespace.
NEWLINE: str = "\n"

# Whitespace elided before every token. \r is accepted for CRLF sources.
DEFAULT_WHITESPACE: str = " \t\n\r"

DEFAULT_IDENTIFIER_START: str = "_abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ASCII digits only. str.isdigit() also accepts superscripts like ² or ³.
DEFAULT_DIGITS: str = "0123456789"

DEFAULT_OPERATOR_CHARS: str = "+-*/%=<>!&|^~?@$"

DEFAULT_QUOTE: str = '"'

DEFAULT_DIRECTIVE_MARKER: str = "#"

# Symbols with their own token kinds: wildcard binding and assignment.
DEFAULT_UNDERSCORE: str = "_"
DEFAULT_EQUALS: str = "="

# ============================================================================
# COMMENT DELIMITERS
# ============================================================================

LINE_COMMENT: str = "//"
BLOCK_COMMENT_OPEN: str = "/*"
BLOCK_COMMENT_CLOSE: str = "*/"
