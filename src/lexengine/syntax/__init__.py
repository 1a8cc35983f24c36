"""Scanning and tokenization package.

Provides the cursor, position tracker, whitespace/comment skipper,
tokenization strategies, and the Lexer facade.

Python 3.13+.
"""

from .cursor import Buffer, Cursor, Element
from .elements import PUNCTUATION, CommentSyntax, ElementClasses
from .lexer import Lexer
from .position import PositionTracker, format_position, get_error_context, get_line_content
from .strategy import DispatchStrategy, FunctionStrategy, ProduceFunction, TokenizationStrategy
from .tokens import Output, Token, TokenKind
from .whitespace import skip_block_comment, skip_line_comment, skip_trivia

__all__ = [
    "PUNCTUATION",
    "Buffer",
    "CommentSyntax",
    "Cursor",
    "DispatchStrategy",
    "Element",
    "ElementClasses",
    "FunctionStrategy",
    "Lexer",
    "Output",
    "PositionTracker",
    "ProduceFunction",
    "Token",
    "TokenKind",
    "TokenizationStrategy",
    "format_position",
    "get_error_context",
    "get_line_content",
    "skip_block_comment",
    "skip_line_comment",
    "skip_trivia",
]
