"""lexengine - reusable tokenization engine.

Turns raw source text into a pull-based stream of (token, location)
pairs. The embedding parser supplies the vocabulary (keyword and
directive tables, or a whole tokenization strategy); the engine supplies
cursoring, lookahead buffering, whitespace and nested comment skipping,
and error reporting.

Public API:
    Lexer - Token stream with peek(n)/pop() and last_location
    tokenize - Tokenize a whole source with the dispatch vocabulary
    DispatchStrategy - Built-in vocabulary parameterized by tables
    FunctionStrategy - Adapt a plain function as a strategy
    Token, TokenKind, Output - Dispatch token types and output pairs
    SourceLocation - 1-based line/column

Exceptions:
    LexerError - Base exception class
    UnterminatedStringError, UnknownDirectiveError, InvalidTokenError,
    UnmatchedBlockCommentError, EndOfStreamError - Error kinds

Submodules:
    lexengine.syntax - Cursor, PositionTracker, skipper, strategies
    lexengine.diagnostics - Error codes, templates, and formatting
"""

from collections.abc import Mapping

from .diagnostics import (
    EndOfStreamError,
    InvalidTokenError,
    LexerError,
    SourceLocation,
    UnknownDirectiveError,
    UnmatchedBlockCommentError,
    UnterminatedStringError,
)
from .syntax import (
    CommentSyntax,
    DispatchStrategy,
    ElementClasses,
    FunctionStrategy,
    Lexer,
    Output,
    Token,
    TokenizationStrategy,
    TokenKind,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def tokenize(
    source: str | bytes,
    *,
    keywords: Mapping[str, object] | None = None,
    directives: Mapping[str, object] | None = None,
    operator_keywords: Mapping[str, object] | None = None,
    comments: CommentSyntax | None = None,
) -> list[Output[Token]]:
    """Tokenize a whole source with the dispatch vocabulary.

    Args:
        source: Text or bytes to tokenize
        keywords: Reserved identifier spellings -> keyword values
        directives: Known directive names -> directive values
        operator_keywords: Reserved operator spellings (default: keywords)
        comments: Comment delimiters (default: // and nested /* */)

    Returns:
        Every output in source order

    Raises:
        LexerError: On the first malformed token

    Example:
        >>> [str(token) for token, _ in tokenize("f(x, 2)")]
        ['identifier(f)', 'lparen', 'identifier(x)', 'comma', 'integer(2)', 'rparen']
    """
    strategy = DispatchStrategy(keywords, directives, operator_keywords=operator_keywords)
    return list(Lexer(source, strategy, comments=comments))


__all__ = [
    "CommentSyntax",
    "DispatchStrategy",
    "ElementClasses",
    "EndOfStreamError",
    "FunctionStrategy",
    "InvalidTokenError",
    "Lexer",
    "LexerError",
    "Output",
    "SourceLocation",
    "Token",
    "TokenKind",
    "TokenizationStrategy",
    "UnknownDirectiveError",
    "UnmatchedBlockCommentError",
    "UnterminatedStringError",
    "__version__",
    "tokenize",
]
