"""Tokenization strategies.

A strategy turns the tracker's current state into one Output, or None
at end of input. The lexer has already skipped whitespace and comments
when produce() is called.

Strategies:
    DispatchStrategy - fixed dispatch on the first element's class,
        parameterized by keyword and directive tables
    FunctionStrategy - adapts a plain function, so one lexer engine can
        serve any vocabulary without subclassing

Python 3.13+.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from lexengine.constants import DEFAULT_EQUALS, DEFAULT_UNDERSCORE
from lexengine.diagnostics import (
    ErrorTemplate,
    InvalidTokenError,
    SourceLocation,
    UnknownDirectiveError,
    UnterminatedStringError,
)
from lexengine.syntax.cursor import Element
from lexengine.syntax.position import PositionTracker
from lexengine.syntax.tokens import Output, Token, TokenKind

__all__ = [
    "DispatchStrategy",
    "FunctionStrategy",
    "ProduceFunction",
    "TokenizationStrategy",
]

type ProduceFunction[T] = Callable[[PositionTracker], Output[T] | tuple[T, SourceLocation] | None]


class TokenizationStrategy[T](Protocol):
    """Protocol for producing the next token from tracker state.

    Implementations must capture the location before consuming any
    element of the token, and must either consume at least one element
    or raise, so the lexer always makes progress.
    """

    def produce(self, tracker: PositionTracker) -> Output[T] | None:
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class FunctionStrategy[T]:
    """Strategy backed by a plain function.

    Example:
        >>> def digits_only(tracker):
        ...     if tracker.is_eof:
        ...         return None
        ...     location = tracker.position
        ...     return Output(int(tracker.consume_run(tracker.classes.digits)), location)
        >>> lexer = Lexer("12 34", FunctionStrategy(digits_only))
        >>> [token for token, _ in lexer]
        [12, 34]
    """

    function: ProduceFunction[T]

    def produce(self, tracker: PositionTracker) -> Output[T] | None:
        result = self.function(tracker)
        if result is None or isinstance(result, Output):
            return result
        token, location = result
        return Output(token, location)


_PUNCTUATION_KINDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "[": TokenKind.LBRACK,
        "]": TokenKind.RBRACK,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        ":": TokenKind.COLON,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
    }
)


class DispatchStrategy:
    """Fixed dispatch keyed on the class of the first unconsumed element.

    Branches, in order of precedence:
        identifier start -> KEYWORD, UNDERSCORE, or IDENTIFIER
        operator element -> KEYWORD, EQUALS, or OPERATOR
        digit -> INTEGER
        quote -> STRING
        punctuation -> one-element punctuation token
        directive marker -> DIRECTIVE
        anything else -> InvalidTokenError

    Symbols absent from the keyword tables are valid generic
    IDENTIFIER/OPERATOR tokens, never errors and never end of input.

    Every run stops before a comment opener, so ``=//`` is EQUALS
    followed by a line comment.

    Attributes:
        keywords: Identifier spelling -> keyword value
        operator_keywords: Operator spelling -> keyword value
        directives: Directive name (without the marker) -> directive value

    Example:
        >>> strategy = DispatchStrategy(keywords={"if": "IF"})
        >>> [str(token) for token, _ in Lexer("if x == 1", strategy)]
        ['keyword(IF)', 'identifier(x)', 'operator(==)', 'integer(1)']
    """

    __slots__ = ("_directives", "_keywords", "_operator_keywords")

    def __init__(
        self,
        keywords: Mapping[str, object] | None = None,
        directives: Mapping[str, object] | None = None,
        *,
        operator_keywords: Mapping[str, object] | None = None,
    ) -> None:
        """Initialize with caller-supplied tables.

        Args:
            keywords: Reserved identifier spellings (default: none)
            directives: Known directive names (default: none, so every
                directive is unknown)
            operator_keywords: Reserved operator spellings (default: the
                keywords table, which is shared by both branches)
        """
        self._keywords: Mapping[str, object] = MappingProxyType(dict(keywords or {}))
        self._directives: Mapping[str, object] = MappingProxyType(dict(directives or {}))
        self._operator_keywords: Mapping[str, object] = (
            MappingProxyType(dict(operator_keywords))
            if operator_keywords is not None
            else self._keywords
        )

    @property
    def keywords(self) -> Mapping[str, object]:
        """Read-only keyword table."""
        return self._keywords

    @property
    def operator_keywords(self) -> Mapping[str, object]:
        """Read-only operator keyword table."""
        return self._operator_keywords

    @property
    def directives(self) -> Mapping[str, object]:
        """Read-only directive table."""
        return self._directives

    def produce(self, tracker: PositionTracker) -> Output[Token] | None:
        """Produce the next dispatch token.

        Raises:
            UnterminatedStringError: Quote never closed
            UnknownDirectiveError: Directive missing from the table
            InvalidTokenError: No token shape matches
        """
        element = tracker.peek()
        if element is None:
            return None

        classes = tracker.classes
        location = tracker.position

        if element in classes.identifier_start:
            token = self._identifier(tracker)
        elif element in classes.operator_chars:
            token = self._operator(tracker)
        elif element in classes.digits:
            token = Token(TokenKind.INTEGER, _run(tracker, classes.digits.__contains__))
        elif element == classes.quote:
            token = self._string(tracker, location)
        elif element in classes.punctuation:
            token = Token(_PUNCTUATION_KINDS[tracker.consume(1)])
        elif element == classes.directive_marker:
            token = self._directive(tracker, location)
        else:
            suspect = _run(tracker, lambda el: el not in classes.whitespace)
            raise InvalidTokenError(ErrorTemplate.invalid_token(suspect, location))

        return Output(token, location)

    def _identifier(self, tracker: PositionTracker) -> Token:
        symbol = _run(tracker, tracker.classes.identifier_chars.__contains__)
        if symbol in self._keywords:
            return Token(TokenKind.KEYWORD, self._keywords[symbol])
        if symbol == DEFAULT_UNDERSCORE:
            return Token(TokenKind.UNDERSCORE)
        return Token(TokenKind.IDENTIFIER, symbol)

    def _operator(self, tracker: PositionTracker) -> Token:
        symbol = _run(tracker, tracker.classes.operator_chars.__contains__)
        if symbol in self._operator_keywords:
            return Token(TokenKind.KEYWORD, self._operator_keywords[symbol])
        if symbol == DEFAULT_EQUALS:
            return Token(TokenKind.EQUALS)
        return Token(TokenKind.OPERATOR, symbol)

    def _string(self, tracker: PositionTracker, location: SourceLocation) -> Token:
        quote = tracker.classes.quote
        tracker.pop()
        text = tracker.consume_until(quote)
        if tracker.is_eof:
            raise UnterminatedStringError(
                ErrorTemplate.unterminated_string(location, tracker.classes.decode([quote]))
            )
        tracker.pop()
        return Token(TokenKind.STRING, text)

    def _directive(self, tracker: PositionTracker, location: SourceLocation) -> Token:
        whitespace = tracker.classes.whitespace
        tracker.pop()
        name = _run(tracker, lambda el: el not in whitespace)
        if name not in self._directives:
            raise UnknownDirectiveError(ErrorTemplate.unknown_directive(name, location))
        return Token(TokenKind.DIRECTIVE, self._directives[name])


def _run(tracker: PositionTracker, predicate: Callable[[Element], bool]) -> str:
    """Consume a maximal run, stopping where a comment opens."""
    return tracker.consume_while(lambda el: predicate(el) and not tracker.at_comment())
