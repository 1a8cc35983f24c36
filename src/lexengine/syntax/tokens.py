"""Token types for the built-in dispatch vocabulary.

Custom strategies may produce any token type; the lexer is generic over
it. Token and TokenKind describe what DispatchStrategy produces.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from lexengine.diagnostics import SourceLocation

__all__ = ["Output", "Token", "TokenKind"]


class TokenKind(StrEnum):
    """Kind of a dispatch token.

    StrEnum provides automatic string conversion: str(TokenKind.COMMA) == "comma"
    """

    KEYWORD = "keyword"
    """Identifier or operator spelling found in the keyword table"""

    IDENTIFIER = "identifier"
    UNDERSCORE = "underscore"
    """Lone ``_``, distinct from identifiers for wildcard bindings"""

    OPERATOR = "operator"
    EQUALS = "equals"
    """Lone ``=``, distinct from other operators"""

    INTEGER = "integer"
    """Run of digits, unvalidated. No real, negative, or based literals."""

    STRING = "string"
    DIRECTIVE = "directive"

    LPAREN = "lparen"
    RPAREN = "rparen"
    LBRACK = "lbrack"
    RBRACK = "rbrack"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    COLON = "colon"
    COMMA = "comma"
    DOT = "dot"


@dataclass(frozen=True, slots=True)
class Token:
    """A dispatch token.

    Attributes:
        kind: Token kind
        value: Payload. The literal text for identifiers, operators,
            integers, and strings; the table value for keywords and
            directives; None for punctuation, underscore, and equals.
    """

    kind: TokenKind
    value: object = None

    def __str__(self) -> str:
        if self.value is None:
            return str(self.kind)
        return f"{self.kind}({self.value})"


class Output[T](NamedTuple):
    """A produced token and the location of its first element.

    Unpacks as a pair: ``token, location = lexer.pop()``.
    """

    token: T
    location: SourceLocation
