"""Tokenizer Tour - Driving lexengine from a hand-written parser.

Demonstrates:

1. Tokenizing with keyword and directive tables
2. Lookahead with peek(n) and pop()
3. Reporting errors against source context
4. Byte buffers
5. Injecting a custom tokenization function (LLVM type syntax)

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum


class Keyword(StrEnum):
    LET = "let"
    FN = "fn"
    ARROW = "->"


class Directive(StrEnum):
    INCLUDE = "include"


KEYWORDS = {kw.value: kw for kw in Keyword}
DIRECTIVES = {d.value: d for d in Directive}

SOURCE = """\
#include
/* comments /* nest */ freely */
fn add(a, b) -> a + b // trailing
let answer = add(40, 2)
"""


def example_1_tables() -> None:
    """Tokenize a small language with keyword and directive tables."""
    from lexengine import tokenize

    print("=" * 60)
    print("Example 1: Keyword and Directive Tables")
    print("=" * 60)

    for token, location in tokenize(SOURCE, keywords=KEYWORDS, directives=DIRECTIVES):
        print(f"  {location!s:>6}  {token}")

    print()


def example_2_lookahead() -> None:
    """Decide between two productions with peek(1)."""
    from lexengine import DispatchStrategy, Lexer, TokenKind

    print("=" * 60)
    print("Example 2: Lookahead")
    print("=" * 60)

    lexer = Lexer("f(x) y = 1", DispatchStrategy(KEYWORDS))
    while (head := lexer.peek()) is not None:
        following = lexer.peek(1)
        if following is not None and following.token.kind is TokenKind.LPAREN:
            print(f"  call of {head.token.value} at {head.location}")
        elif following is not None and following.token.kind is TokenKind.EQUALS:
            print(f"  binding of {head.token.value} at {head.location}")
        lexer.pop()

    print(f"  last token started at {lexer.last_location}")
    print()


def example_3_errors() -> None:
    """Render a tokenization error with source context."""
    from lexengine import LexerError, tokenize

    print("=" * 60)
    print("Example 3: Error Reporting")
    print("=" * 60)

    broken = 'let s = "never closed\nlet t = 1\n'
    try:
        tokenize(broken, keywords=KEYWORDS)
    except LexerError as error:
        print(f"  kind: {error.kind.name}")
        print(error.format_with_context(broken))

    print()


def example_4_bytes() -> None:
    """Tokenize raw bytes with the same vocabulary."""
    from lexengine import tokenize

    print("=" * 60)
    print("Example 4: Byte Buffers")
    print("=" * 60)

    data = SOURCE.encode()
    tables = {"keywords": KEYWORDS, "directives": DIRECTIVES}
    text_tokens = [token for token, _ in tokenize(SOURCE, **tables)]
    byte_tokens = [token for token, _ in tokenize(data, **tables)]
    print(f"  {len(byte_tokens)} tokens from {len(data)} bytes")
    print(f"  identical to text tokens: {byte_tokens == text_tokens}")
    print()


def example_5_custom_function() -> None:
    """Reuse the engine for LLVM type expressions."""
    from lexengine import Lexer, Output
    from lexengine.syntax import PositionTracker

    print("=" * 60)
    print("Example 5: Custom Tokenization Function")
    print("=" * 60)

    def llvm_type(tracker: PositionTracker) -> Output[str] | None:
        element = tracker.peek()
        if element is None:
            return None
        location = tracker.position
        classes = tracker.classes
        if element == "i" and tracker.peek(1) in classes.digits:
            tracker.pop()
            return Output(f"int{tracker.consume_run(classes.digits)}", location)
        if element in classes.identifier_start:
            return Output(tracker.consume_run(classes.identifier_chars), location)
        if element in classes.digits:
            return Output(f"count{tracker.consume_run(classes.digits)}", location)
        return Output(tracker.consume(1), location)

    for token, location in Lexer("{ i32, <4 x float>* } /* struct */", llvm_type):
        print(f"  {location!s:>6}  {token}")

    print()


def main() -> None:
    """Run all examples."""
    print()
    print("lexengine Tokenizer Tour")
    print()

    example_1_tables()
    example_2_lookahead()
    example_3_errors()
    example_4_bytes()
    example_5_custom_function()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
