"""Hypothesis strategies for lexengine property-based testing.

Usage:
    from tests.strategies import token_sources, trivia
"""

from .source import (
    block_comments,
    identifiers,
    line_comments,
    simple_tokens,
    token_sources,
    trivia,
)

__all__ = [
    "block_comments",
    "identifiers",
    "line_comments",
    "simple_tokens",
    "token_sources",
    "trivia",
]
