"""Tests for whitespace and comment skipping."""

from __future__ import annotations

import pytest
from hypothesis import given

from lexengine.diagnostics import DiagnosticCode, SourceLocation, UnmatchedBlockCommentError
from lexengine.syntax.position import PositionTracker
from lexengine.syntax.whitespace import (
    CommentSyntax,
    skip_block_comment,
    skip_line_comment,
    skip_trivia,
)
from tests.strategies import block_comments, trivia

# ============================================================================
# WHITESPACE
# ============================================================================


class TestSkipWhitespace:
    """Plain whitespace runs."""

    def test_skips_spaces_tabs_newlines(self) -> None:
        tracker = PositionTracker(" \t\n  x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"
        assert tracker.position == SourceLocation(2, 3)

    def test_skips_carriage_return(self) -> None:
        tracker = PositionTracker("\r\nx")

        skip_trivia(tracker)

        assert tracker.position == SourceLocation(2, 1)

    def test_stops_at_token(self) -> None:
        tracker = PositionTracker("x ")

        skip_trivia(tracker)

        assert tracker.offset == 0

    def test_lone_slash_is_not_comment(self) -> None:
        """A single '/' is left for the tokenization strategy."""
        tracker = PositionTracker("  / 2")

        skip_trivia(tracker)

        assert tracker.peek() == "/"


# ============================================================================
# LINE COMMENTS
# ============================================================================


class TestLineComments:
    """// comments end at newline or end of input."""

    def test_line_comment_then_token(self) -> None:
        tracker = PositionTracker("// note\nx")

        skip_trivia(tracker)

        assert tracker.peek() == "x"
        assert tracker.position == SourceLocation(2, 1)

    def test_line_comment_at_end_of_input(self) -> None:
        tracker = PositionTracker("// trailing")

        skip_trivia(tracker)

        assert tracker.is_eof

    def test_skip_line_comment_leaves_newline(self) -> None:
        tracker = PositionTracker("// a\nb")

        skip_line_comment(tracker)

        assert tracker.peek() == "\n"

    def test_block_opener_inside_line_comment_ignored(self) -> None:
        tracker = PositionTracker("// /* not a block\nx")

        skip_trivia(tracker)

        assert tracker.peek() == "x"


# ============================================================================
# BLOCK COMMENTS
# ============================================================================


class TestBlockComments:
    """/* */ comments nest to any depth."""

    def test_simple_block(self) -> None:
        tracker = PositionTracker("/* a */x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"

    def test_nested_block(self) -> None:
        tracker = PositionTracker("/* a /* b */ c */ x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"
        assert tracker.position == SourceLocation(1, 19)

    def test_block_spans_lines(self) -> None:
        """Block comments are not terminated by line boundaries."""
        tracker = PositionTracker("/* a\n b\n */x")

        skip_trivia(tracker)

        assert tracker.position == SourceLocation(3, 4)

    def test_empty_block(self) -> None:
        tracker = PositionTracker("/**/x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"

    def test_deep_nesting(self) -> None:
        depth = 500
        tracker = PositionTracker("/*" * depth + "*/" * depth + "x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"

    def test_unterminated_block(self) -> None:
        tracker = PositionTracker("/* unterminated")

        with pytest.raises(UnmatchedBlockCommentError) as exc_info:
            skip_trivia(tracker)

        assert exc_info.value.kind is DiagnosticCode.UNMATCHED_BLOCK_COMMENT
        assert exc_info.value.location == SourceLocation(1, 1)

    def test_unclosed_nested_block_reports_outer_opener(self) -> None:
        tracker = PositionTracker("x\n  /* a /* b */ c")
        tracker.advance(1)

        with pytest.raises(UnmatchedBlockCommentError) as exc_info:
            skip_trivia(tracker)

        assert exc_info.value.location == SourceLocation(2, 3)

    def test_skip_block_comment_directly(self) -> None:
        tracker = PositionTracker("/* x */ y")

        skip_block_comment(tracker)

        assert tracker.peek() == " "

    def test_bytes_buffer(self) -> None:
        tracker = PositionTracker(b"/* a /* b */ */ // c\nx")

        skip_trivia(tracker)

        assert tracker.peek() == ord("x")

    @given(block_comments())
    def test_generated_blocks_fully_skipped(self, comment: str) -> None:
        """PROPERTY: any well-formed nested block is skipped entirely."""
        tracker = PositionTracker(comment + "x")

        skip_trivia(tracker)

        assert tracker.peek() == "x"


# ============================================================================
# COMMENT SYNTAX CONFIGURATION
# ============================================================================


class TestCommentSyntax:
    """Configurable and disabled comment forms."""

    def test_custom_delimiters(self) -> None:
        comments = CommentSyntax(line="--", block_open="{-", block_close="-}")
        tracker = PositionTracker("-- note\n{- a {- b -} -} x")

        skip_trivia(tracker, comments)

        assert tracker.peek() == "x"

    def test_line_comments_disabled(self) -> None:
        tracker = PositionTracker("// x")

        skip_trivia(tracker, CommentSyntax(line=None))

        assert tracker.peek() == "/"

    def test_block_comments_disabled(self) -> None:
        tracker = PositionTracker("/* x */")

        skip_trivia(tracker, CommentSyntax(block_open=None))

        assert tracker.peek() == "/"

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            CommentSyntax(line="")


class TestTriviaProperties:
    """Property tests over generated trivia."""

    @given(trivia())
    def test_trivia_only_reaches_end(self, source: str) -> None:
        """PROPERTY: whitespace and comments alone skip to end of input."""
        tracker = PositionTracker(source)

        skip_trivia(tracker)

        assert tracker.is_eof
        assert tracker.position.line == source.count("\n") + 1


class TestNonAsciiDelimiters:
    """Delimiters are matched element by element."""

    guillemets = CommentSyntax(block_open="«", block_close="»")

    def test_text_buffer_accepts_non_ascii(self) -> None:
        tracker = PositionTracker("«x» y", comments=self.guillemets)

        skip_trivia(tracker)

        assert tracker.peek() == "y"
        assert tracker.position == SourceLocation(1, 5)

    def test_bytes_tracker_rejects_non_ascii(self) -> None:
        with pytest.raises(ValueError, match="block_open must be ASCII"):
            PositionTracker("«x» y".encode(), comments=self.guillemets)

    def test_bytes_skip_rejects_non_ascii(self) -> None:
        tracker = PositionTracker("§ x\ny".encode())

        with pytest.raises(ValueError, match="line must be ASCII"):
            skip_trivia(tracker, CommentSyntax(line="§"))

    def test_tracker_comments_are_default(self) -> None:
        tracker = PositionTracker("; note\nx", comments=CommentSyntax(line=";"))

        skip_trivia(tracker)

        assert tracker.peek() == "x"
