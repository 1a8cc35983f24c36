"""Tests for PositionTracker and position helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexengine.diagnostics import EndOfStreamError, SourceLocation
from lexengine.syntax.elements import ElementClasses
from lexengine.syntax.position import (
    PositionTracker,
    format_position,
    get_error_context,
    get_line_content,
)


class TestPositionTracking:
    """Line/column accounting on pop."""

    def test_initial_position(self) -> None:
        assert PositionTracker("abc").position == SourceLocation(1, 1)

    def test_column_increments(self) -> None:
        tracker = PositionTracker("abc")

        tracker.pop()
        tracker.pop()

        assert tracker.position == SourceLocation(1, 3)

    def test_newline_resets_column(self) -> None:
        tracker = PositionTracker("a\nb")

        tracker.advance(2)

        assert tracker.position == SourceLocation(2, 1)

    def test_advance_counts_every_newline(self) -> None:
        """advance(n) never skips newline accounting."""
        tracker = PositionTracker("\n\n\nx")

        tracker.advance(3)

        assert tracker.position == SourceLocation(4, 1)

    def test_bytes_newline(self) -> None:
        tracker = PositionTracker(b"ab\ncd")

        tracker.advance(4)

        assert tracker.position == SourceLocation(2, 2)

    def test_peek_does_not_move(self) -> None:
        tracker = PositionTracker("a\nb")

        tracker.peek(1)
        tracker.peek(5)

        assert tracker.position == SourceLocation(1, 1)

    def test_offset_tracks_index(self) -> None:
        tracker = PositionTracker("ab\ncd")

        tracker.advance(4)

        assert tracker.offset == 4
        assert tracker.position.offset == 4

    def test_pop_checked_at_eof(self) -> None:
        tracker = PositionTracker("a\n")
        tracker.advance(2)

        with pytest.raises(EndOfStreamError) as exc_info:
            tracker.pop_checked()

        assert exc_info.value.location == SourceLocation(2, 1)

    def test_advance_past_end_leaves_position(self) -> None:
        tracker = PositionTracker("ab")

        with pytest.raises(IndexError):
            tracker.advance(3)
        assert tracker.position == SourceLocation(1, 1)

    def test_mismatched_classes_rejected(self) -> None:
        with pytest.raises(ValueError, match="built for bytes"):
            PositionTracker("text", ElementClasses.for_bytes())

    @given(st.text(alphabet="ab \n", max_size=40))
    def test_location_is_monotonic(self, source: str) -> None:
        """PROPERTY: locations never decrease as elements are popped."""
        tracker = PositionTracker(source)
        previous = tracker.position

        while not tracker.is_eof:
            element = tracker.pop()
            current = tracker.position
            assert current > previous
            if element == "\n":
                assert current == SourceLocation(previous.line + 1, 1)
            else:
                assert current == SourceLocation(previous.line, previous.column + 1)
            previous = current


class TestConsumption:
    """Run-consuming helpers used by strategies."""

    def test_consume(self) -> None:
        tracker = PositionTracker("hello")

        assert tracker.consume(3) == "hel"
        assert tracker.position == SourceLocation(1, 4)

    def test_consume_run(self) -> None:
        tracker = PositionTracker("123abc")

        assert tracker.consume_run(frozenset("0123456789")) == "123"
        assert tracker.peek() == "a"

    def test_consume_while(self) -> None:
        tracker = PositionTracker("abc def")

        assert tracker.consume_while(str.isalpha) == "abc"

    def test_consume_until_stops_before_target(self) -> None:
        tracker = PositionTracker('abc"rest')

        assert tracker.consume_until('"') == "abc"
        assert tracker.peek() == '"'

    def test_consume_until_end_of_input(self) -> None:
        tracker = PositionTracker("abc")

        assert tracker.consume_until('"') == "abc"
        assert tracker.is_eof

    def test_consume_bytes_decodes_utf8(self) -> None:
        """Byte runs come back as text."""
        tracker = PositionTracker("héllo".encode())

        assert tracker.consume(6) == "héllo"

    def test_prefix_does_not_consume(self) -> None:
        tracker = PositionTracker(b"abc")

        assert tracker.prefix(2) == "ab"
        assert tracker.offset == 0


class TestPositionHelpers:
    """Rendering locations against source text."""

    def test_format_position(self) -> None:
        assert format_position(SourceLocation(3, 7)) == "3:7"
        assert format_position(SourceLocation(3, 7), zero_based=True) == "2:6"

    def test_get_line_content(self) -> None:
        assert get_line_content("one\ntwo\nthree", 2) == "two"

    def test_get_line_content_bytes(self) -> None:
        assert get_line_content(b"one\ntwo", 1) == "one"

    def test_get_line_content_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            get_line_content("one", 2)

    def test_get_error_context(self) -> None:
        source = "a\nb = ?\nc"

        context = get_error_context(source, SourceLocation(2, 5), context_lines=1)

        assert context.splitlines() == [
            "   1 | a",
            "   2 | b = ?",
            "           ^",
            "   3 | c",
        ]

    def test_get_error_context_limits_lines(self) -> None:
        source = "\n".join(f"line{i}" for i in range(1, 10))

        context = get_error_context(source, SourceLocation(5, 1), context_lines=0)

        assert context.splitlines() == ["   5 | line5", "       ^"]
