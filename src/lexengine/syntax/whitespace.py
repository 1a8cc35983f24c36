"""Whitespace and comment skipping.

skip_trivia() runs before every token production attempt. It elides
whitespace, line comments, and block comments, which nest to any depth.
"""

from lexengine.diagnostics import ErrorTemplate, UnmatchedBlockCommentError
from lexengine.syntax.elements import DEFAULT_COMMENTS, CommentSyntax
from lexengine.syntax.position import PositionTracker

__all__ = [
    "DEFAULT_COMMENTS",
    "CommentSyntax",
    "skip_block_comment",
    "skip_line_comment",
    "skip_trivia",
]


def skip_line_comment(tracker: PositionTracker) -> None:
    """Consume a line comment up to, but excluding, the next newline.

    The newline is left for the whitespace loop so line accounting
    stays in one place.
    """
    tracker.consume_until(tracker.classes.newline)


def skip_block_comment(tracker: PositionTracker, comments: CommentSyntax | None = None) -> None:
    """Consume a block comment, including every nested block comment.

    Precondition:
        The tracker is positioned at comments.block_open.

    Args:
        tracker: Scanning state
        comments: Delimiters (default: the tracker's own)

    Raises:
        UnmatchedBlockCommentError: If input ends before every opened
            comment is closed. Reported at the outermost opener.
        ValueError: If a delimiter is non-ASCII for a bytes buffer
    """
    comments = _resolve(tracker, comments)
    opener = comments.block_open
    closer = comments.block_close
    assert opener is not None and tracker.has_prefix(opener)

    start = tracker.position
    tracker.advance(len(opener))
    depth = 1
    while depth > 0:
        if tracker.is_eof:
            raise UnmatchedBlockCommentError(
                ErrorTemplate.unmatched_block_comment(start, closer)
            )
        if tracker.has_prefix(closer):
            depth -= 1
            tracker.advance(len(closer))
        elif tracker.has_prefix(opener):
            depth += 1
            tracker.advance(len(opener))
        else:
            tracker.pop()


def skip_trivia(tracker: PositionTracker, comments: CommentSyntax | None = None) -> None:
    """Skip whitespace and comments until a token can start.

    Returns with the tracker at end of input or at the first element
    that is neither whitespace nor the start of a comment.

    Raises:
        UnmatchedBlockCommentError: From an unterminated block comment
        ValueError: If a delimiter is non-ASCII for a bytes buffer
    """
    comments = _resolve(tracker, comments)
    whitespace = tracker.classes.whitespace
    while (element := tracker.peek()) is not None:
        if element in whitespace:
            tracker.pop()
        elif comments.line is not None and tracker.has_prefix(comments.line):
            skip_line_comment(tracker)
        elif comments.block_open is not None and tracker.has_prefix(comments.block_open):
            skip_block_comment(tracker, comments)
        else:
            return


def _resolve(tracker: PositionTracker, comments: CommentSyntax | None) -> CommentSyntax:
    """Default to the tracker's delimiters; byte buffers match ASCII only."""
    if comments is None:
        return tracker.comments
    if tracker.classes.is_bytes and comments is not DEFAULT_COMMENTS:
        comments.require_ascii()
    return comments
