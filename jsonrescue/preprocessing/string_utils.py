"""
Utility functions for string-aware text processing.

Repair steps rewrite structural text only. This module splits text into
string literals, comments and code so each step can leave literal content
alone while still working with plain regular expressions on the code.
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..core.constants import LITERAL_FOLLOW_CHARS

CODE = "code"
STRING = "string"
COMMENT = "comment"

CodeRewriter = Callable[[str], str]


@dataclass(frozen=True)
class Segment:
    """A run of text with a single lexical role."""

    kind: str
    text: str
    quote: str = ""

    @property
    def is_code(self) -> bool:
        return self.kind == CODE


def find_string_end(text: str, start: int) -> int:
    """
    Find the end of a quoted string starting at position start.

    Args:
        text: The text to search in
        start: Starting position (should point to opening quote)

    Returns:
        Index of closing quote, or -1 if not found
    """
    if start >= len(text) or text[start] not in ['"', "'"]:
        return -1

    quote_char = text[start]
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2  # Skip escaped character
            continue
        if char == quote_char:
            return i
        i += 1

    return -1


def _find_comment_end(text: str, start: int, hash_comments: bool) -> int:
    """Return the index just past a comment opening at start, or -1."""
    pair = text[start : start + 2]
    if pair == "/*":
        close = text.find("*/", start + 2)
        return -1 if close == -1 else close + 2
    if pair == "//" or (hash_comments and text[start] == "#"):
        newline = text.find("\n", start)
        return len(text) if newline == -1 else newline
    return -1


def _opens_single_quoted(text: str, pos: int, hash_comments: bool) -> bool:
    """
    Check if a single quote at pos opens a JSON key or value.

    The run must close, and what follows the closing quote must be
    structure, a comment or the end of the text. An apostrophe in prose
    fails this test and stays code, so it cannot swallow a later block.
    """
    end = find_string_end(text, pos)
    if end == -1:
        return False
    j = end + 1
    while j < len(text) and text[j].isspace():
        j += 1
    if j == len(text) or text[j] in LITERAL_FOLLOW_CHARS:
        return True
    return _find_comment_end(text, j, hash_comments) != -1


def split_segments(text: str, hash_comments: bool = False) -> list[Segment]:
    """
    Split text into code, string and comment segments.

    Double-quoted runs are always strings. Single-quoted runs are strings only
    when they close where a JSON key or value would end, so apostrophes in
    prose stay code. An unterminated double-quoted run extends to the end of
    the text.

    Args:
        text: Text to split
        hash_comments: Also treat ``#`` to end of line as a comment

    Returns:
        Segments whose texts concatenate back to ``text``
    """
    segments: list[Segment] = []
    code_start = 0
    i = 0

    def flush_code(end: int) -> None:
        if end > code_start:
            segments.append(Segment(CODE, text[code_start:end]))

    while i < len(text):
        char = text[i]

        if char == '"' or (
            char == "'" and _opens_single_quoted(text, i, hash_comments)
        ):
            end = find_string_end(text, i)
            stop = len(text) if end == -1 else end + 1
            flush_code(i)
            segments.append(Segment(STRING, text[i:stop], quote=char))
            i = code_start = stop
            continue

        if char in "/#":
            end = _find_comment_end(text, i, hash_comments)
            if end != -1:
                flush_code(i)
                segments.append(Segment(COMMENT, text[i:end]))
                i = code_start = end
                continue

        i += 1

    flush_code(len(text))
    return segments


def join_segments(segments: list[Segment]) -> str:
    """Concatenate segments back into text."""
    return "".join(segment.text for segment in segments)


def rewrite_code(text: str, rewriter: CodeRewriter, hash_comments: bool = False) -> str:
    """
    Apply a rewrite to code segments only.

    String literals and comments pass through unchanged.
    """
    return "".join(
        rewriter(segment.text) if segment.is_code else segment.text
        for segment in split_segments(text, hash_comments)
    )
