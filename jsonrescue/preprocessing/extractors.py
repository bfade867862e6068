"""
Candidate block extraction.

This module finds substrings of mixed text that look like complete object
or array literals, so each can be repaired and decoded on its own.
"""

from collections.abc import Iterator, Sequence

from ..core.constants import ARRAY_BRACKETS, OBJECT_BRACKETS


def match_brackets(
    text: str, opener: str, closer: str, start: int = 0
) -> dict[int, int]:
    """
    Pair openers with their balancing closers in one left-to-right pass.

    Only the given bracket type is counted, so other bracket types may nest
    freely. Brackets inside double-quoted strings are ignored, and a closer
    with no open bracket is skipped.

    Returns:
        Mapping from each balanced opener index to its closer index
    """
    matches: dict[int, int] = {}
    stack: list[int] = []
    in_string = False
    escape_next = False

    for i in range(start, len(text)):
        char = text[i]

        if escape_next:
            escape_next = False
            continue

        if in_string:
            if char == "\\":
                escape_next = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == opener:
            stack.append(i)
        elif char == closer and stack:
            matches[stack.pop()] = i

    return matches



class BlockExtractor:
    """
    Yields balanced object and array spans from text.

    Object candidates come first, then array candidates, each group in
    source order. Spans of the same bracket type never overlap: an opener
    inside a span already yielded is skipped, and an opener that never
    balances yields nothing.
    """

    def __init__(
        self,
        bracket_pairs: Sequence[tuple[str, str]] = (OBJECT_BRACKETS, ARRAY_BRACKETS),
    ):
        self.bracket_pairs = tuple(bracket_pairs)

    def extract(self, text: str, max_blocks: int) -> list[str]:
        """Return up to ``max_blocks`` candidate blocks."""
        blocks: list[str] = []
        if max_blocks <= 0:
            return blocks

        for opener, closer in self.bracket_pairs:
            for block in self.iter_spans(text, opener, closer):
                if len(blocks) >= max_blocks:
                    return blocks
                blocks.append(block)
        return blocks

    @staticmethod
    def iter_spans(text: str, opener: str, closer: str) -> Iterator[str]:
        """Yield maximal balanced spans for one bracket type."""
        matches = match_brackets(text, opener, closer)
        span_end = -1
        for start in sorted(matches):
            if start > span_end:
                span_end = matches[start]
                yield text[start : span_end + 1]
