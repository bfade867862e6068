"""
Text normalization repair steps.

This module contains the steps that normalize encoding artifacts, quote
styles and whitespace before or during repair.
"""

import re

from ..core.constants import BYTE_ORDER_MARK, ESCAPED_QUOTE_SENTINEL
from .base import RepairStepBase
from .string_utils import STRING, Segment, join_segments, split_segments

_ESCAPE_PAIR = re.compile(r"\\(.)", re.DOTALL)
_WHITESPACE_RUN = re.compile(r"\s+")


class BomStripper(RepairStepBase):
    """Removes leading byte-order marks."""

    def process(self, text: str) -> str:
        return text.lstrip(BYTE_ORDER_MARK)


class EscapeNormalizer(RepairStepBase):
    """
    Protects escaped double quotes from the quote rewrites.

    Every ``\\"`` escape is swapped for a sentinel token that the mistake
    fixer's last step turns back into ``\\"``. Escape pairs are matched left
    to right, so the closing quote in ``"C:\\\\"`` is not mistaken for an
    escape. Text that already contains the sentinel is left unprotected.
    """

    def process(self, text: str) -> str:
        if ESCAPED_QUOTE_SENTINEL in text:
            return text
        return _ESCAPE_PAIR.sub(self._protect, text)

    @staticmethod
    def _protect(match: "re.Match[str]") -> str:
        if match.group(1) == '"':
            return ESCAPED_QUOTE_SENTINEL
        return match.group(0)


class QuoteNormalizer(RepairStepBase):
    """
    Converts single-quoted literals to double-quoted ones.

    Only runs the scanner recognizes as single-quoted keys or values are
    converted. Apostrophes inside double-quoted strings and in surrounding
    prose are never touched.
    """

    def process(self, text: str) -> str:
        return join_segments(
            [self._convert(segment) for segment in split_segments(text)]
        )

    @classmethod
    def _convert(cls, segment: Segment) -> Segment:
        if segment.kind != STRING or segment.quote != "'":
            return segment
        # Single-quoted segments are always terminated
        body = segment.text[1:-1]
        return Segment(STRING, f'"{cls._requote_body(body)}"', quote='"')

    @staticmethod
    def _requote_body(body: str) -> str:
        """Escape bare double quotes and drop escapes JSON does not need."""
        result = []
        i = 0
        while i < len(body):
            char = body[i]
            if char == "\\" and i + 1 < len(body):
                escaped = body[i + 1]
                result.append("'" if escaped == "'" else char + escaped)
                i += 2
                continue
            result.append('\\"' if char == '"' else char)
            i += 1
        return "".join(result)


class WhitespaceNormalizer(RepairStepBase):
    """Collapses every whitespace run, string content included, to one space."""

    def process(self, text: str) -> str:
        return _WHITESPACE_RUN.sub(" ", text)
