"""
Special content handlers for repair.

This module contains repair steps that remove comments and translate
non-JSON literals into their JSON equivalents.
"""

import re
from typing import Optional

from ..core.constants import FOREIGN_LITERALS
from .base import CodeRewriteStep, RepairStepBase
from .string_utils import COMMENT, split_segments


class CommentHandler(RepairStepBase):
    """Removes comments that sit outside string literals."""

    def __init__(self, hash_comments: bool = False):
        self.hash_comments = hash_comments

    def process(self, text: str) -> str:
        result: list[str] = []
        for segment in split_segments(text, self.hash_comments):
            if segment.kind != COMMENT:
                result.append(segment.text)
            elif segment.text.startswith("/*"):
                # Keep neighbouring tokens apart
                result.append(" ")
        return "".join(result)

    def __repr__(self) -> str:
        return f"CommentHandler(hash_comments={self.hash_comments})"


class LiteralHandler(CodeRewriteStep):
    """Replaces whole-word foreign literals such as ``True`` or ``None``."""

    def __init__(self, literals: Optional[dict[str, str]] = None):
        self.literals = dict(literals or FOREIGN_LITERALS)
        alternatives = "|".join(re.escape(word) for word in self.literals)
        self._pattern = re.compile(rf"\b(?:{alternatives})\b")

    def rewrite(self, code: str) -> str:
        return self._pattern.sub(lambda match: self.literals[match.group(0)], code)

    def __repr__(self) -> str:
        return f"LiteralHandler({sorted(self.literals)})"
