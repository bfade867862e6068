"""
Structure repair steps.

This module contains repair steps that fix structural mistakes: trailing
commas, bare object keys, and the escaped-quote sentinel left by
normalization.
"""

import re

from ..core.constants import ESCAPED_QUOTE, ESCAPED_QUOTE_SENTINEL
from .base import CodeRewriteStep, RepairStepBase

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_$][A-Za-z0-9_$]*)\s*:")


class TrailingCommaRemover(CodeRewriteStep):
    """Removes a comma that directly precedes ``}`` or ``]``."""

    def rewrite(self, code: str) -> str:
        return _TRAILING_COMMA.sub(r"\1", code)


class KeyQuoter(CodeRewriteStep):
    """Wraps identifier-shaped object keys in double quotes."""

    def rewrite(self, code: str) -> str:
        return _BARE_KEY.sub(r'\1"\2":', code)


class EscapeRestorer(RepairStepBase):
    """Turns the escaped-quote sentinel back into ``\\"``."""

    def process(self, text: str) -> str:
        return text.replace(ESCAPED_QUOTE_SENTINEL, ESCAPED_QUOTE)
