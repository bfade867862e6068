"""
Repair pipeline for composable text rewrites.

This module implements the pipeline pattern used by the recovery cascade.
The order of steps matters: later rewrites assume earlier ones already ran.
"""

from typing import Optional

from ..core.constants import AGGRESSIVE_LITERALS
from ..core.interfaces import RepairStep
from .handlers import CommentHandler, LiteralHandler
from .normalizers import QuoteNormalizer, WhitespaceNormalizer
from .repairers import EscapeRestorer, KeyQuoter, TrailingCommaRemover


class RepairPipeline:
    """Manages a sequence of repair steps applied to text."""

    def __init__(self, steps: Optional[list[RepairStep]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStep) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str) -> str:
        """Apply every step, in order, to the text."""
        result = text
        for step in self.steps:
            result = step.process(result)
        return result

    def __len__(self) -> int:
        return len(self.steps)

    @classmethod
    def create_mistake_fixer(cls) -> "RepairPipeline":
        """Create the pipeline that corrects common generator mistakes."""
        pipeline = cls()
        pipeline.add_step(TrailingCommaRemover())
        pipeline.add_step(KeyQuoter())
        pipeline.add_step(QuoteNormalizer())
        pipeline.add_step(LiteralHandler())
        pipeline.add_step(CommentHandler())

        # Must stay last, the quote rewrites rely on the sentinel
        pipeline.add_step(EscapeRestorer())
        return pipeline

    @classmethod
    def create_aggressive_fixer(cls) -> "RepairPipeline":
        """Create the lossy last-resort pipeline."""
        pipeline = cls()
        pipeline.add_step(CommentHandler(hash_comments=True))
        pipeline.add_step(TrailingCommaRemover())
        pipeline.add_step(KeyQuoter())
        pipeline.add_step(QuoteNormalizer())
        pipeline.add_step(LiteralHandler(AGGRESSIVE_LITERALS))
        pipeline.add_step(WhitespaceNormalizer())
        return pipeline
