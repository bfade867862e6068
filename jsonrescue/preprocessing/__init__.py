"""
Text repair module.

This module provides the repair steps used by the recovery cascade. Each
step is a focused, single-responsibility rewrite; the steps are composed
into the mistake fixer and the aggressive fixer pipelines.
"""

from .base import CodeRewriteStep, RepairStepBase
from .extractors import BlockExtractor
from .handlers import CommentHandler, LiteralHandler
from .normalizers import BomStripper, EscapeNormalizer, QuoteNormalizer, WhitespaceNormalizer
from .pipeline import RepairPipeline
from .repairers import EscapeRestorer, KeyQuoter, TrailingCommaRemover

__all__ = [
    "RepairPipeline",
    "RepairStepBase",
    "CodeRewriteStep",
    "BlockExtractor",
    "BomStripper",
    "EscapeNormalizer",
    "QuoteNormalizer",
    "WhitespaceNormalizer",
    "TrailingCommaRemover",
    "KeyQuoter",
    "EscapeRestorer",
    "CommentHandler",
    "LiteralHandler",
]
