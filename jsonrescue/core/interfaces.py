"""
Core interfaces and protocols for the recovery system.

This module defines the contracts that repair components must implement,
enabling flexible composition of the repair pipelines.
"""

from typing import Protocol


class RepairStep(Protocol):
    """Protocol for text rewrites composed into a repair pipeline."""

    def process(self, text: str) -> str:
        """Rewrite the input text and return the result."""
        ...


class BlockSource(Protocol):
    """Protocol for components that yield candidate blocks from text."""

    def extract(self, text: str, max_blocks: int) -> list[str]:
        """Return up to ``max_blocks`` candidate substrings of ``text``."""
        ...
