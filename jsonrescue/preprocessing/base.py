"""
Base classes for repair steps.

This module contains the base class shared by the text rewrites so they can
be composed in a repair pipeline.
"""

from .string_utils import rewrite_code


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    def process(self, text: str) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CodeRewriteStep(RepairStepBase):
    """Repair step that rewrites code outside string literals and comments."""

    hash_comments = False

    def process(self, text: str) -> str:
        return rewrite_code(text, self.rewrite, self.hash_comments)

    def rewrite(self, code: str) -> str:
        """Rewrite a code segment. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement rewrite()")
