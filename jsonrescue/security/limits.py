"""
Input limits for jsonrescue.
This module guards the cascade against inputs larger than the caller allows.
"""

from ..utils.config import RecoveryLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates input against configured limits."""

    def __init__(self, limits: RecoveryLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        max_size = self.limits.max_input_size
        if max_size is not None and len(text) > max_size:
            raise SecurityError(f"Input size {len(text)} exceeds limit {max_size}")
