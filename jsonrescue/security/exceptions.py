"""
Exception types raised by jsonrescue.

Malformed input never raises from ``recover()`` or ``parse()``; these
exceptions surface only from ``loads()`` and from violated limits.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for parse failures."""


class RecoveryError(ParseError):
    """Raised when no recovery strategy produced a valid decode."""

    def __init__(self, message: Optional[str] = None, input_length: int = 0):
        self.input_length = input_length
        super().__init__(message or "No recovery strategy produced a valid decode")


class SecurityError(Exception):
    """Raised when input exceeds a configured limit."""
