"""
jsonrescue Security and Validation System.

This module provides input limits and exception types.
"""

from .exceptions import ParseError, RecoveryError, SecurityError
from .limits import LimitValidator

__all__ = ["ParseError", "RecoveryError", "SecurityError", "LimitValidator"]
