"""
jsonrescue Recovery System.

This module provides the cascade stages, decode results and stage tracking.
"""

from .core.tracker import StageAttempt, StageTracker
from .strategies import FAILURE, DecodeResult, RecoveryStage

__all__ = [
    "FAILURE",
    "DecodeResult",
    "RecoveryStage",
    "StageAttempt",
    "StageTracker",
]
