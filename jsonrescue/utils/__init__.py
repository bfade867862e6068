"""
jsonrescue configuration utilities.
"""

from .config import RecoveryConfig, RecoveryLimits

__all__ = ["RecoveryConfig", "RecoveryLimits"]
