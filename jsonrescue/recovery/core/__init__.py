"""
Recovery core module.

This module contains the internal components that observe the recovery
cascade. The stages and result types live in the parent recovery module.
"""

from .tracker import StageAttempt, StageTracker

__all__ = ["StageAttempt", "StageTracker"]
