"""
jsonrescue Core Recovery Engine.

This module provides the strict decoder and the cascade that drives it.
"""

from .decoder import decode_or_raise, strict_decode
from .engine import RecoveryEngine, loads, parse, recover

__all__ = [
    "recover", "loads", "parse", "RecoveryEngine",
    "decode_or_raise", "strict_decode",
]
