"""
Recovery stages and results.

The cascade moves through the stages below in a fixed order and stops at the
first one that yields a strict decode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RecoveryStage(Enum):
    """States of the recovery cascade, in transition order."""

    RAW_STRICT = "raw_strict"
    NORMALIZED_STRICT = "normalized_strict"
    MISTAKE_FIXED_STRICT = "mistake_fixed_strict"
    BLOCK_CANDIDATES = "block_candidates"
    AGGRESSIVE_STRICT = "aggressive_strict"
    FAILURE = "failure"

    @property
    def is_repair(self) -> bool:
        """Whether this stage rewrites the input before decoding."""
        return self not in (RecoveryStage.RAW_STRICT, RecoveryStage.FAILURE)


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of a recovery attempt.

    A successful decode of JSON ``null`` has ``ok`` set and ``value`` of
    ``None``; use ``ok`` rather than ``value`` to tell success from failure.
    """

    ok: bool
    value: Any = None
    stage: RecoveryStage = RecoveryStage.FAILURE

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any, stage: RecoveryStage) -> "DecodeResult":
        """Create a successful result produced by ``stage``."""
        return cls(ok=True, value=value, stage=stage)


# Failure carries no detail beyond "no strategy succeeded"
FAILURE = DecodeResult(ok=False)
