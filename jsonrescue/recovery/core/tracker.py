"""
Stage tracking for recovery attempts.

The cascade itself keeps no diagnostics. A caller that wants to observe
which stages ran passes a tracker, which records attempts without changing
control flow.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..strategies import RecoveryStage


@dataclass(frozen=True)
class StageAttempt:
    """One strict decode attempt made by the cascade."""

    stage: RecoveryStage
    succeeded: bool
    candidate_index: Optional[int] = None


@dataclass
class StageTracker:
    """Records every decode attempt made during one or more recoveries."""

    attempts: list[StageAttempt] = field(default_factory=list)

    def record(
        self,
        stage: RecoveryStage,
        succeeded: bool,
        candidate_index: Optional[int] = None,
    ) -> None:
        """Record a decode attempt."""
        self.attempts.append(StageAttempt(stage, succeeded, candidate_index))

    @property
    def stages(self) -> list[RecoveryStage]:
        """Stages attempted, in order, without repeats."""
        seen: list[RecoveryStage] = []
        for attempt in self.attempts:
            if attempt.stage not in seen:
                seen.append(attempt.stage)
        return seen

    @property
    def candidates_tried(self) -> int:
        """Number of block candidates that were decoded."""
        return sum(
            1 for attempt in self.attempts
            if attempt.stage is RecoveryStage.BLOCK_CANDIDATES
        )

    @property
    def repaired(self) -> bool:
        """Whether any repair stage was attempted."""
        return any(attempt.stage.is_repair for attempt in self.attempts)

    def reset(self) -> None:
        """Clear recorded attempts for reuse."""
        self.attempts.clear()
