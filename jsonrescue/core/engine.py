"""
jsonrescue recovery engine.

This module drives the repair cascade. Each stage rewrites an owned copy of
the input and hands it to the strict decoder; the first successful decode
ends the cascade. Intermediate failures are expected and absorbed, only
exhaustion of every stage is reported.
"""

import logging
from typing import Any, Optional

from ..preprocessing.extractors import BlockExtractor
from ..preprocessing.normalizers import BomStripper, EscapeNormalizer
from ..preprocessing.pipeline import RepairPipeline
from ..recovery.core.tracker import StageTracker
from ..recovery.strategies import FAILURE, DecodeResult, RecoveryStage
from ..security.exceptions import RecoveryError
from ..security.limits import LimitValidator
from ..utils.config import RecoveryConfig
from .decoder import strict_decode
from .interfaces import BlockSource, RepairStep

logger = logging.getLogger(__name__)


class RecoveryEngine:
    """
    Runs the recovery cascade for one configuration.

    Stages, in fixed order::

        RAW_STRICT -> NORMALIZED_STRICT -> MISTAKE_FIXED_STRICT
            -> BLOCK_CANDIDATES -> AGGRESSIVE_STRICT -> FAILURE

    With ``attempt_fix`` disabled, a failed raw decode goes straight to
    FAILURE. Each stage runs at most once per call and the cascade never
    goes back to an earlier stage.

    The engine holds no per-call state and may be shared between threads as
    long as the optional tracker is not.
    """

    def __init__(
        self,
        config: Optional[RecoveryConfig] = None,
        tracker: Optional[StageTracker] = None,
        mistake_fixer: Optional[RepairStep] = None,
        aggressive_fixer: Optional[RepairStep] = None,
        extractor: Optional[BlockSource] = None,
    ):
        self.config = config or RecoveryConfig()
        self.tracker = tracker
        self.mistake_fixer = mistake_fixer or RepairPipeline.create_mistake_fixer()
        self.aggressive_fixer = (
            aggressive_fixer or RepairPipeline.create_aggressive_fixer()
        )
        self.extractor = extractor or BlockExtractor()
        self._bom_stripper = BomStripper()
        self._escape_normalizer = EscapeNormalizer()

    def recover(self, text: Any) -> DecodeResult:
        """
        Recover a value from text.

        Args:
            text: Raw payload; anything but a non-empty ``str`` fails at once

        Returns:
            The first successful DecodeResult, or the failure marker

        Raises:
            SecurityError: If the input exceeds the configured size limit
        """
        if not isinstance(text, str) or not text:
            logger.debug("Rejected %s input without decoding", type(text).__name__)
            return FAILURE

        LimitValidator(self.config.limits).validate_input_size(text)

        cleaned = text.strip()
        result = self._attempt(cleaned, RecoveryStage.RAW_STRICT)
        if result or not self.config.attempt_fix:
            return self._finish(result, text)

        normalized = self._bom_stripper.process(cleaned)
        result = self._attempt(normalized, RecoveryStage.NORMALIZED_STRICT)
        if result:
            return self._finish(result, text)

        fixed = self.mistake_fixer.process(self._escape_normalizer.process(normalized))
        result = self._attempt(fixed, RecoveryStage.MISTAKE_FIXED_STRICT)
        if result:
            return self._finish(result, text)

        result = self._attempt_blocks(fixed)
        if result:
            return self._finish(result, text)

        aggressive = self.aggressive_fixer.process(fixed)
        result = self._attempt(aggressive, RecoveryStage.AGGRESSIVE_STRICT)
        return self._finish(result, text)

    def _attempt_blocks(self, text: str) -> DecodeResult:
        """Try each candidate block in source order; first success wins."""
        blocks = self.extractor.extract(text, self.config.max_blocks)
        logger.debug("Extracted %d candidate block(s)", len(blocks))

        for index, block in enumerate(blocks):
            result = self._attempt(
                self.mistake_fixer.process(block),
                RecoveryStage.BLOCK_CANDIDATES,
                candidate_index=index,
            )
            if result:
                return result
        return FAILURE

    def _attempt(
        self,
        text: str,
        stage: RecoveryStage,
        candidate_index: Optional[int] = None,
    ) -> DecodeResult:
        result = strict_decode(text, stage)
        if self.tracker is not None:
            self.tracker.record(stage, result.ok, candidate_index)
        logger.debug(
            "Stage %s %s", stage.value, "decoded" if result.ok else "failed"
        )
        return result

    @staticmethod
    def _finish(result: DecodeResult, text: str) -> DecodeResult:
        if result.ok:
            logger.debug("Recovered value at stage %s", result.stage.value)
        else:
            logger.debug("No strategy decoded input of length %d", len(text))
        return result


def _resolve_config(
    config: Optional[RecoveryConfig], options: dict[str, Any]
) -> RecoveryConfig:
    """Merge an explicit config and keyword options into one config."""
    if options:
        if config is not None:
            raise TypeError("Pass either a RecoveryConfig or keyword options, not both")
        return RecoveryConfig.from_options(**options)
    return config or RecoveryConfig()


def recover(
    text: Any,
    config: Optional[RecoveryConfig] = None,
    *,
    tracker: Optional[StageTracker] = None,
    **options: Any,
) -> DecodeResult:
    """
    Recover a value from possibly malformed JSON text.

    Args:
        text: Raw text, typically a language model response
        config: RecoveryConfig; mutually exclusive with ``options``
        tracker: Optional StageTracker that records every decode attempt
        **options: RecoveryConfig fields, e.g. ``max_blocks=3``

    Returns:
        DecodeResult; ``result.ok`` tells success from failure

    Example:
        >>> recover("Sure! {answer: 'yes',}").value
        {'answer': 'yes'}
    """
    engine = RecoveryEngine(_resolve_config(config, options), tracker=tracker)
    return engine.recover(text)


def loads(text: Any, config: Optional[RecoveryConfig] = None, **options: Any) -> Any:
    """
    Recover a value from text, raising if no strategy succeeds.

    Raises:
        RecoveryError: If no recovery strategy produced a valid decode
        SecurityError: If the input exceeds the configured size limit
    """
    result = recover(text, config, **options)
    if not result.ok:
        length = len(text) if isinstance(text, str) else 0
        raise RecoveryError(input_length=length)
    return result.value


def parse(
    text: Any,
    default: Any = None,
    config: Optional[RecoveryConfig] = None,
    **options: Any,
) -> Any:
    """
    Recover a value from text, returning ``default`` if no strategy succeeds.

    A decoded JSON ``null`` and a failure both return ``None`` by default;
    pass a sentinel ``default`` or use ``recover()`` to tell them apart.
    """
    result = recover(text, config, **options)
    return result.value if result.ok else default
