"""
Configuration and limits for jsonrescue recovery.

This module defines the options that steer the repair cascade and the
optional size limit callers can use to bound the work done per call.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Optional


@dataclass
class RecoveryLimits:
    """Input size limits applied before any stage runs."""

    max_input_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_input_size is not None and self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")


@dataclass
class RecoveryConfig:
    """
    Options for the recovery cascade.

    Attributes:
        attempt_fix: Run repair stages after a failed strict decode.
        max_blocks: Upper bound on candidate blocks tried by the extractor.
        prefer_first: First candidate in source order wins. This is the only
            supported selection order; ``False`` behaves the same.
        allow_partial: Reserved for prefix-only decoding. Accepted and ignored.
        limits: Optional input size limits.
    """

    attempt_fix: bool = True
    max_blocks: int = 5
    prefer_first: bool = True
    allow_partial: bool = False
    limits: RecoveryLimits = field(default_factory=RecoveryLimits)

    def __post_init__(self) -> None:
        # bool is an int subclass, reject it explicitly
        if isinstance(self.max_blocks, bool) or not isinstance(self.max_blocks, int):
            raise ValueError("max_blocks must be an integer")
        if self.max_blocks < 0:
            raise ValueError("max_blocks must be non-negative")
        if self.limits is None:
            self.limits = RecoveryLimits()

    @property
    def max_input_size(self) -> Optional[int]:
        """Maximum accepted input length in characters, if any."""
        return self.limits.max_input_size

    @classmethod
    def strict(cls) -> "RecoveryConfig":
        """Create a configuration that only accepts conformant JSON."""
        return cls(attempt_fix=False)

    @classmethod
    def lenient(cls) -> "RecoveryConfig":
        """Create a configuration that runs the full repair cascade."""
        return cls()

    @classmethod
    def from_options(cls, **options: Any) -> "RecoveryConfig":
        """
        Build a configuration from keyword options.

        ``max_input_size`` is accepted as a shortcut for ``limits``.

        Raises:
            TypeError: If an option name is not a configuration field.
        """
        known = {f.name for f in fields(cls)}
        max_input_size = options.pop("max_input_size", None)
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown recovery option(s): {', '.join(unknown)}")

        if max_input_size is not None:
            if "limits" in options:
                raise TypeError("Pass either 'limits' or 'max_input_size', not both")
            options["limits"] = RecoveryLimits(max_input_size=max_input_size)
        return cls(**options)
