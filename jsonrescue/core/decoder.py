"""
Strict decoding of conformant JSON.

The decoder is the only judge of success in the cascade: a rewrite counts
only when its output passes here.
"""

import json
from typing import Any, NoReturn

from ..recovery.strategies import FAILURE, DecodeResult, RecoveryStage


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard constant {name!r} is not valid JSON")


def decode_or_raise(text: str) -> Any:
    """
    Decode text, raising on any deviation from the JSON grammar.

    ``NaN`` and ``Infinity`` are rejected, as are a leading byte-order mark
    and raw control characters inside strings.

    Raises:
        ValueError: If the text is not a single conformant JSON value
        RecursionError: If nesting exceeds the interpreter's limit
    """
    return json.loads(text, parse_constant=_reject_constant)


def strict_decode(
    text: str, stage: RecoveryStage = RecoveryStage.RAW_STRICT
) -> DecodeResult:
    """Decode text, absorbing failures into the failure marker."""
    try:
        return DecodeResult.success(decode_or_raise(text), stage)
    except (ValueError, RecursionError):
        return FAILURE
