"""
jsonrescue - Recover JSON values from the near-JSON text language models emit.

Model responses often wrap the data in prose, leave trailing commas, skip
key quotes, use single quotes or Python literals, or sprinkle comments.
jsonrescue runs a fixed cascade of increasingly aggressive repairs and
returns the first value that decodes under the standard JSON grammar, or a
predictable failure when nothing does.

Cascade:
- Strict decode of the raw text
- Strict decode after byte-order mark removal
- Common mistake fixes (trailing commas, bare keys, quotes, literals, comments)
- Balanced object and array blocks extracted from surrounding prose
- A lossy aggressive rewrite as the last resort

Quick Start:
    import jsonrescue

    data = jsonrescue.parse("Here you go: {name: 'Ada', active: True,}")
    # {'name': 'Ada', 'active': True}

    result = jsonrescue.recover(response_text, max_blocks=3)
    if result.ok:
        print(result.value, result.stage)

    value = jsonrescue.loads(response_text)  # raises RecoveryError on failure
"""

from .core.engine import RecoveryEngine, loads, parse, recover
from .recovery.core.tracker import StageAttempt, StageTracker
from .recovery.strategies import FAILURE, DecodeResult, RecoveryStage
from .security.exceptions import ParseError, RecoveryError, SecurityError
from .utils.config import RecoveryConfig, RecoveryLimits

__version__ = "0.1.0"
__author__ = "jsonrescue contributors"

__all__ = [
    # Entry points
    "recover", "loads", "parse", "RecoveryEngine",
    # Results and tracking
    "DecodeResult", "RecoveryStage", "FAILURE", "StageTracker", "StageAttempt",
    # Configuration classes
    "RecoveryConfig", "RecoveryLimits",
    # Exception classes
    "ParseError", "RecoveryError", "SecurityError",
]
