"""Configuration layer: constants and typed config dataclasses."""

from turing_automata.config.constants import (
    DEFAULT_BLANK,
    DEFAULT_RENDER_RADIUS,
    DEFAULT_STEP_BUDGET,
    HALT_STATE,
    MAX_STEP_BUDGET,
)
from turing_automata.config.types import (
    EngineConfig,
    RulesetKind,
    RunResult,
    TapePolicy,
    TerminationReason,
    UnderflowPolicy,
)

__all__ = [
    "DEFAULT_BLANK",
    "DEFAULT_RENDER_RADIUS",
    "DEFAULT_STEP_BUDGET",
    "EngineConfig",
    "HALT_STATE",
    "MAX_STEP_BUDGET",
    "RulesetKind",
    "RunResult",
    "TapePolicy",
    "TerminationReason",
    "UnderflowPolicy",
]
