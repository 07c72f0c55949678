"""Configuration dataclasses and policy enums for the execution engine.

The frozen dataclasses here parameterise tape construction and the
step/run loop; the enums name every out-of-bounds and termination policy
so that behaviour is fixed per engine, never decided ad hoc.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from turing_automata.config.constants import (
    DEFAULT_BLANK,
    DEFAULT_RENDER_RADIUS,
    DEFAULT_STEP_BUDGET,
    MAX_STEP_BUDGET,
)

__all__ = [
    "EngineConfig",
    "RulesetKind",
    "RunResult",
    "TapePolicy",
    "TerminationReason",
    "UnderflowPolicy",
]

# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class TapePolicy(Enum):
    """Out-of-bounds behaviour of the tape."""

    GROW = "grow"
    STRICT = "strict"


class UnderflowPolicy(Enum):
    """What a Left move does when the head already sits on cell 0."""

    ERROR = "error"
    CLAMP = "clamp"
    EXTEND = "extend"


class RulesetKind(Enum):
    """Backing store used by a program for rule lookup."""

    MAP = "map"
    SEQUENCE = "sequence"


class TerminationReason(str, Enum):
    """Why a run stopped."""

    NO_MATCHING_RULE = "no_matching_rule"
    HALT_STATE = "halt_state"
    BUDGET_EXHAUSTED = "budget_exhausted"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Outcome of one ``Engine.run`` call."""

    halted: bool
    cycles: int
    reason: TerminationReason
    position: int
    steps: int  # rules applied during this call; cycles is the engine total


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EngineConfig:
    """Tape and stepping knobs for one engine."""

    tape_policy: TapePolicy = TapePolicy.GROW
    underflow_policy: UnderflowPolicy = UnderflowPolicy.ERROR
    blank: Any = DEFAULT_BLANK
    step_budget: int | None = DEFAULT_STEP_BUDGET
    max_tape_length: int | None = None
    render_radius: int = DEFAULT_RENDER_RADIUS

    def __post_init__(self) -> None:
        if self.step_budget is not None and not 0 <= self.step_budget <= MAX_STEP_BUDGET:
            raise ValueError(f"step_budget must be in [0, {MAX_STEP_BUDGET}]")
        if self.max_tape_length is not None and self.max_tape_length < 1:
            raise ValueError("max_tape_length must be >= 1")
        if self.render_radius < 0:
            raise ValueError("render_radius must be >= 0")
        if (
            self.tape_policy == TapePolicy.STRICT
            and self.underflow_policy == UnderflowPolicy.EXTEND
        ):
            raise ValueError("underflow_policy EXTEND requires a growable tape")
        if self.tape_policy == TapePolicy.STRICT and self.max_tape_length is not None:
            raise ValueError("max_tape_length only applies to growable tapes")
