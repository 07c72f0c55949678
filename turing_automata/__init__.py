"""Rule-matching interpreter for Turing machines and similar automata."""

from turing_automata.config import (
    EngineConfig,
    RulesetKind,
    RunResult,
    TapePolicy,
    TerminationReason,
    UnderflowPolicy,
)
from turing_automata.domain import (
    Direction,
    GrowableTape,
    Head,
    Program,
    Rule,
    RuleMap,
    RuleSequence,
    Ruleset,
    State,
    StrictTape,
    Tail,
    Tape,
    make_tape,
)
from turing_automata.errors import (
    AllocationFailureError,
    DuplicateRuleError,
    IndexOutOfBoundsError,
    MissingInitialStateError,
    StateNotFoundError,
    StepBudgetExhaustedError,
    TuringAutomataError,
)
from turing_automata.simulation import Engine

__version__ = "0.1.0"

__all__ = [
    "AllocationFailureError",
    "Direction",
    "DuplicateRuleError",
    "Engine",
    "EngineConfig",
    "GrowableTape",
    "Head",
    "IndexOutOfBoundsError",
    "MissingInitialStateError",
    "Program",
    "Rule",
    "RuleMap",
    "RuleSequence",
    "Ruleset",
    "RulesetKind",
    "RunResult",
    "State",
    "StateNotFoundError",
    "StepBudgetExhaustedError",
    "StrictTape",
    "Tail",
    "Tape",
    "TapePolicy",
    "TerminationReason",
    "TuringAutomataError",
    "UnderflowPolicy",
    "make_tape",
]
