"""Example programs built by plain function calls.

Each call returns a fresh ``Program``; run them with
:func:`recommended_config` so the tape is unbounded in both directions.
"""

from __future__ import annotations

from turing_automata.config.constants import HALT_STATE
from turing_automata.config.types import EngineConfig, TapePolicy, UnderflowPolicy
from turing_automata.domain.ruleset import Program


def recommended_config() -> EngineConfig:
    """Growable tape that prepends blanks when the head walks off the left edge."""
    return EngineConfig(tape_policy=TapePolicy.GROW, underflow_policy=UnderflowPolicy.EXTEND)


def busy_beaver_2() -> Program:
    """2-state, 2-symbol champion: halts after 6 steps leaving 4 ones."""
    return Program(
        [
            ("A", 0, "R", "B", 1),
            ("A", 1, "L", "B", 1),
            ("B", 0, "L", "A", 1),
            ("B", 1, "R", HALT_STATE, 1),
        ],
        initial_state="A",
        halt_states=[HALT_STATE],
    )


def busy_beaver_3() -> Program:
    """3-state, 2-symbol champion by ones: halts after 14 steps leaving 6 ones."""
    return Program(
        [
            ("A", 0, "R", "B", 1),
            ("A", 1, "R", HALT_STATE, 1),
            ("B", 0, "R", "C", 0),
            ("B", 1, "R", "B", 1),
            ("C", 0, "L", "C", 1),
            ("C", 1, "L", "A", 1),
        ],
        initial_state="A",
        halt_states=[HALT_STATE],
    )
