"""Domain layer: states, rules, rulesets, and tapes."""

from turing_automata.domain.direction import Direction
from turing_automata.domain.rules import Head, Rule, RuleTuple, Tail
from turing_automata.domain.ruleset import (
    Program,
    RuleMap,
    RuleSequence,
    Ruleset,
    new_ruleset,
)
from turing_automata.domain.state import State, as_state
from turing_automata.domain.tape import GrowableTape, StrictTape, Tape, make_tape

__all__ = [
    "Direction",
    "GrowableTape",
    "Head",
    "Program",
    "Rule",
    "RuleMap",
    "RuleSequence",
    "RuleTuple",
    "Ruleset",
    "State",
    "StrictTape",
    "Tail",
    "Tape",
    "as_state",
    "make_tape",
    "new_ruleset",
]
