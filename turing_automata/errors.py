"""Error taxonomy for rule lookup, tape access, and engine execution.

Every error derives from :class:`TuringAutomataError` and from the builtin
exception that best matches its meaning, so callers may catch either.
A missing rule is not an error: it is the normal halting condition and is
reported through :class:`~turing_automata.config.types.TerminationReason`.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AllocationFailureError",
    "DuplicateRuleError",
    "IndexOutOfBoundsError",
    "MissingInitialStateError",
    "StateNotFoundError",
    "StepBudgetExhaustedError",
    "TuringAutomataError",
]


class TuringAutomataError(Exception):
    """Base class for all package errors."""


class IndexOutOfBoundsError(TuringAutomataError, IndexError):
    """Tape access outside ``[0, length)`` under a bounded policy."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} is out of bounds for tape of length {length}")


class StateNotFoundError(TuringAutomataError, KeyError):
    """A state is absent from a program's declared state set."""

    def __init__(self, state: Any) -> None:
        self.state = state
        super().__init__(state)

    def __str__(self) -> str:
        return f"state {self.state!r} is not declared by the program"


class DuplicateRuleError(TuringAutomataError, ValueError):
    """A map-backed program received a second rule for the same head."""

    def __init__(self, head: Any) -> None:
        self.head = head
        super().__init__(f"duplicate rule for head {head!r}")


class MissingInitialStateError(TuringAutomataError, ValueError):
    """Neither the caller nor the program supplied an initial state."""

    def __init__(self) -> None:
        super().__init__("an initial state is required but none was given")


class StepBudgetExhaustedError(TuringAutomataError, RuntimeError):
    """``Engine.run`` reached its step budget before the machine halted."""

    def __init__(self, budget: int, cycles: int) -> None:
        self.budget = budget
        self.cycles = cycles
        super().__init__(f"step budget of {budget} exhausted after {cycles} total cycles")


class AllocationFailureError(TuringAutomataError, MemoryError):
    """A growable tape could not extend to the requested length."""

    def __init__(self, requested: int, limit: int | None) -> None:
        self.requested = requested
        self.limit = limit
        if limit is None:
            message = f"could not grow tape to {requested} cells"
        else:
            message = f"tape length {requested} exceeds limit of {limit} cells"
        super().__init__(message)
