"""Rule-matching execution engine.

``Engine`` holds the live cursor (a ``Head`` whose symbol is the tape
position), a read-only ``Program``, an owned ``Tape``, and a cycle counter.
Each ``step`` reads the symbol under the head, applies the matching rule,
and returns the pre-transition head. A missing rule or a designated halt
state halts the machine; neither is an error.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from turing_automata.config.constants import MAX_STEP_BUDGET
from turing_automata.config.types import (
    EngineConfig,
    RunResult,
    TerminationReason,
    UnderflowPolicy,
)
from turing_automata.domain.direction import Direction
from turing_automata.domain.rules import Head
from turing_automata.domain.ruleset import Program
from turing_automata.domain.state import State
from turing_automata.domain.tape import Tape, make_tape
from turing_automata.errors import (
    IndexOutOfBoundsError,
    MissingInitialStateError,
    StepBudgetExhaustedError,
)

logger = logging.getLogger(__name__)

_UNSET: object = object()
"""Sentinel indicating a parameter was not explicitly provided."""


class Engine:
    """Single-cursor Turing machine interpreter.

    The tape policy in ``config`` decides whether reading past the end
    yields the blank symbol or raises :exc:`IndexOutOfBoundsError`; the
    underflow policy decides what a Left move from cell 0 does. Both are
    fixed for the lifetime of the engine.

    Programs are never mutated by the engine and may be shared between
    engines; each engine owns its tape, head, and counter.
    """

    def __init__(
        self,
        program: Program,
        tape: Tape | Iterable[Any] = (),
        *,
        initial_state: Any = None,
        position: int = 0,
        config: EngineConfig | None = None,
    ) -> None:
        if position < 0:
            raise ValueError("position must be >= 0")
        self._config = config or EngineConfig()
        if initial_state is None:
            state = program.initial_state
            if state is None:
                raise MissingInitialStateError()
        else:
            state = program.validate_state(initial_state)
        self._program = program
        self._tape = make_tape(tape, self._config)
        self._head = Head(state, position)
        self._cycles = 0
        self._halt_reason: TerminationReason | None = None
        if program.is_halt_state(state):
            self._halt_reason = TerminationReason.HALT_STATE

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def program(self) -> Program:
        return self._program

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def head(self) -> Head:
        """Current cursor: ``Head(state, position)``."""
        return self._head

    @property
    def state(self) -> State[Any]:
        return self._head.state

    @property
    def position(self) -> int:
        return self._head.symbol

    @property
    def cycles(self) -> int:
        """Number of rules applied so far."""
        return self._cycles

    @property
    def tape(self) -> tuple[Any, ...]:
        """Snapshot of the tape cells."""
        return tuple(self._tape)

    @property
    def halt_reason(self) -> TerminationReason | None:
        return self._halt_reason

    def is_halted(self) -> bool:
        return self._halt_reason is not None

    def read(self) -> Any:
        """Return the symbol under the head, subject to the tape policy."""
        return self._tape.read(self.position)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def step(self) -> Head | None:
        """Apply one rule and return the head as it was before the transition.

        Returns ``None`` once the machine has halted. Bounds and
        allocation errors are raised before anything is written.
        """
        if self._halt_reason is not None:
            return None
        state, position = self._head.state, self._head.symbol
        if self._program.is_halt_state(state):
            self._halt(TerminationReason.HALT_STATE)
            return None

        symbol = self._tape.read(position)
        tail = self._program.find_tail(state, symbol)
        if tail is None:
            logger.debug("No rule for (%s, %r) at position %d", state, symbol, position)
            self._halt(TerminationReason.NO_MATCHING_RULE)
            return None

        next_position, extend = self._resolve_move(position, tail.direction)
        self._tape.reserve(max(len(self._tape), position + 1) + int(extend))
        self._tape.write(position, tail.write_symbol)
        if extend:
            self._tape.prepend()
        previous = self._head
        self._head = Head(tail.next_state, next_position)
        self._cycles += 1
        logger.debug(
            "Cycle %d: (%s, %r) at %d -> %s",
            self._cycles,
            state,
            symbol,
            position,
            tail,
        )
        if self._program.is_halt_state(tail.next_state):
            self._halt(TerminationReason.HALT_STATE)
        return previous

    def _resolve_move(self, position: int, direction: Direction) -> tuple[int, bool]:
        """Return the position after moving and whether a blank must be prepended."""
        target = direction.apply(position)
        if target >= 0:
            return target, False
        policy = self._config.underflow_policy
        if policy == UnderflowPolicy.CLAMP:
            return 0, False
        if policy == UnderflowPolicy.EXTEND:
            return 0, True
        raise IndexOutOfBoundsError(target, len(self._tape))

    def _halt(self, reason: TerminationReason) -> None:
        self._halt_reason = reason
        logger.debug("Halted after %d cycles: %s", self._cycles, reason.value)

    def run(self, budget: object = _UNSET, *, strict: bool = False) -> RunResult:
        """Step until the machine halts or *budget* steps have been applied.

        *budget* defaults to ``config.step_budget``; ``None`` means
        unbounded. An exhausted budget is reported through the result's
        ``reason`` or, with ``strict=True``, raised as
        :exc:`StepBudgetExhaustedError`.
        """
        limit: int | None = (
            self._config.step_budget if budget is _UNSET else budget  # type: ignore[assignment]
        )
        if limit is not None and limit < 0:
            raise ValueError("budget must be >= 0")
        if limit is not None and limit > MAX_STEP_BUDGET:
            raise ValueError(f"budget must be <= {MAX_STEP_BUDGET}")

        logger.info(
            "Running from state %s at position %d (budget=%s)", self.state, self.position, limit
        )
        steps = 0
        while not self.is_halted() and (limit is None or steps < limit):
            if self.step() is None:
                break
            steps += 1

        if self._halt_reason is not None:
            logger.info(
                "Halted after %d cycles (%s) at position %d",
                self._cycles,
                self._halt_reason.value,
                self.position,
            )
            return RunResult(
                halted=True,
                cycles=self._cycles,
                reason=self._halt_reason,
                position=self.position,
                steps=steps,
            )

        # Only a bounded loop stops without halting, and it stops at steps == limit.
        logger.warning("Step budget of %d exhausted after %d cycles", steps, self._cycles)
        if strict:
            raise StepBudgetExhaustedError(steps, self._cycles)
        return RunResult(
            halted=False,
            cycles=self._cycles,
            reason=TerminationReason.BUDGET_EXHAUSTED,
            position=self.position,
            steps=steps,
        )

    def __iter__(self) -> Iterator[Head]:
        """Yield the pre-transition head of every applied rule until halt."""
        while True:
            previous = self.step()
            if previous is None:
                return
            yield previous

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render(self, radius: int | None = None) -> str:
        r = self._config.render_radius if radius is None else radius
        return self._tape.render(self.position, r)

    def __str__(self) -> str:
        return f"{self.state}: {self.render()}"

    def __repr__(self) -> str:
        return (
            f"Engine(state={self.state!r}, position={self.position}, "
            f"cycles={self._cycles}, halted={self.is_halted()})"
        )
