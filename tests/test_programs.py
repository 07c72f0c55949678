"""Tests for turing_automata.programs module."""

from __future__ import annotations

import pytest

from turing_automata.config.constants import HALT_STATE
from turing_automata.config.types import TapePolicy, TerminationReason, UnderflowPolicy
from turing_automata.domain.state import State
from turing_automata.errors import IndexOutOfBoundsError
from turing_automata.metrics.tape import summarize
from turing_automata.programs import busy_beaver_2, busy_beaver_3, recommended_config
from turing_automata.simulation.engine import Engine


class TestRecommendedConfig:
    def test_growable_and_extending(self) -> None:
        config = recommended_config()
        assert config.tape_policy == TapePolicy.GROW
        assert config.underflow_policy == UnderflowPolicy.EXTEND


class TestBusyBeaver2:
    def test_program_shape(self) -> None:
        program = busy_beaver_2()
        assert len(program) == 4
        assert program.initial_state == State("A")
        assert program.is_halt_state(HALT_STATE)

    def test_run(self) -> None:
        engine = Engine(busy_beaver_2(), config=recommended_config())
        result = engine.run(100)
        assert result.halted
        assert result.reason == TerminationReason.HALT_STATE
        assert result.cycles == 6
        assert engine.tape == (1, 1, 1, 1)
        assert engine.position == 2
        assert engine.state == State(HALT_STATE)
        assert summarize(engine).non_blank == 4

    def test_fresh_program_per_call(self) -> None:
        assert busy_beaver_2() is not busy_beaver_2()


class TestBusyBeaver3:
    def test_run(self) -> None:
        engine = Engine(busy_beaver_3(), config=recommended_config())
        result = engine.run(100)
        assert result.halted
        assert result.cycles == 14
        assert engine.tape == (1,) * 6
        assert engine.position == 3
        assert summarize(engine).non_blank == 6

    def test_default_underflow_policy_fails_at_left_edge(self) -> None:
        engine = Engine(busy_beaver_3())
        with pytest.raises(IndexOutOfBoundsError, match="index -1"):
            engine.run(100)
        assert engine.cycles == 4
