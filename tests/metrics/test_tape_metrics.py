"""Tests for turing_automata.metrics.tape module."""

from __future__ import annotations

import pytest

from turing_automata.config.types import TerminationReason
from turing_automata.domain.ruleset import Program
from turing_automata.metrics.tape import (
    non_blank_count,
    summarize,
    symbol_counts,
    symbol_entropy,
)
from turing_automata.simulation.engine import Engine


class TestSymbolCounts:
    def test_counts_in_first_appearance_order(self) -> None:
        counts = symbol_counts([1, 0, 1, 1, "x"])
        assert counts == {1: 3, 0: 1, "x": 1}
        assert list(counts) == [1, 0, "x"]

    def test_empty(self) -> None:
        assert symbol_counts([]) == {}


class TestSymbolEntropy:
    def test_empty_tape_has_zero_entropy(self) -> None:
        assert symbol_entropy([]) == 0.0

    def test_uniform_tape_has_zero_entropy(self) -> None:
        assert symbol_entropy([1, 1, 1]) == pytest.approx(0.0)

    def test_two_symbols_evenly_split(self) -> None:
        assert symbol_entropy([0, 1, 1, 0]) == pytest.approx(1.0)

    def test_four_symbols_evenly_split(self) -> None:
        assert symbol_entropy(["a", "b", "c", "d"]) == pytest.approx(2.0)

    def test_returns_builtin_float(self) -> None:
        assert isinstance(symbol_entropy([0, 1]), float)


class TestNonBlankCount:
    def test_counts_non_blank_cells(self) -> None:
        assert non_blank_count([0, 1, 1, 0, 2], 0) == 3

    def test_custom_blank(self) -> None:
        assert non_blank_count(["_", "a", "_"], "_") == 1

    def test_empty(self) -> None:
        assert non_blank_count([], 0) == 0


class TestSummarize:
    def test_summarize_halted_engine(self) -> None:
        program = Program([(0, 0, "R", 1, 1), (1, 0, "R", 2, 1)], initial_state=0)
        engine = Engine(program, [0, 0, 0, 0])
        engine.run()
        summary = summarize(engine)
        assert summary.cycles == 2
        assert summary.halted
        assert summary.reason == TerminationReason.NO_MATCHING_RULE
        assert summary.position == 2
        assert summary.tape_length == 4
        assert summary.non_blank == 2
        assert summary.symbol_entropy == pytest.approx(1.0)

    def test_summarize_fresh_engine(self) -> None:
        engine = Engine(Program([(0, 0, "R", 0, 0)], initial_state=0))
        summary = summarize(engine)
        assert summary.cycles == 0
        assert not summary.halted
        assert summary.reason is None
        assert summary.tape_length == 0
        assert summary.symbol_entropy == 0.0
