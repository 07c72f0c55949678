"""Tests for turing_automata.domain.rules module."""

from __future__ import annotations

import dataclasses

import pytest

from turing_automata.domain.direction import Direction
from turing_automata.domain.rules import Head, Rule, Tail
from turing_automata.domain.state import State


class TestHead:
    def test_raw_state_is_wrapped(self) -> None:
        head = Head(0, 1)
        assert head.state == State(0)
        assert head == Head(State(0), 1)

    def test_equality_requires_state_and_symbol(self) -> None:
        assert Head(0, 1) != Head(0, 0)
        assert Head(0, 1) != Head(1, 1)

    def test_usable_as_dict_key(self) -> None:
        table = {Head("A", 0): "x"}
        assert table[Head(State("A"), 0)] == "x"

    def test_unpacks_into_state_and_symbol(self) -> None:
        state, symbol = Head("A", 7)
        assert state == State("A")
        assert symbol == 7

    def test_is_frozen(self) -> None:
        head = Head(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            head.symbol = 1  # type: ignore[misc]


class TestTail:
    def test_direction_and_state_are_coerced(self) -> None:
        tail = Tail("R", 1, 1)
        assert tail.direction is Direction.RIGHT
        assert tail.next_state == State(1)

    def test_invalid_direction_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown direction"):
            Tail("X", 1, 1)

    def test_as_head(self) -> None:
        assert Tail(Direction.LEFT, "B", 0).as_head() == Head("B", 0)


class TestRule:
    def test_from_flat_tuple(self) -> None:
        rule = Rule.from_tuple((0, 0, "R", 1, 1))
        assert rule.head == Head(0, 0)
        assert rule.tail == Tail(Direction.RIGHT, 1, 1)

    def test_from_nested_tuple(self) -> None:
        rule = Rule.from_tuple(((0, 1), ("L", -1, 0)))
        assert rule == Rule.new(0, 1, Direction.LEFT, -1, 0)

    def test_malformed_literal_rejected(self) -> None:
        with pytest.raises(ValueError, match="malformed rule literal"):
            Rule.from_tuple((0, 0, "R"))
        with pytest.raises(ValueError, match="malformed rule literal"):
            Rule.from_tuple(((0, 0, 0), ("R", 1, 1)))

    def test_coerce_passes_rules_through(self) -> None:
        rule = Rule.new("A", 0, "R", "B", 1)
        assert Rule.coerce(rule) is rule

    def test_as_tuple_round_trips(self) -> None:
        literal = ("A", 0, Direction.RIGHT, "B", 1)
        assert Rule.from_tuple(literal).as_tuple() == literal

    def test_asdict_is_flat(self) -> None:
        data = dataclasses.asdict(Rule.new("A", 0, "R", "B", 1))
        assert data == {
            "head": {"state": {"value": "A"}, "symbol": 0},
            "tail": {
                "direction": Direction.RIGHT,
                "next_state": {"value": "B"},
                "write_symbol": 1,
            },
        }

    def test_str(self) -> None:
        assert str(Rule.new(0, 0, "R", 1, 1)) == "(0, 0) -> R(1, 1)"
