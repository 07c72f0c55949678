"""Head, Tail, and Rule value types.

A ``Rule`` pairs a trigger ``Head`` (state and symbol read) with an effect
``Tail`` (direction, next state, symbol written). All three are flat frozen
dataclasses, so ``dataclasses.asdict`` serialises them without help.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from turing_automata.domain.direction import Direction
from turing_automata.domain.state import State, as_state

# Flat literal form of a rule: (state, symbol, direction, next_state, write_symbol)
RuleTuple = tuple[Any, Any, Any, Any, Any]


@dataclass(frozen=True)
class Head:
    """A (state, symbol) pair.

    As a rule key ``symbol`` is the value read from the tape; as the engine's
    cursor it is the integer tape position.
    """

    state: State[Any]
    symbol: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", as_state(self.state))

    def __iter__(self) -> Iterator[Any]:
        yield self.state
        yield self.symbol

    def __str__(self) -> str:
        return f"({self.state}, {self.symbol!r})"


@dataclass(frozen=True)
class Tail:
    """The consequence of firing a rule."""

    direction: Direction
    next_state: State[Any]
    write_symbol: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction.coerce(self.direction))
        object.__setattr__(self, "next_state", as_state(self.next_state))

    def as_head(self) -> Head:
        """Return the head formed by the next state and the written symbol."""
        return Head(self.next_state, self.write_symbol)

    def __str__(self) -> str:
        return f"{self.direction.as_char()}({self.next_state}, {self.write_symbol!r})"


@dataclass(frozen=True)
class Rule:
    """One Head -> Tail transition."""

    head: Head
    tail: Tail

    @classmethod
    def new(
        cls,
        state: Any,
        symbol: Any,
        direction: Any,
        next_state: Any,
        write_symbol: Any,
    ) -> Rule:
        """Build a rule from raw field values."""
        return cls(Head(state, symbol), Tail(direction, next_state, write_symbol))

    @classmethod
    def from_tuple(cls, literal: Sequence[Any]) -> Rule:
        """Build a rule from a flat 5-tuple or a nested ``((q, s), (d, q', w))`` pair."""
        if len(literal) == 5:
            return cls.new(*literal)
        if len(literal) == 2:
            head, tail = literal
            if len(head) != 2 or len(tail) != 3:
                raise ValueError(f"malformed rule literal: {literal!r}")
            return cls.new(*head, *tail)
        raise ValueError(f"malformed rule literal: {literal!r}")

    @classmethod
    def coerce(cls, value: Rule | Sequence[Any]) -> Rule:
        """Return *value* unchanged if it is a Rule, else parse it as a literal."""
        if isinstance(value, cls):
            return value
        return cls.from_tuple(value)

    @property
    def state(self) -> State[Any]:
        return self.head.state

    @property
    def symbol(self) -> Any:
        return self.head.symbol

    def as_tuple(self) -> RuleTuple:
        """Return the flat ``(state, symbol, direction, next_state, write)`` form."""
        return (
            self.head.state.value,
            self.head.symbol,
            self.tail.direction,
            self.tail.next_state.value,
            self.tail.write_symbol,
        )

    def __str__(self) -> str:
        return f"{self.head} -> {self.tail}"
