"""Machine state wrapper.

A ``State`` marks a value as the name of a machine state. Equality, hashing,
and ordering come from the wrapped value alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

Q = TypeVar("Q")


@dataclass(frozen=True, order=True)
class State(Generic[Q]):
    """Transparent wrapper around a state identity."""

    value: Q

    def __repr__(self) -> str:
        return f"State({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


def as_state(value: Any) -> State[Any]:
    """Wrap *value* in a ``State`` unless it already is one."""
    if isinstance(value, State):
        return value
    return State(value)
