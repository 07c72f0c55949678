"""Head movement directions."""

from __future__ import annotations

from enum import Enum
from typing import Any

_ALIASES: dict[str, int] = {
    "l": -1,
    "left": -1,
    "r": 1,
    "right": 1,
    "s": 0,
    "stay": 0,
}


class Direction(Enum):
    """Head movement applied after a rule fires."""

    LEFT = -1
    STAY = 0
    RIGHT = 1

    @classmethod
    def coerce(cls, value: Any) -> Direction:
        """Convert a Direction, -1/0/1, or L/R/S-style text into a Direction.

        Anything else raises :exc:`ValueError`; only three directions exist.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return cls(_ALIASES[key])
            raise ValueError(f"unknown direction: {value!r}")
        if isinstance(value, bool):
            raise ValueError(f"unknown direction: {value!r}")
        if isinstance(value, int) and value in (-1, 0, 1):
            return cls(value)
        raise ValueError(f"unknown direction: {value!r}")

    def as_char(self) -> str:
        """Return the single-letter form: L, R, or S."""
        return {Direction.LEFT: "L", Direction.RIGHT: "R", Direction.STAY: "S"}[self]

    def apply(self, position: int) -> int:
        """Return the position after moving; not clamped at zero."""
        return position + self.value

    def __str__(self) -> str:
        return self.as_char()
