"""Linear tape storage with an explicit out-of-bounds policy.

``GrowableTape`` treats unwritten cells as blank and extends on write;
``StrictTape`` rejects every access outside its current length. Positions
are plain integer indices into an owned list.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator

from turing_automata.config.constants import DEFAULT_BLANK, DEFAULT_RENDER_RADIUS
from turing_automata.config.types import EngineConfig, TapePolicy
from turing_automata.errors import AllocationFailureError, IndexOutOfBoundsError

logger = logging.getLogger(__name__)


class Tape(ABC):
    """Indexed read/write storage for tape symbols."""

    policy: TapePolicy

    def __init__(self, cells: Iterable[Any] = (), blank: Any = DEFAULT_BLANK) -> None:
        self._cells: list[Any] = list(cells)
        self._blank = blank

    @property
    def blank(self) -> Any:
        return self._blank

    @abstractmethod
    def read(self, index: int) -> Any:
        """Return the symbol at *index*."""

    @abstractmethod
    def write(self, index: int, symbol: Any) -> None:
        """Overwrite the symbol at *index*."""

    @abstractmethod
    def prepend(self, count: int = 1) -> None:
        """Insert *count* blank cells before cell 0."""

    def reserve(self, length: int) -> None:
        """Raise :exc:`AllocationFailureError` if the tape cannot reach *length* cells."""

    def to_list(self) -> list[Any]:
        return list(self._cells)

    def render(self, position: int, radius: int = DEFAULT_RENDER_RADIUS) -> str:
        """Render the cells around *position*, bracketing the head cell.

        A head sitting one past the last cell is drawn as ``[ ]``.
        """
        n = len(self._cells)
        start = max(position - radius, 0)
        stop = min(position + radius + 1, n)
        parts: list[str] = []
        for idx in range(start, stop):
            cell = str(self._cells[idx])
            parts.append(f"[{cell}]" if idx == position else cell)
        if position >= n:
            parts.append("[ ]")
        return "".join(parts)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexOutOfBoundsError(index, len(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Any:
        return self.read(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tape):
            return self._cells == other._cells and self.policy == other.policy
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cells!r}, blank={self._blank!r})"


class GrowableTape(Tape):
    """Tape that reads blanks past its end and grows on write.

    Writing at ``p >= len`` leaves ``len == p + 1`` with every new
    intermediate cell blank. Growth beyond ``max_length`` raises
    :exc:`AllocationFailureError`.
    """

    policy = TapePolicy.GROW

    def __init__(
        self,
        cells: Iterable[Any] = (),
        blank: Any = DEFAULT_BLANK,
        max_length: int | None = None,
    ) -> None:
        super().__init__(cells, blank)
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be >= 1")
        self._max_length = max_length
        if max_length is not None and len(self._cells) > max_length:
            raise AllocationFailureError(len(self._cells), max_length)

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def read(self, index: int) -> Any:
        if index < 0:
            raise IndexOutOfBoundsError(index, len(self._cells))
        if index >= len(self._cells):
            return self._blank
        return self._cells[index]

    def write(self, index: int, symbol: Any) -> None:
        if index < 0:
            raise IndexOutOfBoundsError(index, len(self._cells))
        if index >= len(self._cells):
            self._grow(index + 1 - len(self._cells))
        self._cells[index] = symbol

    def prepend(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        self.reserve(len(self._cells) + count)
        self._cells[:0] = [self._blank] * count

    def _grow(self, count: int) -> None:
        self.reserve(len(self._cells) + count)
        logger.debug("Extending tape by %d blank cells", count)
        try:
            self._cells.extend([self._blank] * count)
        except MemoryError as exc:
            raise AllocationFailureError(len(self._cells) + count, self._max_length) from exc

    def reserve(self, length: int) -> None:
        if self._max_length is not None and length > self._max_length:
            raise AllocationFailureError(length, self._max_length)


class StrictTape(Tape):
    """Fixed-length tape; any access outside ``[0, len)`` is an error."""

    policy = TapePolicy.STRICT

    def read(self, index: int) -> Any:
        self._check_index(index)
        return self._cells[index]

    def write(self, index: int, symbol: Any) -> None:
        self._check_index(index)
        self._cells[index] = symbol

    def prepend(self, count: int = 1) -> None:
        raise IndexOutOfBoundsError(-count, len(self._cells))


def make_tape(symbols: Tape | Iterable[Any] = (), config: EngineConfig | None = None) -> Tape:
    """Build the tape variant selected by ``config.tape_policy``.

    An existing ``Tape`` is returned as-is; its policy must match the config.
    """
    cfg = config or EngineConfig()
    if isinstance(symbols, Tape):
        if symbols.policy != cfg.tape_policy:
            raise ValueError(
                f"tape policy {symbols.policy.value} conflicts with "
                f"config.tape_policy {cfg.tape_policy.value}"
            )
        return symbols
    if cfg.tape_policy == TapePolicy.STRICT:
        return StrictTape(symbols, blank=cfg.blank)
    return GrowableTape(symbols, blank=cfg.blank, max_length=cfg.max_tape_length)
