"""Tape statistics: symbol counts, Shannon entropy, and busy-beaver score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from turing_automata.config.types import TerminationReason

if TYPE_CHECKING:
    from turing_automata.simulation.engine import Engine


@dataclass(frozen=True)
class RunSummary:
    """Snapshot of an engine's progress and final tape."""

    cycles: int
    halted: bool
    reason: TerminationReason | None
    position: int
    tape_length: int
    non_blank: int
    symbol_entropy: float


def symbol_counts(cells: Iterable[Any]) -> dict[Any, int]:
    """Return occurrences of each symbol, ordered by first appearance."""
    counts: dict[Any, int] = {}
    for cell in cells:
        counts[cell] = counts.get(cell, 0) + 1
    return counts


def symbol_entropy(cells: Iterable[Any]) -> float:
    """Compute Shannon entropy (bits) of the symbol distribution on a tape."""
    counts = np.fromiter(symbol_counts(cells).values(), dtype=np.float64)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts / total
    return float(-(p * np.log2(p)).sum())


def non_blank_count(cells: Iterable[Any], blank: Any) -> int:
    """Count cells holding anything other than *blank* (the busy-beaver score)."""
    mask = np.fromiter((cell != blank for cell in cells), dtype=np.bool_)
    return int(np.count_nonzero(mask))


def summarize(engine: Engine) -> RunSummary:
    """Summarize an engine's counters and tape contents."""
    cells = engine.tape
    return RunSummary(
        cycles=engine.cycles,
        halted=engine.is_halted(),
        reason=engine.halt_reason,
        position=engine.position,
        tape_length=len(cells),
        non_blank=non_blank_count(cells, engine.config.blank),
        symbol_entropy=symbol_entropy(cells),
    )
