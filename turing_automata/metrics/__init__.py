"""Metrics layer: tape statistics and run summaries."""

from turing_automata.metrics.tape import (
    RunSummary,
    non_blank_count,
    summarize,
    symbol_counts,
    symbol_entropy,
)

__all__ = [
    "RunSummary",
    "non_blank_count",
    "summarize",
    "symbol_counts",
    "symbol_entropy",
]
