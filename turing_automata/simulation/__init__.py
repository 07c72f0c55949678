"""Simulation layer: the step/run execution engine."""

from turing_automata.simulation.engine import Engine

__all__ = ["Engine"]
