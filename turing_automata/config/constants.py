"""Centralized constants for engine configuration.

Defaults shared by the tape, ruleset, and engine modules live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_BLANK = 0
"""Symbol implied by unwritten tape cells."""

DEFAULT_RENDER_RADIUS = 3
"""Number of cells shown on each side of the head when rendering a tape."""

DEFAULT_STEP_BUDGET: int | None = None
"""Default bound on ``Engine.run``; ``None`` runs until the machine halts."""

MAX_STEP_BUDGET = 100_000_000
"""Safety cap on any explicitly configured step budget."""

HALT_STATE = "H"
"""Conventional halt state name used by the bundled example programs."""
