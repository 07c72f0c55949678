from turing_automata.config.constants import (
    DEFAULT_BLANK,
    DEFAULT_RENDER_RADIUS,
    DEFAULT_STEP_BUDGET,
    HALT_STATE,
    MAX_STEP_BUDGET,
)


def test_default_blank_is_zero() -> None:
    assert DEFAULT_BLANK == 0


def test_render_radius_is_non_negative_int() -> None:
    assert isinstance(DEFAULT_RENDER_RADIUS, int) and DEFAULT_RENDER_RADIUS >= 0


def test_default_step_budget_is_unbounded() -> None:
    assert DEFAULT_STEP_BUDGET is None


def test_max_step_budget_is_large() -> None:
    assert isinstance(MAX_STEP_BUDGET, int)
    assert MAX_STEP_BUDGET >= 1_000_000


def test_halt_state_is_text() -> None:
    assert isinstance(HALT_STATE, str) and HALT_STATE
