"""Tests for clock advancement and TickContext generation."""

import pytest
from unitcircle.clock import Clock
from unitcircle.types import TickContext


def test_clock_initialization():
    """Clock initializes with correct TPS and dt."""
    clock = Clock(tps=25)
    assert clock.tps == 25
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.04) < 1e-9


@pytest.mark.parametrize("tps", [0, -5])
def test_non_positive_tps_rejected(tps):
    with pytest.raises(ValueError):
        Clock(tps=tps)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=25)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_elapsed_is_exact_at_cycle_boundary():
    """360 ticks at 25 TPS is exactly 14.4 seconds."""
    clock = Clock(tps=25)
    clock.reset(360)
    assert clock.elapsed == 14.4


def test_context_snapshot():
    clock = Clock(tps=25)
    clock.advance()
    ctx = clock.context(lambda: None)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == clock.dt
    assert ctx.elapsed == pytest.approx(0.04)


def test_reset():
    clock = Clock(tps=25)
    for _ in range(10):
        clock.advance()
    clock.reset()
    assert clock.tick_number == 0
    clock.reset(42)
    assert clock.tick_number == 42
