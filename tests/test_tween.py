"""Tests for LoopingTween interpolation and wrap-around."""

import pytest
from unitcircle import LoopingTween


class TestLinearInterpolation:
    """Linear sweep from 0 to 360 over 14.4 seconds."""

    def test_start(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(0.0) == 0.0

    def test_halfway(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(7.2) == pytest.approx(180.0)

    def test_forty_ms_per_degree(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(0.04) == pytest.approx(1.0)
        assert tween.value_at(1.8) == pytest.approx(45.0)


class TestLooping:
    """The tween snaps back to start_val at each cycle boundary."""

    def test_resets_at_duration(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(14.4) == 0.0

    def test_second_cycle_repeats_first(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(14.4 + 3.6) == pytest.approx(tween.value_at(3.6))

    @pytest.mark.parametrize("k", [2, 5, 7])
    def test_resets_at_later_boundaries(self, k):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(k * 14.4) == 0.0
        assert tween.cycle_at(k * 14.4) == k

    def test_just_before_boundary_is_near_end(self):
        tween = LoopingTween(0.0, 360.0, 14.4)
        assert tween.value_at(14.4 - 0.04) == pytest.approx(359.0)
        assert tween.cycle_at(14.4 - 0.04) == 0

    def test_cycle_count(self):
        tween = LoopingTween(0.0, 360.0, 10.0)
        assert tween.cycle_at(0.0) == 0
        assert tween.cycle_at(9.99) == 0
        assert tween.cycle_at(10.0) == 1
        assert tween.cycle_at(25.0) == 2

    def test_progress_never_reaches_one(self):
        tween = LoopingTween(0.0, 1.0, 3.0)
        for i in range(100):
            assert 0.0 <= tween.progress_at(i * 0.07) < 1.0


class TestEasing:
    def test_ease_in_applied(self):
        tween = LoopingTween(0.0, 100.0, 10.0, easing="ease_in")
        assert tween.value_at(5.0) == pytest.approx(25.0)


class TestValidation:
    def test_unknown_easing(self):
        with pytest.raises(ValueError, match="bounce"):
            LoopingTween(0.0, 1.0, 1.0, easing="bounce")

    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_non_positive_duration(self, duration):
        with pytest.raises(ValueError):
            LoopingTween(0.0, 1.0, duration)
