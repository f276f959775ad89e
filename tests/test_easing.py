"""Tests for easing functions."""

import pytest
from unitcircle import EASINGS
from unitcircle.easing import get_easing


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_endpoints(name):
    """Every easing maps 0 -> 0 and 1 -> 1."""
    fn = EASINGS[name]
    assert fn(0.0) == 0.0
    assert fn(1.0) == 1.0


class TestMidpoints:
    """Values at t=0.5."""

    def test_linear(self):
        assert EASINGS["linear"](0.5) == 0.5

    def test_ease_in(self):
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out(self):
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out(self):
        assert EASINGS["ease_in_out"](0.5) == 0.5


def test_get_easing_unknown_name():
    assert get_easing("linear")(0.3) == 0.3
    with pytest.raises(ValueError, match="elastic"):
        get_easing("elastic")
