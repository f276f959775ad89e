"""Easing curves applied to the normalized sweep position t in [0, 1]."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def ease_in_out(t: float) -> float:
    """Quadratic in for the first half, quadratic out for the second."""
    if t < 0.5:
        return 2 * t * t
    u = 1 - t
    return 1 - 2 * u * u


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def get_easing(name: str) -> Easing:
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(f"Unknown easing {name!r}") from None
