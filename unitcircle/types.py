"""Shared value types and aliases for the unit circle visualizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Point = tuple[float, float]
Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


@dataclass(frozen=True, slots=True)
class Viewport:
    """Size of one drawing panel, in pixels."""

    width: float
    height: float


System = Callable[[TickContext], None]
