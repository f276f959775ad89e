"""Looping tween: a value interpolated over a fixed period, repeated forever."""
from __future__ import annotations

import math
from dataclasses import dataclass

from unitcircle.easing import get_easing

_BOUNDARY_TOLERANCE = 1e-9


@dataclass(frozen=True)
class LoopingTween:
    """Interpolates start_val -> end_val over duration seconds, then snaps back.

    The end value itself is never produced: at every multiple of duration the
    tween is back at start_val.
    """

    start_val: float
    end_val: float
    duration: float
    easing: str = "linear"

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        get_easing(self.easing)

    def _phase(self, elapsed: float) -> tuple[int, float]:
        q = elapsed / self.duration
        nearest = round(q)
        # Boundary times like 5 * 14.4 miss the integer by an ulp either way.
        if abs(q - nearest) < _BOUNDARY_TOLERANCE:
            return nearest, 0.0
        cycle = math.floor(q)
        return cycle, q - cycle

    def progress_at(self, elapsed: float) -> float:
        """Normalized position in the current cycle, in [0, 1)."""
        return self._phase(elapsed)[1]

    def value_at(self, elapsed: float) -> float:
        eased_t = get_easing(self.easing)(self.progress_at(elapsed))
        return self.start_val + (self.end_val - self.start_val) * eased_t

    def cycle_at(self, elapsed: float) -> int:
        return self._phase(elapsed)[0]
