"""Angle driver: loops the shared angle from 0 to 360 degrees forever."""
from __future__ import annotations

import logging
from typing import Callable

from unitcircle.constants import CYCLE_SECONDS, FULL_TURN
from unitcircle.state import AngleState
from unitcircle.tween import LoopingTween
from unitcircle.types import TickContext

logger = logging.getLogger(__name__)


def angle_at(elapsed: float, cycle_seconds: float = CYCLE_SECONDS) -> float:
    """Map elapsed seconds to the animated angle in [0, 360)."""
    return LoopingTween(0.0, FULL_TURN, cycle_seconds).value_at(elapsed)


class AngleDriver:
    def __init__(
        self,
        state: AngleState,
        cycle_seconds: float = CYCLE_SECONDS,
        easing: str = "linear",
    ) -> None:
        self._state = state
        self._tween = LoopingTween(0.0, FULL_TURN, cycle_seconds, easing)
        self._cycles = 0

    @property
    def state(self) -> AngleState:
        return self._state

    @property
    def cycles(self) -> int:
        return self._cycles

    def update(self, elapsed: float) -> float:
        cycle = self._tween.cycle_at(elapsed)
        if cycle > self._cycles:
            self._cycles = cycle
            logger.debug("angle cycle %d complete at %.3fs", cycle, elapsed)
        angle = self._tween.value_at(elapsed)
        self._state.set(angle)
        return angle


def make_angle_system(driver: AngleDriver) -> Callable[[TickContext], None]:
    def angle_system(ctx: TickContext) -> None:
        driver.update(ctx.elapsed)
        driver.state.flush()

    return angle_system
