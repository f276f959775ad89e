"""Visualizer configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from unitcircle.constants import CYCLE_SECONDS
from unitcircle.easing import get_easing


@dataclass(frozen=True)
class VisualizerConfig:
    """Immutable settings for the animated unit circle.

    Attributes:
        cycle_seconds: Wall-clock length of one 0 -> 360 degree sweep.
        tps: Engine ticks per second driving the angle.
        fps: Render frames per second.
        width: Initial window width in pixels.
        height: Initial window height in pixels.
        easing: Name of the easing applied to the sweep.
    """

    cycle_seconds: float = CYCLE_SECONDS
    tps: int = 25
    fps: int = 60
    width: int = 900
    height: int = 600
    easing: str = "linear"

    def __post_init__(self) -> None:
        for name in ("cycle_seconds", "tps", "fps", "width", "height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        get_easing(self.easing)
