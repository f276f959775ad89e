"""Window layout: split into a circle panel and a curve panel by orientation."""
from __future__ import annotations

from dataclasses import dataclass

from unitcircle.types import Viewport


@dataclass(frozen=True)
class Panel:
    x: int
    y: int
    width: int
    height: int

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.width, self.height)


def orientation(width: int, height: int) -> str:
    return "portrait" if height > width else "landscape"


def compute_layout(width: int, height: int) -> dict[str, Panel]:
    """Portrait stacks circle over curves; landscape puts them side by side."""
    if orientation(width, height) == "portrait":
        half = height // 2
        return {
            "circle": Panel(0, 0, width, half),
            "curves": Panel(0, half, width, height - half),
        }
    half = width // 2
    return {
        "circle": Panel(0, 0, half, height),
        "curves": Panel(half, 0, width - half, height),
    }
