"""Pure geometry for the circle and curve views.

Screen coordinates grow rightwards and downwards, so every mapping from a
mathematical y value to pixels subtracts from the reference line.
"""
from __future__ import annotations

import math

from unitcircle.constants import (
    CENTER_OFFSET_Y,
    CURVE_PADDING,
    FULL_TURN,
    LINE_SPACING,
    SAMPLE_POINTS,
)
from unitcircle.types import Point, Viewport


def unit_point(angle: float) -> Point:
    """Return (cos, sin) of angle given in degrees."""
    theta = math.radians(angle)
    return math.cos(theta), math.sin(theta)


def circle_center(viewport: Viewport) -> Point:
    return viewport.width / 2, viewport.height / 2 + CENTER_OFFSET_Y


def circle_radius(viewport: Viewport) -> float:
    return min(viewport.width, viewport.height) / 3


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    x, y = unit_point(angle)
    return center[0] + x * radius, center[1] - y * radius


def foot_of(point: Point, center: Point) -> Point:
    """Projection of point onto the horizontal axis through center."""
    return point[0], center[1]


def sample_count(angle: float) -> int:
    """Index of the last curve sample drawn for angle (inclusive)."""
    n = int(angle / FULL_TURN * SAMPLE_POINTS)
    return max(0, min(n, SAMPLE_POINTS))


def curve_size(viewport: Viewport) -> tuple[float, float]:
    return (
        viewport.width - 2 * CURVE_PADDING,
        viewport.height - 2 * CURVE_PADDING,
    )


def curve_x(angle: float, viewport: Viewport) -> float:
    curve_w, _ = curve_size(viewport)
    return CURVE_PADDING + (angle / FULL_TURN) * curve_w


def curve_y(value: float, viewport: Viewport) -> float:
    _, curve_h = curve_size(viewport)
    return viewport.height / 2 - value * (curve_h / 2)


def line_step(size: int) -> int:
    """Baseline-to-baseline distance for stacked text of the given size."""
    return math.ceil(size * LINE_SPACING)
