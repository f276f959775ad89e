"""Sine/cosine curve renderer, rebuilt up to the current angle every frame."""
from __future__ import annotations

from unitcircle.commands import Circle, DrawCommand, Line, Polyline, Text
from unitcircle.constants import (
    AXIS_COLOR,
    AXIS_WIDTH,
    COS_COLOR,
    CURVE_PADDING,
    FULL_TURN,
    LEGEND_SIZE,
    MARKER_RADIUS,
    READOUT_X,
    READOUT_Y,
    SAMPLE_POINTS,
    SIN_COLOR,
    VECTOR_WIDTH,
)
from unitcircle.geometry import curve_x, curve_y, line_step, sample_count, unit_point
from unitcircle.types import Point, Viewport

LEGEND = (("Sine (sin)", SIN_COLOR), ("Cosine (cos)", COS_COLOR))


def curve_points(
    angle: float, viewport: Viewport
) -> tuple[list[Point], list[Point]]:
    """Sine and cosine polylines sampled every degree from 0 to angle."""
    step = FULL_TURN / SAMPLE_POINTS
    sin_points: list[Point] = []
    cos_points: list[Point] = []
    for i in range(sample_count(angle) + 1):
        sample_angle = i * step
        cos_value, sin_value = unit_point(sample_angle)
        x = curve_x(sample_angle, viewport)
        sin_points.append((x, curve_y(sin_value, viewport)))
        cos_points.append((x, curve_y(cos_value, viewport)))
    return sin_points, cos_points


def marker_positions(angle: float, viewport: Viewport) -> tuple[Point, Point]:
    """Exact sine and cosine positions for angle, without quantization."""
    cos_value, sin_value = unit_point(angle)
    x = curve_x(angle, viewport)
    return (x, curve_y(sin_value, viewport)), (x, curve_y(cos_value, viewport))


def render_curves(angle: float, viewport: Viewport) -> list[DrawCommand]:
    """Draw commands for one frame of the curve view."""
    w, h = viewport.width, viewport.height
    commands: list[DrawCommand] = [
        Line((CURVE_PADDING, CURVE_PADDING), (CURVE_PADDING, h - CURVE_PADDING), AXIS_COLOR, AXIS_WIDTH),
        Line((CURVE_PADDING, h / 2), (w - CURVE_PADDING, h / 2), AXIS_COLOR, AXIS_WIDTH),
    ]

    sin_points, cos_points = curve_points(angle, viewport)
    commands.append(Polyline(tuple(sin_points), SIN_COLOR, VECTOR_WIDTH))
    commands.append(Polyline(tuple(cos_points), COS_COLOR, VECTOR_WIDTH))

    sin_marker, cos_marker = marker_positions(angle, viewport)
    commands.append(Circle(sin_marker, MARKER_RADIUS, SIN_COLOR))
    commands.append(Circle(cos_marker, MARKER_RADIUS, COS_COLOR))

    y = READOUT_Y + LEGEND_SIZE
    for text, color in LEGEND:
        commands.append(Text(text, (READOUT_X, y), color, LEGEND_SIZE))
        y += line_step(LEGEND_SIZE)
    return commands
