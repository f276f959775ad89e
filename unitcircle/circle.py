"""Unit circle renderer: axes, radius vector, projections and readout."""
from __future__ import annotations

from unitcircle.commands import Align, Circle, DrawCommand, Line, Text
from unitcircle.constants import (
    AXIS_COLOR,
    AXIS_WIDTH,
    COS_COLOR,
    INK_COLOR,
    LABEL_GAP,
    LABEL_OFFSET,
    LABEL_SIZE,
    RADIUS_COLOR,
    READOUT_SIZE,
    READOUT_X,
    READOUT_Y,
    SIN_COLOR,
    TEXT_PROBE,
    TICK_HALF,
    TITLE_SIZE,
    VECTOR_WIDTH,
)
from unitcircle.geometry import (
    circle_center,
    circle_radius,
    foot_of,
    line_step,
    point_on_circle,
    unit_point,
)
from unitcircle.text import TextMeasurer
from unitcircle.types import Point, Viewport

TICK_MARKS = (-1.0, 0.0, 1.0)


def _one_decimal(value: float) -> str:
    text = f"{value:.1f}"
    # cos(270) and friends round to -0.0
    return "0.0" if text == "-0.0" else text


def format_readout(angle: float) -> list[str]:
    """Textual readout for angle: title, degrees, cos, sin, hypotenuse."""
    x, y = unit_point(angle)
    return [
        "Unit circle",
        f"Angle (θ): {int(angle)}°",
        f"Adjacent (cos): {_one_decimal(x)}",
        f"Opposite (sin): {_one_decimal(y)}",
        "Hypotenuse: 1.0",
    ]


def label_positions(
    center: Point, radius: float, measurer: TextMeasurer
) -> list[Text]:
    """Axis-extreme and axis-name labels, placed from measured text metrics."""
    cx, cy = center
    _, text_h = measurer.size(TEXT_PROBE)

    def width(text: str) -> float:
        return measurer.size(text)[0]

    def label(text: str, pos: Point, align: Align) -> Text:
        return Text(text, pos, INK_COLOR, LABEL_SIZE, align)

    return [
        label("+1.0", (cx + radius + width("+1.0") / 4, cy + text_h), "left"),
        label(
            "+1.0",
            (cx + width("+1.0") / 2 + LABEL_GAP, cy - radius - LABEL_OFFSET),
            "center",
        ),
        label(
            "-1.0",
            (cx - radius - LABEL_OFFSET - width("-1.0"), cy + text_h),
            "left",
        ),
        label(
            "-1.0",
            (cx + width("-1.0") / 2 + LABEL_GAP, cy + radius + LABEL_OFFSET + text_h),
            "center",
        ),
        label("x", (width("x") / 2, cy + text_h), "left"),
        label("y", (cx + width("y"), text_h), "center"),
    ]


def _readout(angle: float) -> list[DrawCommand]:
    commands: list[DrawCommand] = []
    y = READOUT_Y + TITLE_SIZE
    for i, line in enumerate(format_readout(angle)):
        size = TITLE_SIZE if i == 0 else READOUT_SIZE
        if i > 0:
            y += line_step(size)
        commands.append(Text(line, (READOUT_X, y), INK_COLOR, size))
    return commands


def render_circle(
    angle: float, viewport: Viewport, measurer: TextMeasurer
) -> list[DrawCommand]:
    """Draw commands for one frame of the unit circle view."""
    center = circle_center(viewport)
    radius = circle_radius(viewport)
    cx, cy = center

    commands: list[DrawCommand] = [
        Line((0, cy), (viewport.width, cy), AXIS_COLOR, AXIS_WIDTH),
        Line((cx, 0), (cx, viewport.height), AXIS_COLOR, AXIS_WIDTH),
    ]

    for mark in TICK_MARKS:
        x_pos = cx + mark * radius
        commands.append(
            Line((x_pos, cy - TICK_HALF), (x_pos, cy + TICK_HALF), INK_COLOR, AXIS_WIDTH)
        )
        y_pos = cy - mark * radius
        commands.append(
            Line((cx - TICK_HALF, y_pos), (cx + TICK_HALF, y_pos), INK_COLOR, AXIS_WIDTH)
        )

    commands.append(Circle(center, radius, INK_COLOR, AXIS_WIDTH))

    point = point_on_circle(center, radius, angle)
    foot = foot_of(point, center)
    commands.append(Line(center, point, RADIUS_COLOR, VECTOR_WIDTH))
    commands.append(Line(center, foot, COS_COLOR, VECTOR_WIDTH))
    commands.append(Line(foot, point, SIN_COLOR, VECTOR_WIDTH))

    commands.extend(label_positions(center, radius, measurer))
    commands.extend(_readout(angle))
    return commands
