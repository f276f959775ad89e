"""Backend-neutral draw commands produced by the renderers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from unitcircle.types import Color, Point

Align = Literal["left", "center"]


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: int = 2


@dataclass(frozen=True)
class Circle:
    """Circle outline, or a filled disc when width is 0."""

    center: Point
    radius: float
    color: Color
    width: int = 0


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    color: Color
    width: int = 2


@dataclass(frozen=True)
class Text:
    """Text anchored on its baseline at pos, aligned horizontally by align."""

    text: str
    pos: Point
    color: Color
    size: int
    align: Align = "left"


DrawCommand = Union[Line, Circle, Polyline, Text]
