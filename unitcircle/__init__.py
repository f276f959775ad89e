"""unitcircle - An animated unit circle with synchronized sine/cosine curves."""

from unitcircle.circle import format_readout, label_positions, render_circle
from unitcircle.clock import Clock
from unitcircle.commands import Circle, DrawCommand, Line, Polyline, Text
from unitcircle.config import VisualizerConfig
from unitcircle.curves import curve_points, marker_positions, render_curves
from unitcircle.driver import AngleDriver, angle_at, make_angle_system
from unitcircle.easing import EASINGS
from unitcircle.engine import Engine
from unitcircle.layout import Panel, compute_layout, orientation
from unitcircle.state import AngleState
from unitcircle.text import MonospaceMeasurer, TextMeasurer
from unitcircle.tween import LoopingTween
from unitcircle.types import TickContext, Viewport

__all__ = [
    "AngleDriver",
    "AngleState",
    "Circle",
    "Clock",
    "DrawCommand",
    "EASINGS",
    "Engine",
    "Line",
    "LoopingTween",
    "MonospaceMeasurer",
    "Panel",
    "Polyline",
    "Text",
    "TextMeasurer",
    "TickContext",
    "Viewport",
    "VisualizerConfig",
    "angle_at",
    "compute_layout",
    "curve_points",
    "format_readout",
    "label_positions",
    "make_angle_system",
    "marker_positions",
    "orientation",
    "render_circle",
    "render_curves",
]
