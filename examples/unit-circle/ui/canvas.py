"""Executes backend-neutral draw commands on a pygame surface."""
from __future__ import annotations

import pygame

from unitcircle import Circle, DrawCommand, Line, Panel, Polyline, Text

from ui.constants import FONT_NAME, PANEL_BORDER


class FontCache:
    """SysFont instances keyed by pixel size."""

    def __init__(self, name: str = FONT_NAME) -> None:
        self._name = name
        self._fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(self._name, size)
            self._fonts[size] = font
        return font


def draw_commands(
    surface: pygame.Surface,
    panel: Panel,
    commands: list[DrawCommand],
    fonts: FontCache,
) -> None:
    """Draw commands into panel, translating panel-local coordinates."""
    ox, oy = panel.x, panel.y

    def at(p: tuple[float, float]) -> tuple[float, float]:
        return p[0] + ox, p[1] + oy

    previous_clip = surface.get_clip()
    surface.set_clip(pygame.Rect(panel.x, panel.y, panel.width, panel.height))

    for cmd in commands:
        if isinstance(cmd, Line):
            pygame.draw.line(surface, cmd.color, at(cmd.start), at(cmd.end), cmd.width)
        elif isinstance(cmd, Circle):
            pygame.draw.circle(surface, cmd.color, at(cmd.center), cmd.radius, cmd.width)
        elif isinstance(cmd, Polyline):
            # pygame needs two points for a path
            if len(cmd.points) > 1:
                points = [at(p) for p in cmd.points]
                pygame.draw.lines(surface, cmd.color, False, points, cmd.width)
        elif isinstance(cmd, Text):
            font = fonts.get(cmd.size)
            label = font.render(cmd.text, True, cmd.color)
            x, y = at(cmd.pos)
            if cmd.align == "center":
                x -= label.get_width() / 2
            surface.blit(label, (x, y - font.get_ascent()))

    surface.set_clip(previous_clip)


def draw_panel_border(surface: pygame.Surface, panel: Panel) -> None:
    pygame.draw.rect(surface, PANEL_BORDER, (panel.x, panel.y, panel.width, panel.height), 1)
