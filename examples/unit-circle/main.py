"""Unit Circle — animated unit circle with synchronized sine/cosine curves.

The angle sweeps 0 -> 360 degrees in 14.4 s (40 ms per degree) and loops.
Portrait windows stack the circle above the curves; landscape windows put
them side by side.

Controls:
  Space   Pause / Resume
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from unitcircle import (
    AngleDriver,
    AngleState,
    Engine,
    VisualizerConfig,
    compute_layout,
    make_angle_system,
    orientation,
    render_circle,
    render_curves,
)
from unitcircle.constants import BG_COLOR, LABEL_SIZE
from unitcircle.easing import EASINGS

from ui.canvas import FontCache, draw_commands, draw_panel_border
from ui.constants import CAPTION, MIN_H, MIN_W, PAUSED_COLOR

logger = logging.getLogger("unit_circle")


def parse_args() -> argparse.Namespace:
    defaults = VisualizerConfig()
    p = argparse.ArgumentParser(description="Animated unit circle with sin/cos curves")
    p.add_argument("--width", type=int, default=defaults.width, help=f"Window width (default: {defaults.width})")
    p.add_argument("--height", type=int, default=defaults.height, help=f"Window height (default: {defaults.height})")
    p.add_argument("--fps", type=int, default=defaults.fps, help=f"Frames per second (default: {defaults.fps})")
    p.add_argument("--tps", type=int, default=defaults.tps, help=f"Engine ticks per second (default: {defaults.tps})")
    p.add_argument("--cycle", type=float, default=defaults.cycle_seconds,
                   help=f"Seconds per full turn (default: {defaults.cycle_seconds})")
    p.add_argument("--easing", choices=sorted(EASINGS), default=defaults.easing,
                   help="Easing of the sweep (default: linear)")
    p.add_argument("--angle", type=float, default=None, metavar="DEG",
                   help="Freeze the animation at DEG degrees")
    p.add_argument("--screenshot", type=str, default=None, metavar="FILE",
                   help="Render a single frame to FILE and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.width = max(MIN_W, args.width)
    args.height = max(MIN_H, args.height)
    return args


class Visualizer:
    """Owns the engine, the shared angle and the per-frame rendering."""

    def __init__(self, config: VisualizerConfig, frozen_angle: float | None = None) -> None:
        self.config = config
        self.engine = Engine(tps=config.tps)
        self.state = AngleState()
        self.driver = AngleDriver(self.state, config.cycle_seconds, config.easing)
        self.paused = False
        self.frozen = frozen_angle is not None
        self.dirty = True

        self.state.subscribe(self._on_angle_changed)
        if self.frozen:
            self.state.set(frozen_angle % 360.0)
            self.state.flush()
        else:
            self.engine.add_system(make_angle_system(self.driver))

        self.fonts = FontCache()
        self.resize(config.width, config.height)

    def _on_angle_changed(self, old: float, new: float) -> None:
        self.dirty = True

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.layout = compute_layout(width, height)
        self.dirty = True
        logger.info("layout %dx%d (%s)", width, height, orientation(width, height))

    def tick(self) -> None:
        if not (self.paused or self.frozen):
            self.engine.step()

    def render(self, surface: pygame.Surface) -> None:
        angle = self.state.value
        surface.fill(BG_COLOR)

        circle_panel = self.layout["circle"]
        curve_panel = self.layout["curves"]
        measurer = self.fonts.get(LABEL_SIZE)
        draw_commands(
            surface,
            circle_panel,
            render_circle(angle, circle_panel.viewport, measurer),
            self.fonts,
        )
        draw_commands(surface, curve_panel, render_curves(angle, curve_panel.viewport), self.fonts)
        draw_panel_border(surface, curve_panel)

        if self.paused:
            label = self.fonts.get(LABEL_SIZE).render("PAUSED", True, PAUSED_COLOR)
            surface.blit(label, (self.width - label.get_width() - 12, 8))
        self.dirty = False


def save_screenshot(viz: Visualizer, path: str) -> None:
    surface = pygame.Surface((viz.width, viz.height))
    viz.render(surface)
    pygame.image.save(surface, path)
    logger.info("saved frame at %.1f° to %s", viz.state.value, path)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = VisualizerConfig(
            cycle_seconds=args.cycle,
            tps=args.tps,
            fps=args.fps,
            width=args.width,
            height=args.height,
            easing=args.easing,
        )
    except ValueError as exc:
        logger.error("invalid settings: %s", exc)
        sys.exit(2)

    pygame.init()
    viz = Visualizer(config, frozen_angle=args.angle)

    if args.screenshot:
        save_screenshot(viz, args.screenshot)
        pygame.quit()
        return

    screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()
    logger.info("running at %d fps, %d tps, %.1fs per turn", config.fps, config.tps, config.cycle_seconds)

    tick_interval = 1.0 / config.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(config.fps) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    viz.paused = not viz.paused
                    viz.dirty = True

            elif event.type == pygame.VIDEORESIZE:
                width = max(MIN_W, event.w)
                height = max(MIN_H, event.h)
                screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
                viz.resize(width, height)

        # --- Tick ---
        while accumulator >= tick_interval:
            viz.tick()
            accumulator -= tick_interval

        # --- Render ---
        if viz.dirty:
            viz.render(screen)
            pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
