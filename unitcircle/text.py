"""Text measurement interface used for label placement."""
from __future__ import annotations

from typing import Protocol


class TextMeasurer(Protocol):
    """Anything that reports the rendered (width, height) of a string.

    ``pygame.font.Font`` satisfies this protocol as-is.
    """

    def size(self, text: str) -> tuple[int, int]: ...


class MonospaceMeasurer:
    """Deterministic measurer: every glyph is char_width wide."""

    def __init__(self, char_width: int = 10, line_height: int = 16) -> None:
        if char_width <= 0 or line_height <= 0:
            raise ValueError("glyph metrics must be positive")
        self.char_width = char_width
        self.line_height = line_height

    def size(self, text: str) -> tuple[int, int]:
        return len(text) * self.char_width, self.line_height
