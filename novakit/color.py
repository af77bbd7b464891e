"""RGBA colours with clamped brightening and darkening."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} is outside 0..255")

    def brighten(self, r: int, g: int, b: int, a: int) -> None:
        """Add to each channel, clamping at 255."""
        self.r = min(255, self.r + r)
        self.g = min(255, self.g + g)
        self.b = min(255, self.b + b)
        self.a = min(255, self.a + a)

    def darken(self, r: int, g: int, b: int, a: int) -> None:
        """Subtract from each channel, clamping at 0."""
        self.r = max(0, self.r - r)
        self.g = max(0, self.g - g)
        self.b = max(0, self.b - b)
        self.a = max(0, self.a - a)


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
RED = Color(230, 41, 55, 255)

MODAL_WINDOW_COLOR_DEFAULT = Color(20, 20, 20, 255)
MODAL_WINDOW_COLOR_LIGHT = Color(250, 250, 250, 255)
MODAL_WINDOW_COLOR_NIGHT = Color(20, 50, 20, 255)