"""A small 2D game toolkit on top of pygame: window, drawing, input, UI, sprites, audio and helpers."""

__version__ = "1.0.0"