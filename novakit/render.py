"""Drawing shapes and text onto the current target surface."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Any

import pygame

from novakit.color import Color
from novakit.geometry import Vec2
from novakit.objects import Circle, Rectangle


@dataclass
class _RenderState:
    surface: pygame.Surface | None = None
    camera: Any = None
    clock: pygame.time.Clock | None = None
    fps: int = 0
    delta: float = 0.0


_state = _RenderState()


def set_target(surface: pygame.Surface | None) -> None:
    """Direct all drawing to ``surface``; ``None`` removes the target."""
    _state.surface = surface


def set_camera(camera: Any) -> None:
    """Draw through a camera with ``target``, ``offset``, ``zoom`` and ``rotation``."""
    _state.camera = camera


def clear_camera() -> None:
    """Draw in screen coordinates."""
    _state.camera = None


def _surface() -> pygame.Surface:
    if _state.surface is None:
        raise RuntimeError("no render target is set")
    return _state.surface


def _pg(color: Color) -> pygame.Color:
    return pygame.Color(color.r, color.g, color.b, color.a)


def _zoom() -> float:
    return 1.0 if _state.camera is None else _state.camera.zoom


def _to_screen(x: float, y: float) -> tuple[float, float]:
    cam = _state.camera
    if cam is None:
        return x, y
    dx = (x - cam.target.x) * cam.zoom
    dy = (y - cam.target.y) * cam.zoom
    angle = math.radians(cam.rotation)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return (
        dx * cos_a - dy * sin_a + cam.offset.x,
        dx * sin_a + dy * cos_a + cam.offset.y,
    )


def _fill_quad(points: list[tuple[float, float]], color: Color) -> None:
    screen = [_to_screen(x, y) for x, y in points]
    xs = [p[0] for p in screen]
    ys = [p[1] for p in screen]
    axis_aligned = len({round(x, 6) for x in xs}) <= 2 and len(
        {round(y, 6) for y in ys}
    ) <= 2
    if axis_aligned:
        left, top = min(xs), min(ys)
        area = pygame.Rect(
            int(left), int(top), int(max(xs) - left), int(max(ys) - top)
        )
        pygame.draw.rect(_surface(), _pg(color), area)
    else:
        pygame.draw.polygon(_surface(), _pg(color), screen)


def _fill_circle(center_x: float, center_y: float, radius: float, color: Color) -> None:
    sx, sy = _to_screen(center_x, center_y)
    pygame.draw.circle(_surface(), _pg(color), (sx, sy), radius * _zoom())


def fill(color: Color) -> None:
    """Fill the whole target with ``color``."""
    _surface().fill(_pg(color))


def rect(left: float, top: float, width: float, height: float, color: Color) -> None:
    right, bottom = left + width, top + height
    _fill_quad([(left, top), (right, top), (right, bottom), (left, bottom)], color)


def draw_rect(rectangle: Rectangle) -> None:
    """Draw a rectangle rotated about its origin, which sits at its position."""
    if not rectangle.visible:
        return
    ox, oy = rectangle.origin.x, rectangle.origin.y
    w, h = rectangle.width, rectangle.height
    angle = math.radians(rectangle.rotation)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    corners = [(-ox, -oy), (w - ox, -oy), (w - ox, h - oy), (-ox, h - oy)]
    points = [
        (rectangle.x + cx * cos_a - cy * sin_a, rectangle.y + cx * sin_a + cy * cos_a)
        for cx, cy in corners
    ]
    _fill_quad(points, rectangle.color)


def circle(center_x: float, center_y: float, radius: float, color: Color) -> None:
    _fill_circle(center_x, center_y, radius, color)


def draw_circle(circle: Circle) -> None:
    if not circle.visible:
        return
    _fill_circle(circle.x, circle.y, circle.radius, circle.color)


def line(x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
    pygame.draw.line(_surface(), _pg(color), _to_screen(x1, y1), _to_screen(x2, y2))


def point(x: float, y: float, color: Color) -> None:
    line(x, y, x, y, color)


def poly(
    x: float, y: float, sides: float, radius: float, color: Color, rotation: float = 0.0
) -> None:
    """Draw a regular polygon with at least three sides centred on ``(x, y)``."""
    count = max(3, int(sides))
    step = 2 * math.pi / count
    start = math.radians(rotation)
    points = [
        _to_screen(
            x + math.cos(start + i * step) * radius,
            y + math.sin(start + i * step) * radius,
        )
        for i in range(count)
    ]
    pygame.draw.polygon(_surface(), _pg(color), points)


@functools.lru_cache(maxsize=32)
def _default_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def text(text: str, x: float, y: float, font_size: int, color: Color) -> None:
    """Draw ``text`` with the default font, its top-left corner at ``(x, y)``."""
    font = _default_font(max(1, int(font_size * _zoom())))
    image = font.render(text, False, _pg(color))
    sx, sy = _to_screen(x, y)
    _surface().blit(image, (int(sx), int(sy)))


def grid_lines(cell_size: Vec2, cells: Vec2, color: Color) -> None:
    """Draw the lines at the top and left of every cell."""
    width = cell_size.x * cells.x
    height = cell_size.y * cells.y
    y = 0.0
    for _ in range(math.ceil(cells.y)):
        line(0.0, y, width, y, color)
        y += cell_size.y
    x = 0.0
    for _ in range(math.ceil(cells.x)):
        line(x, 0.0, x, height, color)
        x += cell_size.x


def grid_boxes(
    cell_size: Vec2, cells: Vec2, line_color: Color, box_color: Color
) -> None:
    """Fill the grid's area with ``box_color``, then draw its lines over it."""
    rect(0.0, 0.0, cells.x * cell_size.x, cells.y * cell_size.y, box_color)
    grid_lines(cell_size, cells, line_color)


def framerate_limit(limit: int) -> None:
    """Cap the frame rate used by :func:`tick`; 0 means no cap."""
    _state.fps = max(0, int(limit))


def delta_time() -> float:
    """Seconds the last frame took."""
    return _state.delta


def tick() -> float:
    """Finish a frame, waiting for the frame-rate cap, and return its duration."""
    if _state.clock is None:
        _state.clock = pygame.time.Clock()
    _state.delta = _state.clock.tick(_state.fps) / 1000.0
    return _state.delta