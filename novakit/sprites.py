"""Loaded images, raw textures, spritesheets and frame animations."""

from __future__ import annotations

import itertools
import math

import pygame

from novakit import logger, render
from novakit.color import WHITE, Color
from novakit.geometry import Vec2
from novakit.objects import Object4

_texture_ids = itertools.count(1)


def _load(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        logger.warn(f"could not load texture `{path}`: {exc}")
        return None


def _blit_rotated(piece: pygame.Surface, x: float, y: float, origin: Vec2,
                  rotation: float) -> None:
    """Draw ``piece`` with its ``origin`` at ``(x, y)``, rotated about it."""
    zoom = render._zoom()
    cam_rot = 0.0 if render._state.camera is None else render._state.camera.rotation
    w, h = piece.get_size()
    cx, cy = w / 2 - origin.x, h / 2 - origin.y
    angle = math.radians(rotation)
    wx = x + cx * math.cos(angle) - cy * math.sin(angle)
    wy = y + cx * math.sin(angle) + cy * math.cos(angle)
    sx, sy = render._to_screen(wx, wy)
    total = rotation + cam_rot
    image = piece if total == 0 and zoom == 1 else pygame.transform.rotozoom(
        piece, -total, zoom
    )
    area = image.get_rect()
    area.center = (round(sx), round(sy))
    if image is piece:
        area.topleft = (round(sx - w / 2), round(sy - h / 2))
    render._surface().blit(image, area)


class RenderImage(Object4):
    """An object drawn with an image loaded from a file.

    The origin is fixed at the top-left corner when the image is created.
    """

    def __init__(self, x: float, y: float, path: str, rotation: float = 0.0) -> None:
        super().__init__(x, y, 0, 0, rotation)
        self.path = path
        self.texture = _load(path)
        if self.texture is not None:
            self.width, self.height = self.texture.get_size()

    def dispose(self) -> None:
        self.texture = None


class RawTexture:
    """An image file loaded for plain drawing."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.texture = _load(path)
        self._id = next(_texture_ids) if self.texture is not None else 0

    def size(self) -> Vec2:
        if self.texture is None:
            return Vec2(0, 0)
        return Vec2(*self.texture.get_size())

    def texture_id(self) -> int:
        """A unique positive id, or 0 when nothing was loaded."""
        return self._id

    def mipmaps(self) -> int:
        return 1 if self.texture is not None else 0


def draw_image(image: RenderImage) -> None:
    if not image.visible or image.texture is None:
        return
    _blit_rotated(image.texture, image.x, image.y, image.origin, image.rotation)


def draw_texture(texture: RawTexture, x: float, y: float, tint: Color = WHITE) -> None:
    if texture.texture is None:
        return
    piece = texture.texture
    if tint != WHITE:
        piece = piece.convert_alpha() if pygame.display.get_surface() else piece.copy()
        piece.fill((tint.r, tint.g, tint.b, tint.a), special_flags=pygame.BLEND_RGBA_MULT)
    _blit_rotated(piece, x, y, Vec2(0, 0), 0.0)


def image_loaded(image: RenderImage) -> bool:
    """True when the image holds no texture."""
    return image.texture is None


class Spritesheet:
    """An image cut into equally sized frames."""

    def __init__(self, path: str, x: float, y: float, frame_width: float,
                 frame_height: float) -> None:
        self.x = x
        self.y = y
        self.image = RenderImage(x, y, path)
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.row = 0
        self.column = 0
        self.rows = 0
        self.columns = 0
        self.recalculate_rows()
        self.recalculate_columns()

    def recalculate_rows(self) -> None:
        self.rows = int(self.image.height // self.frame_height)

    def recalculate_columns(self) -> None:
        self.columns = int(self.image.width // self.frame_width)

    def render(self) -> None:
        """Draw the frame at the current row and column."""
        if not self.image.visible or self.image.texture is None:
            return
        texture = self.image.texture
        frame = pygame.Rect(
            int(self.frame_width * self.column), int(self.frame_height * self.row),
            int(self.frame_width), int(self.frame_height),
        ).clip(texture.get_rect())
        if frame.width == 0 or frame.height == 0:
            return
        _blit_rotated(texture.subsurface(frame), self.x, self.y,
                      self.image.origin, self.image.rotation)

    def dispose(self) -> None:
        self.image.dispose()


class Animation(Spritesheet):
    """Steps through the columns of a spritesheet over time."""

    def __init__(self, path: str, x: float, y: float, frame_width: float,
                 frame_height: float) -> None:
        super().__init__(path, x, y, frame_width, frame_height)
        self.framerate = 0.0
        self.frame_time = 0.0
        self.fps = 0
        self.loop = False
        self._first_time = True

    def set_framerate(self, framerate: float) -> None:
        self.framerate = 1 / framerate
        self.frame_time = self.framerate
        self.fps = int(framerate)

    def get_framerate(self) -> int:
        return self.fps

    def play(self, delta: float) -> None:
        """Advance by ``delta`` seconds, moving to the next column when due."""
        if self._first_time:
            self._first_time = False
            self.column = 0
        self.frame_time -= delta
        if self.frame_time <= 0.0:
            self.frame_time = self.framerate
            if self.column < self.columns - 1:
                self.column += 1
            elif self.loop:
                self.column = 0