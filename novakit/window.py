"""The game window, its 2D camera and the per-frame drawing cycle."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from novakit import logger, render
from novakit.geometry import Axis, Vec2
from novakit.input import Key, current_state

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_CAPTION = "Game"


@dataclass
class Camera:
    """A 2D camera: world ``target`` appears at screen ``offset``."""

    target: Vec2 = field(default_factory=Vec2)
    offset: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0
    rotation: float = 0.0


class Window:
    """Opens a display and drives the start/end drawing cycle."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        caption: str = DEFAULT_CAPTION,
    ) -> None:
        self.width = width
        self.height = height
        self.caption = caption
        self.camera = Camera()
        self._should_close = False
        self._closed = False
        pygame.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warn(f"audio device unavailable: {exc}")
        render.set_target(self.surface)

    def is_open(self) -> bool:
        """Process pending events; False once closed, quit or Escape was pressed."""
        if self._closed:
            return False
        state = current_state()
        state.begin_frame()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._should_close = True
            state.handle_event(event)
        if state.key_hit(Key.Escape):
            self._should_close = True
        return not self._should_close

    def start(self) -> None:
        """Begin a frame, drawing through the camera."""
        render.set_target(self.surface)
        render.set_camera(self.camera)

    def ui_mode(self) -> None:
        """Draw the rest of the frame in screen coordinates."""
        render.clear_camera()

    def end(self) -> None:
        """Show the frame and wait for the frame-rate cap."""
        render.clear_camera()
        pygame.display.flip()
        render.tick()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        render.clear_camera()
        render.set_target(None)
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.display.quit()

    def center_camera(self, x: float, y: float) -> None:
        """Point the camera so that ``(x, y)`` sits at the centre of the screen."""
        screen_w, screen_h = self.surface.get_size()
        self.camera.target.x = x - screen_w // 2
        self.camera.target.y = y - screen_h // 2

    def axis(self) -> Axis:
        return Axis(self.width, self.height)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()