import pygame
import pytest

from novakit import render
from novakit.color import RED, WHITE, Color
from novakit.geometry import Vec2
from novakit.input import Key, current_state, key_hit
from novakit.window import Camera, Window


def _rgba(color):
    return (color.r, color.g, color.b, color.a)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def window(headless):
    win = Window(64, 48, "Test")
    yield win
    win.close()
    state = current_state()
    state.begin_frame()
    state.keys_down.clear()
    state.buttons_down.clear()


def test_window_size_and_caption(window):
    assert window.surface.get_size() == (64, 48)
    assert pygame.display.get_caption()[0] == "Test"


def test_camera_defaults():
    cam = Camera()
    assert cam.zoom == 1.0
    assert cam.rotation == 0.0
    assert cam.target == Vec2()


def test_open_until_quit(window):
    assert window.is_open() is True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.is_open() is False


def test_escape_closes(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=int(Key.Escape)))
    assert window.is_open() is False


def test_events_reach_input_state(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=int(Key.A)))
    assert window.is_open() is True
    assert key_hit(Key.A) is True
    window.is_open()
    assert key_hit(Key.A) is False


def test_frame_cycle_draws(window):
    window.start()
    render.fill(WHITE)
    window.end()
    assert window.surface.get_at((10, 10)) == _rgba(WHITE)


def test_camera_applies_until_ui_mode(window):
    window.camera.target = Vec2(10, 0)
    window.start()
    render.fill(Color(0, 0, 0, 255))
    render.rect(10, 0, 4, 4, RED)
    window.ui_mode()
    render.rect(30, 30, 4, 4, WHITE)
    window.end()
    assert window.surface.get_at((1, 1)) == _rgba(RED)
    assert window.surface.get_at((31, 31)) == _rgba(WHITE)


def test_center_camera(window):
    window.center_camera(100, 100)
    assert window.camera.target == Vec2(68, 76)
    first = Vec2(window.camera.target.x, window.camera.target.y)
    window.center_camera(110, 95)
    assert window.camera.target.x - first.x == 10
    assert window.camera.target.y - first.y == -5


def test_axis_matches_window(window):
    axis = window.axis()
    assert axis.overflow_x(65) is True
    assert axis.at_right(64) is False
    assert axis.at_bottom(49) is True


def test_close_is_final_and_repeatable(headless):
    with Window(32, 32, "Ctx") as win:
        assert win.is_open() is True
    assert win.is_open() is False
    win.close()
    with pytest.raises(RuntimeError):
        render.fill(WHITE)