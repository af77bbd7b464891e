"""Immediate-mode widgets: buttons, text entries, labels, popups and menus."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass, field, replace

import pygame

from novakit import input as nk_input
from novakit import render
from novakit.color import BLACK, RED, WHITE, Color
from novakit.geometry import Vec2


class UIEvent(enum.Enum):
    CLICK = "click"
    HOVER = "hover"
    NONE = "none"


class PopupEvent(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass
class _UIState:
    use_default_font: bool = True
    font_name: str = ""
    padding: Vec2 = field(default_factory=lambda: Vec2(10, 10))
    spacing: int = 10


_state = _UIState()


def set_padding(x: float | Vec2, y: float | None = None) -> None:
    """Set widget padding from two numbers or from a vector."""
    if isinstance(x, Vec2):
        _state.padding = Vec2(x.x, x.y)
    else:
        _state.padding = Vec2(x, x if y is None else y)


def get_padding() -> Vec2:
    return Vec2(_state.padding.x, _state.padding.y)


def set_spacing(spacing: int) -> None:
    _state.spacing = spacing


def get_spacing() -> int:
    return _state.spacing


def set_font(font_name: str) -> None:
    """Use the font file ``font_name`` for widget text."""
    _state.font_name = font_name
    _state.use_default_font = False


def get_font_name() -> str:
    return _state.font_name


def unload_font() -> None:
    """Return to the default font."""
    _state.use_default_font = True


@functools.lru_cache(maxsize=64)
def _load_font(name: str | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(name, size)


def _font(font_size: int) -> pygame.font.Font:
    name = None if _state.use_default_font else _state.font_name
    return _load_font(name, max(1, int(font_size)))


def text_pixel_size(text: str, font_size: int) -> Vec2:
    """Width of ``text`` in pixels and the font size as its height."""
    font = _font(font_size)
    if _state.use_default_font:
        return Vec2(font.size(text)[0], font_size)
    widths = [font.size(ch)[0] for ch in text]
    gaps = _state.spacing * max(0, len(widths) - 1)
    return Vec2(sum(widths) + gaps, font_size)


def widget_size(text: str, font_size: int) -> Vec2:
    """Text size plus padding on every side."""
    size = text_pixel_size(text, font_size)
    size += _state.padding * Vec2(2, 2)
    return size


def _draw_custom(text: str, x: float, y: float, font_size: int, color: Color) -> None:
    font = _font(font_size)
    surface = render._surface()
    pen_x = x
    for ch in text:
        image = font.render(ch, False, pygame.Color(color.r, color.g, color.b, color.a))
        sx, sy = render._to_screen(pen_x, y)
        surface.blit(image, (int(sx), int(sy)))
        pen_x += image.get_width() + _state.spacing


def _draw_text(text: str, pos: Vec2, font_size: int, default_color: Color,
               custom_color: Color) -> None:
    if _state.use_default_font:
        render.text(text, pos.x, pos.y, font_size, default_color)
    else:
        _draw_custom(text, pos.x, pos.y, font_size, custom_color)


def ui_button(text: str, position: Vec2, background: Color, foreground: Color,
              font_size: int) -> UIEvent:
    """Draw a button and report whether it is hovered or clicked this frame."""
    result = UIEvent.NONE
    size = widget_size(text, font_size)
    shade = replace(background)
    if nk_input.mouse_hover(position.x, position.y, size.x, size.y):
        result = UIEvent.HOVER
        shade.brighten(20, 20, 20, 0)
    if nk_input.mouse_click(position.x, position.y, size.x, size.y):
        result = UIEvent.CLICK
        shade.brighten(40, 40, 40, 0)
    display = Vec2(position.x, position.y)
    display += _state.padding
    render.rect(position.x, position.y, size.x, size.y, shade)
    _draw_text(text, display, font_size, foreground, WHITE)
    return result


def ui_text_input(target: str, position: Vec2, background: Color, foreground: Color,
                  font_size: int, focused: bool = True) -> str:
    """Draw a text entry, apply this frame's typing when focused, return the text."""
    if focused:
        ch = nk_input.current_state().pop_char()
        if ch and 32 <= ord(ch) <= 126:
            target += ch
        if nk_input.key_hit(nk_input.Key.Backspace) and target:
            target = target[:-1]
    size = widget_size(target, font_size)
    size.x = max(225, int(size.x))
    shade = replace(background)
    if nk_input.mouse_hover(position.x, position.y, size.x, size.y):
        shade.brighten(20, 20, 20, 0)
    display = Vec2(position.x, position.y)
    display += _state.padding
    render.rect(position.x, position.y, size.x, size.y, shade)
    _draw_text(target, display, font_size, foreground, WHITE)
    if focused:
        cursor_x = display.x + text_pixel_size(target, font_size).x
        render.text("|", cursor_x, display.y, font_size, WHITE)
    return target


def ui_label(text: str, pos: Vec2, font_size: int, color: Color) -> None:
    _draw_text(text, pos, font_size, color, color)


@dataclass
class Popup:
    """A titled dialog box with a close button."""

    title: str
    x: float
    y: float
    width: float
    height: float
    background: Color
    visible: bool = True

    def show(self) -> PopupEvent:
        if not self.visible:
            return PopupEvent.CLOSED
        close_pos = Vec2(self.x + self.width - 32, self.y)
        render.rect(self.x, self.y, self.width, self.height, self.background)
        render.text(self.title, self.x + 10, self.y + 10, 18, BLACK)
        if ui_button("X", close_pos, RED, WHITE, 20) is UIEvent.CLICK:
            self.visible = False
            return PopupEvent.CLOSED
        return PopupEvent.OPEN


@dataclass
class MenuResult:
    option: str = ""
    clicked: bool = False


class Menu:
    """A button that toggles a drop-down list of option buttons."""

    def __init__(self, label: str, position: Vec2, font_size: int) -> None:
        self.label = label
        self.position = position
        self.font_size = font_size
        self.options: list[str] = []
        self.opened = False
        self.dropdown_position = Vec2(
            position.x, position.y + widget_size("", font_size).y
        )

    def add_option(self, option: str) -> None:
        self.options.append(option)

    def remove_option(self, index: int) -> None:
        del self.options[index]

    def show(self) -> MenuResult:
        if ui_button(self.label, self.position, BLACK, WHITE, self.font_size) is UIEvent.CLICK:
            self.opened = not self.opened
        if self.opened:
            return self.draw_options()
        return MenuResult()

    def draw_options(self) -> MenuResult:
        """Draw every option; report the first one clicked."""
        pos = Vec2(self.dropdown_position.x, self.dropdown_position.y)
        result = MenuResult()
        for option in self.options:
            event = ui_button(option, pos, BLACK, WHITE, self.font_size)
            if event is UIEvent.CLICK and not result.clicked:
                result = MenuResult(option, True)
            pos.y += widget_size(option, self.font_size).y
        return result