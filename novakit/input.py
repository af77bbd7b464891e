"""Keyboard and mouse state, key bindings and per-frame input snapshots."""

from __future__ import annotations

import enum
import math
from collections import deque
from dataclasses import dataclass, field

import pygame

from novakit.geometry import Vec2
from novakit.objects import Rectangle, check_collision


class Key(enum.IntEnum):
    """Keyboard key codes."""

    ArrowLeft = pygame.K_LEFT
    ArrowRight = pygame.K_RIGHT
    ArrowUp = pygame.K_UP
    ArrowDown = pygame.K_DOWN

    A = pygame.K_a
    B = pygame.K_b
    C = pygame.K_c
    D = pygame.K_d
    E = pygame.K_e
    F = pygame.K_f
    G = pygame.K_g
    H = pygame.K_h
    I = pygame.K_i  # noqa: E741
    J = pygame.K_j
    K = pygame.K_k
    L = pygame.K_l
    M = pygame.K_m
    N = pygame.K_n
    O = pygame.K_o  # noqa: E741
    P = pygame.K_p
    Q = pygame.K_q
    R = pygame.K_r
    S = pygame.K_s
    T = pygame.K_t
    U = pygame.K_u
    V = pygame.K_v
    W = pygame.K_w
    X = pygame.K_x
    Y = pygame.K_y
    Z = pygame.K_z

    Zero = pygame.K_0
    One = pygame.K_1
    Two = pygame.K_2
    Three = pygame.K_3
    Four = pygame.K_4
    Five = pygame.K_5
    Six = pygame.K_6
    Seven = pygame.K_7
    Eight = pygame.K_8
    Nine = pygame.K_9

    Space = pygame.K_SPACE
    Enter = pygame.K_RETURN
    Backspace = pygame.K_BACKSPACE
    Tab = pygame.K_TAB
    Escape = pygame.K_ESCAPE
    Apostrophe = pygame.K_QUOTE
    Comma = pygame.K_COMMA
    Minus = pygame.K_MINUS
    Period = pygame.K_PERIOD
    Slash = pygame.K_SLASH
    Semicolon = pygame.K_SEMICOLON
    Equal = pygame.K_EQUALS
    LeftBracket = pygame.K_LEFTBRACKET
    Backslash = pygame.K_BACKSLASH
    RightBracket = pygame.K_RIGHTBRACKET
    Grave = pygame.K_BACKQUOTE

    LeftShift = pygame.K_LSHIFT
    RightShift = pygame.K_RSHIFT
    LeftControl = pygame.K_LCTRL
    RightControl = pygame.K_RCTRL
    LeftAlt = pygame.K_LALT
    RightAlt = pygame.K_RALT
    LeftSuper = pygame.K_LSUPER
    RightSuper = pygame.K_RSUPER
    CapsLock = pygame.K_CAPSLOCK
    NumLock = pygame.K_NUMLOCK
    ScrollLock = pygame.K_SCROLLOCK


class Mouse(enum.IntEnum):
    """Mouse button numbers; ``Side`` is the same button as ``Back``."""

    Left = 1
    Middle = 2
    Right = 3
    Back = 6
    Forward = 7
    Side = 6


@dataclass
class InputState:
    """Keyboard and mouse state built from a stream of pygame events."""

    keys_down: set[int] = field(default_factory=set)
    keys_pressed: set[int] = field(default_factory=set)
    buttons_down: set[int] = field(default_factory=set)
    buttons_pressed: set[int] = field(default_factory=set)
    mouse_pos: Vec2 = field(default_factory=Vec2)
    wheel: Vec2 = field(default_factory=Vec2)
    chars: deque[str] = field(default_factory=deque)
    key_queue: deque[int] = field(default_factory=deque)

    def begin_frame(self) -> None:
        """Forget everything that only lasts for one frame."""
        self.keys_pressed.clear()
        self.buttons_pressed.clear()
        self.wheel = Vec2()
        self.chars.clear()
        self.key_queue.clear()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update the state from one pygame event."""
        kind = event.type
        if kind == pygame.KEYDOWN:
            self.keys_down.add(event.key)
            self.keys_pressed.add(event.key)
            self.key_queue.append(event.key)
        elif kind == pygame.KEYUP:
            self.keys_down.discard(event.key)
        elif kind == pygame.TEXTINPUT:
            self.chars.extend(event.text)
        elif kind == pygame.MOUSEMOTION:
            self.mouse_pos = Vec2(*event.pos)
        elif kind == pygame.MOUSEBUTTONDOWN:
            self.buttons_down.add(event.button)
            self.buttons_pressed.add(event.button)
            if hasattr(event, "pos"):
                self.mouse_pos = Vec2(*event.pos)
        elif kind == pygame.MOUSEBUTTONUP:
            self.buttons_down.discard(event.button)
            if hasattr(event, "pos"):
                self.mouse_pos = Vec2(*event.pos)
        elif kind == pygame.MOUSEWHEEL:
            self.wheel = Vec2(self.wheel.x + event.x, self.wheel.y + event.y)

    def key_hit(self, key: int) -> bool:
        return key in self.keys_pressed

    def key_held(self, key: int) -> bool:
        return key in self.keys_down

    def key_up(self, key: int) -> bool:
        return key not in self.keys_down

    def mouse_button_hit(self, button: int) -> bool:
        return button in self.buttons_pressed

    def mouse_button_held(self, button: int) -> bool:
        return button in self.buttons_down

    def mouse_button_up(self, button: int) -> bool:
        return button not in self.buttons_down

    def pop_char(self) -> str:
        """Return the next typed character, or an empty string if none is queued."""
        return self.chars.popleft() if self.chars else ""

    def pop_key(self) -> int:
        """Return the next pressed key code, or 0 if none is queued."""
        return self.key_queue.popleft() if self.key_queue else 0


_STATE = InputState()


def current_state() -> InputState:
    """The input state fed by the open window."""
    return _STATE


def key_hit(key: int) -> bool:
    return _STATE.key_hit(key)


def key_held(key: int) -> bool:
    return _STATE.key_held(key)


def key_up(key: int) -> bool:
    return _STATE.key_up(key)


def mouse_button_hit(button: int) -> bool:
    return _STATE.mouse_button_hit(button)


def mouse_button_held(button: int) -> bool:
    return _STATE.mouse_button_held(button)


def mouse_button_up(button: int) -> bool:
    return _STATE.mouse_button_up(button)


def mouse_position() -> Vec2:
    return Vec2(_STATE.mouse_pos.x, _STATE.mouse_pos.y)


def mouse_hover(left: float, top: float, width: float, height: float) -> bool:
    """Whether the mouse pointer is inside the given rectangle."""
    pos = _STATE.mouse_pos
    hitbox = Rectangle(pos.x, pos.y, 1, 1)
    return check_collision(hitbox, Rectangle(left, top, width, height))


def mouse_click(left: float, top: float, width: float, height: float) -> bool:
    """Whether the left button was pressed this frame over the given rectangle."""
    return mouse_hover(left, top, width, height) and mouse_button_hit(Mouse.Left)


def get_scroll() -> float:
    """Wheel movement this frame along whichever axis moved more."""
    wheel = _STATE.wheel
    return wheel.x if abs(wheel.x) > abs(wheel.y) else wheel.y


def get_scroll_ex() -> int:
    """Wheel movement this frame rounded to a whole number, halves away from zero."""
    value = get_scroll()
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class BindingKind(enum.Enum):
    KEY = 0
    MOUSE = 1


@dataclass
class Binding:
    """A named input bound to a key or a mouse button."""

    kind: BindingKind
    code: int
    state: InputState | None = field(default=None, repr=False, compare=False)

    def _state(self) -> InputState:
        return self.state if self.state is not None else current_state()

    def held(self) -> bool:
        state = self._state()
        if self.kind is BindingKind.KEY:
            return state.key_held(self.code)
        return state.mouse_button_held(self.code)

    def hit(self) -> bool:
        state = self._state()
        if self.kind is BindingKind.KEY:
            return state.key_hit(self.code)
        return state.mouse_button_hit(self.code)

    def up(self) -> bool:
        state = self._state()
        if self.kind is BindingKind.KEY:
            return state.key_up(self.code)
        return state.mouse_button_up(self.code)


class InputManager:
    """Looks up bindings by name; unknown names report no input."""

    def __init__(self, state: InputState | None = None) -> None:
        self.bindings: dict[str, Binding] = {}
        self._state = state

    def bind_key(self, name: str, code: int) -> None:
        self.bindings[name] = Binding(BindingKind.KEY, code, self._state)

    def bind_mouse(self, name: str, code: int) -> None:
        self.bindings[name] = Binding(BindingKind.MOUSE, code, self._state)

    def held(self, name: str) -> bool:
        binding = self.bindings.get(name)
        return binding is not None and binding.held()

    def hit(self, name: str) -> bool:
        binding = self.bindings.get(name)
        return binding is not None and binding.hit()

    def up(self, name: str) -> bool:
        binding = self.bindings.get(name)
        return binding is not None and binding.up()


@dataclass
class Event:
    """A snapshot of mouse position, wheel movement and the next pressed key."""

    mouse_pos: Vec2 = field(default_factory=Vec2)
    mouse_scroll: Vec2 = field(default_factory=Vec2)
    last_key_hit: int = 0
    state: InputState | None = field(default=None, repr=False, compare=False)

    def fetch(self) -> None:
        state = self.state if self.state is not None else current_state()
        self.mouse_pos = Vec2(state.mouse_pos.x, state.mouse_pos.y)
        self.mouse_scroll = Vec2(state.wheel.x, state.wheel.y)
        self.last_key_hit = state.pop_key()