"""Small vector types, screen-axis checks and grid snapping.

Binary vector operators compute ``other <op> self`` per component, so
``a - b`` yields ``b - a`` and ``a / b`` yields ``b / a``. The augmented
operators work in the ordinary direction and modify the left operand in place.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

_Op = Callable[[float, float], float]


def _binary(self: Any, other: object, op: _Op) -> Any:
    if type(other) is not type(self):
        return NotImplemented
    values = (op(getattr(other, name), getattr(self, name)) for name in self._AXES)
    return type(self)(*values)


def _inplace(self: Any, other: object, op: _Op) -> Any:
    if type(other) is not type(self):
        return NotImplemented
    for name in self._AXES:
        setattr(self, name, op(getattr(self, name), getattr(other, name)))
    return self


@dataclass
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    def __add__(self, other):
        return _binary(self, other, operator.add)

    def __sub__(self, other):
        return _binary(self, other, operator.sub)

    def __mul__(self, other):
        return _binary(self, other, operator.mul)

    def __truediv__(self, other):
        return _binary(self, other, operator.truediv)

    def __iadd__(self, other):
        return _inplace(self, other, operator.add)

    def __isub__(self, other):
        return _inplace(self, other, operator.sub)

    def __imul__(self, other):
        return _inplace(self, other, operator.mul)

    def __itruediv__(self, other):
        return _inplace(self, other, operator.truediv)


@dataclass
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def __add__(self, other):
        return _binary(self, other, operator.add)

    def __sub__(self, other):
        return _binary(self, other, operator.sub)

    def __mul__(self, other):
        return _binary(self, other, operator.mul)

    def __truediv__(self, other):
        return _binary(self, other, operator.truediv)

    def __iadd__(self, other):
        return _inplace(self, other, operator.add)

    def __isub__(self, other):
        return _inplace(self, other, operator.sub)

    def __imul__(self, other):
        return _inplace(self, other, operator.mul)

    def __itruediv__(self, other):
        return _inplace(self, other, operator.truediv)


@dataclass
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    def __add__(self, other):
        return _binary(self, other, operator.add)

    def __sub__(self, other):
        return _binary(self, other, operator.sub)

    def __mul__(self, other):
        return _binary(self, other, operator.mul)

    def __truediv__(self, other):
        return _binary(self, other, operator.truediv)

    def __iadd__(self, other):
        return _inplace(self, other, operator.add)

    def __isub__(self, other):
        return _inplace(self, other, operator.sub)

    def __imul__(self, other):
        return _inplace(self, other, operator.mul)

    def __itruediv__(self, other):
        return _inplace(self, other, operator.truediv)


@dataclass
class Axis:
    """Position checks against a screen of the given size."""

    width: int = 0
    height: int = 0

    def overflow_x(self, x: float) -> bool:
        return x < 0 or x > self.width

    def overflow_y(self, y: float) -> bool:
        return y < 0 or y > self.height

    def overflow(self, x: float, y: float) -> bool:
        return self.overflow_x(x) or self.overflow_y(y)

    def at_top(self, y: float) -> bool:
        return y < 0

    def at_bottom(self, y: float) -> bool:
        return y > self.height

    def at_left(self, x: float) -> bool:
        return x < 0

    def at_right(self, x: float) -> bool:
        return x > self.width

    def at_middle(self, x: float) -> bool:
        return int(x) == int(self.width / 2)

    def at_middle_y(self, y: float) -> bool:
        return int(y) == int(self.height / 2)


@dataclass
class Grid:
    """A grid of equally sized cells."""

    cell_size: Vec2

    def snap(self, x: float, y: float) -> Vec2:
        """Return the snapped position for the point ``(x, y)``."""
        cw, ch = self.cell_size.x, self.cell_size.y
        return Vec2(((x + cw / 2) / cw) * cw, ((y + ch / 2) / ch) * ch)