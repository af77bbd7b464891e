"""Positioned game objects, collision tests, object chains and generators."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from novakit.color import WHITE, Color
from novakit.geometry import Vec2
from novakit.randomness import RandomDevice

T = TypeVar("T")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class Object4:
    """A rectangular object with position, size, rotation and flags."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0
    visible: bool = True
    can_collide: bool = True
    z_index: int = 0
    origin: Vec2 | None = None

    def __post_init__(self) -> None:
        if self.origin is None:
            self.origin = Vec2(self.width / 2, self.height / 2)

    def move(self, delta_x: float, delta_y: float) -> None:
        self.x += delta_x
        self.y += delta_y

    def shift(self, delta: Vec2) -> None:
        self.move(delta.x, delta.y)

    def roam(self, speed: float, rd: RandomDevice) -> None:
        """Step randomly by ``speed`` or not at all along one random axis."""
        delta_x = delta_y = 0.0
        step = _round_half_away(rd.random_float(-speed, speed) / speed) * speed
        if rd.random_int(0, 1) == 1:
            delta_x = step
        else:
            delta_y = step
        self.move(delta_x, delta_y)

    def move_to(self, target: Vec2, speed: float) -> None:
        """Step toward ``target`` on both axes."""
        if self.x < target.x:
            self.x += speed
        if self.x > target.x:
            self.x -= speed
        if self.y < target.y:
            self.y += speed
        if self.y > target.y:
            self.y -= speed

    def roam_to(self, target: Vec2, speed: float, rd: RandomDevice) -> None:
        """Step toward ``target`` along one randomly chosen axis."""
        if rd.random_int(1, 2) == 1:
            if self.x < target.x:
                self.x += speed
            if self.x > target.x:
                self.x -= speed
            return
        if self.y < target.y:
            self.y += speed
        if self.y > target.y:
            self.y -= speed

    def cache(self) -> None:
        """Hide the object and disable collisions."""
        self.visible = False
        self.can_collide = False

    def grab(self) -> None:
        """Show the object and enable collisions."""
        self.visible = True
        self.can_collide = True


@dataclass
class Rectangle(Object4):
    """A coloured rectangle."""

    color: Color = field(default_factory=lambda: replace(WHITE), kw_only=True)


@dataclass
class Circle:
    """A coloured circle."""

    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    color: Color = field(default_factory=lambda: replace(WHITE))
    visible: bool = True
    can_collide: bool = True


def _recs_overlap(a: Object4, b: Object4) -> bool:
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def _circle_hits_rec(circle: Circle, rec: Object4) -> bool:
    half_w, half_h = rec.width / 2, rec.height / 2
    dx = abs(circle.x - (rec.x + half_w))
    dy = abs(circle.y - (rec.y + half_h))
    if dx > half_w + circle.radius or dy > half_h + circle.radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= circle.radius**2


def check_collision(obj: Object4, other: Object4 | Circle) -> bool:
    """Whether ``obj`` collides with another rectangle-like object or a circle.

    Rectangles only collide when they share a z-index; disabled objects never do.
    """
    if isinstance(other, Circle):
        if not other.can_collide or not obj.can_collide:
            return False
        return _circle_hits_rec(other, obj)
    if not obj.can_collide or not other.can_collide or obj.z_index != other.z_index:
        return False
    return _recs_overlap(obj, other)


class ObjectChain:
    """Objects and sub-chains that follow the movement of a parent object."""

    def __init__(self, parent: Object4) -> None:
        self.parent = parent
        self.children: list[Object4] = []
        self.subchains: list[ObjectChain] = []
        self.last_parent_pos = Vec2(parent.x, parent.y)

    def add_child(self, child: Object4) -> None:
        self.children.append(child)

    def remove_child(self, index: int) -> None:
        del self.children[index]

    def add_subchain(self, subchain: ObjectChain) -> None:
        if subchain is self:
            raise ValueError("cannot add a chain as a subchain of itself")
        self.subchains.append(subchain)

    def remove_subchain(self, index: int) -> None:
        del self.subchains[index]

    def rechain(self) -> None:
        """Move every child and sub-chain by the parent's movement since last call."""
        for child in self.children:
            self.rechain_object(child)
        for chain in self.subchains:
            self.rechain_object(chain.parent)
            chain.rechain()
        self.last_parent_pos = Vec2(self.parent.x, self.parent.y)

    def rechain_object(self, obj: Object4) -> None:
        obj.x += self.parent.x - self.last_parent_pos.x
        obj.y += self.parent.y - self.last_parent_pos.y


class Generator(Generic[T]):
    """Fills a list with items produced from their index."""

    def __init__(
        self, target_list: list[T] | None = None, rd: RandomDevice | None = None
    ) -> None:
        self.target_list: list[T] = [] if target_list is None else target_list
        self._rd = rd if rd is not None else RandomDevice()

    def generate(
        self, amount: int, func: Callable[[int], T], chance: int | None = None
    ) -> None:
        """Call ``func`` for indices 0 through ``amount`` (at least once).

        With ``chance`` given, each index is kept with probability ``1/chance``.
        """
        i = 0
        while True:
            if chance is None or self._rd.random_int(1, chance) == 1:
                self.target_list.append(func(i))
            i += 1
            if i > amount:
                break