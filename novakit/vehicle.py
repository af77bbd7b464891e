"""Keyboard-driven vehicle movement for an object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from novakit.input import InputState, current_state
from novakit.objects import Object4


@dataclass
class VehicleConfig:
    top_speed: float
    deceleration_speed: float
    acceleration_speed: float
    turn_speed: float
    max_deceleration_speed: float


class Vehicle:
    """Accelerates, brakes and steers its host object from held keys."""

    def __init__(self, host: Object4, config: VehicleConfig, forward_key: int,
                 backward_key: int, turn_left_key: int, turn_right_key: int,
                 state: InputState | None = None, driving: bool = False) -> None:
        self.host = host
        self.config = config
        self.forward_key = forward_key
        self.backward_key = backward_key
        self.turn_left_key = turn_left_key
        self.turn_right_key = turn_right_key
        self.y_velocity = 0.0
        self.driving = driving
        self._state = state

    def drive(self) -> None:
        """Apply one frame of acceleration, damping, steering and movement."""
        state = self._state if self._state is not None else current_state()
        cfg = self.config
        rad = math.radians(self.host.rotation)
        if self.driving:
            if state.key_held(self.forward_key):
                self.y_velocity = min(self.y_velocity + cfg.acceleration_speed,
                                      cfg.top_speed)
            elif state.key_held(self.backward_key):
                self.y_velocity = max(self.y_velocity - cfg.deceleration_speed,
                                      -cfg.max_deceleration_speed)
        elif abs(self.y_velocity) < 0.05:
            self.y_velocity = 0.0
        elif self.y_velocity > 0.0:
            self.y_velocity -= cfg.deceleration_speed
        else:
            self.y_velocity += cfg.deceleration_speed

        if self.driving:
            if state.key_held(self.turn_left_key):
                self.host.rotation -= cfg.turn_speed
            if state.key_held(self.turn_right_key):
                self.host.rotation += cfg.turn_speed

        self.host.x += math.sin(rad) * self.y_velocity
        self.host.y += -math.cos(rad) * self.y_velocity

    def valid_speed(self) -> float:
        """The velocity, with values below 0.05 in size reported as 0."""
        if abs(self.y_velocity) < 0.05:
            return 0.0
        return self.y_velocity