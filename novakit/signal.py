"""Callbacks that fire on demand or when a bound condition holds."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class Signal:
    """A callback with an optional triggering condition."""

    callback: Callable[[], None] | None = None
    bound_condition: Callable[[], bool] | None = None

    def emit(self) -> None:
        """Call the callback; raises RuntimeError if none is set."""
        if self.callback is None:
            raise RuntimeError("signal has no callback")
        self.callback()

    def bind_to(self, condition: Callable[[], bool]) -> None:
        self.bound_condition = condition

    def emit_on_condition(self) -> None:
        """Call the callback if a condition is bound and currently true."""
        if self.bound_condition is not None and self.bound_condition() and self.callback:
            self.callback()