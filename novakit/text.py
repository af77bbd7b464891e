"""Typewriter text effect, string helpers and shell command building."""

from __future__ import annotations

from dataclasses import dataclass, field


class TypeWriter:
    """Reveals ``target_text`` one character at a time."""

    def __init__(self, target_text: str, time_between_character: float) -> None:
        self.target_text = target_text
        self.time_between_character = time_between_character
        self._timer = time_between_character
        self._current = ""
        self._index = 0
        self._paused = False

    def current_text(self) -> str:
        return self._current

    def reset(self) -> None:
        """Clear the shown text and restart the delay.

        The position in ``target_text`` is kept, so typing resumes where it left off.
        """
        self._current = ""
        self._timer = self.time_between_character

    def update(self, delta: float) -> None:
        """Advance by ``delta`` seconds, revealing a character when the delay has run out."""
        if self._paused:
            return
        if self._timer > 0.0:
            self._timer -= delta
            return
        self._timer = self.time_between_character
        if self._index >= len(self.target_text):
            return
        self._current += self.target_text[self._index]
        self._index += 1

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False


def has_prefix(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def has_suffix(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter; one trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def replace_first(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old``; return an empty string if absent."""
    if old not in text:
        return ""
    return text.replace(old, new, 1)


@dataclass
class CommandBuilder:
    """Assembles a command line from a command, options and values."""

    command: str = ""
    options: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    def build(self) -> str:
        """Return the command, each option followed by a space, then the values joined."""
        return self.command + " " + "".join(f"{o} " for o in self.options) + "".join(
            self.values
        )