"""Sound effects and streamed music."""

from __future__ import annotations

import pygame

from novakit import logger


def _percent_or_fraction(volume: int | float) -> float:
    if isinstance(volume, int) and not isinstance(volume, bool):
        return volume / 100.0
    return float(volume)


class Sound:
    """A short sound loaded fully into memory."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.volume = 1.0
        try:
            self._sound: pygame.mixer.Sound | None = pygame.mixer.Sound(path)
        except (pygame.error, OSError) as exc:
            logger.warn(f"could not load sound `{path}`: {exc}")
            self._sound = None

    def set_volume(self, volume: int | float) -> None:
        """Set volume as a percentage (int) or a fraction in 0.0..1.0 (float)."""
        if isinstance(volume, float) and not 0.0 <= volume <= 1.0:
            raise ValueError("Sound volume mustn't be over 1.0 or below 0.0")
        self.volume = _percent_or_fraction(volume)
        if self._sound is not None:
            self._sound.set_volume(self.volume)

    def loaded(self) -> bool:
        return self._sound is not None

    def play(self) -> None:
        """Play the sound unless it is already playing."""
        if self._sound is not None and self._sound.get_num_channels() == 0:
            self._sound.play()


class Music:
    """A streamed music track, restarted when it ends if looping."""

    def __init__(self, path: str, loop: bool = True) -> None:
        self.path = path
        self.loop = loop
        self.volume = 1.0
        try:
            pygame.mixer.music.load(path)
            self._loaded = True
        except (pygame.error, OSError) as exc:
            logger.warn(f"could not load music `{path}`: {exc}")
            self._loaded = False

    def loaded(self) -> bool:
        return self._loaded

    def set_volume(self, volume: int | float) -> None:
        """Set volume as a percentage (int) or a fraction (float)."""
        self.volume = _percent_or_fraction(volume)
        if self._loaded:
            pygame.mixer.music.set_volume(self.volume)

    def update(self) -> None:
        if self._loaded and self.loop and not pygame.mixer.music.get_busy():
            pygame.mixer.music.play()

    def play(self) -> None:
        if self._loaded:
            pygame.mixer.music.play()

    def close(self) -> None:
        if self._loaded:
            pygame.mixer.music.unload()
            self._loaded = False