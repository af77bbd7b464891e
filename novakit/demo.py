"""A minimal window that clears to white every frame."""

from __future__ import annotations

import argparse

from novakit import render
from novakit.color import WHITE
from novakit.window import Window


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Open a white 640x480 game window.")
    parser.add_argument("--frames", type=int, default=0,
                        help="stop after this many frames (0 runs until closed)")
    args = parser.parse_args(argv)

    window = Window(640, 480, "Game")
    render.framerate_limit(60)
    frames = 0
    with window:
        while window.is_open():
            window.start()
            render.fill(WHITE)
            window.end()
            frames += 1
            if args.frames and frames >= args.frames:
                break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())