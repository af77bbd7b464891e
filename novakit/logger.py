"""Console logging with a timestamped line format."""

from __future__ import annotations

import time


def get_time() -> str:
    """Return the current local time in ``ctime`` form."""
    return time.ctime()


def get_log_format(level: str, text: str) -> str:
    """Format a log line as ``[time]::level::> text``."""
    return f"[{get_time()}]::{level}::> {text}"


def log(level: str, text: str) -> None:
    """Print a formatted log line to standard output."""
    print(get_log_format(level, text))


def info(text: str) -> None:
    log("info", text)


def fatal(text: str) -> None:
    log("fatal", text)


def error(text: str) -> None:
    log("error", text)


def warn(text: str) -> None:
    log("warn", text)