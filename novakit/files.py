"""Writable text files, log files, file watching and shell file commands."""

from __future__ import annotations

import os
import subprocess

from novakit.logger import get_log_format


class TextFile:
    """A file opened for writing that remembers everything written to it."""

    def __init__(self, path: str, extension: str = "") -> None:
        self.path = path
        self.extension = extension
        self.contents = ""
        try:
            self._file = open(self.full_path(), "w", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Could not open file: `{self.full_path()}`.") from exc

    def full_path(self) -> str:
        """The path with the extension appended, if there is one."""
        if not self.extension:
            return self.path
        return f"{self.path}.{self.extension}"

    def write(self, text: str) -> None:
        self._file.write(text)
        self.contents += text

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> TextFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LogFile(TextFile):
    """A text file that receives formatted log lines."""

    def info(self, text: str) -> None:
        self.write(get_log_format("info", text) + "\n")

    def error(self, text: str) -> None:
        self.write(get_log_format("error", text) + "\n")

    def fatal(self, text: str) -> None:
        self.write(get_log_format("fatal", text) + "\n")

    def warning(self, text: str) -> None:
        self.write(get_log_format("warning", text) + "\n")


def fetch_contents(path: str) -> str:
    """Read a file, ending every line with a newline."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            raw = handle.read()
    except OSError as exc:
        raise OSError(f"Couldn't fetch contents from file `{path}`.") from exc
    lines = raw.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "".join(f"{line}\n" for line in lines)


class FileWatcher:
    """Detects changes in a file's contents since the last capture."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.captured_contents = fetch_contents(path)

    def is_different(self) -> bool:
        return fetch_contents(self.path) != self.captured_contents

    def reload(self) -> None:
        self.captured_contents = fetch_contents(self.path)


def _shell(command: str) -> int:
    return subprocess.run(command, shell=True, check=False).returncode


def _unix_command(name: str, path: str, dest: str, force: bool, recursive: bool) -> str:
    flags = ("-f " if force else "") + ("-r " if recursive else "")
    return f"{name} {flags}{path} {dest}"


def mkdir(path: str) -> int:
    """Create a directory with the shell; returns the exit status (0 on success)."""
    if os.name == "nt":
        path = path.replace("/", "\\")
    return _shell(f"mkdir {path}")


def touch(path: str) -> int:
    return _shell(f"touch {path}")


def rm(path: str, dest: str = "", force: bool = False, recursive: bool = False) -> int:
    return _shell(_unix_command("rm", path, dest, force, recursive))


def cp(path: str, dest: str, force: bool = False, recursive: bool = False) -> int:
    return _shell(_unix_command("cp", path, dest, force, recursive))


def mv(path: str, dest: str, force: bool = False, recursive: bool = False) -> int:
    return _shell(_unix_command("mv", path, dest, force, recursive))


def win32_rmdir(path: str) -> int:
    return _shell(f"rmdir {path}")


def win32_copy(path: str, dest: str) -> int:
    return _shell(f"copy {path} {dest}")


def win32_move(path: str, dest: str) -> int:
    return _shell(f"move {path} {dest}")


def win32_xcopy(path: str, dest: str) -> int:
    return _shell(f"xcopy {path} {dest} /E")