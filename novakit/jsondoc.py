"""A JSON document with typed access and file loading and saving."""

from __future__ import annotations

import json
from typing import Any


class NullValueError(LookupError):
    """Raised when a requested entry is not in the document."""


class TypeMismatchError(TypeError):
    """Raised when an entry exists but has the wrong type."""


def _coerce(value: Any, kind: type) -> Any:
    if kind in (int, float) and isinstance(value, bool):
        raise TypeMismatchError(
            f"The entry was found but its value is boolean, not {kind.__name__}."
        )
    if kind is float and isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, kind):
        return value
    raise TypeMismatchError(
        f"The entry was found but its value is {type(value).__name__}, "
        f"not {kind.__name__}."
    )


class JsonDocument:
    """A JSON value, normally an object, kept in memory."""

    def __init__(self, data: Any = None) -> None:
        self.data = data

    def load_file(self, path: str) -> None:
        """Replace the document with the JSON held in ``path``."""
        try:
            with open(path, encoding="utf-8") as handle:
                self.data = json.load(handle)
        except FileNotFoundError as exc:
            raise OSError(f"Could not load json from file: {path}") from exc
        except IsADirectoryError as exc:
            raise OSError(f"Could not load json from file: {path}") from exc
        except PermissionError as exc:
            raise OSError(f"Could not load json from file: {path}") from exc

    def write_file(self, path: str, indent: int = 4) -> None:
        """Write the document to ``path`` with the given indentation."""
        text = self.prettify(indent)
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise OSError(f"Could not open file: {path}") from exc

    def prettify(self, indent: int) -> str:
        """Serialise with sorted keys; a negative indent gives compact output."""
        if indent < 0:
            return json.dumps(
                self.data, separators=(",", ":"), sort_keys=True, ensure_ascii=False
            )
        return json.dumps(self.data, indent=indent, sort_keys=True, ensure_ascii=False)

    def set(self, name: str, value: Any) -> None:
        if self.data is None:
            self.data = {}
        if not isinstance(self.data, dict):
            raise TypeError("cannot set a named entry on a non-object document")
        self.data[name] = value

    def get(self, name: str, kind: type | None = None) -> Any:
        """Return the entry ``name``, checked against ``kind`` when given."""
        if not isinstance(self.data, dict) or name not in self.data:
            raise NullValueError(f"The following item is not in the json: {name}")
        value = self.data[name]
        if kind is None:
            return value
        return _coerce(value, kind)