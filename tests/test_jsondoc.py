import json

import pytest

from novakit.jsondoc import JsonDocument, NullValueError, TypeMismatchError


def test_set_get_round_trip():
    doc = JsonDocument()
    doc.set("level", 3)
    doc.set("name", "hero")
    doc.set("items", ["sword", "shield"])
    assert doc.get("level", int) == 3
    assert doc.get("name", str) == "hero"
    assert doc.get("items", list) == ["sword", "shield"]
    assert doc.get("name") == "hero"


def test_get_missing_raises():
    doc = JsonDocument()
    doc.set("a", 1)
    with pytest.raises(NullValueError, match="missing"):
        doc.get("missing")


def test_get_on_empty_document_raises():
    with pytest.raises(NullValueError):
        JsonDocument().get("anything")


def test_get_type_mismatch():
    doc = JsonDocument()
    doc.set("name", "hero")
    doc.set("flag", True)
    with pytest.raises(TypeMismatchError):
        doc.get("name", int)
    with pytest.raises(TypeMismatchError):
        doc.get("flag", int)


def test_get_float_from_integer():
    doc = JsonDocument()
    doc.set("speed", 7)
    value = doc.get("speed", float)
    assert isinstance(value, float)
    assert value == 7


def test_prettify_compact_sorts_keys():
    doc = JsonDocument()
    doc.set("b", 1)
    doc.set("a", 2)
    assert doc.prettify(-1) == '{"a":2,"b":1}'


def test_prettify_indented():
    doc = JsonDocument()
    doc.set("a", 1)
    assert doc.prettify(2) == '{\n  "a": 1\n}'


def test_prettify_empty_document_is_null():
    assert JsonDocument().prettify(4) == "null"


def test_prettify_parses_back():
    doc = JsonDocument()
    doc.set("z", [1, 2])
    doc.set("m", {"k": "v"})
    assert json.loads(doc.prettify(4)) == doc.data


def test_file_round_trip(tmp_path):
    path = str(tmp_path / "save.json")
    doc = JsonDocument()
    doc.set("score", 42)
    doc.set("player", "ada")
    doc.write_file(path)
    loaded = JsonDocument()
    loaded.load_file(path)
    assert loaded.data == doc.data
    assert loaded.get("score", int) == 42


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError, match="Could not load json"):
        JsonDocument().load_file(str(tmp_path / "absent.json"))


def test_load_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        JsonDocument().load_file(str(path))


def test_write_into_missing_directory(tmp_path):
    doc = JsonDocument()
    doc.set("a", 1)
    with pytest.raises(OSError, match="Could not open file"):
        doc.write_file(str(tmp_path / "nodir" / "x.json"))


def test_set_on_array_document_fails(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    doc = JsonDocument()
    doc.load_file(str(path))
    with pytest.raises(TypeError):
        doc.set("a", 1)
    with pytest.raises(NullValueError):
        doc.get("a")