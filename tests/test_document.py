"""Tests for Document and ZObject."""

import pytest

from zoconfig import Document, ScalarKind, ZObject, parse


def _doc() -> Document:
    return parse("[orc]\n{\n[name]: [Grak]\n[strength]: (int)[18]\n[speed]: [5.5]\n}\n")


def test_lookup_by_name():
    doc = _doc()
    assert "orc" in doc
    assert isinstance(doc["orc"], ZObject)
    assert doc.get("elf") is None

def test_unknown_object_raises_key_error():
    with pytest.raises(KeyError):
        _doc()["elf"]

def test_unknown_key_raises_key_error():
    with pytest.raises(KeyError):
        _doc()["orc"]["wisdom"]

def test_iteration_and_len():
    orc = _doc()["orc"]
    assert list(orc) == ["name", "strength", "speed"]
    assert len(orc) == 3

def test_get_as():
    orc = _doc()["orc"]
    assert orc.get_as("strength", ScalarKind.Int) == 18
    assert orc.get_as("speed", "float") == 5.5

def test_get_as_missing_key_yields_default():
    assert _doc()["orc"].get_as("wisdom", ScalarKind.Short) == 0

def test_to_dict_is_a_copy():
    doc = _doc()
    data = doc.to_dict()
    data["orc"]["name"] = "Thok"
    assert doc["orc"]["name"] == "Grak"

def test_no_mutation_api():
    doc = _doc()
    with pytest.raises(TypeError):
        doc["elf"] = ZObject()
    with pytest.raises(TypeError):
        doc["orc"]["name"] = "Thok"

def test_constructor_copies_input():
    data = {"name": "Grak"}
    obj = ZObject(data)
    data["name"] = "Thok"
    assert obj["name"] == "Grak"
