from __future__ import annotations

import json

import pydantic
import pytest

from docstore.disk_store import DiskJsonStateStore


def test_missing_file_is_created_empty(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = DiskJsonStateStore(path)

    assert store.read_all() == {}
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_write_is_pretty_printed_in_insertion_order(tmp_path):
    path = tmp_path / "db.json"
    store = DiskJsonStateStore(path)

    store.write_all({"zeta": [{"b": 1, "a": 2}], "alpha": []})

    text = path.read_text(encoding="utf-8")
    assert text.index('"zeta"') < text.index('"alpha"')
    assert text.index('"b"') < text.index('"a"')
    assert '\n  "zeta": [' in text
    assert not (tmp_path / "db.json.tmp").exists()
    assert store.read_all() == {"zeta": [{"b": 1, "a": 2}], "alpha": []}


def test_invalid_json_propagates(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        DiskJsonStateStore(path).read_all()
    # file left untouched
    assert path.read_text(encoding="utf-8") == "{not json"


def test_empty_file_is_a_parse_error(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        DiskJsonStateStore(path).read_all()


def test_non_object_top_level_is_rejected(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(pydantic.ValidationError):
        DiskJsonStateStore(path).read_all()


def test_directory_path_propagates_os_error(tmp_path):
    with pytest.raises(OSError):
        DiskJsonStateStore(tmp_path).read_all()
