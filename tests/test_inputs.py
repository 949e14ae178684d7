"""Image list / files list readers and JSON output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from internal.loaders.inputs import dump_json, read_drop_files, read_image_names, write_json
from internal.models.errors import ConfigError, SerializationError


def test_image_names_skip_empty_lines(tmp_path: Path) -> None:
    p = tmp_path / "images.txt"
    p.write_text("\ntoolA\n\ntoolB\r\n tool C\n", encoding="utf-8")
    assert read_image_names(p) == ["toolA", "toolB", " tool C"]


def test_image_names_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        read_image_names(tmp_path / "nope.txt")


def test_drop_files_roundtrip(tmp_path: Path) -> None:
    p = tmp_path / "files.json"
    p.write_text('{"b": "2", "a": "1"}', encoding="utf-8")
    d = read_drop_files(p)
    assert d == {"b": "2", "a": "1"}
    assert list(d) == ["b", "a"]


@pytest.mark.parametrize("content", ["[1, 2]", '{"a": 1}', "{not json"])
def test_drop_files_rejects_bad_content(tmp_path: Path, content: str) -> None:
    p = tmp_path / "files.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        read_drop_files(p)


def test_dump_json_is_two_space_indented() -> None:
    assert dump_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}\n'


def test_dump_json_unencodable() -> None:
    with pytest.raises(SerializationError):
        dump_json({"a": object()})


def test_write_json_creates_parents(tmp_path: Path) -> None:
    out = write_json(tmp_path / "out" / "manifest.json", {"drop_files": {}})
    assert json.loads(out.read_text(encoding="utf-8")) == {"drop_files": {}}


def test_write_json_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(SerializationError):
        write_json(blocker / "manifest.json", {})
