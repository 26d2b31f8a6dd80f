"""Tests for package.json project settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stdlint.manifest import (
    PackageConfig,
    find_package_config,
    find_root,
    parse_package_config,
    read_manifest,
)


def _write_manifest(directory: Path, data: object) -> Path:
    manifest = directory / "package.json"
    manifest.write_text(json.dumps(data))
    return manifest


def test_find_root_in_start_dir(tmp_path: Path) -> None:
    _write_manifest(tmp_path, {"name": "demo"})
    assert find_root(tmp_path) == tmp_path.resolve()


def test_find_root_walks_up(tmp_path: Path) -> None:
    _write_manifest(tmp_path, {"name": "demo"})
    subdir = tmp_path / "src" / "deep"
    subdir.mkdir(parents=True)
    assert find_root(subdir) == tmp_path.resolve()


def test_find_root_nearest_wins(tmp_path: Path) -> None:
    _write_manifest(tmp_path, {"name": "outer"})
    inner = tmp_path / "packages" / "inner"
    inner.mkdir(parents=True)
    _write_manifest(inner, {"name": "inner"})
    assert find_root(inner / ".") == inner.resolve()


def test_find_package_config(tmp_path: Path) -> None:
    manifest = _write_manifest(
        tmp_path, {"name": "demo", "stdlint": {"ignore": ["tmp/**"], "parser": "babel-eslint"}}
    )
    found = find_package_config("stdlint", tmp_path)
    assert found is not None
    path, config = found
    assert path == manifest.resolve()
    assert config == PackageConfig(ignore=["tmp/**"], parser="babel-eslint")


def test_find_package_config_skips_manifest_without_block(tmp_path: Path) -> None:
    _write_manifest(tmp_path, {"name": "outer", "stdlint": {"parser": "esprima-fb"}})
    inner = tmp_path / "inner"
    inner.mkdir()
    _write_manifest(inner, {"name": "inner"})
    found = find_package_config("stdlint", inner)
    assert found is not None
    assert found[1].parser == "esprima-fb"


def test_find_package_config_uses_cmd_name(tmp_path: Path) -> None:
    _write_manifest(tmp_path, {"standard": {"ignore": ["a/**"]}})
    assert find_package_config("stdlint", tmp_path) is None
    found = find_package_config("standard", tmp_path)
    assert found is not None
    assert found[1].ignore == ["a/**"]


def test_find_package_config_none_when_missing(tmp_path: Path) -> None:
    assert find_package_config("stdlint", tmp_path) is None


def test_read_manifest_invalid_json(tmp_path: Path) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text("{ not json")
    assert read_manifest(manifest) is None


def test_read_manifest_not_an_object(tmp_path: Path) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text("[1, 2]")
    assert read_manifest(manifest) is None


def test_find_package_config_invalid_json_is_absent(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{ not json")
    assert find_package_config("stdlint", tmp_path) is None


def test_parse_package_config_string_ignore() -> None:
    config = parse_package_config({"ignore": "fixtures/**"})
    assert config.ignore == ["fixtures/**"]
    assert config.parser is None


def test_parse_package_config_ignores_unknown_and_bad_values() -> None:
    config = parse_package_config({"globals": ["$"], "ignore": 3, "parser": ""})
    assert config == PackageConfig()


def test_parse_package_config_key_case() -> None:
    config = parse_package_config({"Parser": "babel-eslint", "IGNORE": ["x/**"]})
    assert config.parser == "babel-eslint"


def test_manifest_lookup_treats_unreadable_directories_as_absent(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_manifest(tmp_path, {"name": "demo", "stdlint": {"parser": "babel-eslint"}})
    locked = tmp_path / "locked"
    deep = locked / "deep"
    deep.mkdir(parents=True)
    real_is_file = Path.is_file

    def is_file(self: Path) -> bool:
        if self.parent == locked.resolve():
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_file(self)

    monkeypatch.setattr(Path, "is_file", is_file)
    assert find_root(deep) == tmp_path.resolve()
    found = find_package_config("stdlint", deep)
    assert found is not None
    assert found[1].parser == "babel-eslint"
