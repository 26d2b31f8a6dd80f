"""
Project configuration from `package.json`.

The project root is the nearest ancestor directory holding a `package.json`.
Project settings live in a block of that manifest keyed by the command name,
for example `{"standard": {"ignore": ["tmp/**"], "parser": "babel-eslint"}}`.
The block is looked up walking up from the working directory; the first
manifest that has it wins.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, cast

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


@dataclass
class PackageConfig:
    """
    Settings read from the manifest block. Fields are `None` when not set,
    so callers can tell "not configured" from an explicit value.
    """

    ignore: list[str] | None = None
    parser: str | None = None


_VALID_FIELDS = {f.name for f in fields(PackageConfig)}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def _to_snake(key: str) -> str:
    """Map `kebab-case` and `camelCase` manifest keys to field names."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).replace("-", "_").lower()


def _manifest_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        logger.debug("Cannot check manifest %s: %s", path, e)
        return False


def find_root(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` to the nearest directory containing `package.json`.
    Returns `None` if there is none.
    """
    current = start_dir.resolve()
    while True:
        if _manifest_exists(current / MANIFEST_FILENAME):
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def read_manifest(path: Path) -> dict[str, Any] | None:
    """Parse a manifest, or return `None` if it is unreadable or not a JSON object."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Skipping unreadable manifest %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        return None
    return cast(dict[str, Any], data)


def find_package_config(cmd: str, start_dir: Path) -> tuple[Path, PackageConfig] | None:
    """
    Walk up from `start_dir` looking for a `package.json` with a `cmd` block.
    Returns the manifest path and its parsed block, or `None`.
    """
    current = start_dir.resolve()
    while True:
        candidate = current / MANIFEST_FILENAME
        if _manifest_exists(candidate):
            data = read_manifest(candidate)
            if data is not None and isinstance(data.get(cmd), dict):
                logger.debug("Using %r settings from %s", cmd, candidate)
                return candidate, parse_package_config(cast(dict[str, Any], data[cmd]))
        parent = current.parent
        if parent == current:
            return None
        current = parent


def parse_package_config(data: dict[str, Any]) -> PackageConfig:
    """Parse a manifest block into `PackageConfig`, ignoring unknown keys."""
    mapped: dict[str, Any] = {}
    for key, value in data.items():
        snake_key = _to_snake(key)
        if snake_key in _VALID_FIELDS:
            mapped[snake_key] = value

    ignore = mapped.get("ignore")
    if isinstance(ignore, str):
        ignore = [ignore]
    elif isinstance(ignore, list):
        ignore = [str(p) for p in cast(list[Any], ignore)]
    else:
        ignore = None

    parser = mapped.get("parser")
    if not isinstance(parser, str) or not parser:
        parser = None

    return PackageConfig(ignore=ignore, parser=parser)
