"""
Per-call option resolution.

Caller options are merged with defaults and with project settings from
`package.json` and `.gitignore`, producing the ignore set and engine
configuration for a single lint call.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import tempfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from strif import atomic_output_file

from stdlint.engine import EngineConfig
from stdlint.errors import ConfigError
from stdlint.file_resolver import (
    DEFAULT_IGNORE_PATTERNS,
    FileResolverConfig,
    IgnoreSet,
    load_gitignore,
)
from stdlint.manifest import find_package_config, find_root

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:]")


@dataclass
class LintOptions:
    """
    Options for a single lint call.

    `cwd` defaults to the process working directory. `ignore` adds glob
    patterns to the built-in ignore list. `parser` names a custom JS parser
    (e.g. `babel-eslint`) and takes precedence over one set in `package.json`.
    `on_files`, if set, receives the discovered file list before linting.
    """

    cwd: str | Path | None = None
    ignore: list[str] = field(default_factory=list)
    parser: str | None = None
    on_files: Callable[[list[Path]], None] | None = None


@dataclass
class ResolvedOptions:
    """Options after merging defaults, caller settings and project settings."""

    cwd: Path
    ignore_set: IgnoreSet
    engine_config: EngineConfig
    root: Path | None = None
    on_files: Callable[[list[Path]], None] | None = None

    @property
    def glob_ignore(self) -> list[str]:
        return self.ignore_set.glob_patterns

    def file_resolver_config(self) -> FileResolverConfig:
        return FileResolverConfig(cwd=self.cwd, ignore_set=self.ignore_set)


def resolve_options(
    options: LintOptions | None, cmd: str, engine_config: EngineConfig
) -> ResolvedOptions:
    """
    Build the per-call options.

    Ignore sources are added in a fixed order: built-in defaults, caller
    patterns, manifest patterns, then the project root's `.gitignore`.
    Manifest and `.gitignore` are only consulted when a project root (a
    directory with `package.json`) is found; read failures count as absence.
    """
    options = options or LintOptions()
    cwd = Path(options.cwd) if options.cwd else Path.cwd()
    cwd = cwd.resolve()

    ignore_set = IgnoreSet()
    ignore_set.add("defaults", DEFAULT_IGNORE_PATTERNS)
    ignore_set.add("options", options.ignore)

    parser = options.parser
    root = find_root(cwd)
    if root is not None:
        logger.debug("Project root: %s", root)
        found = find_package_config(cmd, cwd)
        if found is not None:
            _, package_config = found
            if package_config.ignore:
                ignore_set.add("package.json", package_config.ignore)
            if parser is None:
                parser = package_config.parser

        gitignore = load_gitignore(root)
        if gitignore:
            ignore_set.add(".gitignore", gitignore, glob_level=False, base=root)

    if parser:
        engine_config = with_parser(engine_config, parser)

    return ResolvedOptions(
        cwd=cwd,
        ignore_set=ignore_set,
        engine_config=engine_config,
        root=root,
        on_files=options.on_files,
    )


def with_parser(engine_config: EngineConfig, parser: str) -> EngineConfig:
    """
    Return a copy of `engine_config` that uses `parser`.

    When the config names a JSON config file, a derived copy with its `parser`
    field set is written to the temp directory and used instead.
    """
    if engine_config.config_file is None:
        return dataclasses.replace(engine_config, parser=parser)
    config_file = write_parser_config(Path(engine_config.config_file), parser)
    return dataclasses.replace(engine_config, config_file=config_file)


def write_parser_config(config_file: Path, parser: str) -> Path:
    """Write `config_file` with `parser` injected to `<tempdir>/.eslintrc-<parser>`."""
    try:
        data: dict[str, Any] = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read engine config {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Engine config {config_file} is not a JSON object")
    data["parser"] = parser

    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", parser)
    tmp_filename = Path(tempfile.gettempdir()) / f".eslintrc-{safe_name}"
    with atomic_output_file(tmp_filename) as temp_path:
        Path(temp_path).write_text(json.dumps(data), encoding="utf-8")
    logger.debug("Wrote engine config with parser %r to %s", parser, tmp_filename)
    return tmp_filename


def normalize_patterns(files: Sequence[str] | str | None) -> list[str]:
    if files is None:
        return []
    if isinstance(files, str):
        return [files]
    return list(files)
