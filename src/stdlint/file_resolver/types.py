"""Configuration types for file discovery."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from stdlint.file_resolver.defaults import DEFAULT_IGNORE_PATTERNS, DEFAULT_PATTERNS
from stdlint.file_resolver.gitignore import IgnoreSet


def default_ignore_set() -> IgnoreSet:
    ignore_set = IgnoreSet()
    ignore_set.add("defaults", DEFAULT_IGNORE_PATTERNS)
    return ignore_set


@dataclass
class FileResolverConfig:
    """
    Configuration for file discovery and filtering.

    Globs are expanded relative to `cwd`. `ignore_set` holds every ignore
    source; its glob-level patterns are applied while expanding and the full
    set is applied as a second, gitignore-style filter pass.
    `default_patterns` are used when no patterns are given.
    """

    cwd: Path = field(default_factory=Path.cwd)
    ignore_set: IgnoreSet = field(default_factory=default_ignore_set)
    default_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
