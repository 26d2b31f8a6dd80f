"""Gitignore reading and layered ignore-set building using pathspec."""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")


def parse_ignore_lines(content: str) -> list[str]:
    """
    Split ignore-file content into patterns, dropping blank lines and comments.
    """
    lines = _LINE_SPLIT.split(content)
    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def load_gitignore(directory: Path) -> list[str] | None:
    """
    Read `.gitignore` in the given directory and return its patterns, or `None`
    if the file is missing, unreadable, or has no patterns.
    """
    gitignore = directory / ".gitignore"
    try:
        content = gitignore.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("No usable .gitignore in %s: %s", directory, e)
        return None
    lines = parse_ignore_lines(content)
    return lines or None


def to_unix(path: str) -> str:
    return path.replace("\\", "/")


def relative_posix(path: Path, base: Path) -> str:
    """`path` relative to `base`, `/`-separated for matching."""
    rel = os.path.relpath(path, base)
    if sys.platform == "win32":
        rel = to_unix(rel)
    return rel


@dataclass
class IgnoreSource:
    """
    A named group of ignore patterns.

    Patterns are matched against paths relative to `base`, or to the working
    directory when `base` is `None`. A source with a `base` never matches paths
    outside it.
    """

    name: str
    patterns: list[str]
    # Whether the patterns also apply while globbing, not only in the final filter.
    glob_level: bool = True
    base: Path | None = None

    @cached_property
    def spec(self) -> pathspec.PathSpec:
        return pathspec.PathSpec.from_lines("gitignore", self.patterns)

    @cached_property
    def dir_spec(self) -> pathspec.PathSpec:
        """
        Directories whose whole content this source ignores. `dir/**` ignores
        everything below `dir`; a negation could re-include something below, so a
        source with `!` lines prunes nothing.
        """
        if any(p.startswith("!") for p in self.patterns):
            return pathspec.PathSpec.from_lines("gitignore", [])
        lines = [p[:-2] if p.endswith("/**") else p for p in self.patterns]
        return pathspec.PathSpec.from_lines("gitignore", lines)

    def _rel(self, path: Path, cwd: Path) -> str | None:
        rel = relative_posix(path, self.base or cwd)
        if self.base is not None and (rel == ".." or rel.startswith("../")):
            return None
        return rel

    def matches(self, path: Path, cwd: Path) -> bool:
        rel = self._rel(path, cwd)
        return rel is not None and self.spec.match_file(rel)

    def matches_dir(self, path: Path, cwd: Path) -> bool:
        rel = self._rel(path, cwd)
        return rel is not None and rel != "." and self.dir_spec.match_file(rel + "/")


@dataclass
class IgnoreSet:
    """
    Ordered union of ignore patterns from named sources.

    Sources are added in a fixed order (defaults, caller, manifest, gitignore).
    Each source is matched on its own and a path is ignored when any source
    matches it, so a `!pattern` line only re-includes paths within its own
    source and can never undo the built-in defaults. Glob-level sources are
    applied while expanding globs (and prune ignored directories); every source
    is applied again in the final filter pass.
    """

    sources: list[IgnoreSource] = field(default_factory=list)

    def add(
        self,
        name: str,
        patterns: Iterable[str] | str,
        glob_level: bool = True,
        base: Path | None = None,
    ) -> None:
        if isinstance(patterns, str):
            patterns = [patterns]
        patterns = [p for p in patterns if p]
        if not patterns:
            return
        logger.debug("Ignore source %r: %d pattern(s)", name, len(patterns))
        self.sources.append(IgnoreSource(name, patterns, glob_level, base))

    @property
    def glob_patterns(self) -> list[str]:
        """Patterns applied while globbing."""
        return [p for source in self.sources if source.glob_level for p in source.patterns]

    @property
    def patterns(self) -> list[str]:
        """All patterns, in source order."""
        return [p for source in self.sources for p in source.patterns]

    def source_names(self) -> list[str]:
        return [source.name for source in self.sources]

    def is_glob_ignored(self, path: Path, cwd: Path) -> bool:
        return any(s.matches(path, cwd) for s in self.sources if s.glob_level)

    def is_dir_pruned(self, path: Path, cwd: Path) -> bool:
        """Whether globbing may skip the directory `path` entirely."""
        return any(s.matches_dir(path, cwd) for s in self.sources if s.glob_level)

    def is_ignored(self, path: Path, cwd: Path) -> bool:
        return any(s.matches(path, cwd) for s in self.sources)

    def filter(self, paths: Iterable[Path], cwd: Path) -> list[Path]:
        """Return the given paths that no source ignores."""
        return [p for p in paths if not self.is_ignored(p, cwd)]
