"""
FileResolver: main entry point for file discovery.

Expands glob patterns into a deduplicated list of absolute file paths,
applying the configured ignore sources in two passes: once while globbing,
once as a gitignore-style filter over the combined result.
"""

from __future__ import annotations

import asyncio
import glob
import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from stdlint.file_resolver.types import FileResolverConfig

logger = logging.getLogger(__name__)


class FileResolver:
    """
    Discovers files matching glob patterns while respecting default, caller,
    manifest and `.gitignore` ignore patterns.
    """

    def __init__(self, config: FileResolverConfig) -> None:
        self._config: FileResolverConfig = config
        self._cwd: Path = Path(config.cwd).resolve()

    async def discover(self, patterns: Sequence[str] | str | None = None) -> list[Path]:
        """
        Expand `patterns` (default: `**/*.js` and `**/*.jsx`) into absolute paths.

        Every pattern is globbed concurrently in a worker thread. The first
        glob failure aborts discovery and propagates unchanged. A pattern that
        matches nothing contributes nothing; it is not an error.
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        if not patterns:
            patterns = self._config.default_patterns

        results = await asyncio.gather(
            *(asyncio.to_thread(self._expand, pattern) for pattern in patterns)
        )

        # Flatten in pattern order, keeping the first occurrence of each path.
        files = list(dict.fromkeys(path for result in results for path in result))
        files = self._config.ignore_set.filter(files, self._cwd)
        logger.debug("Discovered %d file(s) from %d pattern(s)", len(files), len(patterns))
        return files

    def _expand(self, pattern: str) -> list[Path]:
        """
        Glob one pattern relative to `cwd`, keeping files not ignored at glob level.

        Segments are expanded one at a time with `glob`; `**` segments walk the
        tree themselves so that ignored directories are never entered.
        """
        parsed = Path(pattern)
        parts = parsed.parts
        if parsed.anchor:
            candidates = [Path(parsed.anchor)]
            parts = parts[1:]
        else:
            candidates = [self._cwd]

        for i, part in enumerate(parts):
            last = i == len(parts) - 1
            matched: dict[Path, None] = {}
            for base in candidates:
                if part == "**":
                    matched.update(dict.fromkeys(self._walk(base, include_files=last)))
                else:
                    for name in glob.glob(part, root_dir=base):
                        matched[base / name] = None
            candidates = list(matched)

        ignore_set = self._config.ignore_set
        return [
            path.resolve()
            for path in candidates
            if path.is_file() and not ignore_set.is_glob_ignored(path, self._cwd)
        ]

    def _walk(self, base: Path, include_files: bool) -> Iterator[Path]:
        """
        Yield `base` and every non-hidden directory below it (and files, when
        `include_files`), pruning directories the ignore set skips wholesale.
        """
        ignore_set = self._config.ignore_set
        for dirpath, dirnames, filenames in os.walk(base):
            current = Path(dirpath)
            yield current

            # Prune in-place (prevents descent)
            dirnames[:] = [
                d
                for d in dirnames
                if not d.startswith(".") and not ignore_set.is_dir_pruned(current / d, self._cwd)
            ]
            if include_files:
                for filename in filenames:
                    if not filename.startswith("."):
                        yield current / filename
