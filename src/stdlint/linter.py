"""
Linter: lint JavaScript text or files with project-aware configuration.

Each call resolves its own options (defaults, caller options, `package.json`
settings, `.gitignore`), discovers files when needed, and hands the work to a
fresh engine built from the per-call engine config.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from stdlint.callbacks import Callback, run_with_callback
from stdlint.engine import EngineConfig, EslintEngine, LintEngine, LintReport
from stdlint.errors import ConfigError
from stdlint.file_resolver import FileResolver
from stdlint.options import LintOptions, ResolvedOptions, normalize_patterns, resolve_options

logger = logging.getLogger(__name__)

EngineFactory = Callable[[EngineConfig], LintEngine]


class Linter:
    """
    Front end over a lint engine.

    `cmd` names the `package.json` block holding project settings.
    `engine_factory` builds the engine for each call; it defaults to
    `EslintEngine`.
    """

    def __init__(
        self,
        cmd: str = "stdlint",
        engine_config: EngineConfig | None = None,
        engine_factory: EngineFactory = EslintEngine,
    ) -> None:
        if engine_config is None:
            engine_config = EngineConfig()
        if not isinstance(engine_config, EngineConfig):
            raise ConfigError("No engine config passed.")
        self.cmd = cmd
        self.engine_config = engine_config
        self.engine_factory = engine_factory

    def parse_options(self, options: LintOptions | None = None) -> ResolvedOptions:
        """
        Resolve `options` for one call: absolute `cwd`, the layered ignore set and
        the engine config, with any custom parser applied.
        """
        return resolve_options(options, self.cmd, self.engine_config)

    async def lint_text(self, text: str, options: LintOptions | None = None) -> LintReport:
        """Lint a text blob."""
        resolved = self.parse_options(options)
        return self.engine_factory(resolved.engine_config).execute_on_text(text)

    async def lint_files(
        self,
        files: Sequence[str] | str | None = None,
        options: LintOptions | None = None,
    ) -> LintReport:
        """
        Lint the files matched by the glob patterns in `files`.

        With no patterns, all `.js` and `.jsx` files under `cwd` are linted.
        Ignored files are never passed to the engine.
        """
        resolved = self.parse_options(options)
        paths = await self.find_files(files, resolved)
        logger.debug("Linting %d file(s) in %s", len(paths), resolved.cwd)
        if resolved.on_files is not None:
            resolved.on_files(paths)
        return self.engine_factory(resolved.engine_config).execute_on_files(paths)

    async def find_files(
        self, files: Sequence[str] | str | None, resolved: ResolvedOptions
    ) -> list[Path]:
        resolver = FileResolver(resolved.file_resolver_config())
        return await resolver.discover(normalize_patterns(files))

    def lint_text_cb(
        self,
        text: str,
        options: LintOptions | Callback | None,
        callback: Callback | None = None,
    ) -> asyncio.Task[None]:
        """
        Callback form of `lint_text`. `options` may be omitted by passing the
        callback in its place. The callback is always called on a later loop
        iteration with `(error, report)`.
        """
        options, callback = _split_callback(options, callback)
        return run_with_callback(self.lint_text(text, options), callback)

    def lint_files_cb(
        self,
        files: Sequence[str] | str | None,
        options: LintOptions | Callback | None,
        callback: Callback | None = None,
    ) -> asyncio.Task[None]:
        """Callback form of `lint_files`, with the same delivery rules as `lint_text_cb`."""
        options, callback = _split_callback(options, callback)
        return run_with_callback(self.lint_files(files, options), callback)


def _split_callback(
    options: LintOptions | Callback | None, callback: Callback | None
) -> tuple[LintOptions | None, Callback]:
    if callback is None:
        if not callable(options):
            raise TypeError("A callback is required")
        return None, options
    if callable(options):
        raise TypeError("options must be LintOptions or None")
    return options, callback
