"""
stdlint: project-aware front end for linting JavaScript with ESLint.

Usage::

    import asyncio
    from stdlint import Linter, LintOptions

    options = LintOptions(ignore=["src/vendor/**"])
    report = asyncio.run(Linter().lint_files(["src/**/*.js"], options))
"""

from stdlint.engine import EngineConfig, EslintEngine, LintEngine, LintMessage, LintReport
from stdlint.errors import ConfigError, EngineError, StdlintError
from stdlint.linter import Linter
from stdlint.options import LintOptions

__all__ = [
    "ConfigError",
    "EngineConfig",
    "EngineError",
    "EslintEngine",
    "LintEngine",
    "LintMessage",
    "LintOptions",
    "LintReport",
    "Linter",
    "StdlintError",
]
