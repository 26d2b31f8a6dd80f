"""
Lint engine interface and the ESLint adapter.

The engine is a black box: it receives a resolved configuration plus either a
text blob or a file list and returns a `LintReport`. `EslintEngine` runs the
`eslint` executable with JSON output and normalizes what it prints.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from stdlint.errors import EngineError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine settings for one lint call. Treated as immutable: per-call changes
    (such as a custom parser) are made on a copy with `dataclasses.replace`.
    """

    config_file: Path | None = None
    use_eslintrc: bool = False
    parser: str | None = None
    executable: str = "eslint"
    extra_args: tuple[str, ...] = ()


@dataclass
class LintMessage:
    """One diagnostic reported by the engine."""

    rule_id: str | None
    severity: int
    message: str
    line: int = 0
    column: int = 0

    @property
    def is_error(self) -> bool:
        return self.severity >= 2


@dataclass
class FileReport:
    file_path: str
    messages: list[LintMessage] = field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0


@dataclass
class LintReport:
    """Normalized engine result: one `FileReport` per linted file plus totals."""

    results: list[FileReport] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(r.error_count for r in self.results)

    @property
    def warning_count(self) -> int:
        return sum(r.warning_count for r in self.results)

    @property
    def messages(self) -> list[LintMessage]:
        return [m for r in self.results for m in r.messages]

    @classmethod
    def from_eslint_json(cls, data: list[dict[str, Any]]) -> LintReport:
        """Build a report from ESLint's `--format json` output."""
        results: list[FileReport] = []
        for entry in data:
            messages = [
                LintMessage(
                    rule_id=m.get("ruleId"),
                    severity=int(m.get("severity", 2)),
                    message=m.get("message", ""),
                    line=int(m.get("line") or 0),
                    column=int(m.get("column") or 0),
                )
                for m in entry.get("messages", [])
            ]
            results.append(
                FileReport(
                    file_path=entry.get("filePath", ""),
                    messages=messages,
                    error_count=int(entry.get("errorCount", 0)),
                    warning_count=int(entry.get("warningCount", 0)),
                )
            )
        return cls(results=results)


class LintEngine(Protocol):
    """What stdlint needs from a lint engine."""

    def execute_on_text(self, text: str, filename: str | None = None) -> LintReport: ...

    def execute_on_files(self, files: Sequence[str | Path]) -> LintReport: ...


class EslintEngine:
    """Runs the `eslint` executable and parses its JSON output."""

    def __init__(self, config: EngineConfig) -> None:
        self.config = config

    def base_command(self) -> list[str]:
        cmd = [self.config.executable, "--format", "json"]
        if not self.config.use_eslintrc:
            cmd.append("--no-eslintrc")
        if self.config.config_file is not None:
            cmd += ["--config", str(self.config.config_file)]
        if self.config.parser:
            cmd += ["--parser", self.config.parser]
        cmd += list(self.config.extra_args)
        return cmd

    def execute_on_text(self, text: str, filename: str | None = None) -> LintReport:
        cmd = self.base_command() + ["--stdin"]
        if filename:
            cmd += ["--stdin-filename", filename]
        return self._run(cmd, stdin=text)

    def execute_on_files(self, files: Sequence[str | Path]) -> LintReport:
        if not files:
            return LintReport()
        return self._run(self.base_command() + [str(f) for f in files])

    def _run(self, cmd: list[str], stdin: str | None = None) -> LintReport:
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd, input=stdin, capture_output=True, text=True, check=False
            )
        except OSError as e:
            raise EngineError(f"Could not run {self.config.executable}: {e}") from e

        # eslint exits 1 when lint problems were found; anything else is a failure.
        if proc.returncode not in (0, 1):
            raise EngineError(
                f"{self.config.executable} exited with status {proc.returncode}",
                stderr=proc.stderr,
            )
        try:
            data = json.loads(proc.stdout)
        except json.JSONDecodeError as e:
            raise EngineError(
                f"Unreadable output from {self.config.executable}: {e}", stderr=proc.stderr
            ) from e
        return LintReport.from_eslint_json(data)
