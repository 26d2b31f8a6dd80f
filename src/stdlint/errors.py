"""Exceptions raised by stdlint."""

from __future__ import annotations


class StdlintError(Exception):
    """Base class for stdlint errors."""


class ConfigError(StdlintError):
    """The linter was given an unusable configuration."""


class EngineError(StdlintError):
    """The lint engine failed to run or produced unreadable output."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr
