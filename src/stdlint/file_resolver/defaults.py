"""
Default include and ignore patterns for file discovery.

Include patterns are globs relative to the working directory. Ignore patterns
use gitignore syntax and are matched against paths relative to the working
directory.
"""

from __future__ import annotations

DEFAULT_PATTERNS: list[str] = [
    "**/*.js",
    "**/*.jsx",
]

# Always ignored, whatever the caller or the project asks for.
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "coverage/**",
    "node_modules/**",
    "**/*.min.js",
    "**/bundle.js",
]
