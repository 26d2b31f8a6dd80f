"""
Self-contained file discovery with layered ignore patterns.

No imports from `stdlint` outside this package.

Usage::

    from stdlint.file_resolver import FileResolver, FileResolverConfig, IgnoreSet

    ignore_set = IgnoreSet()
    ignore_set.add("defaults", DEFAULT_IGNORE_PATTERNS)
    ignore_set.add("caller", ["fixtures/**"])
    resolver = FileResolver(FileResolverConfig(cwd=Path("."), ignore_set=ignore_set))
    files = await resolver.discover(["src/**/*.js"])
"""

from stdlint.file_resolver.defaults import DEFAULT_IGNORE_PATTERNS, DEFAULT_PATTERNS
from stdlint.file_resolver.gitignore import IgnoreSet, load_gitignore, parse_ignore_lines
from stdlint.file_resolver.resolver import FileResolver
from stdlint.file_resolver.types import FileResolverConfig

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "DEFAULT_PATTERNS",
    "FileResolver",
    "FileResolverConfig",
    "IgnoreSet",
    "load_gitignore",
    "parse_ignore_lines",
]
