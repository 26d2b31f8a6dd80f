#!/usr/bin/env python3
"""
stdlint: Lint JavaScript with ESLint, using project ignore rules and settings

Common usage:
  stdlint
  stdlint "src/**/*.js"
  stdlint --ignore "fixtures/**" "lib/**/*.js"
  cat file.js | stdlint --stdin
  stdlint --list-files

Project settings are read from the "stdlint" block of the nearest package.json,
and the project root's .gitignore is honored.
"""

from __future__ import annotations

import argparse
import asyncio
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from stdlint.engine import EngineConfig, LintReport
from stdlint.errors import EngineError, StdlintError
from stdlint.linter import Linter
from stdlint.options import LintOptions


@dataclass
class Options:
    """Command-line options for the stdlint tool."""

    files: list[str]
    ignore: list[str]
    parser: str | None
    cwd: str | None
    config: str | None
    eslintrc: bool
    stdin: bool
    list_files: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    """Parse command-line arguments."""
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="stdlint",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=[],
        help="Glob patterns of files to lint (default: all .js and .jsx files)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Additional glob pattern to ignore. Can be repeated",
    )
    parser.add_argument(
        "--parser",
        type=str,
        default=None,
        metavar="NAME",
        help="Custom JS parser (e.g. babel-eslint); overrides package.json",
    )
    parser.add_argument(
        "--cwd",
        type=str,
        default=None,
        metavar="DIR",
        help="Directory to lint from (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="ESLint JSON config file to use",
    )
    parser.add_argument(
        "--eslintrc",
        action="store_true",
        help="Let ESLint also pick up .eslintrc files",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Lint text read from stdin instead of files",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the files that would be linted, without linting them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log how options, ignore rules and files were resolved",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        files=opts.files,
        ignore=opts.ignore,
        parser=opts.parser,
        cwd=opts.cwd,
        config=opts.config,
        eslintrc=opts.eslintrc,
        stdin=opts.stdin,
        list_files=opts.list_files,
        verbose=opts.verbose,
        version=opts.version,
    )


def _print_report(report: LintReport) -> None:
    for file_report in report.results:
        for msg in file_report.messages:
            rule = f" ({msg.rule_id})" if msg.rule_id else ""
            print(f"{file_report.file_path}:{msg.line}:{msg.column}: {msg.message}{rule}")


async def _run(linter: Linter, options: Options) -> LintReport | None:
    lint_options = LintOptions(cwd=options.cwd, ignore=options.ignore, parser=options.parser)

    if options.list_files:
        resolved = linter.parse_options(lint_options)
        for path in await linter.find_files(options.files, resolved):
            print(path)
        return None

    if options.stdin:
        return await linter.lint_text(sys.stdin.read(), lint_options)
    return await linter.lint_files(options.files, lint_options)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the stdlint CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for clean, 1 if problems were reported, 2 for errors)
    """
    options = _parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Display version information if requested
    if options.version:
        try:
            version = importlib.metadata.version("stdlint")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    engine_config = EngineConfig(
        config_file=Path(options.config) if options.config else None,
        use_eslintrc=options.eslintrc,
    )
    linter = Linter(engine_config=engine_config)

    try:
        report = asyncio.run(_run(linter, options))
    except StdlintError as e:
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, EngineError) and e.stderr:
            print(e.stderr.rstrip(), file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if report is None:
        return 0
    _print_report(report)
    if report.error_count or report.warning_count:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
