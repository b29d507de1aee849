#!/usr/bin/env python3
"""
Show the VCS status of every repository directly under a directory.

For each git or jujutsu working copy one row is printed:
  Dirty  - uncommitted work (jujutsu: the working-copy change has files
           but no description)
  Remote - at least one remote is configured
  Ahead  - local commits not yet on the remote

Without a directory argument, the enclosing jj root, then git root, then
the current directory is scanned. Folders starting with "." or "_" are
ignored, as are repositories whose status cannot be read.

Exit code:
  0 - table printed
  1 - the directory itself could not be listed
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from workspace_status.report import print_table
from workspace_status.scan import default_directory, scan


def configure_logging(quiet: bool, verbose: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List git and jujutsu repositories in a directory with their status."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="Directory to scan (default: enclosing jj/git root, else the current directory).",
    )
    parser.add_argument(
        "--no-unicode",
        action="store_true",
        help="Use text instead of Unicode symbols for boolean values.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Also list directories that are not repositories.",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode: warnings and errors only.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose mode: log every VCS command and skipped directory.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(quiet=args.quiet, verbose=args.verbose)

    root: Path = args.directory if args.directory is not None else default_directory()
    logging.debug("Scanning %s", root)

    try:
        rows = scan(root)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_table(rows, no_unicode=args.no_unicode, show_bare=args.all)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
