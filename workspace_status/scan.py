"""Walk a workspace directory and classify each repository under it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from workspace_status.models import RepoStatus
from workspace_status.oracle import Oracle, run_command
from workspace_status.probes import GIT, JJ, ProbeError, classify

log = logging.getLogger(__name__)

SKIP_PREFIXES = (".", "_")

# Asked in order; jj first since jujutsu repos often also answer to git.
ROOT_QUERIES: List[Tuple[str, List[str]]] = [
    (JJ, ["root"]),
    (GIT, ["rev-parse", "--show-toplevel"]),
]


def get_subdirectories(root: Path) -> List[Path]:
    """
    Return immediate child directories of `root` in listing order,
    skipping hidden (`.`) and private (`_`) names and symlinks.

    Raises:
        OSError: `root` cannot be listed.
    """
    subdirs: List[Path] = []
    for entry in root.iterdir():
        if entry.is_symlink() or not entry.is_dir():
            continue
        if entry.name.startswith(SKIP_PREFIXES):
            log.debug("Skipping %s", entry)
            continue
        subdirs.append(entry)
    return subdirs


def default_directory(oracle: Oracle = run_command) -> Path:
    """Return the enclosing jj or git root, or the current directory."""
    for command, args in ROOT_QUERIES:
        stdout, ok = oracle(command, args, None)
        if not ok:
            continue
        root = stdout.decode(errors="replace").strip()
        if root:
            log.debug("Using %s root: %s", command, root)
            return Path(root)
    return Path(".")


def scan(root: Path, oracle: Oracle = run_command) -> Iterator[Tuple[str, RepoStatus]]:
    """
    Yield (name, status) for each subdirectory of `root`, one at a time.

    Directories whose probe fails are left out.

    Raises:
        OSError: `root` cannot be listed (raised before anything is yielded).
    """
    subdirs = get_subdirectories(root)
    return _classify_all(subdirs, oracle)


def _classify_all(subdirs: List[Path], oracle: Oracle) -> Iterator[Tuple[str, RepoStatus]]:
    for subdir in subdirs:
        try:
            status = classify(subdir, oracle)
        except ProbeError as exc:
            log.debug("Skipping %s: %s", subdir.name, exc)
            continue
        yield subdir.name, status
