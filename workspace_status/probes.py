"""
Classify a directory by VCS kind and reduce VCS query output to a RepoStatus.

git:
  dirty  - `git status --porcelain` prints anything (untracked files count)
  remote - `git remote` lists at least one remote
  ahead  - `git log origin/main..main` is non-empty; a missing origin/main
           means there is nothing to be ahead of, so failure reads as False

jujutsu:
  The working copy is always a change, so "dirty" means the change has
  files but no description yet. "ahead" counts non-empty changes that no
  remote bookmark contains, and is only queried when a remote exists.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from workspace_status.models import RepoKind, RepoStatus
from workspace_status.oracle import Oracle, run_command

log = logging.getLogger(__name__)

GIT = "git"
JJ = "jj"

# Only this branch pair is compared; other default branch names report not ahead.
LOCAL_BRANCH = "main"
REMOTE_BRANCH = "origin/main"

AHEAD_REVSET = "all() & ~ remote_bookmarks() & ~ root() & ~ empty()"

# .jj first: colocated jujutsu repos also carry a .git entry.
DETECTION_ORDER: List[RepoKind] = [RepoKind.JUJUTSU, RepoKind.GIT]


class ProbeError(Exception):
    """A status query that must succeed failed; the directory is not reportable."""

    def __init__(self, path: Path, cmd: Sequence[str]) -> None:
        self.path = path
        self.cmd = list(cmd)
        super().__init__(f"{' '.join(self.cmd)} failed in {path}")


def _query(oracle: Oracle, path: Path, command: str, args: List[str]) -> bytes:
    stdout, ok = oracle(command, args, path)
    if not ok:
        raise ProbeError(path, [command, *args])
    return stdout


def detect_kind(path: Path) -> RepoKind:
    """Return the kind whose marker entry exists directly under `path`."""
    for kind in DETECTION_ORDER:
        try:
            found = (path / kind.marker).exists()
        except OSError as exc:
            log.debug("Cannot check %s in %s: %s", kind.marker, path, exc)
            continue
        if found:
            return kind
    return RepoKind.BARE


def bare_status(path: Path, oracle: Oracle) -> RepoStatus:
    return RepoStatus(path=path, kind=RepoKind.BARE)


def git_status(path: Path, oracle: Oracle) -> RepoStatus:
    dirty = len(_query(oracle, path, GIT, ["status", "--porcelain"])) > 0
    remote = len(_query(oracle, path, GIT, ["remote"])) > 0

    ahead = False
    if remote:
        stdout, ok = oracle(GIT, ["log", f"{REMOTE_BRANCH}..{LOCAL_BRANCH}"], path)
        if ok:
            ahead = len(stdout) > 0
        else:
            log.debug("No %s in %s, treating as not ahead", REMOTE_BRANCH, path)

    return RepoStatus(path=path, kind=RepoKind.GIT, dirty=dirty, remote=remote, ahead=ahead)


def jujutsu_status(path: Path, oracle: Oracle) -> RepoStatus:
    has_files = len(_query(oracle, path, JJ, ["status"])) > 0
    description = _query(oracle, path, JJ, ["log", "-r", "@", "--no-graph", "-T", "description"])
    has_no_description = len(description.strip()) == 0
    dirty = has_files and has_no_description

    remote = len(_query(oracle, path, JJ, ["git", "remote", "list"])) > 0

    ahead = False
    if remote:
        stdout, ok = oracle(JJ, ["log", "-r", AHEAD_REVSET, "--no-graph", "-T", "commit_id"], path)
        if ok:
            ahead = len(stdout.strip()) > 0
        else:
            log.debug("Ahead query failed in %s, treating as not ahead", path)

    return RepoStatus(path=path, kind=RepoKind.JUJUTSU, dirty=dirty, remote=remote, ahead=ahead)


Probe = Callable[[Path, Oracle], RepoStatus]

PROBES: Dict[RepoKind, Probe] = {
    RepoKind.BARE: bare_status,
    RepoKind.GIT: git_status,
    RepoKind.JUJUTSU: jujutsu_status,
}


def classify(path: Path, oracle: Oracle = run_command) -> RepoStatus:
    """
    Detect the VCS kind of `path` and probe its status.

    Raises:
        ProbeError: a status, description or remote query failed.
    """
    kind = detect_kind(path)
    log.debug("%s: detected %s", path, kind)
    return PROBES[kind](path, oracle)
