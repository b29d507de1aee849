"""Shared fixtures: a scripted VCS oracle and isolated VCS environments."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from workspace_status.oracle import CommandResult


class FakeOracle:
    """Answers VCS queries from a table and records every call."""

    def __init__(self, responses: Dict[Tuple[str, ...], CommandResult]) -> None:
        self.responses = responses
        self.calls: List[Tuple[str, ...]] = []

    def __call__(self, command: str, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        key = (command, *args)
        self.calls.append(key)
        if key not in self.responses:
            raise AssertionError(f"unexpected query: {' '.join(key)}")
        return self.responses[key]


def ok(stdout: bytes = b"") -> CommandResult:
    return CommandResult(stdout, True)


def failed(stdout: bytes = b"") -> CommandResult:
    return CommandResult(stdout, False)


@pytest.fixture
def vcs_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user-level git/jj config out of the tests."""
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME", "JJ_USER"):
        monkeypatch.setenv(var, "Test User")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL", "JJ_EMAIL"):
        monkeypatch.setenv(var, "test@example.com")
    return home


def run(args: List[str], cwd: Path) -> None:
    subprocess.run(args, cwd=str(cwd), capture_output=True, check=True)


def git_init(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    run(["git", "init"], path)
    run(["git", "symbolic-ref", "HEAD", "refs/heads/main"], path)
    return path


def git_commit(path: Path, filename: str, message: str) -> None:
    (path / filename).write_text(message + "\n")
    run(["git", "add", "."], path)
    run(["git", "commit", "-m", message], path)


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
requires_jj = pytest.mark.skipif(shutil.which("jj") is None, reason="jj not installed")
