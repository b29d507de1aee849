"""VCS kinds and the per-repository status record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class RepoKind(Enum):
    BARE = "bare"
    GIT = "git"
    JUJUTSU = "jujutsu"

    @property
    def marker(self) -> Optional[str]:
        """Name of the entry that marks a working copy of this kind."""
        return _MARKERS[self]

    def __str__(self) -> str:
        return self.value


_MARKERS = {
    RepoKind.BARE: None,
    RepoKind.GIT: ".git",
    RepoKind.JUJUTSU: ".jj",
}


@dataclass(frozen=True)
class RepoStatus:
    path: Path
    kind: RepoKind
    dirty: bool = False
    remote: bool = False
    ahead: bool = False

    def __post_init__(self) -> None:
        if self.ahead and not self.remote:
            raise ValueError(f"{self.path}: cannot be ahead without a remote")
