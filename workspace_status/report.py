"""
Fixed-width status table.

Booleans print as ✓/✗, or true/false with --no-unicode.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from workspace_status.models import RepoKind, RepoStatus

NAME_WIDTH = 30
KIND_WIDTH = 10
FLAG_WIDTH = 7

HEADER = ("Name", "VCS", "Dirty", "Remote", "Ahead")


def format_bool(value: bool, no_unicode: bool) -> str:
    if no_unicode:
        return "true" if value else "false"
    return "✓" if value else "✗"


def format_row(name: str, kind: str, dirty: str, remote: str, ahead: str) -> str:
    return (
        f"{name:<{NAME_WIDTH}} {kind:<{KIND_WIDTH}} "
        f"{dirty:<{FLAG_WIDTH}} {remote:<{FLAG_WIDTH}} {ahead:<{FLAG_WIDTH}}"
    )


def render_table(
    rows: Iterable[Tuple[str, RepoStatus]],
    no_unicode: bool = False,
    show_bare: bool = False,
) -> List[str]:
    """Return the header line followed by one line per repository."""
    lines = [format_row(*HEADER)]
    for name, status in rows:
        if status.kind is RepoKind.BARE and not show_bare:
            continue
        lines.append(
            format_row(
                name,
                str(status.kind),
                format_bool(status.dirty, no_unicode),
                format_bool(status.remote, no_unicode),
                format_bool(status.ahead, no_unicode),
            )
        )
    return lines


def print_table(
    rows: Iterable[Tuple[str, RepoStatus]],
    no_unicode: bool = False,
    show_bare: bool = False,
) -> None:
    for line in render_table(rows, no_unicode=no_unicode, show_bare=show_bare):
        print(line)
