"""
Thin wrapper around the VCS command line tools.

Every query goes through an "oracle": a callable taking the executable name,
its arguments and the working directory, returning the captured stdout and
whether the command succeeded. Probes only look at emptiness of the output,
so tests can swap in any callable with the same shape.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, NamedTuple, Optional, Sequence

log = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    stdout: bytes
    ok: bool


Oracle = Callable[[str, Sequence[str], Optional[Path]], CommandResult]


def run_command(command: str, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
    """Run `command args...` in `cwd` and return (stdout, succeeded)."""
    cmd = [command, *args]
    log.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as exc:
        log.debug("Executable or directory not found: %s", exc)
        return CommandResult(b"", False)
    except (NotADirectoryError, PermissionError) as exc:
        log.debug("Cannot run %s in %s: %s", command, cwd, exc)
        return CommandResult(b"", False)

    if result.returncode != 0:
        log.debug(
            "Command failed (exit %s): %s\n   ↳ %s",
            result.returncode,
            " ".join(cmd),
            result.stderr.decode(errors="replace").strip(),
        )
        return CommandResult(result.stdout, False)
    return CommandResult(result.stdout, True)
