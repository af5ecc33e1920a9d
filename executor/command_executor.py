"""Command execution wrapper."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("od.executor")

# Exit status reported when the executable itself cannot be found.
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one process invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[list[str]], CommandResult]


def run_command(command: list[str], cwd: Path | None = None) -> CommandResult:
    """Run an argument list without a shell and capture its output."""
    logger.debug("running %s", command)
    try:
        proc = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
    except FileNotFoundError as exc:
        return CommandResult(returncode=COMMAND_NOT_FOUND, stdout="", stderr=str(exc))
    return CommandResult(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def find_executable(name: str) -> Path | None:
    """Locate `name` on PATH."""
    found = shutil.which(name)
    return Path(found) if found else None
