"""Blocking child-process execution with captured diagnostics.

Where: platform/process/runner.py
What: Run an external command to completion and report its stderr on failure.
Why: Give every collaborator adapter the same call-and-wait semantics.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence

from tracksplit.platform.logging import logger


class ProcessFailure(Exception):
    """Raised when a child process exits with a non-zero status."""

    def __init__(self, command: tuple[str, ...], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """The captured stderr, or the exit status when stderr was empty."""
        diagnostic = self.stderr.strip()
        if diagnostic:
            return diagnostic
        return f"{self.command[0]} exited with status {self.returncode}"

    def __str__(self) -> str:
        return self.message


def run_command(command: Sequence[str]) -> None:
    """Run ``command`` and wait for it to exit.

    Standard input is closed and standard output is discarded; standard error
    is captured so it can become the error message.

    Args:
        command: Executable followed by its arguments. No shell is involved.

    Raises:
        FileNotFoundError: If the executable cannot be found.
        ProcessFailure: If the process exits with a non-zero status.
    """
    argv = tuple(command)
    logger.debug("Running: %s", shlex.join(argv))

    completed = subprocess.run(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    if completed.returncode != 0:
        raise ProcessFailure(argv, completed.returncode, completed.stderr or "")


__all__ = ["ProcessFailure", "run_command"]
