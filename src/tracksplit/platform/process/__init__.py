"""Child-process helpers."""

from .runner import ProcessFailure, run_command

__all__ = ["ProcessFailure", "run_command"]
