# cppsage/errors.py
"""
Error taxonomy for cppsage.

Every failure a command can report derives from :class:`SageError`. The CLI
catches it at the command boundary, prints a labeled ``Error:`` line and exits
with the class's ``exit_code``.

Exit codes
----------
1  generic / unexpected IO failure
3  NotFound (missing file, executable or build artifact)
4  AlreadyExists (scaffold target collision)
5  ExternalToolFailure (cmake / conan exited non-zero)
6  MarkerNotFound (CMakeLists.txt lacks the dependency markers)
7  ExecutionFailure (the project's own binary exited non-zero)
8  Configuration (unreadable ``sage.yaml``)
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "SageError",
    "NotFoundError",
    "ToolNotFoundError",
    "AlreadyExistsError",
    "ExternalToolError",
    "MarkerNotFoundError",
    "ExecutionError",
    "ConfigError",
]


class SageError(Exception):
    """Base class for all errors surfaced to the user."""

    exit_code = 1


class NotFoundError(SageError):
    """A required file, executable or artifact does not exist."""

    exit_code = 3


class ToolNotFoundError(NotFoundError):
    """An external executable could not be launched."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"'{executable}' could not be launched. Is it installed and on PATH?")
        self.executable = executable


class AlreadyExistsError(SageError):
    """The scaffold target directory already exists."""

    exit_code = 4


class ExternalToolError(SageError):
    """An external tool ran but exited non-zero.

    Parameters
    ----------
    action
        Short description of what was attempted, e.g. ``"CMake build failed"``.
    stderr
        Captured standard error of the failed process.
    """

    exit_code = 5

    def __init__(self, action: str, stderr: str = "") -> None:
        message = f"{action}:\n{stderr}" if stderr else action
        super().__init__(message)
        self.action = action
        self.stderr = stderr


class MarkerNotFoundError(SageError):
    """The build-description file is missing its dependency markers."""

    exit_code = 6


class ExecutionError(SageError):
    """The project's own binary exited with a non-zero status."""

    exit_code = 7

    def __init__(self, returncode: Optional[int] = None) -> None:
        detail = f" (exit code {returncode})" if returncode is not None else ""
        super().__init__(f"Project execution failed.{detail}")
        self.returncode = returncode


class ConfigError(SageError):
    """``sage.yaml`` exists but cannot be used."""

    exit_code = 8
