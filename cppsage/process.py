# cppsage/process.py
"""
Blocking subprocess invocation with captured output.

No timeout is imposed: a child that never exits blocks the caller.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from cppsage.errors import ToolNotFoundError
from cppsage.log_manager import get_logger

__all__ = ["ProcessResult", "run_process"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one finished child process."""

    args: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_process(
    executable: Union[str, Path],
    args: Sequence[str] = (),
    cwd: Optional[Union[str, Path]] = None,
) -> ProcessResult:
    """Run ``executable`` with ``args`` and wait for it to finish.

    Parameters
    ----------
    executable
        Program name (looked up on PATH) or path to a binary.
    args
        Ordered argument list.
    cwd
        Working directory for the child; the caller's cwd if omitted.

    Returns
    -------
    ProcessResult
        Exit code and captured stdout/stderr. A non-zero exit is *not* an
        exception; callers decide what failure means.

    Raises
    ------
    ToolNotFoundError
        If the executable cannot be launched at all.
    """
    cmd = [str(executable), *[str(a) for a in args]]
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except (FileNotFoundError, PermissionError) as exc:
        logger.debug("Launch of %s failed: %s", executable, exc)
        raise ToolNotFoundError(str(executable)) from exc

    logger.debug("%s exited with %s", cmd[0], completed.returncode)
    return ProcessResult(
        args=tuple(cmd),
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
