"""Shared fixtures for the cppsage test-suite.

`fake_process` replaces `cppsage.process.run_process` (the import path every
module calls through) with a recorder that answers from a scripted queue, so
no real cmake/conan/binary is ever launched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest

import cppsage.process as process
from cppsage.config import ProjectConfig, load_config
from cppsage.errors import ToolNotFoundError


class FakeProcess:
    """Records invocations and replays scripted outcomes in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[str, ...], Optional[str]]] = []
        self._outcomes: List[object] = []
        self.on_call: Optional[Callable[[str, Tuple[str, ...]], None]] = None

    def push(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> "FakeProcess":
        self._outcomes.append((returncode, stdout, stderr))
        return self

    def push_missing(self) -> "FakeProcess":
        self._outcomes.append("missing")
        return self

    def __call__(self, executable, args=(), cwd=None):
        exe = str(executable)
        argv = tuple(str(a) for a in args)
        self.calls.append((exe, argv, str(cwd) if cwd is not None else None))
        if self.on_call is not None:
            self.on_call(exe, argv)
        outcome = self._outcomes.pop(0) if self._outcomes else (0, "", "")
        if outcome == "missing":
            raise ToolNotFoundError(exe)
        returncode, stdout, stderr = outcome
        return process.ProcessResult(
            args=(exe, *argv), returncode=returncode, stdout=stdout, stderr=stderr
        )

    @property
    def executables(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_process(monkeypatch) -> FakeProcess:
    fake = FakeProcess()
    monkeypatch.setattr(process, "run_process", fake)
    return fake


def _write(path: Path, content: str = "") -> Path:
    """Create file with parents and write text content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path) -> ProjectConfig:
    """A minimal on-disk project named `myapp` with marker-bearing CMakeLists."""
    root = tmp_path / "myapp"
    _write(
        root / "myapp" / "CMakeLists.txt",
        "add_executable(myapp\n    src/main.cpp\n)\n\n"
        "# cppsage:dependencies_start\n# cppsage:dependencies_end\n",
    )
    _write(root / "packages" / "requirements.txt", "# deps\n")
    return load_config(root)
