"""Tests for cppsage.process: launching children and capturing output."""

from __future__ import annotations

import subprocess

import pytest

import cppsage.process as process
from cppsage.errors import NotFoundError, ToolNotFoundError


def test_run_process_captures_output(monkeypatch):
    """A finished child yields its exit code and decoded stdout/stderr."""
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0, stdout="hello\n", stderr="warn\n")

    monkeypatch.setattr(process.subprocess, "run", fake_run)
    result = process.run_process("cmake", ["--build", "build"], cwd="/proj")

    assert seen["cmd"] == ["cmake", "--build", "build"]
    assert seen["kwargs"]["capture_output"] is True
    assert seen["kwargs"]["cwd"] == "/proj"
    assert seen["kwargs"]["check"] is False
    assert result.ok
    assert result.stdout == "hello\n"
    assert result.stderr == "warn\n"
    assert result.args == ("cmake", "--build", "build")


def test_non_zero_exit_is_not_an_exception(monkeypatch):
    monkeypatch.setattr(
        process.subprocess,
        "run",
        lambda cmd, **kw: subprocess.CompletedProcess(cmd, 2, stdout="", stderr="boom"),
    )
    result = process.run_process("conan", ["install", "."])
    assert not result.ok
    assert result.returncode == 2
    assert result.stderr == "boom"


def test_launch_failure_raises_tool_not_found(monkeypatch):
    """A missing executable is a distinct error from a non-zero exit."""

    def boom(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file", cmd[0])

    monkeypatch.setattr(process.subprocess, "run", boom)
    with pytest.raises(ToolNotFoundError) as excinfo:
        process.run_process("ninja", ["--version"])
    assert isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.executable == "ninja"
    assert "ninja" in str(excinfo.value)


def test_none_streams_become_empty_strings(monkeypatch):
    monkeypatch.setattr(
        process.subprocess,
        "run",
        lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, stdout=None, stderr=None),
    )
    result = process.run_process("clang")
    assert result.stdout == ""
    assert result.stderr == ""
