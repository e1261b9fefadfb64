"""Tests for cppsage.platform_policy."""

from __future__ import annotations

from pathlib import Path

import pytest

from cppsage.platform_policy import SUFFIXED, UNSUFFIXED, detect_platform


@pytest.mark.parametrize(
    "platform, expected",
    [("win32", SUFFIXED), ("cygwin", SUFFIXED), ("linux", UNSUFFIXED), ("darwin", UNSUFFIXED)],
)
def test_detect_platform(platform, expected):
    assert detect_platform(platform) is expected


def test_binary_path():
    build = Path("build")
    assert UNSUFFIXED.binary_path(build, "myapp") == Path("build/myapp/myapp")
    assert SUFFIXED.binary_path(build, "myapp") == Path("build/myapp/myapp.exe")


def test_vswhere_path():
    assert UNSUFFIXED.vswhere_path({}) is None
    custom = SUFFIXED.vswhere_path({"ProgramFiles(x86)": "D:/PF86"})
    assert custom == Path("D:/PF86") / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"
    default = SUFFIXED.vswhere_path({})
    assert default.name == "vswhere.exe"
    assert "Program Files (x86)" in str(default)
