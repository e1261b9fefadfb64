"""Tests for cppsage.doctor: tool probes and report rendering."""

from __future__ import annotations

import pytest
import cppsage.doctor as doctor
from cppsage.platform_policy import SUFFIXED, UNSUFFIXED


def test_extract_version():
    assert doctor.extract_version("cmake version 3.28.1") == "3.28.1"
    assert doctor.extract_version("Conan version 2.3.0") == "2.3.0"
    assert doctor.extract_version("no digits here") is None


def test_check_tool_found(fake_process):
    fake_process.push(0, stdout="cmake version 3.28.1\n\nCMake suite maintained by Kitware\n")
    status = doctor.check_tool(doctor.REQUIRED_TOOLS[0])
    assert status.found
    assert status.version_line == "cmake version 3.28.1"
    assert not status.outdated
    assert fake_process.calls == [("cmake", ("--version",), None)]


def test_check_tool_outdated(fake_process):
    fake_process.push(0, stdout="cmake version 3.10.2\n")
    status = doctor.check_tool(doctor.REQUIRED_TOOLS[0])
    assert status.found and status.outdated


def test_check_tool_missing_and_failing(fake_process):
    fake_process.push_missing()
    fake_process.push(1)
    spec = doctor.ToolSpec("ninja", ("--version",), "winget install Kitware.Ninja")
    assert not doctor.check_tool(spec).found
    failing = doctor.check_tool(spec)
    assert not failing.found
    assert failing.install_hint == "winget install Kitware.Ninja"


def test_check_tools_probes_four_tools_on_posix(fake_process):
    statuses = doctor.check_tools(UNSUFFIXED)
    assert [s.name for s in statuses] == ["cmake", "ninja", "conan", "clang"]
    assert fake_process.executables == ["cmake", "ninja", "conan", "clang"]


def test_vs_probe_not_applicable_on_posix():
    assert doctor.check_vs_build_tools(UNSUFFIXED) is None


def test_vs_probe_missing_vswhere(tmp_path):
    status = doctor.check_vs_build_tools(SUFFIXED, {"ProgramFiles(x86)": str(tmp_path)})
    assert not status.found
    assert "vswhere.exe not found" in status.detail
    assert status.install_hint == doctor.VS_BUILD_TOOLS_HINT


@pytest.mark.parametrize(
    "returncode, stdout, found",
    [
        (0, "Visual Studio Build Tools 2022\n", True),
        (0, "   \n", False),
        (1, "", False),
    ],
)
def test_vs_probe_runs_vswhere(tmp_path, fake_process, returncode, stdout, found):
    vswhere = tmp_path / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"
    vswhere.parent.mkdir(parents=True)
    vswhere.write_text("", encoding="utf-8")
    fake_process.push(returncode, stdout=stdout)

    status = doctor.check_vs_build_tools(SUFFIXED, {"ProgramFiles(x86)": str(tmp_path)})

    assert status.found is found
    assert fake_process.calls[0][1] == ("-latest", "-property", "displayName")
    if found:
        assert status.version_line == "Visual Studio Build Tools 2022"


def test_print_report(capsys):
    statuses = [
        doctor.ToolStatus("cmake", True, "cmake version 3.28.1", "winget install Kitware.CMake"),
        doctor.ToolStatus("conan", True, "Conan version 1.64.0", "pip install conan", outdated=True),
        doctor.ToolStatus("ninja", False, install_hint="winget install Kitware.Ninja"),
    ]

    doctor.print_report(statuses)
    text = capsys.readouterr().out

    assert "cppsage doctor" in text
    assert "- cmake: OK cmake version 3.28.1" in text
    assert "Outdated: version 2.0 or newer is required." in text
    assert "- ninja: Not found" in text
    assert "winget install Kitware.Ninja" in text
