# cppsage/doctor.py
"""
``sage doctor``: check that the external tools cppsage drives are available.

Each tool is probed by running it with ``--version``. A probe that cannot
launch or exits non-zero means "Not found". Nothing is modified.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

import click
from packaging.version import InvalidVersion
from packaging.version import parse as parse_version

from cppsage import process
from cppsage.errors import ToolNotFoundError
from cppsage.log_manager import get_logger
from cppsage.platform_policy import PlatformPolicy

__all__ = [
    "ToolSpec",
    "ToolStatus",
    "REQUIRED_TOOLS",
    "MIN_TOOL_VERSIONS",
    "VS_BUILD_TOOLS_HINT",
    "extract_version",
    "check_tool",
    "check_vs_build_tools",
    "check_tools",
    "print_report",
]

logger = get_logger(__name__)

VS_BUILD_TOOLS_NAME = "Visual Studio Build Tools"
VS_BUILD_TOOLS_HINT = "Install from: https://visualstudio.microsoft.com/visual-cpp-build-tools/"

_VERSION_RE = re.compile(r"\d+(\.\d+)+")


@dataclass(frozen=True)
class ToolSpec:
    name: str
    args: Sequence[str]
    install_hint: str


@dataclass(frozen=True)
class ToolStatus:
    name: str
    found: bool
    version_line: str = ""
    install_hint: str = ""
    outdated: bool = False
    detail: str = ""


REQUIRED_TOOLS: Sequence[ToolSpec] = (
    ToolSpec("cmake", ("--version",), "winget install Kitware.CMake"),
    ToolSpec("ninja", ("--version",), "winget install Kitware.Ninja"),
    ToolSpec("conan", ("--version",), "pip install conan"),
    ToolSpec("clang", ("--version",), "winget install LLVM.LLVM"),
)

#: cmake 3.15 is what the generated CMakeLists.txt requires; the
#: ``[generators]`` manifest section uses Conan 2 generator names.
MIN_TOOL_VERSIONS: Dict[str, str] = {
    "cmake": "3.15",
    "conan": "2.0",
}


def extract_version(line: str) -> Optional[str]:
    """Return the first version-looking token in ``line`` (e.g. ``3.28.1``)."""
    match = _VERSION_RE.search(line)
    return match.group(0) if match else None


def _is_outdated(tool: str, version_line: str) -> bool:
    minimum = MIN_TOOL_VERSIONS.get(tool)
    version = extract_version(version_line)
    if not minimum or not version:
        return False
    try:
        return parse_version(version) < parse_version(minimum)
    except InvalidVersion:
        logger.warning("Could not parse version '%s' for %s", version, tool)
        return False


def check_tool(spec: ToolSpec) -> ToolStatus:
    """Probe one tool."""
    try:
        result = process.run_process(spec.name, spec.args)
    except ToolNotFoundError:
        return ToolStatus(spec.name, found=False, install_hint=spec.install_hint)

    if not result.ok:
        return ToolStatus(spec.name, found=False, install_hint=spec.install_hint)

    lines = result.stdout.splitlines()
    version_line = lines[0].strip() if lines else ""
    return ToolStatus(
        spec.name,
        found=True,
        version_line=version_line,
        install_hint=spec.install_hint,
        outdated=_is_outdated(spec.name, version_line),
    )


def check_vs_build_tools(
    policy: PlatformPolicy,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[ToolStatus]:
    """Locate Visual Studio Build Tools through ``vswhere.exe``.

    Returns None on platforms where the probe does not apply.
    """
    vswhere = policy.vswhere_path(environ)
    if vswhere is None:
        return None

    if not vswhere.exists():
        return ToolStatus(
            VS_BUILD_TOOLS_NAME,
            found=False,
            install_hint=VS_BUILD_TOOLS_HINT,
            detail="(vswhere.exe not found at expected path)",
        )

    try:
        result = process.run_process(vswhere, ["-latest", "-property", "displayName"])
    except ToolNotFoundError:
        return ToolStatus(VS_BUILD_TOOLS_NAME, found=False, install_hint=VS_BUILD_TOOLS_HINT)

    display_name = result.stdout.strip()
    if not result.ok or not display_name:
        return ToolStatus(VS_BUILD_TOOLS_NAME, found=False, install_hint=VS_BUILD_TOOLS_HINT)
    return ToolStatus(
        VS_BUILD_TOOLS_NAME,
        found=True,
        version_line=display_name,
        install_hint=VS_BUILD_TOOLS_HINT,
    )


def check_tools(
    policy: PlatformPolicy,
    tools: Sequence[ToolSpec] = REQUIRED_TOOLS,
) -> List[ToolStatus]:
    statuses = [check_tool(spec) for spec in tools]
    vs_status = check_vs_build_tools(policy)
    if vs_status is not None:
        statuses.append(vs_status)
    return statuses


def print_report(statuses: Sequence[ToolStatus]) -> None:
    click.echo()
    click.secho("cppsage doctor", bold=True, underline=True)
    for status in statuses:
        click.echo(f"- {click.style(status.name, bold=True)}: ", nl=False)
        if status.found:
            click.echo(f"{click.style('OK', fg='green')} {click.style(status.version_line, dim=True)}")
            if status.outdated:
                minimum = MIN_TOOL_VERSIONS.get(status.name, "")
                click.secho(f"  Outdated: version {minimum} or newer is required.", fg="yellow")
                click.secho(f"  {status.install_hint}", fg="cyan")
        else:
            click.secho("Not found", fg="red")
            if status.detail:
                click.echo(f"  {status.detail}")
            click.secho(f"  {status.install_hint}", fg="cyan")
