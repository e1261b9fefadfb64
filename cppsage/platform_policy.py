# cppsage/platform_policy.py
"""
Platform-conditional behavior, selected once at startup.

Two variants exist: the *suffixed* platform (Windows), whose binaries end in
``.exe`` and which can probe for Visual Studio Build Tools, and the
*unsuffixed* platform (Linux, macOS, ...).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

__all__ = ["PlatformPolicy", "SUFFIXED", "UNSUFFIXED", "detect_platform"]

_DEFAULT_PROGRAM_FILES_X86 = r"C:\Program Files (x86)"


@dataclass(frozen=True)
class PlatformPolicy:
    name: str
    exe_suffix: str
    probes_vs_build_tools: bool

    def executable_name(self, target: str) -> str:
        return f"{target}{self.exe_suffix}"

    def binary_path(self, build_dir: Path, target: str) -> Path:
        """Where CMake places ``target``'s executable: ``<build>/<target>/<target>[.exe]``."""
        return build_dir / target / self.executable_name(target)

    def vswhere_path(self, environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        """Location of the Visual Studio installer locator, or None if not applicable."""
        if not self.probes_vs_build_tools:
            return None
        env = os.environ if environ is None else environ
        program_files = env.get("ProgramFiles(x86)", _DEFAULT_PROGRAM_FILES_X86)
        return Path(program_files) / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"


SUFFIXED = PlatformPolicy(name="windows", exe_suffix=".exe", probes_vs_build_tools=True)
UNSUFFIXED = PlatformPolicy(name="posix", exe_suffix="", probes_vs_build_tools=False)


def detect_platform(platform: Optional[str] = None) -> PlatformPolicy:
    """Pick the policy for ``platform`` (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    return SUFFIXED if platform.startswith(("win32", "cygwin")) else UNSUFFIXED
