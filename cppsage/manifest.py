# cppsage/manifest.py
"""
Dependency declarations and the transient Conan manifest.

``packages/requirements.txt`` is the source of truth. For each install, a
``conanfile.txt`` is written at the project root, ``conan install`` is run,
and the manifest is removed again whatever the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from cppsage import process
from cppsage.config import ProjectConfig
from cppsage.errors import ExternalToolError, NotFoundError, SageError
from cppsage.log_manager import get_logger

__all__ = [
    "Declaration",
    "GENERATORS",
    "parse_dependencies",
    "read_dependencies",
    "render_manifest",
    "install",
]

logger = get_logger(__name__)

GENERATORS = ("CMakeDeps", "CMakeToolchain")


@dataclass(frozen=True)
class Declaration:
    """One ``name/version`` requirement line."""

    text: str

    @property
    def name(self) -> str:
        return self.text.split("/", 1)[0]

    @property
    def version(self) -> Optional[str]:
        _, sep, rest = self.text.partition("/")
        return rest if sep else None

    def __str__(self) -> str:
        return self.text


def parse_dependencies(lines: Iterable[str]) -> List[Declaration]:
    """Keep stripped, non-blank, non-comment lines in their original order."""
    decls: List[Declaration] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        decls.append(Declaration(stripped))
    return decls


def read_dependencies(path: Path) -> List[Declaration]:
    """Read declarations from a requirements file.

    Raises
    ------
    NotFoundError
        If ``path`` does not exist.
    SageError
        If the file cannot be read or is not valid UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"{path} not found. Are you in the project root?")
    try:
        with path.open("r", encoding="utf-8") as f:
            return parse_dependencies(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise SageError(f"Could not read {path}: {exc}") from exc


def render_manifest(declarations: Sequence[Declaration]) -> str:
    lines = ["[requires]"]
    lines.extend(d.text for d in declarations)
    lines.append("")
    lines.append("[generators]")
    lines.extend(GENERATORS)
    return "\n".join(lines) + "\n"


def _write_manifest(path: Path, declarations: Sequence[Declaration]) -> None:
    try:
        path.write_text(render_manifest(declarations), encoding="utf-8")
    except OSError as exc:
        raise SageError(f"Could not write {path}: {exc}") from exc
    logger.debug("Wrote %s with %d requirement(s)", path, len(declarations))


def _remove_manifest(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove %s: %s", path, exc)
        return
    logger.debug("Removed %s", path)


def _conan_args(config: ProjectConfig) -> List[str]:
    return [
        "install",
        ".",
        "--build=missing",
        f"--output-folder={config.install_folder.relative_to(config.root).as_posix()}",
    ]


def install(
    declarations: Sequence[Declaration],
    config: ProjectConfig,
) -> Optional[process.ProcessResult]:
    """Install ``declarations`` through Conan.

    Returns
    -------
    ProcessResult or None
        The Conan result, or ``None`` when there was nothing to install.

    Raises
    ------
    ExternalToolError
        If Conan exits non-zero. Raised only after the manifest is removed.
    ToolNotFoundError
        If Conan cannot be launched.
    """
    if not declarations:
        return None

    manifest = config.manifest_file
    try:
        # A failed or partial write is removed by the finally block as well.
        _write_manifest(manifest, declarations)
        result = process.run_process(config.conan, _conan_args(config), cwd=config.root)
    finally:
        _remove_manifest(manifest)

    if not result.ok:
        raise ExternalToolError("Conan install failed", result.stderr)
    return result
