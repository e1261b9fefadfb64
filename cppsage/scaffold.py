# cppsage/scaffold.py
"""
Project scaffolding for ``sage new``.

Creates the directory tree and writes the starter files from
:mod:`cppsage.templates`. The only substitution performed is the project
name.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, Iterable, Sequence, Union

from cppsage import templates
from cppsage.errors import AlreadyExistsError, SageError
from cppsage.log_manager import get_logger

__all__ = ["PROJECT_STRUCTURE", "project_files", "validate_name", "create_project"]

logger = get_logger(__name__)

#: Directories created under the new project root. ``{name}`` is the project name.
PROJECT_STRUCTURE: Sequence[str] = [
    "build/windows",
    "cmake",
    "{name}/include",
    "{name}/src",
    "install",
    "packages",
    "res",
]


def validate_name(name: str) -> str:
    """Reject names that are not a single, ordinary path component."""
    stripped = name.strip()
    if not stripped or stripped in {".", ".."} or "/" in stripped or "\\" in stripped:
        raise SageError(f"Invalid project name: '{name}'")
    return stripped


def project_files(name: str) -> Dict[str, str]:
    """Map of relative file path -> content for a project called ``name``."""
    return {
        ".clang-format": templates.clang_format(name),
        ".clang-tidy": "",
        ".clangd": templates.CLANGD,
        ".editorconfig": templates.EDITORCONFIG,
        ".gitignore": templates.GITIGNORE,
        "CMakeLists.txt": templates.cmake_lists_top(name),
        "cmake/config.cmake": templates.CONFIG_CMAKE,
        f"{name}/CMakeLists.txt": templates.cmake_lists_sub(name),
        f"{name}/src/main.cpp": templates.MAIN_CPP,
        "packages/requirements.txt": templates.REQUIREMENTS_TXT,
    }


def _create_directories(root: Path, structure: Iterable[str], name: str) -> None:
    for sub in structure:
        (root / sub.format(name=name)).mkdir(parents=True, exist_ok=True)


def _write_files(root: Path, files: Dict[str, str]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)


def create_project(name: str, parent: Union[str, Path] = ".") -> Path:
    """Create a new project directory ``<parent>/<name>``.

    Raises
    ------
    AlreadyExistsError
        If the target directory exists; nothing is created in that case.
    SageError
        If the name is invalid or the filesystem refuses a write. A partially
        written project directory is removed again.
    """
    name = validate_name(name)
    root = Path(parent) / name
    if root.exists():
        raise AlreadyExistsError(f"Directory '{name}' already exists.")

    try:
        root.mkdir(parents=True, exist_ok=False)
    except OSError as exc:
        raise SageError(f"Failed to create project '{name}': {exc}") from exc

    try:
        _create_directories(root, PROJECT_STRUCTURE, name)
        _write_files(root, project_files(name))
    except OSError as exc:
        shutil.rmtree(root, ignore_errors=True)
        raise SageError(f"Failed to create project '{name}': {exc}") from exc
    return root
