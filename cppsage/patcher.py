# cppsage/patcher.py
"""
Rewrites the tool-owned region of a target's ``CMakeLists.txt``.

Only the text strictly between :data:`~cppsage.config.START_MARKER` and
:data:`~cppsage.config.END_MARKER` is replaced; the marker lines and
everything outside them are left untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from cppsage.config import END_MARKER, START_MARKER
from cppsage.errors import MarkerNotFoundError, NotFoundError, SageError
from cppsage.log_manager import get_logger
from cppsage.manifest import Declaration

__all__ = [
    "render_dependency_block",
    "patch_dependency_section",
    "update_build_file",
]

logger = get_logger(__name__)


def render_dependency_block(declarations: Sequence[Declaration], owner: str) -> str:
    """Return ``find_package`` + ``target_link_libraries`` lines for each declaration."""
    lines = []
    for decl in declarations:
        lines.append(f"find_package({decl.name})\n")
        lines.append(f"target_link_libraries({owner} PRIVATE {decl.name}::{decl.name})\n")
    return "".join(lines)


def patch_dependency_section(
    contents: str,
    declarations: Sequence[Declaration],
    owner: str,
) -> str:
    """Replace the region between the dependency markers.

    Parameters
    ----------
    contents
        Current text of the build-description file.
    declarations
        Dependencies to link.
    owner
        The CMake target that links against them.

    Returns
    -------
    str
        Updated text. Applying the same declarations twice yields the same
        text as applying them once.

    Raises
    ------
    MarkerNotFoundError
        If either marker is missing or the end marker precedes the start.
    """
    start = contents.find(START_MARKER)
    if start == -1:
        raise MarkerNotFoundError("Could not find dependency markers in CMakeLists.txt")
    interior_start = start + len(START_MARKER)
    end = contents.find(END_MARKER, interior_start)
    if end == -1:
        raise MarkerNotFoundError("Could not find dependency markers in CMakeLists.txt")

    block = render_dependency_block(declarations, owner)
    return contents[:interior_start] + "\n" + block + "\n" + contents[end:]


def update_build_file(path: Path, declarations: Sequence[Declaration], owner: str) -> str:
    """Patch the file at ``path`` in place and return the new text.

    Nothing is written when the markers are missing.
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"Build file not found: {path}")
    try:
        contents = path.read_text(encoding="utf-8")
        updated = patch_dependency_section(contents, declarations, owner)
        if updated != contents:
            path.write_text(updated, encoding="utf-8")
            logger.debug("Updated dependency section of %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        raise SageError(f"Could not update {path}: {exc}") from exc
    return updated
