# cppsage/config.py
"""
Per-invocation project configuration.

All operations receive a :class:`ProjectConfig` instead of looking at the
current working directory themselves, so tests can pin a fixed project root.

Defaults reproduce the fixed layout written by ``sage new``. A ``sage.yaml``
file in the project root may override a small set of keys::

    build_dir: out
    generator: Ninja Multi-Config
    cmake: /opt/cmake/bin/cmake
    conan: conan2
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from cppsage.errors import ConfigError
from cppsage.log_manager import get_logger

__all__ = [
    "ProjectConfig",
    "load_config",
    "CONFIG_FILE_NAME",
    "START_MARKER",
    "END_MARKER",
]

logger = get_logger(__name__)

CONFIG_FILE_NAME = "sage.yaml"

START_MARKER = "# cppsage:dependencies_start"
END_MARKER = "# cppsage:dependencies_end"

DEFAULT_BUILD_DIR = "build"
DEFAULT_GENERATOR = "Ninja"
REQUIREMENTS_FILE = Path("packages") / "requirements.txt"
MANIFEST_FILE = Path("conanfile.txt")
INSTALL_FOLDER = Path("packages") / "install"
TOOLCHAIN_FILE = INSTALL_FOLDER / "conan_toolchain.cmake"

_OVERRIDABLE = ("build_dir", "generator", "cmake", "conan")


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved settings for one command invocation.

    Attributes
    ----------
    root
        Project root directory (where ``packages/`` and ``CMakeLists.txt`` live).
    name
        Project name; also the CMake target and binary name.
    build_dir_name
        Build directory, relative to ``root``.
    generator
        CMake generator passed to ``-G``.
    cmake, conan
        Executables used for the build system generator and package manager.
    """

    root: Path
    name: str
    build_dir_name: str = DEFAULT_BUILD_DIR
    generator: str = DEFAULT_GENERATOR
    cmake: str = "cmake"
    conan: str = "conan"

    @property
    def build_dir(self) -> Path:
        return self.root / self.build_dir_name

    @property
    def requirements_file(self) -> Path:
        return self.root / REQUIREMENTS_FILE

    @property
    def manifest_file(self) -> Path:
        return self.root / MANIFEST_FILE

    @property
    def install_folder(self) -> Path:
        return self.root / INSTALL_FOLDER

    @property
    def toolchain_file(self) -> Path:
        return self.root / TOOLCHAIN_FILE

    @property
    def build_file(self) -> Path:
        """The target's CMakeLists.txt holding the dependency markers."""
        return self.root / self.name / "CMakeLists.txt"


def _read_overrides(path: Path) -> Dict[str, Any]:
    """Parse ``sage.yaml`` into a mapping of recognised overrides."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path} must contain a mapping at the top level.")

    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in _OVERRIDABLE:
            logger.warning("Ignoring unknown key '%s' in %s", key, path)
            continue
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'{key}' in {path} must be a non-empty string.")
        overrides[key] = value.strip()
    return overrides


def load_config(
    project_root: Union[str, Path],
    name: Optional[str] = None,
) -> ProjectConfig:
    """Build the configuration for a project rooted at ``project_root``.

    Parameters
    ----------
    project_root
        The project root; normally the current working directory.
    name
        Project name override. Defaults to the root directory's name.

    Raises
    ------
    ConfigError
        If ``sage.yaml`` exists but is malformed.
    """
    root = Path(project_root).resolve()
    config = ProjectConfig(root=root, name=name or root.name)

    config_path = root / CONFIG_FILE_NAME
    if not config_path.is_file():
        return config

    overrides = _read_overrides(config_path)
    logger.debug("Loaded overrides from %s: %s", config_path, overrides)
    if "build_dir" in overrides:
        overrides["build_dir_name"] = overrides.pop("build_dir")
    return replace(config, **overrides)
