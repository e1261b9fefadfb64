# cppsage/pipeline.py
"""
CMake configure + build, short-circuiting on the first failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import click

from cppsage import process
from cppsage.config import ProjectConfig
from cppsage.errors import ExternalToolError, NotFoundError, SageError
from cppsage.log_manager import get_logger

__all__ = ["BuildReport", "configure_args", "build_args", "relay_output", "build"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class BuildReport:
    configure: process.ProcessResult
    build: process.ProcessResult


def configure_args(config: ProjectConfig) -> List[str]:
    return [
        "-S", str(config.root),
        "-B", str(config.build_dir),
        "-G", config.generator,
        f"-DCMAKE_TOOLCHAIN_FILE={config.toolchain_file}",
    ]


def build_args(config: ProjectConfig) -> List[str]:
    return ["--build", str(config.build_dir)]


def relay_output(result: process.ProcessResult) -> None:
    """Echo a finished process's stdout, then its stderr (to stderr)."""
    if result.stdout:
        click.echo(result.stdout.rstrip("\n"))
    if result.stderr:
        click.echo(result.stderr.rstrip("\n"), err=True)


def _relay_stdout(result: process.ProcessResult) -> None:
    # stderr of a failed step travels inside the raised error
    if result.stdout:
        click.echo(result.stdout.rstrip("\n"))


def build(config: ProjectConfig) -> BuildReport:
    """Configure and build the project.

    Raises
    ------
    NotFoundError
        If the Conan toolchain file has not been generated yet.
    ExternalToolError
        If the configure or build step exits non-zero. A failed configure
        step means the build step is never run.
    """
    click.secho("Configuring project with CMake...", fg="green")
    try:
        config.build_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SageError(f"Could not create build directory {config.build_dir}: {exc}") from exc

    if not config.toolchain_file.is_file():
        raise NotFoundError(
            f"Toolchain file not found at: {config.toolchain_file}. "
            "Run 'sage install' to generate it."
        )

    configured = process.run_process(config.cmake, configure_args(config), cwd=config.root)
    if not configured.ok:
        _relay_stdout(configured)
        raise ExternalToolError("CMake configuration failed", configured.stderr)
    relay_output(configured)

    click.secho("Compiling project with CMake...", fg="green")
    built = process.run_process(config.cmake, build_args(config), cwd=config.root)
    if not built.ok:
        _relay_stdout(built)
        raise ExternalToolError("CMake build failed", built.stderr)
    relay_output(built)

    logger.debug("Build finished in %s", config.build_dir)
    click.secho("Success: Project compiled successfully!", fg="green")
    return BuildReport(configure=configured, build=built)
