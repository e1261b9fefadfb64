# cppsage/orchestrator.py
"""
Compile, locate the produced binary, execute it and relay its output.
"""

from __future__ import annotations

from pathlib import Path

import click

from cppsage import pipeline, process
from cppsage.config import ProjectConfig
from cppsage.errors import ExecutionError, NotFoundError
from cppsage.platform_policy import PlatformPolicy

__all__ = ["locate_binary", "run_project"]


def locate_binary(config: ProjectConfig, policy: PlatformPolicy) -> Path:
    """Return the expected binary path, failing if nothing was built there."""
    exe_path = policy.binary_path(config.build_dir, config.name)
    if not exe_path.exists():
        raise NotFoundError(f"Executable not found at: {exe_path}")
    return exe_path


def run_project(config: ProjectConfig, policy: PlatformPolicy) -> process.ProcessResult:
    """Build the project and run its binary with no arguments.

    The program's output is always relayed before a non-zero exit status is
    reported as :class:`ExecutionError`.
    """
    pipeline.build(config)

    click.secho("Running project...", fg="green")
    exe_path = locate_binary(config, policy)
    result = process.run_process(exe_path, [], cwd=config.root)

    click.echo("--- Program Output ---")
    click.echo(result.stdout.rstrip("\n"))
    if result.stderr:
        click.echo(result.stderr.rstrip("\n"), err=True)
    click.echo("--- End Program Output ---")

    if not result.ok:
        raise ExecutionError(result.returncode)
    return result
