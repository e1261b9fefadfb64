# cppsage/cli.py
"""
cppsage command-line interface (``sage``).

Commands
--------
new <name>   Scaffold a new C++ project.
install      Install packages/requirements.txt through Conan and link them.
compile      Configure and build with CMake + Ninja.
run          Compile, then execute the produced binary.
debug        Placeholder.
doctor       Check for cmake, ninja, conan, clang (and VS Build Tools on Windows).

The current working directory is read once here and handed to every
operation as part of :class:`~cppsage.config.ProjectConfig`. Any
:class:`~cppsage.errors.SageError` is reported as a red ``Error:`` line and
the process exits with the error's ``exit_code``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click

from cppsage import __version__, doctor, manifest, orchestrator, patcher, pipeline, scaffold
from cppsage.config import load_config
from cppsage.errors import SageError
from cppsage.log_manager import get_logger, set_level
from cppsage.platform_policy import PlatformPolicy, detect_platform

__all__ = ["cli", "main"]

logger = get_logger(__name__)


@dataclass
class _Context:
    cwd: Path
    policy: PlatformPolicy


def _fail(exc: SageError) -> NoReturn:
    click.echo(f"{click.style('Error:', fg='red')} {exc}", err=True)
    sys.exit(exc.exit_code)


@click.group()
@click.version_option(__version__, prog_name="sage")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cppsage: scaffold, install dependencies for, build and run C++ projects."""
    if verbose:
        set_level(logging.DEBUG)
    ctx.obj = _Context(cwd=Path.cwd(), policy=detect_platform())
    logger.debug("Project root %s, platform %s", ctx.obj.cwd, ctx.obj.policy.name)


@cli.command("new")
@click.argument("name", required=True)
@click.pass_obj
def new_cmd(obj: _Context, name: str) -> None:
    """Create a new C++ project."""
    click.echo(
        f"{click.style('Creating new project:', fg='green')} "
        f"{click.style('sage', bold=True)} '{click.style(name, bold=True)}'"
    )
    try:
        scaffold.create_project(name, obj.cwd)
    except SageError as exc:
        _fail(exc)
    click.echo(f"{click.style('Success:', fg='green')} Project '{name}' created successfully!")
    click.secho(f"Next: cd {name} && sage install && sage run", fg="blue")


@cli.command("install")
@click.pass_obj
def install_cmd(obj: _Context) -> None:
    """Install dependencies."""
    click.secho("Installing dependencies...", fg="green")
    try:
        config = load_config(obj.cwd)
        declarations = manifest.read_dependencies(config.requirements_file)
        if not declarations:
            click.secho("No dependencies to install.", fg="yellow")
            return

        click.echo(f"Found dependencies: {[d.text for d in declarations]}")
        click.secho("Running conan install...", fg="green")
        result = manifest.install(declarations, config)
        if result is not None and result.stdout:
            click.echo(result.stdout.rstrip("\n"))

        click.secho("Updating CMakeLists.txt...", fg="green")
        patcher.update_build_file(config.build_file, declarations, config.name)
    except SageError as exc:
        _fail(exc)
    click.echo(f"{click.style('Success:', fg='green')} Successfully updated CMakeLists.txt")


@cli.command("compile")
@click.pass_obj
def compile_cmd(obj: _Context) -> None:
    """Compile the project."""
    try:
        pipeline.build(load_config(obj.cwd))
    except SageError as exc:
        _fail(exc)


@cli.command("run")
@click.pass_obj
def run_cmd(obj: _Context) -> None:
    """Compile and run the project."""
    try:
        orchestrator.run_project(load_config(obj.cwd), obj.policy)
    except SageError as exc:
        _fail(exc)


@cli.command("debug")
def debug_cmd() -> None:
    """Debug the project."""
    click.secho("Debugging project...", fg="green")


@cli.command("doctor")
@click.pass_obj
def doctor_cmd(obj: _Context) -> None:
    """Check for required tools."""
    click.secho("Checking for required tools...", fg="green")
    doctor.print_report(doctor.check_tools(obj.policy))


def main() -> None:
    cli(prog_name="sage")


if __name__ == "__main__":
    main()
