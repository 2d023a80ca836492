"""CLI interface for extforge."""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from extforge import __version__
from extforge.config import Config
from extforge.core.models import ProjectNames
from extforge.rewrite.transformer import process_template_project
from extforge.utils.git import clone_repository, directory_exists
from extforge.utils.packaging import install_and_package

app = typer.Typer(
    name="extforge",
    help="Create a renamed VSCode extension from a template repository.",
    no_args_is_help=True,
)
console = Console()

# Lowercase kebab-case, as required for extension package names
PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=verbose)],
        force=True,
    )


def _validate_project_name(value: str) -> str:
    if not PROJECT_NAME_PATTERN.match(value):
        raise typer.BadParameter(
            f"'{value}' is not a valid project name. Use lowercase letters, digits and dashes (e.g. my-app)."
        )
    return value


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"extforge {__version__}")
        raise typer.Exit()


def _show_error(message: str) -> None:
    console.print()
    console.print(f"[red]Error:[/red] {message}")
    console.print()
    console.print("If the issue persists, please report it.")
    console.print()


def _cleanup(target_dir: Path) -> None:
    """Remove a partially created project directory."""
    if not directory_exists(target_dir):
        return
    try:
        shutil.rmtree(target_dir)
    except OSError:
        console.print(
            f"[yellow]Warning: Failed to clean up. Please delete the directory manually:[/yellow] {target_dir}"
        )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
) -> None:
    """Create a renamed VSCode extension from a template repository."""


@app.command()
def create(
    project_name: Annotated[
        str,
        typer.Argument(help="Name of the new extension (kebab-case)", callback=_validate_project_name),
    ],
    template: Annotated[
        str | None,
        typer.Option("--template", "-t", help="Template key from the configuration"),
    ] = None,
    directory: Annotated[
        Path,
        typer.Option("--directory", "-d", help="Parent directory for the new project"),
    ] = Path("."),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a config.yaml"),
    ] = None,
    skip_package: Annotated[
        bool,
        typer.Option("--skip-package", help="Stop after renaming, skip install and packaging"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Output detailed logs"),
    ] = False,
) -> None:
    """Clone the template, rename it to PROJECT_NAME and package it."""
    _configure_logging(verbose)
    config = Config.load(config_path)

    target_dir = (directory / project_name).resolve()
    if directory_exists(target_dir):
        _show_error(
            f"Directory '{project_name}' already exists. "
            "Please specify a different name or delete the existing directory."
        )
        raise typer.Exit(1)

    try:
        repo_url = config.repo_url(template)
    except KeyError as e:
        _show_error(e.args[0])
        raise typer.Exit(1) from e

    names = ProjectNames.from_name(project_name)
    rules = config.rules_for(template)

    try:
        with console.status("Cloning template repository..."):
            clone_repository(repo_url, target_dir, timeout=config.clone_timeout)
        console.print("[green]✓[/green] Template repository cloning completed")

        process_template_project(target_dir, names, rules)

        if skip_package:
            artifact = target_dir
        else:
            with console.status("Installing dependencies and packaging..."):
                artifact = install_and_package(target_dir, config)
            console.print("[green]✓[/green] Dependencies installation and packaging completed")
    except Exception as e:
        _cleanup(target_dir)
        _show_error(str(e))
        raise typer.Exit(1) from e

    console.print()
    console.print(f"🎉  [green]Successfully created![/green] [cyan]{artifact}[/cyan]")
    console.print()


@app.command()
def rename(
    directory: Annotated[
        Path,
        typer.Argument(
            help="Existing template checkout to rename in place",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ],
    project_name: Annotated[
        str,
        typer.Argument(help="New project name (kebab-case)", callback=_validate_project_name),
    ],
    template: Annotated[
        str | None,
        typer.Option("--template", "-t", help="Template key whose rename rules apply"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a config.yaml"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Output detailed logs"),
    ] = False,
) -> None:
    """Rename an already cloned template in place (no clone, no packaging)."""
    _configure_logging(verbose)
    config = Config.load(config_path)
    names = ProjectNames.from_name(project_name)

    try:
        result = process_template_project(directory, names, config.rules_for(template))
    except Exception as e:
        _show_error(str(e))
        raise typer.Exit(1) from e

    console.print(
        f"[green]Renamed to {project_name}:[/green] "
        f"{len(result.files_rewritten)} rewritten, "
        f"{len(result.files_renamed)} files renamed, "
        f"{len(result.directories_renamed)} directories renamed "
        f"[dim]({result.files_scanned} files scanned)[/dim]"
    )


if __name__ == "__main__":
    app()
