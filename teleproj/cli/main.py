# teleproj/cli/main.py
"""
Main command-line interface for teleproj.
"""
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from teleproj import __version__
from teleproj.config import ConfigManager
from teleproj.constants import APP_DESCRIPTION, LOG_DIR
from teleproj.errors import (
    AmbiguousMatchError,
    IndexOutOfRangeError,
    NoMatchError,
    TeleprojError,
)
from teleproj.projects import (
    ResolutionKind,
    add_path,
    existing_paths,
    project_name,
    prune_missing,
    remove_path,
    resolve,
    stored_entries,
)
from teleproj.shell import render_shell_init
from teleproj.utils.logging import setup_logging, get_logger

# Create the app
app = typer.Typer(
    help=f"teleproj: {APP_DESCRIPTION}",
    add_completion=False,
)
logger = get_logger(__name__)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def version_callback(value: bool):
    """Display version information and exit."""
    if value:
        console.print(f"teleproj version: {__version__}")
        sys.exit(0)


def _fail(message: str) -> None:
    """Report an error on stderr and exit with status 1."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


def _add(manager: ConfigManager, path: str) -> None:
    result = add_path(manager.config, path)
    if not result.added:
        console.print(f"Path already exists: {escape(result.path)}")
        return
    manager.save_config()
    console.print(f"[green]Added path:[/green] {escape(result.path)}")


def _remove(manager: ConfigManager, index_text: str) -> None:
    removed = remove_path(manager.config, index_text)
    manager.save_config()
    console.print(f"[green]Removed path:[/green] {escape(removed)}")


def _prune(manager: ConfigManager) -> None:
    removed = prune_missing(manager.config)
    if not removed:
        console.print("No missing paths to prune.")
        return
    manager.save_config()
    for path in removed:
        console.print(f"[green]Removed path:[/green] {escape(path)}")


def _list(manager: ConfigManager, show_all: bool) -> None:
    if show_all:
        entries = stored_entries(manager.config)
        if not entries:
            console.print("No paths saved yet. Use --add to add some!")
            return
        console.print("[bold]Saved projects (stored order):[/bold]")
        for entry in entries:
            marker = "" if entry.exists else " [red](missing)[/red]"
            console.print(
                f"{entry.index}: [bold]{escape(project_name(entry.path))}[/bold] "
                f"({escape(entry.path)}){marker}"
            )
        return

    paths = existing_paths(manager.config)
    if not paths:
        console.print("No paths saved yet. Use --add to add some!")
        return
    console.print("[bold]Saved projects:[/bold]")
    for index, path in enumerate(paths):
        console.print(f"{index}: [bold]{escape(project_name(path))}[/bold] ({escape(path)})")


def _jump(manager: ConfigManager, query: str) -> None:
    paths = existing_paths(manager.config)
    result = resolve(paths, query)
    logger.debug(f"Resolved '{query}' as {result.kind}")

    if result.kind is ResolutionKind.INDEX_OUT_OF_RANGE:
        raise IndexOutOfRangeError(result.index, len(paths))
    if result.kind is ResolutionKind.NOT_FOUND:
        raise NoMatchError(query)
    if result.kind is ResolutionKind.AMBIGUOUS:
        raise AmbiguousMatchError(query, result.candidates)

    # Plain output: the shell wrapper cds into whatever is printed here
    typer.echo(result.path)


def _report_ambiguous(error: AmbiguousMatchError) -> None:
    err_console.print(f"Multiple projects match '{escape(error.query)}'. Please choose:")
    for position, candidate in enumerate(error.candidates):
        err_console.print(
            f"  {position}: [bold]{escape(candidate.name)}[/bold] (index {candidate.index})"
        )
    err_console.print("\nUse the specific index number to jump to a project.")
    sys.exit(1)


@app.command()
def main(
    project: Optional[str] = typer.Argument(
        None, help="Jump to a project by index or name."
    ),
    add: Optional[str] = typer.Option(
        None, "--add", "-a", help="Save a project path."
    ),
    remove: Optional[str] = typer.Option(
        None, "--remove", "-r", help="Remove the saved path at this index."
    ),
    list_projects: bool = typer.Option(
        False, "--list", "-l", help="List saved projects that still exist."
    ),
    show_all: bool = typer.Option(
        False, "--all", help="With --list, also show saved paths that no longer exist."
    ),
    prune: bool = typer.Option(
        False, "--prune", help="Remove saved paths that no longer exist."
    ),
    init_shell: Optional[str] = typer.Option(
        None, "--init", metavar="SHELL", help="Print the shell function for bash, zsh or fish."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Use this config file instead of ~/.teleproj.toml."
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug mode"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """Jump between saved project directories."""
    # Configure logging
    setup_logging(debug=debug, log_dir=LOG_DIR if debug else None)

    try:
        if init_shell is not None:
            typer.echo(render_shell_init(init_shell), nl=False)
            return

        manager = ConfigManager(config_file)
        manager.load_config()

        if add is not None:
            _add(manager, add)
        elif remove is not None:
            _remove(manager, remove)
        elif prune:
            _prune(manager)
        elif list_projects:
            _list(manager, show_all)
        elif project is not None:
            _jump(manager, project)
        else:
            console.print("Use --help for usage information")

    except AmbiguousMatchError as e:
        _report_ambiguous(e)
    except TeleprojError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        _fail(str(e))
