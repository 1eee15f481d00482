from __future__ import annotations

import logging
from importlib.metadata import version
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from repolink.core.adder import add_files
from repolink.core.config import load_config
from repolink.core.errors import RepolinkError
from repolink.core.models import Config, LinkedFile, SkippedItem


def _version_callback(value: bool) -> None:
    if value:
        print(f"repolink {version('repolink')}")
        raise typer.Exit()


app = typer.Typer(
    name="repolink",
    help="Move files into a central repository and leave relative symlinks behind.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _load_config_or_exit(config_path: Path | None) -> Config:
    try:
        return load_config(config_path)
    except RepolinkError as e:
        _fail(str(e))


def _print_skipped(skipped: list[SkippedItem]) -> None:
    table = Table(title=f"Skipped ({len(skipped)})", title_style="yellow")
    table.add_column("Path", style="white", overflow="fold")
    table.add_column("Reason", style="yellow")
    for item in skipped:
        table.add_row(escape(str(item.path)), item.reason)
    err_console.print(table)


_CONFIG_OPTION_HELP = "Path to the config file (default: <user config dir>/repolink.toml)"


@app.command("add")
def add(
    files: list[Path] = typer.Argument(
        ...,
        help="Files to move into the repository",
        show_default=False,
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        envvar="REPOLINK_CONFIG",
        help=_CONFIG_OPTION_HELP,
    ),
):
    """Move FILES into the repository and symlink them back."""
    config = _load_config_or_exit(config_path)

    def on_linked(linked: LinkedFile):
        console.print(
            f"{escape(str(linked.source))} -> [cyan]{escape(str(linked.link_target))}[/cyan]",
            soft_wrap=True,
        )

    try:
        result = add_files(files, config, on_linked=on_linked)
    except (OSError, RepolinkError) as e:
        _fail(str(e))

    if result.skipped:
        _print_skipped(result.skipped)
    console.print(f"\n[bold]{result.summary}[/bold].")


@app.command("config")
def show_config(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        envvar="REPOLINK_CONFIG",
        help=_CONFIG_OPTION_HELP,
    ),
):
    """Show which config file is used and the repository it points to."""
    config = _load_config_or_exit(config_path)
    console.print(f"Config file: [bold]{escape(str(config.source))}[/bold]", soft_wrap=True)
    console.print(f"Repository:  [bold]{escape(str(config.repo_dir))}[/bold]", soft_wrap=True)
    if not config.repo_dir.exists():
        console.print("[yellow]Repository directory does not exist yet.[/yellow]")


@app.callback()
def main(
    version_flag: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        is_eager=True,
        callback=_version_callback,
        is_flag=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        is_flag=True,
        help="Log each step to stderr",
    ),
):
    _setup_logging(verbose)


def _setup_logging(verbose: bool) -> None:
    """Send repolink's log records to stderr, replacing any earlier handler."""
    logger = logging.getLogger("repolink")
    logger.handlers = [RichHandler(console=err_console, show_path=False)]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
