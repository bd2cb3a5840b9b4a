# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_scale", config["default_scale"])
    table.add_row("buffer_ticks", str(config["buffer_ticks"]))
    table.add_row("px_per_char", f"{config['px_per_char']:g}")
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "scales",
        ", ".join(config["scales"].keys()) if config["scales"] else "(built-in only)",
    )

    console.print(table)


@app.command("set, s")
def set_config(
    default_scale: Annotated[
        Optional[str],
        typer.Option("--default-scale", help="Scale used when --scale is not given"),
    ] = None,
    buffer_ticks: Annotated[
        Optional[int],
        typer.Option(
            "--buffer-ticks",
            min=0,
            help="Ticks of headroom added before and after the task range",
        ),
    ] = None,
    px_per_char: Annotated[
        Optional[float],
        typer.Option(
            "--px-per-char", min=0.1, help="Pixels per terminal column"
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="One of DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in _LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    CONFIGURATION_REPO.update_config(
        default_scale=default_scale,
        buffer_ticks=buffer_ticks,
        px_per_char=px_per_char,
        log_level=log_level.upper() if log_level is not None else None,
    )
    CONFIGURATION_REPO.flush()

    console = Console()
    console.print("[green]Configuration updated[/green]")
