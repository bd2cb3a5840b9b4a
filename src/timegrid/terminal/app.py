# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timegrid.logger import setup_logging
from timegrid.terminal import configuration
from timegrid.terminal.custom_typer import OrderedAliasedTyperGroup
from timegrid.terminal.scale import scales
from timegrid.terminal.view import bars, header, sticky
from timegrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="timegrid - Gantt timeline header layout in the CLI",
    no_args_is_help=True,
)
app.command(name="header, h")(header)
app.command(name="bars, b")(bars)
app.command(name="sticky, st")(sticky)
app.command(name="scales, sc")(scales)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the banner printed before output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """
    timegrid - Gantt timeline header layout in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        setup_logging("DEBUG")


def run() -> None:
    app()
