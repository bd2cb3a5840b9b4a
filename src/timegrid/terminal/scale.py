# SPDX-License-Identifier: MIT

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from timegrid.model.scale import ScaleConfigError
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.scale import scales_from_configuration
from timegrid.service.cells import tick_width_px

# Reference date used to show example labels and tick widths
_SAMPLE_DATE = pendulum.datetime(2024, 1, 1)


def scales() -> None:
    """List the available scale presets."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()
    try:
        available = scales_from_configuration(config["scales"])
    except ScaleConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Scale", style="cyan")
    table.add_column("Tick")
    table.add_column("Label unit")
    table.add_column("Drag step")
    table.add_column("Px / drag step", justify="right")
    table.add_column("Sample tick px", justify="right", style="magenta")
    table.add_column("Sample label", style="magenta")

    for scale_key, scale in available.items():
        formatter = scale.get("format_header_label")
        name = scale_key
        if scale_key == config["default_scale"]:
            name = f"{scale_key} (default)"
        table.add_row(
            name,
            f"{scale['unit_per_tick']} {scale['tick_unit']}",
            scale["label_unit"],
            f"{scale['drag_step_amount']} {scale['drag_step_unit']}",
            f"{scale['base_px_per_drag_step']:g}",
            f"{tick_width_px(_SAMPLE_DATE, scale):g}",
            formatter(_SAMPLE_DATE) if formatter is not None else "",
        )

    console.print(table)
