# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table
from yaml import YAMLError

from timegrid.model.scale import ScaleConfig, ScaleConfigError
from timegrid.model.timeline import DragRange, TaskDates, Timeline
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.repository.task import TaskFileError, load_tasks
from timegrid.scale import scales_from_configuration
from timegrid.service.offset import project_task_bars
from timegrid.service.timeline import (
    build_drag_range,
    build_header_state,
    build_timeline,
)
from timegrid.terminal.parse import (
    parse_date,
    parse_positive_float,
    parse_scroll_offset,
)
from timegrid.time import datetime_from_str_lenient, datetime_to_display_date_str
from timegrid.view.gantt_header import gantt_header_view
from timegrid.view.header import header as print_header
from timegrid.view.scroll import ScrollEvents, StickyTracker

TasksFileArgument = Annotated[
    Path,
    typer.Argument(
        help="YAML file mapping task ids to start_date / end_date",
        dir_okay=False,
    ),
]
ScaleOption = Annotated[
    Optional[str],
    typer.Option(
        "--scale",
        "-s",
        help="Scale preset to lay the timeline out with (defaults to the configured default_scale)",
    ),
]


def _read_tasks(console: Console, tasks_file: Path) -> dict[str, TaskDates]:
    if not tasks_file.is_file():
        console.print(f"[red]Error: task file '{tasks_file}' not found[/red]")
        raise typer.Exit(1)
    try:
        return load_tasks(tasks_file)
    except (YAMLError, TaskFileError) as e:
        console.print(f"[red]Error: could not read '{tasks_file}': {e}[/red]")
        raise typer.Exit(1)


def _layout(
    console: Console, tasks: dict[str, TaskDates], scale: Optional[str]
) -> tuple[Timeline, ScaleConfig]:
    config = CONFIGURATION_REPO.get_config()
    scale_key = scale or config["default_scale"]
    try:
        scales = scales_from_configuration(config["scales"])
        timeline = build_timeline(tasks, scale_key, scales, config["buffer_ticks"])
    except ScaleConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    return timeline, scales[scale_key]


def header(
    tasks_file: TasksFileArgument,
    scale: ScaleOption = None,
    scroll: Annotated[
        float,
        typer.Option(
            "--scroll",
            "-x",
            parser=parse_scroll_offset,
            help="Horizontal scroll offset in pixels used to pick the sticky label",
        ),
    ] = 0,
    drag_start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--drag-start",
            parser=parse_date,
            help="Start of a date range being dragged (YYYY-MM-DD)",
        ),
    ] = None,
    drag_end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--drag-end",
            parser=parse_date,
            help="End of a date range being dragged (YYYY-MM-DD)",
        ),
    ] = None,
    px_per_char: Annotated[
        Optional[float],
        typer.Option(
            "--px-per-char",
            parser=parse_positive_float,
            help="Pixels per terminal column (defaults to the configured px_per_char)",
        ),
    ] = None,
) -> None:
    """Draw the timeline header, drag overlay and task bars."""
    console = Console()

    if (drag_start is None) != (drag_end is None):
        raise typer.BadParameter("--drag-start and --drag-end must be given together")

    tasks = _read_tasks(console, tasks_file)
    timeline, scale_config = _layout(console, tasks, scale)

    drag_range: Optional[DragRange] = None
    if drag_start is not None and drag_end is not None:
        drag_range = build_drag_range(
            drag_start, drag_end, timeline["cells"], scale_config
        )

    header_state = build_header_state(timeline, scale_config, scroll, drag_range)
    task_bars = project_task_bars(tasks, timeline["cells"], scale_config)

    if px_per_char is None:
        px_per_char = CONFIGURATION_REPO.get_config()["px_per_char"]

    print_header(timeline["scale_key"], tasks_file.name)
    gantt_header_view(
        timeline,
        scale_config,
        header_state,
        bars=task_bars,
        px_per_char=px_per_char,
        console=console,
    )


def bars(
    tasks_file: TasksFileArgument,
    scale: ScaleOption = None,
) -> None:
    """List the pixel placement of every task bar."""
    console = Console()
    tasks = _read_tasks(console, tasks_file)
    timeline, scale_config = _layout(console, tasks, scale)
    offsets = project_task_bars(tasks, timeline["cells"], scale_config)

    print_header(timeline["scale_key"], tasks_file.name)

    table = Table()
    table.add_column("Task", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Margin left", justify="right", style="magenta")
    table.add_column("Width", justify="right", style="magenta")

    for task_id, task in tasks.items():
        offset = offsets.get(task_id)
        start = datetime_from_str_lenient(task["start_date"])
        end = datetime_from_str_lenient(task["end_date"])
        table.add_row(
            task_id,
            datetime_to_display_date_str(start) if start is not None else "-",
            datetime_to_display_date_str(end) if end is not None else "-",
            f"{offset['margin_left']:g}" if offset is not None else "-",
            f"{offset['width']:g}" if offset is not None else "-",
        )

    console.print(table)


def sticky(
    tasks_file: TasksFileArgument,
    offsets: Annotated[
        list[float],
        typer.Argument(
            parser=parse_scroll_offset,
            help="Scroll offsets in pixels, applied in order",
        ),
    ],
    scale: ScaleOption = None,
) -> None:
    """Replay scroll offsets and show which label stays pinned for each."""
    console = Console()
    tasks = _read_tasks(console, tasks_file)
    timeline, _ = _layout(console, tasks, scale)

    table = Table()
    table.add_column("Scroll", justify="right", style="cyan")
    table.add_column("Index", justify="right")
    table.add_column("Label", style="magenta")

    events = ScrollEvents()
    with StickyTracker(timeline["groups"]) as tracker:
        tracker.attach(events)
        for offset in offsets:
            events.emit(offset)
            table.add_row(f"{offset:g}", str(tracker.index), tracker.label)

    print_header(timeline["scale_key"], tasks_file.name)
    console.print(table)
