# SPDX-License-Identifier: MIT

from typing import Mapping, Optional

from rich.console import Console
from rich.text import Text

from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import HeaderState, LabelGroup, Offset, TickCell, Timeline

HEADER_BACKGROUND = "on grey23"
DRAG_OVERLAY_STYLE = "black on grey70"
BAR_STYLE = "black on sky_blue2"


def _column(px: float, px_per_char: float) -> int:
    return int(round(px / px_per_char))


def _span(left_px: float, width_px: float, px_per_char: float) -> tuple[int, int]:
    """
    Convert a pixel span to (start column, column count).

    Both edges are rounded independently so neighbouring spans share a
    boundary instead of drifting apart as rounding errors add up.
    """
    start = _column(left_px, px_per_char)
    end = _column(left_px + width_px, px_per_char)
    return start, max(end - start, 0)


def _fit(label: str, width: int, align: str = "left") -> str:
    if width <= 0:
        return ""
    if len(label) > width:
        return label[:width]
    if align == "center":
        return label.center(width)
    return label.ljust(width)


def build_label_row(
    groups: list[LabelGroup],
    sticky_label: str,
    px_per_char: float,
    left_column_width: int,
) -> Text:
    """
    Build the top header row: the sticky label followed by every group label.

    The first group's label is left blank because the sticky column already
    shows it at the start of the timeline.
    """
    row = Text(_fit(sticky_label, left_column_width), style="bold")

    for i, group in enumerate(groups):
        _, width = _span(group["left"], group["width_px"], px_per_char)
        label = "" if i == 0 else group["label"]
        style = "bold" + (f" {HEADER_BACKGROUND}" if i % 2 == 1 else "")
        row.append(_fit(label, width), style=style)

    return row


def build_tick_row(
    cells: list[TickCell],
    scale: ScaleConfig,
    px_per_char: float,
    left_column_width: int,
) -> Text:
    formatter = scale.get("format_tick_label")
    row = Text(" " * left_column_width)

    left: float = 0
    for i, cell in enumerate(cells):
        _, width = _span(left, cell["width_px"], px_per_char)
        label = formatter(cell["start_date"]) if formatter is not None else ""
        style = "dim" + (f" {HEADER_BACKGROUND}" if i % 2 == 1 else "")
        row.append(_fit(label, width, align="center"), style=style)
        left += cell["width_px"]

    return row


def build_bar_row(
    name: str,
    offset: Offset,
    px_per_char: float,
    left_column_width: int,
    style: str = BAR_STYLE,
) -> Text:
    row = Text(_fit(name, left_column_width))
    start, width = _span(offset["margin_left"], offset["width"], px_per_char)
    row.append(" " * start)
    # A bar is at least one column wide even when it is under one character
    row.append(" " * max(width, 1), style=style)
    return row


def gantt_header_view(
    timeline: Timeline,
    scale: ScaleConfig,
    header_state: HeaderState,
    bars: Optional[Mapping[str, Offset]] = None,
    px_per_char: float = 8,
    left_column_width: int = 24,
    console: Optional[Console] = None,
) -> None:
    """
    Print the timeline header, drag overlay and task bars to the terminal.

    Args:
        timeline: Cells and label groups to draw
        scale: Scale preset the timeline was built with
        header_state: Sticky label and drag overlay geometry
        bars: Optional mapping of task id to its projected offset
        px_per_char: How many pixels one terminal column stands for
        left_column_width: Width of the left column for names and the sticky label
        console: Console to print to (defaults to a new Console)
    """
    if console is None:
        console = Console()

    if not timeline["cells"]:
        console.print("\n[dim]No tasks with usable dates to display[/dim]\n")
        return

    console.print(
        build_label_row(
            timeline["groups"],
            header_state["sticky_label"],
            px_per_char,
            left_column_width,
        ),
        no_wrap=True,
        crop=False,
    )
    console.print(
        build_tick_row(timeline["cells"], scale, px_per_char, left_column_width),
        no_wrap=True,
        crop=False,
    )

    drag_offset = header_state["drag_offset"]
    if drag_offset is not None:
        console.print(
            build_bar_row(
                "(dragging)",
                drag_offset,
                px_per_char,
                left_column_width,
                style=DRAG_OVERLAY_STYLE,
            ),
            no_wrap=True,
            crop=False,
        )

    for task_id, offset in (bars or {}).items():
        console.print(
            build_bar_row(task_id, offset, px_per_char, left_column_width),
            no_wrap=True,
            crop=False,
        )
