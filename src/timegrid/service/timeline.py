# SPDX-License-Identifier: MIT

import logging
from typing import Mapping, Optional

import pendulum

from timegrid.calendar import CALENDAR, CalendarArithmetic
from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import (
    DragRange,
    HeaderState,
    Offset,
    TaskDates,
    TickCell,
    Timeline,
)
from timegrid.scale import TIMELINE_SHIFT_BUFFER, get_scale_config
from timegrid.service.cells import create_tick_cells
from timegrid.service.groups import create_label_groups
from timegrid.service.offset import calculate_date_offsets
from timegrid.service.range import find_date_range_from_tasks, pad_date_range
from timegrid.service.sticky import select_sticky_index, sticky_label

logger = logging.getLogger(__name__)


def build_timeline(
    tasks: Mapping[str, TaskDates],
    scale_key: str,
    scales: Optional[Mapping[str, ScaleConfig]] = None,
    buffer: int = TIMELINE_SHIFT_BUFFER,
    calendar: CalendarArithmetic = CALENDAR,
) -> Timeline:
    """
    Lay out the timeline axis for a set of tasks at one zoom level.

    Args:
        tasks: Mapping of task id to its start and end date strings
        scale_key: Name of the scale preset to use
        scales: Available scale presets (defaults to the built-in ones)
        buffer: Ticks of headroom added on each side of the task extent

    Returns:
        The scale key with its tick cells and label groups

    Raises:
        ScaleConfigError: If the scale preset is unknown or malformed
    """
    scale = get_scale_config(scale_key, scales)

    min_date, max_date = find_date_range_from_tasks(tasks)
    padded_min, padded_max = pad_date_range(
        min_date, max_date, scale, buffer, calendar
    )
    cells = create_tick_cells(padded_min, padded_max, scale, calendar)
    groups = create_label_groups(cells, scale, calendar)

    logger.debug(
        "built %s timeline: %d cells, %d groups", scale_key, len(cells), len(groups)
    )
    return {"scale_key": scale_key, "cells": cells, "groups": groups}


def find_drag_cell_index(
    drag_range: Optional[DragRange],
    cells: list[TickCell],
    calendar: CalendarArithmetic = CALENDAR,
) -> int:
    """Index of the first cell starting on the drag start or end day, else -1."""
    if drag_range is None:
        return -1
    for i, cell in enumerate(cells):
        if calendar.is_same(
            cell["start_date"], drag_range["start_date"], "day"
        ) or calendar.is_same(cell["start_date"], drag_range["end_date"], "day"):
            return i
    return -1


def build_drag_range(
    start_date: pendulum.DateTime,
    end_date: pendulum.DateTime,
    cells: list[TickCell],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> DragRange:
    """Project a range being dragged to the bar geometry the overlay is drawn with."""
    bar = calculate_date_offsets(start_date, end_date, cells, scale, calendar)
    return {
        "start_date": start_date,
        "end_date": end_date,
        "bar_left": bar["margin_left"],
        "bar_width": bar["width"],
    }


def build_header_state(
    timeline: Timeline,
    scale: ScaleConfig,
    scroll_left: float = 0,
    drag_range: Optional[DragRange] = None,
    calendar: CalendarArithmetic = CALENDAR,
) -> HeaderState:
    groups = timeline["groups"]
    cells = timeline["cells"]

    index = select_sticky_index(scroll_left, groups)
    drag_offset: Optional[Offset] = None
    if drag_range is not None:
        drag_offset = {
            "margin_left": drag_range["bar_left"],
            "width": drag_range["bar_width"],
        }

    return {
        "sticky_index": index,
        "sticky_label": sticky_label(index, groups),
        "drag_offset": drag_offset,
        "drag_cell_index": find_drag_cell_index(drag_range, cells, calendar),
    }
