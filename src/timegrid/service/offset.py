# SPDX-License-Identifier: MIT

import logging
from typing import Mapping

import pendulum

from timegrid.calendar import CALENDAR, CalendarArithmetic
from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import Offset, TaskDates, TickCell
from timegrid.time import datetime_from_str_lenient

logger = logging.getLogger(__name__)


def calculate_date_offsets(
    start_date: pendulum.DateTime,
    end_date: pendulum.DateTime,
    cells: list[TickCell],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> Offset:
    """
    Convert a date range into a left margin and a width in pixels.

    Overlap is measured per whole cell: any cell touching [start, end)
    contributes its full width. Zero-length and inverted ranges come out
    one pixel wide so they stay visible.

    Args:
        start_date: Range start (inclusive)
        end_date: Range end (exclusive)
        cells: Tick cells the range is placed against
        scale: Scale preset the cells were generated with

    Returns:
        Offset with margin_left and width; both 0 when there are no cells
    """
    if not cells:
        return {"margin_left": 0, "width": 0}

    margin_left: float = 0
    width: float = 0
    is_empty_range = calendar.is_same_or_after(start_date, end_date)

    for cell in cells:
        cell_start = cell["start_date"]
        cell_end = calendar.add(cell_start, scale["unit_per_tick"], scale["tick_unit"])

        if calendar.is_same_or_before(cell_end, start_date):
            margin_left += cell["width_px"]
            continue

        if is_empty_range or calendar.is_same_or_after(cell_start, end_date):
            break

        width += cell["width_px"]

    return {"margin_left": margin_left, "width": max(width, 1)}


def project_task_bars(
    tasks: Mapping[str, TaskDates],
    cells: list[TickCell],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> dict[str, Offset]:
    bars: dict[str, Offset] = {}
    for task_id, task in tasks.items():
        start = datetime_from_str_lenient(task.get("start_date"))
        end = datetime_from_str_lenient(task.get("end_date"))
        if start is None or end is None:
            logger.debug("not placing task %s: unusable dates", task_id)
            continue
        bars[task_id] = calculate_date_offsets(start, end, cells, scale, calendar)
    return bars
