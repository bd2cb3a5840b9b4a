# SPDX-License-Identifier: MIT

import logging
from typing import Mapping, Optional

import pendulum

from timegrid.calendar import CALENDAR, CalendarArithmetic
from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import TaskDates
from timegrid.scale import TIMELINE_SHIFT_BUFFER
from timegrid.time import datetime_from_str_lenient

logger = logging.getLogger(__name__)


def find_date_range_from_tasks(
    tasks: Mapping[str, TaskDates],
) -> tuple[Optional[pendulum.DateTime], Optional[pendulum.DateTime]]:
    """
    Find the earliest start and the latest end across all tasks.

    Dates that cannot be parsed are skipped, so a task with a broken start
    can still extend the range with its end and vice versa.

    Args:
        tasks: Mapping of task id to its start and end date strings

    Returns:
        (min_date, max_date), either of which is None when no task supplied
        a usable value for it
    """
    min_date: Optional[pendulum.DateTime] = None
    max_date: Optional[pendulum.DateTime] = None

    for task_id, task in tasks.items():
        start = datetime_from_str_lenient(task.get("start_date"))
        end = datetime_from_str_lenient(task.get("end_date"))
        if start is None or end is None:
            logger.debug("task %s has an unusable start or end date", task_id)

        if start is not None and (min_date is None or start < min_date):
            min_date = start
        if end is not None and (max_date is None or end > max_date):
            max_date = end

    return min_date, max_date


def pad_date_range(
    min_date: Optional[pendulum.DateTime],
    max_date: Optional[pendulum.DateTime],
    scale: ScaleConfig,
    buffer: int = TIMELINE_SHIFT_BUFFER,
    calendar: CalendarArithmetic = CALENDAR,
) -> tuple[Optional[pendulum.DateTime], Optional[pendulum.DateTime]]:
    tick_unit = scale["tick_unit"]
    amount = buffer * scale["unit_per_tick"]

    padded_min = (
        calendar.subtract(min_date, amount, tick_unit) if min_date is not None else None
    )
    padded_max = (
        calendar.add(max_date, amount, tick_unit) if max_date is not None else None
    )
    return padded_min, padded_max
