# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timegrid.calendar import CALENDAR, CalendarArithmetic
from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import TickCell


def tick_width_px(
    tick_start: pendulum.DateTime,
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> float:
    """
    Pixel width of the tick that starts at `tick_start`.

    The width follows the tick's real duration measured in drag steps, so a
    month-long tick in February is narrower than one in March while every
    drag step keeps the same density.
    """
    tick_end = calendar.add(tick_start, scale["unit_per_tick"], scale["tick_unit"])
    drag_steps = (
        calendar.diff(tick_end, tick_start, scale["drag_step_unit"])
        / scale["drag_step_amount"]
    )
    return drag_steps * scale["base_px_per_drag_step"]


def create_tick_cells(
    padded_min_date: Optional[pendulum.DateTime],
    padded_max_date: Optional[pendulum.DateTime],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> list[TickCell]:
    """
    Generate the ordered, contiguous tick cells covering the padded range.

    Args:
        padded_min_date: Start of the padded range, or None when there is no range
        padded_max_date: End of the padded range, or None when there is no range
        scale: Scale preset defining the tick unit and pixel density

    Returns:
        List of cells; empty when the range is missing or not increasing
    """
    if padded_min_date is None or padded_max_date is None:
        return []
    if not calendar.is_before(padded_min_date, padded_max_date):
        return []

    cells: list[TickCell] = []
    current = calendar.start_of(padded_min_date, scale["tick_unit"])

    while calendar.is_before(current, padded_max_date):
        cells.append(
            {
                "start_date": current,
                "width_px": tick_width_px(current, scale, calendar),
            }
        )
        current = calendar.add(current, scale["unit_per_tick"], scale["tick_unit"])

    return cells
