# SPDX-License-Identifier: MIT

from typing import Callable, NotRequired, TypedDict

import pendulum

from timegrid.calendar import CalendarUnit

LabelFormatter = Callable[[pendulum.DateTime], str]


class ScaleConfig(TypedDict):
    tick_unit: CalendarUnit
    unit_per_tick: int
    label_unit: CalendarUnit
    base_px_per_drag_step: float
    drag_step_unit: CalendarUnit
    drag_step_amount: int
    format_header_label: NotRequired[LabelFormatter]
    format_tick_label: NotRequired[LabelFormatter]


class ScaleConfigError(ValueError):
    """Raised when a scale preset is missing or carries unusable values."""
