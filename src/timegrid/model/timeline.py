# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class TickCell(TypedDict):
    start_date: pendulum.DateTime
    width_px: float


class HeaderGroup(TypedDict):
    label: str
    width_px: float
    start_date: pendulum.DateTime


class LabelGroup(HeaderGroup):
    left: float


class DateRange(TypedDict):
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime


class DragRange(DateRange):
    bar_left: float
    bar_width: float


class Offset(TypedDict):
    margin_left: float
    width: float


class TaskDates(TypedDict):
    start_date: str
    end_date: str


class Timeline(TypedDict):
    scale_key: str
    cells: list[TickCell]
    groups: list[LabelGroup]


class HeaderState(TypedDict):
    sticky_index: int
    sticky_label: str
    drag_offset: Optional[Offset]
    drag_cell_index: int
