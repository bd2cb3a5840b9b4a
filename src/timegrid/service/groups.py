# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timegrid.calendar import CALENDAR, CalendarArithmetic
from timegrid.model.scale import ScaleConfig
from timegrid.model.timeline import HeaderGroup, LabelGroup, TickCell
from timegrid.time import datetime_to_iso_str


def group_cells_by_label_unit(
    cells: list[TickCell],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> list[HeaderGroup]:
    """
    Collapse consecutive cells that fall in the same label bucket.

    Buckets are compared by their start instant rather than by the rendered
    label, so two formatters that happen to print the same text for
    different buckets do not affect this pass.
    """
    label_unit = scale["label_unit"]
    formatter = scale.get("format_header_label")

    groups: list[HeaderGroup] = []
    current: Optional[HeaderGroup] = None
    current_key: Optional[pendulum.DateTime] = None

    for cell in cells:
        bucket_start = calendar.start_of(cell["start_date"], label_unit)

        if current is not None and bucket_start == current_key:
            current["width_px"] += cell["width_px"]
            continue

        if current is not None:
            groups.append(current)

        current_key = bucket_start
        current = {
            "label": (
                formatter(bucket_start)
                if formatter is not None
                else datetime_to_iso_str(bucket_start)
            ),
            "width_px": cell["width_px"],
            "start_date": bucket_start,
        }

    if current is not None:
        groups.append(current)

    return groups


def merge_adjacent_labels(groups: list[HeaderGroup]) -> list[HeaderGroup]:
    """Merge neighbouring groups whose rendered label text is identical."""
    merged: list[HeaderGroup] = []
    for group in groups:
        if merged and merged[-1]["label"] == group["label"]:
            merged[-1]["width_px"] += group["width_px"]
        else:
            merged.append(
                {
                    "label": group["label"],
                    "width_px": group["width_px"],
                    "start_date": group["start_date"],
                }
            )
    return merged


def assign_group_offsets(groups: list[HeaderGroup]) -> list[LabelGroup]:
    offset: float = 0
    result: list[LabelGroup] = []
    for group in groups:
        result.append(
            {
                "label": group["label"],
                "width_px": group["width_px"],
                "start_date": group["start_date"],
                "left": offset,
            }
        )
        offset += group["width_px"]
    return result


def create_label_groups(
    cells: list[TickCell],
    scale: ScaleConfig,
    calendar: CalendarArithmetic = CALENDAR,
) -> list[LabelGroup]:
    """
    Build the header label groups for a cell sequence.

    Args:
        cells: Tick cells in timeline order
        scale: Scale preset providing the label unit and formatter

    Returns:
        Label groups partitioning the cells, each with its `left` pixel offset
    """
    groups = group_cells_by_label_unit(cells, scale, calendar)
    return assign_group_offsets(merge_adjacent_labels(groups))
