# SPDX-License-Identifier: MIT

import math
from bisect import bisect_right

from timegrid.model.timeline import LabelGroup

# Above this many groups the binary search is used instead of a linear scan
LINEAR_SCAN_LIMIT = 32


def sticky_index_linear(scroll_left: float, groups: list[LabelGroup]) -> int:
    if math.isnan(scroll_left):
        return 0
    for i in range(len(groups) - 1, -1, -1):
        if scroll_left >= groups[i]["left"]:
            return i
    return 0


def sticky_index_bisect(scroll_left: float, groups: list[LabelGroup]) -> int:
    if math.isnan(scroll_left):
        return 0
    # `left` is strictly increasing, so the groups are already sorted by it
    index = bisect_right(groups, scroll_left, key=lambda group: group["left"]) - 1
    return max(index, 0)


def select_sticky_index(scroll_left: float, groups: list[LabelGroup]) -> int:
    """
    Pick the label group pinned at the left edge of the viewport.

    This is the last group whose `left` is at or before the scroll offset.
    When the offset lies before every group (or there are no groups) the
    first group is selected, and so is a NaN offset.
    """
    if len(groups) <= LINEAR_SCAN_LIMIT:
        return sticky_index_linear(scroll_left, groups)
    return sticky_index_bisect(scroll_left, groups)


def sticky_label(index: int, groups: list[LabelGroup]) -> str:
    if 0 <= index < len(groups):
        return groups[index]["label"]
    return ""
