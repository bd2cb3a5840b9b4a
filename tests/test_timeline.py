"""
Timeline assembly and header state tests.
"""

import pytest

from timegrid.model.scale import ScaleConfigError
from timegrid.service.timeline import (
    build_drag_range,
    build_header_state,
    build_timeline,
    find_drag_cell_index,
)


def _drag(dt, start, end):
    return {"start_date": dt(*start), "end_date": dt(*end), "bar_left": 0, "bar_width": 0}


class TestBuildTimeline:
    def test_week_walkthrough(self, sample_tasks, dt):
        timeline = build_timeline(sample_tasks, "week")
        cells = timeline["cells"]
        assert timeline["scale_key"] == "week"
        assert cells[0]["start_date"] < dt(2024, 1, 1)
        assert cells[-1]["start_date"].add(weeks=1) > dt(2024, 1, 20)
        assert "January 2024" in [g["label"] for g in timeline["groups"]]
        assert len([g for g in timeline["groups"] if g["label"] == "January 2024"]) == 1

    def test_buffer_controls_headroom(self, sample_tasks, dt):
        timeline = build_timeline(sample_tasks, "week", buffer=0)
        assert timeline["cells"][0]["start_date"] == dt(2024, 1, 1)
        assert timeline["cells"][-1]["start_date"] == dt(2024, 1, 15)

    def test_empty_tasks(self):
        assert build_timeline({}, "week") == {
            "scale_key": "week",
            "cells": [],
            "groups": [],
        }

    def test_unknown_scale_fails_fast(self, sample_tasks):
        with pytest.raises(ScaleConfigError):
            build_timeline(sample_tasks, "decade")

    def test_malformed_scale_fails_fast(self, sample_tasks):
        scales = {"broken": {"tick_unit": "week", "label_unit": "month"}}
        with pytest.raises(ScaleConfigError):
            build_timeline(sample_tasks, "broken", scales)


class TestFindDragCellIndex:
    @pytest.fixture
    def cells(self, sample_tasks):
        return build_timeline(sample_tasks, "week")["cells"]

    def test_matches_start_day(self, cells, dt):
        assert find_drag_cell_index(_drag(dt, (2024, 1, 8), (2024, 1, 20)), cells) == 5

    def test_matches_end_day(self, cells, dt):
        assert find_drag_cell_index(_drag(dt, (2024, 1, 10), (2024, 1, 15)), cells) == 6

    def test_no_match(self, cells, dt):
        assert find_drag_cell_index(_drag(dt, (2024, 1, 10), (2024, 1, 12)), cells) == -1

    def test_no_drag(self, cells):
        assert find_drag_cell_index(None, cells) == -1


class TestBuildHeaderState:
    def test_sticky_follows_scroll(self, sample_tasks, week_scale):
        timeline = build_timeline(sample_tasks, "week")
        assert build_header_state(timeline, week_scale, 0)["sticky_label"] == (
            "December 2023"
        )
        assert build_header_state(timeline, week_scale, 400)["sticky_label"] == (
            "January 2024"
        )

    def test_drag_overlay_geometry(self, sample_tasks, week_scale, dt):
        timeline = build_timeline(sample_tasks, "week")
        drag_range = build_drag_range(
            dt(2024, 1, 8), dt(2024, 1, 22), timeline["cells"], week_scale
        )
        assert (drag_range["bar_left"], drag_range["bar_width"]) == (420, 168)
        state = build_header_state(timeline, week_scale, 0, drag_range)
        assert state["drag_offset"] == {"margin_left": 420, "width": 168}
        assert state["drag_cell_index"] == 5

    def test_overlay_uses_carried_bar_geometry(self, sample_tasks, week_scale, dt):
        drag_range = _drag(dt, (2024, 1, 8), (2024, 1, 22))
        drag_range["bar_left"] = 500
        drag_range["bar_width"] = 24
        state = build_header_state(
            build_timeline(sample_tasks, "week"), week_scale, 0, drag_range
        )
        assert state["drag_offset"] == {"margin_left": 500, "width": 24}
        assert state["drag_cell_index"] == 5

    def test_without_drag(self, sample_tasks, week_scale):
        state = build_header_state(build_timeline(sample_tasks, "week"), week_scale)
        assert state["drag_offset"] is None
        assert state["drag_cell_index"] == -1

    def test_empty_timeline(self, week_scale):
        state = build_header_state(build_timeline({}, "week"), week_scale, 250)
        assert state == {
            "sticky_index": 0,
            "sticky_label": "",
            "drag_offset": None,
            "drag_cell_index": -1,
        }
