"""
Label group building tests.
"""

import pytest

from timegrid.service.cells import create_tick_cells
from timegrid.service.groups import (
    assign_group_offsets,
    create_label_groups,
    group_cells_by_label_unit,
    merge_adjacent_labels,
)


@pytest.fixture
def week_cells(week_scale, dt):
    return create_tick_cells(dt(2023, 12, 8), dt(2024, 2, 17), week_scale)


class TestCreateLabelGroups:
    def test_weeks_group_by_month(self, week_cells, week_scale, dt):
        groups = create_label_groups(week_cells, week_scale)
        assert [g["label"] for g in groups] == [
            "December 2023",
            "January 2024",
            "February 2024",
        ]
        assert [g["width_px"] for g in groups] == [336, 420, 168]
        assert [g["left"] for g in groups] == [0, 336, 756]
        assert groups[1]["start_date"] == dt(2024, 1, 1)

    def test_groups_partition_cells(self, week_cells, week_scale):
        groups = create_label_groups(week_cells, week_scale)
        assert sum(g["width_px"] for g in groups) == sum(
            c["width_px"] for c in week_cells
        )

    def test_left_is_strictly_increasing_from_zero(self, week_cells, week_scale):
        lefts = [g["left"] for g in create_label_groups(week_cells, week_scale)]
        assert lefts[0] == 0
        assert all(a < b for a, b in zip(lefts, lefts[1:]))

    def test_default_label_is_iso(self, week_cells, week_scale):
        scale = {k: v for k, v in week_scale.items() if k != "format_header_label"}
        groups = create_label_groups(week_cells, scale)
        assert groups[0]["label"] == "2023-12-01T00:00:00+00:00"

    def test_equal_text_merges_across_buckets(self, week_cells, week_scale, dt):
        scale = dict(week_scale, format_header_label=lambda d: d.format("YYYY"))
        groups = create_label_groups(week_cells, scale)
        assert [(g["label"], g["width_px"], g["left"]) for g in groups] == [
            ("2023", 336, 0),
            ("2024", 588, 336),
        ]
        assert groups[1]["start_date"] == dt(2024, 1, 1)

    def test_empty_cells(self, week_scale):
        assert create_label_groups([], week_scale) == []


class TestGroupPasses:
    def test_bucket_pass_keeps_identical_text_apart(self, week_cells, week_scale):
        scale = dict(week_scale, format_header_label=lambda d: "same")
        groups = group_cells_by_label_unit(week_cells, scale)
        assert len(groups) == 3
        assert len(merge_adjacent_labels(groups)) == 1

    def test_last_group_is_flushed(self, week_scale, dt):
        cells = [{"start_date": dt(2024, 1, 29), "width_px": 84}]
        groups = group_cells_by_label_unit(cells, week_scale)
        assert groups == [
            {"label": "January 2024", "width_px": 84, "start_date": dt(2024, 1, 1)}
        ]

    def test_merge_does_not_mutate_input(self, dt):
        groups = [
            {"label": "x", "width_px": 10, "start_date": dt(2024, 1, 1)},
            {"label": "x", "width_px": 5, "start_date": dt(2024, 2, 1)},
        ]
        merged = merge_adjacent_labels(groups)
        assert merged == [{"label": "x", "width_px": 15, "start_date": dt(2024, 1, 1)}]
        assert groups[0]["width_px"] == 10

    def test_offsets_are_prefix_sums(self, dt):
        groups = [
            {"label": "a", "width_px": 10, "start_date": dt(2024, 1, 1)},
            {"label": "b", "width_px": 2.5, "start_date": dt(2024, 2, 1)},
            {"label": "c", "width_px": 7, "start_date": dt(2024, 3, 1)},
        ]
        assert [g["left"] for g in assign_group_offsets(groups)] == [0, 10, 12.5]
