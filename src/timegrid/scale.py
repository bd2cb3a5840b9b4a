# SPDX-License-Identifier: MIT

import logging
from typing import Any, Mapping, Optional, cast

import pendulum

from timegrid.calendar import CALENDAR_UNITS
from timegrid.model.scale import LabelFormatter, ScaleConfig, ScaleConfigError
from timegrid.service.cells import tick_width_px

logger = logging.getLogger(__name__)

# Ticks anchored here are the shortest a month-based tick can be (non-leap February)
_REFERENCE_TICK_START = pendulum.datetime(2023, 2, 1)

# Number of ticks added on each side of the task extent for scroll headroom
TIMELINE_SHIFT_BUFFER = 4

DEFAULT_SCALE_KEY = "week"

_UNIT_FIELDS = ("tick_unit", "label_unit", "drag_step_unit")
_NUMERIC_FIELDS = ("unit_per_tick", "base_px_per_drag_step", "drag_step_amount")
_FORMATTER_FIELDS = ("format_header_label", "format_tick_label")


def format_with(pattern: str) -> LabelFormatter:
    """Build a label formatter from a pendulum format string."""
    return lambda value: value.format(pattern)


GANTT_SCALE_CONFIG: dict[str, ScaleConfig] = {
    "day": {
        "tick_unit": "day",
        "unit_per_tick": 1,
        "label_unit": "month",
        "base_px_per_drag_step": 40,
        "drag_step_unit": "hour",
        "drag_step_amount": 24,
        "format_header_label": format_with("MMMM YYYY"),
        "format_tick_label": format_with("D"),
    },
    "week": {
        "tick_unit": "week",
        "unit_per_tick": 1,
        "label_unit": "month",
        "base_px_per_drag_step": 12,
        "drag_step_unit": "day",
        "drag_step_amount": 1,
        "format_header_label": format_with("MMMM YYYY"),
        "format_tick_label": format_with("D"),
    },
    "month": {
        "tick_unit": "month",
        "unit_per_tick": 1,
        "label_unit": "year",
        "base_px_per_drag_step": 4,
        "drag_step_unit": "day",
        "drag_step_amount": 1,
        "format_header_label": format_with("YYYY"),
        "format_tick_label": format_with("MMM"),
    },
    "quarter": {
        "tick_unit": "month",
        "unit_per_tick": 3,
        "label_unit": "year",
        "base_px_per_drag_step": 10,
        "drag_step_unit": "week",
        "drag_step_amount": 1,
        "format_header_label": format_with("YYYY"),
        "format_tick_label": format_with("MMM"),
    },
    "year": {
        "tick_unit": "year",
        "unit_per_tick": 1,
        "label_unit": "year",
        "base_px_per_drag_step": 10,
        "drag_step_unit": "month",
        "drag_step_amount": 1,
        "format_header_label": format_with("YYYY"),
    },
}


def validate_scale_config(scale_key: str, scale: Mapping[str, Any]) -> ScaleConfig:
    """
    Check that a scale preset can drive the layout engine.

    A preset with a missing or non-positive numeric field, an unknown
    calendar unit, or a drag step too coarse to give a tick any width is a
    configuration defect and is rejected immediately
    instead of producing an empty or endless timeline later on.

    Args:
        scale_key: The name of the preset, used in error messages
        scale: The preset to check

    Returns:
        The same preset, typed as a ScaleConfig

    Raises:
        ScaleConfigError: If any required field is missing or invalid
    """
    for field in _UNIT_FIELDS:
        if field not in scale:
            raise ScaleConfigError(f"Scale '{scale_key}' is missing '{field}'")
        if scale[field] not in CALENDAR_UNITS:
            raise ScaleConfigError(
                f"Scale '{scale_key}' has unknown unit {scale[field]!r} for '{field}'"
            )

    for field in _NUMERIC_FIELDS:
        if field not in scale:
            raise ScaleConfigError(f"Scale '{scale_key}' is missing '{field}'")
        value = scale[field]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ScaleConfigError(
                f"Scale '{scale_key}' field '{field}' must be a number, got {value!r}"
            )
        if value <= 0:
            raise ScaleConfigError(
                f"Scale '{scale_key}' field '{field}' must be positive, got {value!r}"
            )

    if not isinstance(scale["unit_per_tick"], int):
        raise ScaleConfigError(
            f"Scale '{scale_key}' field 'unit_per_tick' must be a whole number"
        )

    for field in _FORMATTER_FIELDS:
        if field in scale and not callable(scale[field]):
            raise ScaleConfigError(f"Scale '{scale_key}' field '{field}' is not callable")

    if tick_width_px(_REFERENCE_TICK_START, cast(ScaleConfig, scale)) <= 0:
        raise ScaleConfigError(
            f"Scale '{scale_key}' drag step ({scale['drag_step_amount']} "
            f"{scale['drag_step_unit']}) is coarser than one tick "
            f"({scale['unit_per_tick']} {scale['tick_unit']}), so ticks would be 0px wide"
        )

    return cast(ScaleConfig, scale)


def get_scale_config(
    scale_key: str, scales: Optional[Mapping[str, ScaleConfig]] = None
) -> ScaleConfig:
    if scales is None:
        scales = GANTT_SCALE_CONFIG
    if scale_key not in scales:
        raise ScaleConfigError(
            f"Unknown scale '{scale_key}' (available: {', '.join(scales)})"
        )
    return validate_scale_config(scale_key, scales[scale_key])


def scales_from_configuration(
    configured: Optional[Mapping[str, Mapping[str, Any]]],
) -> dict[str, ScaleConfig]:
    """
    Combine the built-in presets with presets read from the config file.

    A configured entry named after a built-in only replaces the fields it
    sets. Format strings are given as `header_format` / `tick_format` and are
    turned into formatters.
    """
    scales: dict[str, ScaleConfig] = dict(GANTT_SCALE_CONFIG)
    if not configured:
        return scales

    for scale_key, entry in configured.items():
        if not isinstance(entry, Mapping):
            raise ScaleConfigError(f"Scale '{scale_key}' must be a mapping")

        merged: dict[str, Any] = dict(scales.get(scale_key, {}))
        for field, value in entry.items():
            if field == "header_format":
                merged["format_header_label"] = format_with(str(value))
            elif field == "tick_format":
                merged["format_tick_label"] = format_with(str(value))
            else:
                merged[field] = value

        scales[scale_key] = validate_scale_config(scale_key, merged)
        logger.debug("loaded scale preset '%s' from configuration", scale_key)

    return scales
