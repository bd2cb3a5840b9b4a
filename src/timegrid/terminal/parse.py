# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum
import typer

from timegrid.time import datetime_from_str_lenient


def parse_date(value: Optional[str]) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    parsed = datetime_from_str_lenient(value)
    if parsed is None:
        raise typer.BadParameter(f"Invalid date: {value!r} (expected e.g. 2024-01-31)")
    return parsed


def parse_positive_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError:
        raise typer.BadParameter(f"Expected a number, got {value!r}")
    if parsed <= 0:
        raise typer.BadParameter(f"Must be greater than 0, got {value}")
    return parsed


def parse_scroll_offset(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise typer.BadParameter(f"Expected a number, got {value!r}")
    if not math.isfinite(parsed):
        raise typer.BadParameter(f"Scroll offset must be a finite number, got {value}")
    if parsed < 0:
        raise typer.BadParameter(f"Scroll offset cannot be negative, got {value}")
    return parsed
