# SPDX-License-Identifier: MIT

from typing import Any, NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "timegrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class ScalePresetConfig(TypedDict):
    tick_unit: NotRequired[str]
    unit_per_tick: NotRequired[int]
    label_unit: NotRequired[str]
    base_px_per_drag_step: NotRequired[float]
    drag_step_unit: NotRequired[str]
    drag_step_amount: NotRequired[int]
    header_format: NotRequired[str]
    tick_format: NotRequired[str]


class Configuration(TypedDict):
    default_scale: str
    buffer_ticks: int
    px_per_char: float
    log_level: str
    scales: Optional[dict[str, ScalePresetConfig]]


def default_configuration() -> Configuration:
    return {
        "default_scale": "week",
        "buffer_ticks": 4,
        "px_per_char": 8,
        "log_level": "WARNING",
        "scales": None,
    }


def configuration_with_defaults(loaded: Optional[dict[str, Any]]) -> Configuration:
    """Fill in any settings missing from an older or hand-written config file."""
    config: dict[str, Any] = dict(default_configuration())
    if loaded:
        config.update(loaded)
    return config  # type: ignore[return-value]
