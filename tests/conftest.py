"""
Shared fixtures for the timegrid tests.
"""

from pathlib import Path

import pendulum
import pytest

from timegrid import configuration
from timegrid.model.scale import ScaleConfig
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.scale import GANTT_SCALE_CONFIG


@pytest.fixture
def week_scale() -> ScaleConfig:
    return GANTT_SCALE_CONFIG["week"]


@pytest.fixture
def sample_tasks():
    """One task inside January 2024, as in the week-scale walkthrough."""
    return {"t1": {"start_date": "2024-01-05", "end_date": "2024-01-20"}}


@pytest.fixture
def dt():
    """Shorthand for a UTC midnight pendulum.DateTime."""

    def _dt(year: int, month: int, day: int) -> pendulum.DateTime:
        return pendulum.datetime(year, month, day)

    return _dt


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch):
    """
    Point the configuration file at a temporary directory and clear the
    cached repository state before and after the test.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    CONFIGURATION_REPO.reset()
    yield config_dir / "config.yaml"
    CONFIGURATION_REPO.reset()


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    path = tmp_path / "tasks.yaml"
    path.write_text(
        "tasks:\n"
        "  t1:\n"
        "    start_date: 2024-01-05\n"
        "    end_date: 2024-01-20\n"
        "  t2:\n"
        "    start_date: '2024-01-22'\n"
        "    end_date: '2024-02-02'\n"
        "  broken:\n"
        "    start_date: not a date\n"
        "    end_date: also not a date\n"
    )
    return path
