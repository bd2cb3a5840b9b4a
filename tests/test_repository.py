"""
Task file and configuration repository tests.
"""

import logging

import pytest
from rich.logging import RichHandler

from timegrid import configuration
from timegrid.initialize import initialize
from timegrid.logger import LOGGER_NAME, setup_logging
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.repository.task import TaskFileError, load_tasks


class TestLoadTasks:
    def test_reads_tasks_key(self, tasks_file):
        tasks = load_tasks(tasks_file)
        assert tasks["t1"] == {"start_date": "2024-01-05", "end_date": "2024-01-20"}
        assert tasks["t2"]["end_date"] == "2024-02-02"
        assert tasks["broken"]["start_date"] == "not a date"

    def test_reads_bare_mapping_with_camel_case(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text(
            "a:\n  startDate: '2024-03-01'\n  endDate: '2024-03-04'\n"
            "b: just a string\n"
        )
        assert load_tasks(path) == {
            "a": {"start_date": "2024-03-01", "end_date": "2024-03-04"}
        }

    def test_missing_fields_become_empty(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("a:\n  start_date: '2024-03-01'\n")
        assert load_tasks(path)["a"]["end_date"] == ""

    def test_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("- 2024-01-01\n- 2024-01-02\n")
        with pytest.raises(TaskFileError):
            load_tasks(path)


class TestConfigurationRepository:
    def test_defaults_without_file(self, isolated_config):
        config = CONFIGURATION_REPO.get_config()
        assert config == configuration.default_configuration()

    def test_missing_keys_are_filled_in(self, isolated_config):
        isolated_config.write_text("default_scale: month\n")
        config = CONFIGURATION_REPO.get_config()
        assert config["default_scale"] == "month"
        assert config["buffer_ticks"] == 4

    def test_update_and_flush(self, isolated_config):
        CONFIGURATION_REPO.update_config(default_scale="day", buffer_ticks=2)
        CONFIGURATION_REPO.flush()
        assert "default_scale: day" in isolated_config.read_text()

        CONFIGURATION_REPO.reset()
        assert CONFIGURATION_REPO.get_config()["buffer_ticks"] == 2

    def test_get_config_returns_a_copy(self, isolated_config):
        CONFIGURATION_REPO.get_config()["default_scale"] = "year"
        assert CONFIGURATION_REPO.get_config()["default_scale"] == "week"

    def test_rejects_non_mapping_file(self, isolated_config):
        isolated_config.write_text("- week\n")
        with pytest.raises(ValueError):
            CONFIGURATION_REPO.get_config()

    def test_initialize_writes_default_file(self, isolated_config):
        initialize()
        assert isolated_config.is_file()
        assert "default_scale: week" in isolated_config.read_text()


class TestLogging:
    def test_setup_is_idempotent(self):
        setup_logging("info")
        setup_logging("debug")
        logger = logging.getLogger(LOGGER_NAME)
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG
        setup_logging("WARNING")
