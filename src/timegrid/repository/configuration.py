# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timegrid import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} must hold a mapping"
            )
        self._config = configuration.configuration_with_defaults(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_scale: Optional[str] = None,
        buffer_ticks: Optional[int] = None,
        px_per_char: Optional[float] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if default_scale is not None:
            self.config["default_scale"] = default_scale
        if buffer_ticks is not None:
            self.config["buffer_ticks"] = buffer_ticks
        if px_per_char is not None:
            self.config["px_per_char"] = px_per_char
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
