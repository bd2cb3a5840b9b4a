# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timegrid import configuration
from timegrid.logger import setup_logging
from timegrid.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    setup_logging(config["log_level"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
