# SPDX-License-Identifier: MIT

import getpass

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from studio_portal import configuration
from studio_portal.errors import ConfigurationError
from studio_portal.logs import configure_logging
from studio_portal.repository.configuration import CONFIGURATION_REPO
from studio_portal.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config.get("log_level", "WARNING"))
    view_state.set_show_header(config["show_header"])

    __ensure_data_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = {
            "data_path": None,
            "user_id": getpass.getuser(),
            "show_header": True,
            "seed_on_first_use": True,
            "default_artists": list(configuration.DEFAULT_ARTISTS),
            "timeline_days": configuration.DEFAULT_TIMELINE_DAYS,
            "timeline_step_days": configuration.DEFAULT_TIMELINE_STEP_DAYS,
            "timeline_offset_days": configuration.DEFAULT_TIMELINE_OFFSET_DAYS,
            "log_level": "WARNING",
        }
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    try:
        configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
        configuration.DATA_STORE_PATH.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(
            f"cannot create data directory {configuration.DATA_PATH}: {e}"
        ) from e
