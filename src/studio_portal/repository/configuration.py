# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from studio_portal import configuration
from studio_portal.errors import ConfigurationError


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ConfigurationError("configuration could not be loaded")
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ConfigurationError(
                f"configuration file is empty: {configuration.APP_CONFIG_PATH}"
            )
        if not self._config.get("user_id"):
            raise ConfigurationError("configuration has no user_id")

        # Back-fill keys added after the config file was written
        if "data_path" not in self._config:
            self._config["data_path"] = None
        if "show_header" not in self._config:
            self._config["show_header"] = True
        if "seed_on_first_use" not in self._config:
            self._config["seed_on_first_use"] = True
        if "default_artists" not in self._config:
            self._config["default_artists"] = list(configuration.DEFAULT_ARTISTS)
        if "timeline_days" not in self._config:
            self._config["timeline_days"] = configuration.DEFAULT_TIMELINE_DAYS
        if "timeline_step_days" not in self._config:
            self._config["timeline_step_days"] = (
                configuration.DEFAULT_TIMELINE_STEP_DAYS
            )
        if "timeline_offset_days" not in self._config:
            self._config["timeline_offset_days"] = (
                configuration.DEFAULT_TIMELINE_OFFSET_DAYS
            )
        if "log_level" not in self._config:
            self._config["log_level"] = "WARNING"

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        user_id: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        seed_on_first_use: Optional[bool] = None,
        default_artists: Optional[list[str]] = None,
        timeline_days: Optional[int] = None,
        timeline_step_days: Optional[int] = None,
        timeline_offset_days: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if user_id is not None:
            self.config["user_id"] = user_id
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if seed_on_first_use is not None:
            self.config["seed_on_first_use"] = seed_on_first_use
        if default_artists is not None:
            self.config["default_artists"] = list(dict.fromkeys(default_artists))
        if timeline_days is not None:
            self.config["timeline_days"] = timeline_days
        if timeline_step_days is not None:
            self.config["timeline_step_days"] = timeline_step_days
        if timeline_offset_days is not None:
            self.config["timeline_offset_days"] = timeline_offset_days
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
