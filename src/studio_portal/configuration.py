# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "studio-portal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STORE_PATH: Path = DATA_PATH / "store"
DATA_VIEWPORT_PATH: Path = DATA_PATH / "viewport.yaml"

DEFAULT_ARTISTS = ["Salini", "Jeki"]
DEFAULT_TIMELINE_DAYS = 40
DEFAULT_TIMELINE_STEP_DAYS = 7
DEFAULT_TIMELINE_OFFSET_DAYS = 10


class Configuration(TypedDict):
    data_path: Optional[str]
    user_id: str
    show_header: bool
    seed_on_first_use: bool
    default_artists: list[str]
    timeline_days: int
    timeline_step_days: int
    timeline_offset_days: int
    log_level: NotRequired[str]


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_STORE_PATH, DATA_VIEWPORT_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_STORE_PATH = DATA_PATH / "store"
        DATA_VIEWPORT_PATH = DATA_PATH / "viewport.yaml"
