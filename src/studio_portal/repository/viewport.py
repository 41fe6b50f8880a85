# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from studio_portal import configuration, time


class ViewportRepository:
    """Remembers where the timeline viewport starts between invocations."""

    def get_start(self) -> Optional[pendulum.DateTime]:
        if not configuration.DATA_VIEWPORT_PATH.is_file():
            return None
        data = load(configuration.DATA_VIEWPORT_PATH.read_text(), Loader=Loader)
        if data is None or data.get("start") is None:
            return None
        return time.datetime_from_local_date_str(data["start"])

    def set_start(self, start: pendulum.DateTime) -> None:
        data = {"start": time.datetime_to_local_date_str(start)}
        configuration.DATA_VIEWPORT_PATH.write_text(dump(data, Dumper=Dumper))

    def clear(self) -> None:
        configuration.DATA_VIEWPORT_PATH.unlink(missing_ok=True)


VIEWPORT_REPO = ViewportRepository()
