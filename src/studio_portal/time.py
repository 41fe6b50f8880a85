# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, TypeAlias, cast

import pendulum

DateLike: TypeAlias = pendulum.DateTime | datetime.datetime | datetime.date | str


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.DateTime:
    return pendulum.today("local")


def relative_date(days_offset: int) -> pendulum.DateTime:
    """Midnight of the local day `days_offset` days away from today."""
    return today_local().add(days=days_offset)


def __to_pendulum(value: DateLike) -> pendulum.DateTime:
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local")
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")
    if isinstance(value, str):
        parsed = pendulum.parse(value, tz="local")
        if isinstance(parsed, pendulum.DateTime):
            return parsed
    raise ValueError(f"not a calendar date: {value!r}")


def normalize_date(value: Optional[DateLike]) -> pendulum.DateTime:
    """
    Parse `value` and truncate it to local midnight.

    Anything that cannot be read as a date is replaced by the current
    moment before truncation, so the result is always a valid date.
    """
    try:
        if value is None:
            raise ValueError("missing date")
        parsed = __to_pendulum(value)
    except (ValueError, TypeError, OverflowError):
        parsed = now_local()
    return parsed.in_tz("local").start_of("day")


def date_for_input(value: Optional[DateLike]) -> str:
    """Render a date as 'YYYY-MM-DD' for an editable field, or '' if absent."""
    if value is None or value == "":
        return ""
    try:
        parsed = __to_pendulum(value)
    except (ValueError, TypeError, OverflowError):
        return ""
    return parsed.in_tz("local").format("YYYY-MM-DD")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz="local"))


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")

