# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    if python_value.tzinfo is None:
        return pendulum.instance(python_value, tz="UTC")
    return pendulum.instance(python_value).in_tz("UTC")


def date_to_pendulum_utc(python_value: datetime.date) -> pendulum.DateTime:
    return pendulum.datetime(
        python_value.year, python_value.month, python_value.day, tz="UTC"
    )


def coerce_instant(value: Any) -> Optional[pendulum.DateTime]:
    """
    Turn a loosely typed timestamp into a UTC pendulum.DateTime.

    Accepts pendulum/python datetimes, python dates and ISO-8601 strings.
    Anything absent or unparseable yields None.
    """
    if value is None:
        return None
    if isinstance(value, pendulum.DateTime):
        return value.in_tz("UTC")
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_utc(value)
    if isinstance(value, datetime.date):
        return date_to_pendulum_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        parsed = pendulum.parse(value.strip())
    except (ValueError, TypeError, OverflowError):
        return None

    # pendulum.DateTime subclasses pendulum.Date, check it first
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("UTC")
    if isinstance(parsed, pendulum.Date):
        return date_to_pendulum_utc(parsed)
    return None


def datetime_to_display_date_str(datetime: pendulum.DateTime, tz: str = "UTC") -> str:
    return datetime.in_tz(tz).format("YYYY-MM-DD ddd")


def datetime_to_display_short_str(datetime: pendulum.DateTime, tz: str = "UTC") -> str:
    return datetime.in_tz(tz).format("MMM DD")


def datetime_from_local_date_str(date_str: str, tz: str = "UTC") -> pendulum.DateTime:
    """Parse a date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz=tz))
