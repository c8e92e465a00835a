# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from trackline.time import datetime_from_local_date_str


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """Parse YYYY-MM-DD, "today"/"t", "now"/"n" or a day offset like 1 or -1."""
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_local_date_str(datetime).in_tz("UTC")
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        return pendulum.today("UTC").add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("UTC")

    raise typer.BadParameter(
        f"Could not parse '{datetime}'. Use YYYY-MM-DD, today, now or a day offset."
    )


def parse_zoom_steps(value: str | int) -> int:
    try:
        steps = int(value)
    except ValueError:
        raise typer.BadParameter(f"Zoom steps must be a whole number, got {value}")
    if steps < 0:
        raise typer.BadParameter("Zoom steps must not be negative")
    return steps
