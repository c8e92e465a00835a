# SPDX-License-Identifier: MIT

import math

import pendulum

from trackline.model.time_window import TimeWindow
from trackline.model.timebar import TimebarSegment

DAYS_PER_WEEK = 7


def week_number(week_start: pendulum.DateTime, month_start: pendulum.DateTime) -> int:
    """
    Number a week within its month.

    Uses ceil((day of month + weekday of the 1st) / 7) with Sunday as 0.
    This is not ISO-8601 week numbering.
    """
    weekday_offset = month_start.isoweekday() % 7
    return math.ceil((week_start.day + weekday_offset) / DAYS_PER_WEEK)


def _week_segments(month_start: pendulum.DateTime) -> list[TimebarSegment]:
    month_end = month_start.end_of("month")
    segments: list[TimebarSegment] = []

    week_start = month_start
    while week_start <= month_end:
        week_end = week_start.add(days=DAYS_PER_WEEK - 1).end_of("day")
        if week_end > month_end:
            week_end = month_end
        number = week_number(week_start, month_start)
        segments.append(
            {
                "id": f"week-{month_start.format('YYYY-MM')}-{number}",
                "label": f"Week {number}",
                "start": week_start,
                "end": week_end,
                "granularity": "week",
            }
        )
        week_start = week_start.add(days=DAYS_PER_WEEK)
    return segments


def generate_timebar(window: TimeWindow, tz: str = "UTC") -> list[TimebarSegment]:
    """
    Generate month and week segments covering a time window.

    Each month from the window start's month to the window end's month gets
    one month segment followed by its week segments. Weeks start on the 1st
    and every 7 days after, the last one clipped to the month end.

    A degenerate window (start == end) still gets its month and weeks.
    """
    start = window["start"]
    end = window["end"]

    segments: list[TimebarSegment] = []
    month_start = start.in_tz(tz).start_of("month")
    last_month = end.in_tz(tz).start_of("month")

    while month_start <= last_month:
        segments.append(
            {
                "id": f"month-{month_start.format('YYYY-MM')}",
                "label": month_start.format("MMMM YYYY"),
                "start": month_start,
                "end": month_start.end_of("month"),
                "granularity": "month",
            }
        )
        segments.extend(_week_segments(month_start))
        month_start = month_start.add(months=1)
    return segments
