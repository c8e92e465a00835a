# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

import pendulum

from trackline.model.task import Task
from trackline.model.time_window import TimeWindow
from trackline.time import coerce_instant, now_utc

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS = ("created_time", "due_date", "last_edited_time")

# Padding applied around the task dates, in calendar months
MONTHS_BEFORE = 1
MONTHS_AFTER = 2


def collect_task_instants(tasks: Sequence[Task]) -> list[pendulum.DateTime]:
    """
    Gather every usable timestamp from the tasks.

    Absent and unparseable values are skipped rather than reported.
    """
    instants: list[pendulum.DateTime] = []
    for task in tasks:
        for field in TIMESTAMP_FIELDS:
            raw_value = task.get(field)
            instant = coerce_instant(raw_value)
            if instant is None:
                if raw_value is not None:
                    logger.debug(
                        "Dropping unparseable %s %r on task %r",
                        field,
                        raw_value,
                        task.get("id"),
                    )
                continue
            instants.append(instant)
    return instants


def compute_time_window(
    tasks: Sequence[Task],
    now: Optional[pendulum.DateTime] = None,
    tz: str = "UTC",
) -> TimeWindow:
    """
    Derive the padded visible window for a task collection.

    The window opens on the first day of the month before the earliest date
    and closes at the end of the last day of the month two months after the
    latest date. Month boundaries are taken in the given timezone.

    Args:
        tasks: The tasks to scan
        now: The current instant (defaults to the wall clock)
        tz: Timezone used for calendar month arithmetic

    Returns:
        A TimeWindow; degenerate (start == end == now) when no dates exist
    """
    if now is None:
        now = now_utc()

    instants = collect_task_instants(tasks) if tasks else []
    if not instants:
        return {"start": now, "end": now, "now": now}

    min_date = min(instants)
    max_date = max(instants)

    start = (
        min_date.in_tz(tz).start_of("month").subtract(months=MONTHS_BEFORE)
    )
    end = max_date.in_tz(tz).start_of("month").add(months=MONTHS_AFTER).end_of("month")

    logger.debug(
        "Window %s..%s from %d instants (%s..%s)",
        start,
        end,
        len(instants),
        min_date,
        max_date,
    )
    return {"start": start, "end": end, "now": now}
