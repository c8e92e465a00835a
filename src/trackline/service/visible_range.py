# SPDX-License-Identifier: MIT

from typing import Literal, Optional

import pendulum

from trackline.model.time_window import TimeWindow
from trackline.time import now_utc

RangePreset = Literal["week", "month", "quarter", "default"]

RANGE_PRESETS: tuple[RangePreset, ...] = ("week", "month", "quarter", "default")


def visible_range(
    preset: RangePreset,
    now: Optional[pendulum.DateTime] = None,
    tz: str = "UTC",
) -> TimeWindow:
    """
    Get a fixed visible window around now.

    "week", "month" and "quarter" span the current calendar period;
    "default" reaches one month back and two months ahead.
    """
    if now is None:
        now = now_utc()
    local_now = now.in_tz(tz)

    if preset == "week":
        start = local_now.start_of("week")
        end = local_now.end_of("week")
    elif preset == "month":
        start = local_now.start_of("month")
        end = local_now.end_of("month")
    elif preset == "quarter":
        quarter_first_month = 3 * ((local_now.month - 1) // 3) + 1
        start = local_now.start_of("month").set(month=quarter_first_month)
        end = start.add(months=2).end_of("month")
    elif preset == "default":
        start = local_now.subtract(months=1)
        end = local_now.add(months=2)
    else:
        raise ValueError(f"Unknown range preset: {preset}")

    return {"start": start, "end": end, "now": now}
