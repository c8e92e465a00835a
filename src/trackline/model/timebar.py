# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

SegmentGranularity = Literal["month", "week"]


class TimebarSegment(TypedDict):
    id: str
    label: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    granularity: SegmentGranularity
