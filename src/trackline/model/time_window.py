# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimeWindow(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    now: pendulum.DateTime
