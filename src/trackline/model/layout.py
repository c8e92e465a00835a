# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from trackline.model.timebar import TimebarSegment
from trackline.model.track import Track
from trackline.model.zoom import ZoomState


class Layout(TypedDict):
    tracks: list[Track]
    start: pendulum.DateTime
    end: pendulum.DateTime
    now: pendulum.DateTime
    timebar: list[TimebarSegment]
    zoom: ZoomState
