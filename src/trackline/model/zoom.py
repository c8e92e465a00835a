# SPDX-License-Identifier: MIT

from typing import TypedDict


class ZoomState(TypedDict):
    factor: float
    min: float
    max: float
