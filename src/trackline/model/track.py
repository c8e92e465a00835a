# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from trackline.model.task import Subtask, Task

TrackKind = Literal["project", "task", "subtask"]


class ElementStyle(TypedDict):
    color: str
    emphasized: bool
    border: Optional[str]
    height: int
    muted: bool


class Element(TypedDict):
    id: str
    title: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    style: ElementStyle
    tooltip: str
    source: Union[Task, Subtask]


class Track(TypedDict):
    id: str
    kind: TrackKind
    title: str
    has_children: bool
    is_open: bool
    task_count: int
    elements: list[Element]
    tracks: list["Track"]
