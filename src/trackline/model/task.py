# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, TypedDict, Union

import pendulum


class SelectValue(TypedDict):
    name: str


type PropertyValue = Union[str, SelectValue, list[Union[str, SelectValue]], Any]

type TimestampValue = Union[pendulum.DateTime, datetime.datetime, datetime.date, str, None]


class Subtask(TypedDict, total=False):
    id: Optional[str]
    title: Optional[str]
    name: Optional[str]


class Task(TypedDict):
    id: str
    title: str
    status: Optional[str]
    is_completed: bool
    priority: Optional[str]
    progress: float
    created_time: TimestampValue
    due_date: TimestampValue
    last_edited_time: TimestampValue
    section: Optional[str]
    properties: dict[str, PropertyValue]
    subtasks: list[Subtask]
