# SPDX-License-Identifier: MIT

from typing import TypedDict

from trackline.model.task import Task


class ProjectGroup(TypedDict):
    name: str
    tasks: list[Task]
