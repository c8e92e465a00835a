# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]

from trackline.model.task import Subtask, Task
from trackline.template.task import get_task_template


class TaskFileError(Exception):
    """Raised when a task file cannot be read as a list of tasks."""


class TaskRepository:
    """Read-only task source backed by a YAML (or JSON) file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise TaskFileError(f"Task file not found: {self.path}")

        try:
            raw_tasks = load(self.path.read_text(), Loader=SafeLoader)
        except YAMLError as e:
            raise TaskFileError(f"Could not parse {self.path}: {e}") from e

        if raw_tasks is None:
            raw_tasks = []
        if not isinstance(raw_tasks, list):
            raise TaskFileError(f"{self.path} must contain a list of tasks")

        self._tasks = [
            self.__convert_task_for_deserialization(raw_task, index)
            for index, raw_task in enumerate(raw_tasks)
        ]

    def __convert_task_for_deserialization(self, raw_task: Any, index: int) -> Task:
        if not isinstance(raw_task, dict):
            raise TaskFileError(f"Task #{index + 1} in {self.path} is not a mapping")

        task = get_task_template()
        task.update(cast(Task, {k: v for k, v in raw_task.items() if v is not None}))

        if task["id"] == "":
            task["id"] = str(index + 1)
        else:
            task["id"] = str(task["id"])
        task["title"] = str(task["title"])
        task["is_completed"] = bool(task["is_completed"])
        if task["status"] is not None:
            task["status"] = str(task["status"])
        if task["priority"] is not None:
            task["priority"] = str(task["priority"])
        if task["section"] is not None:
            task["section"] = str(task["section"])
        if not isinstance(task["progress"], (int, float)):
            task["progress"] = 0
        if not isinstance(task["properties"], dict):
            task["properties"] = {}
        task["subtasks"] = self.__convert_subtasks(task["subtasks"])

        return task

    def __convert_subtasks(self, raw_subtasks: Any) -> list[Subtask]:
        if not isinstance(raw_subtasks, list):
            return []
        subtasks: list[Subtask] = []
        for raw_subtask in raw_subtasks:
            if isinstance(raw_subtask, str):
                subtasks.append({"title": raw_subtask})
            elif isinstance(raw_subtask, dict):
                subtasks.append(cast(Subtask, raw_subtask))
        return subtasks

    def get_all_tasks(self) -> list[Task]:
        return list(self.tasks)
