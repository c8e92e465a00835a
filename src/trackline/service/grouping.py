# SPDX-License-Identifier: MIT

import logging
from typing import Any, Mapping, Optional, Sequence

from trackline.model.project_group import ProjectGroup
from trackline.model.task import Task

logger = logging.getLogger(__name__)

PROJECT_KEYS = ("Project", "project")

DEFAULT_PROJECT_NAME = "General Tasks"


def _select_name(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        name = value.get("name")
        if isinstance(name, str) and name != "":
            return name
        return None
    name = getattr(value, "name", None)
    if isinstance(name, str) and name != "":
        return name
    return None


def _project_from_properties(properties: Mapping[str, Any]) -> Optional[str]:
    values = [properties[key] for key in PROJECT_KEYS if key in properties]

    # 1. plain string
    for value in values:
        if isinstance(value, str) and value != "":
            return value

    # 2. select-like object exposing a name
    for value in values:
        if not isinstance(value, (str, list, tuple)):
            name = _select_name(value)
            if name is not None:
                return name

    # 3. non-empty list, first element wins
    for value in values:
        if isinstance(value, (list, tuple)) and len(value) > 0:
            name = _select_name(value[0])
            if name is not None:
                return name

    return None


def resolve_project_name(task: Task) -> str:
    """
    Resolve the project a task belongs to.

    Checks the "Project"/"project" property as a string, a select-like object
    and a list of those, then the task's section, then "General Tasks".
    """
    properties = task.get("properties") or {}
    if isinstance(properties, Mapping):
        project = _project_from_properties(properties)
        if project is not None:
            return project

    section = task.get("section")
    if isinstance(section, str) and section != "":
        return section

    logger.debug("Task %r has no project or section", task.get("id"))
    return DEFAULT_PROJECT_NAME


def group_tasks(tasks: Sequence[Task]) -> list[ProjectGroup]:
    """Partition tasks into project groups in first-seen order."""
    groups: dict[str, ProjectGroup] = {}
    for task in tasks:
        name = resolve_project_name(task)
        if name not in groups:
            groups[name] = {"name": name, "tasks": []}
        groups[name]["tasks"].append(task)
    return list(groups.values())
