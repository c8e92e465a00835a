# SPDX-License-Identifier: MIT

from trackline.model.task import Task


def get_task_template() -> Task:
    return {
        "id": "",
        "title": "Untitled Task",
        "status": None,
        "is_completed": False,
        "priority": None,
        "progress": 0,
        "created_time": None,
        "due_date": None,
        "last_edited_time": None,
        "section": None,
        "properties": {},
        "subtasks": [],
    }
