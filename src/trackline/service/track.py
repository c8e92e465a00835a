# SPDX-License-Identifier: MIT

import logging
from typing import Mapping, Optional, Sequence

import pendulum

from trackline.color import SUBTASK_COLOR, status_color
from trackline.model.project_group import ProjectGroup
from trackline.model.task import Subtask, Task
from trackline.model.track import Element, ElementStyle, Track
from trackline.service.toggle import (
    is_track_open,
    project_track_id,
    subtask_track_id,
    task_track_id,
)
from trackline.time import coerce_instant, now_utc

logger = logging.getLogger(__name__)

PROJECT_MARKER = "📁"

# Synthetic durations for bars without a usable end
CORRECTED_TASK_DAYS = 7
SUBTASK_DAYS = 3

TASK_BAR_HEIGHT = 24
SUBTASK_BAR_HEIGHT = 16


def task_interval(
    task: Task, now: pendulum.DateTime
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Compute the start and end of a task bar.

    The bar runs from the creation time to the due date, or to the last edit
    when there is no due date. An end that is not after the start is replaced
    by start plus one week.
    """
    created = coerce_instant(task.get("created_time"))
    due = coerce_instant(task.get("due_date"))
    last_edited = coerce_instant(task.get("last_edited_time"))

    start = created
    if start is None:
        start = due or last_edited or now
        logger.debug("Task %r has no usable created time", task.get("id"))

    end = due if due is not None else last_edited
    if end is None or end <= start:
        end = start.add(days=CORRECTED_TASK_DAYS)
        logger.debug("Corrected interval of task %r to end %s", task.get("id"), end)

    return start, end


def _format_progress(progress: object) -> str:
    if isinstance(progress, bool) or not isinstance(progress, (int, float)):
        return "0"
    if float(progress).is_integer():
        return str(int(progress))
    return f"{progress:g}"


def _priority_border(priority: Optional[str]) -> Optional[str]:
    if not isinstance(priority, str):
        return None
    normalized = priority.strip().lower()
    if normalized == "high":
        return "red"
    if normalized == "medium":
        return "amber"
    return None


def task_style(task: Task) -> ElementStyle:
    border = _priority_border(task.get("priority"))
    return {
        "color": status_color(task.get("status"), bool(task.get("is_completed"))),
        "emphasized": border == "red",
        "border": border,
        "height": TASK_BAR_HEIGHT,
        "muted": False,
    }


def task_title(task: Task) -> str:
    return task.get("title") or "Untitled Task"


def task_tooltip(task: Task) -> str:
    status = task.get("status") or "No Status"
    return f"{task_title(task)} - {status} ({_format_progress(task.get('progress'))}%)"


def subtask_name(subtask: Subtask) -> str:
    if isinstance(subtask, str):
        return subtask or "Untitled Subtask"
    if not isinstance(subtask, dict):
        return "Untitled Subtask"
    return subtask.get("title") or subtask.get("name") or "Untitled Subtask"


def _build_subtask_track(
    subtask: Subtask,
    track_id: str,
    parent_start: pendulum.DateTime,
) -> Track:
    name = subtask_name(subtask)
    element: Element = {
        "id": f"element-{track_id}",
        "title": name,
        "start": parent_start,
        "end": parent_start.add(days=SUBTASK_DAYS),
        "style": {
            "color": SUBTASK_COLOR,
            "emphasized": False,
            "border": None,
            "height": SUBTASK_BAR_HEIGHT,
            "muted": True,
        },
        "tooltip": f"Subtask: {name}",
        "source": subtask,
    }
    return {
        "id": track_id,
        "kind": "subtask",
        "title": name,
        "has_children": False,
        "is_open": False,
        "task_count": 0,
        "elements": [element],
        "tracks": [],
    }


def _build_task_track(
    task: Task,
    group_index: int,
    task_index: int,
    open_state: Optional[Mapping[str, bool]],
    now: pendulum.DateTime,
) -> Track:
    track_id = task_track_id(group_index, task_index)
    start, end = task_interval(task, now)
    subtasks = task.get("subtasks") or []

    element: Element = {
        "id": f"element-{track_id}",
        "title": task_title(task),
        "start": start,
        "end": end,
        "style": task_style(task),
        "tooltip": task_tooltip(task),
        "source": task,
    }
    child_tracks = [
        _build_subtask_track(
            subtask, subtask_track_id(group_index, task_index, index), start
        )
        for index, subtask in enumerate(subtasks)
    ]
    return {
        "id": track_id,
        "kind": "task",
        "title": task_title(task),
        "has_children": len(child_tracks) > 0,
        "is_open": is_track_open(open_state, track_id),
        "task_count": 0,
        "elements": [element],
        "tracks": child_tracks,
    }


def build_tracks(
    groups: Sequence[ProjectGroup],
    open_state: Optional[Mapping[str, bool]] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[Track]:
    """
    Build the project -> task -> subtask track tree.

    Track ids depend only on positions, so the same input and open state
    always give the same tree. Collapsed tracks still carry their children;
    the open flag tells the renderer whether to show them.

    Args:
        groups: Project groups in display order
        open_state: Explicit open/closed flags keyed by track id
        now: Fallback start for tasks without any usable date

    Returns:
        One project track per group
    """
    if now is None:
        now = now_utc()

    tracks: list[Track] = []
    for group_index, group in enumerate(groups):
        track_id = project_track_id(group_index)
        tracks.append(
            {
                "id": track_id,
                "kind": "project",
                "title": f"{PROJECT_MARKER} {group['name']}",
                "has_children": True,
                "is_open": is_track_open(open_state, track_id),
                "task_count": len(group["tasks"]),
                "elements": [],
                "tracks": [
                    _build_task_track(task, group_index, task_index, open_state, now)
                    for task_index, task in enumerate(group["tasks"])
                ],
            }
        )
    return tracks
