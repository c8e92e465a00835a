# SPDX-License-Identifier: MIT

from typing import Mapping, Optional

from trackline.model.track import TrackKind

PROJECT_TRACK_PREFIX = "project-"
TASK_TRACK_PREFIX = "task-"
SUBTASK_TRACK_PREFIX = "subtask-"

# Projects start expanded, tasks and subtasks start collapsed
_DEFAULT_OPEN: dict[TrackKind, bool] = {
    "project": True,
    "task": False,
    "subtask": False,
}


def project_track_id(group_index: int) -> str:
    return f"{PROJECT_TRACK_PREFIX}{group_index}"


def task_track_id(group_index: int, task_index: int) -> str:
    return f"{TASK_TRACK_PREFIX}{group_index}-{task_index}"


def subtask_track_id(group_index: int, task_index: int, subtask_index: int) -> str:
    return f"{SUBTASK_TRACK_PREFIX}{group_index}-{task_index}-{subtask_index}"


def track_level(track_id: str) -> TrackKind:
    """Infer the level of a track from its id, unknown ids count as tasks."""
    if track_id.startswith(PROJECT_TRACK_PREFIX):
        return "project"
    if track_id.startswith(SUBTASK_TRACK_PREFIX):
        return "subtask"
    return "task"


def default_open(track_id: str) -> bool:
    return _DEFAULT_OPEN[track_level(track_id)]


def is_track_open(open_state: Optional[Mapping[str, bool]], track_id: str) -> bool:
    if open_state is not None and track_id in open_state:
        return bool(open_state[track_id])
    return default_open(track_id)


def toggle_track(
    open_state: Optional[Mapping[str, bool]], track_id: str
) -> dict[str, bool]:
    """
    Flip the open state of one track.

    Returns a new mapping, the given one is left untouched. An id without an
    explicit entry flips away from its level default.
    """
    toggled = dict(open_state or {})
    toggled[track_id] = not is_track_open(open_state, track_id)
    return toggled
