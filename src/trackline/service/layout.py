# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Mapping, Optional, Sequence, Union

import pendulum

from trackline.model.layout import Layout
from trackline.model.task import Subtask, Task
from trackline.model.time_window import TimeWindow
from trackline.model.zoom import ZoomState
from trackline.service.click import find_element, route_click
from trackline.service.date_range import collect_task_instants, compute_time_window
from trackline.service.grouping import group_tasks
from trackline.service.timebar import generate_timebar
from trackline.service.toggle import toggle_track
from trackline.service.track import build_tracks
from trackline.service.zoom import ZOOM_STEP, make_zoom_state, zoom_in, zoom_out
from trackline.time import now_utc

logger = logging.getLogger(__name__)

DEFAULT_ZOOM: ZoomState = {"factor": 1.0, "min": 1.0, "max": 20.0}


def build_layout(
    tasks: Sequence[Task],
    open_state: Optional[Mapping[str, bool]] = None,
    zoom: Optional[ZoomState] = None,
    now: Optional[pendulum.DateTime] = None,
    window: Optional[TimeWindow] = None,
    tz: str = "UTC",
) -> Layout:
    """
    Run a full layout pass over a task collection.

    Args:
        tasks: The tasks to lay out, left unmodified
        open_state: Explicit open/closed flags keyed by track id
        zoom: Current zoom state (defaults to factor 1 in [1, 20])
        now: The current instant (defaults to the wall clock)
        window: Visible window overriding the padded task window
        tz: Timezone for calendar month arithmetic

    Returns:
        The render payload with tracks, window bounds, now and the timebar
    """
    if now is None:
        now = now_utc()
    if zoom is None:
        zoom = make_zoom_state(
            DEFAULT_ZOOM["factor"], DEFAULT_ZOOM["min"], DEFAULT_ZOOM["max"]
        )

    if len(tasks) == 0 or (window is None and not collect_task_instants(tasks)):
        empty_window: TimeWindow = {"start": now, "end": now, "now": now}
        return {
            "tracks": [],
            "start": now,
            "end": now,
            "now": now,
            "timebar": generate_timebar(empty_window, tz=tz),
            "zoom": zoom,
        }

    if window is None:
        window = compute_time_window(tasks, now=now, tz=tz)
    else:
        window = {"start": window["start"], "end": window["end"], "now": now}

    tracks = build_tracks(group_tasks(tasks), open_state=open_state, now=now)
    timebar = generate_timebar(window, tz=tz)

    logger.debug(
        "Laid out %d tasks in %d project tracks with %d timebar segments",
        len(tasks),
        len(tracks),
        len(timebar),
    )
    return {
        "tracks": tracks,
        "start": window["start"],
        "end": window["end"],
        "now": now,
        "timebar": timebar,
        "zoom": zoom,
    }


class TimelineEngine:
    """
    Host-side adapter holding the state that persists between layout passes.

    Owns the task collection reference, the toggle map and the zoom state,
    reacts to interaction events and recomputes the layout on demand. The
    last layout is cached until the tasks, toggle map or zoom factor change.
    """

    def __init__(
        self,
        tasks: Optional[Sequence[Task]] = None,
        zoom: Optional[ZoomState] = None,
        zoom_step: float = ZOOM_STEP,
        tz: str = "UTC",
        on_task_selected: Optional[Callable[[Union[Task, Subtask]], None]] = None,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self._tasks: Sequence[Task] = tasks if tasks is not None else []
        self.open_state: dict[str, bool] = {}
        self.zoom: ZoomState = (
            zoom
            if zoom is not None
            else make_zoom_state(
                DEFAULT_ZOOM["factor"], DEFAULT_ZOOM["min"], DEFAULT_ZOOM["max"]
            )
        )
        self.zoom_step = zoom_step
        self.tz = tz
        self.window: Optional[TimeWindow] = None
        self.on_task_selected = on_task_selected
        self._clock = clock
        self._cache_key: Optional[tuple[int, frozenset[tuple[str, bool]], float]] = None
        self._cached_layout: Optional[Layout] = None

    @property
    def tasks(self) -> Sequence[Task]:
        return self._tasks

    def set_tasks(self, tasks: Sequence[Task]) -> None:
        self._tasks = tasks
        self.invalidate()

    def set_window(self, window: Optional[TimeWindow]) -> None:
        self.window = window
        self.invalidate()

    def invalidate(self) -> None:
        self._cache_key = None
        self._cached_layout = None

    def layout(self) -> Layout:
        key = (
            id(self._tasks),
            frozenset(self.open_state.items()),
            self.zoom["factor"],
        )
        if self._cached_layout is not None and key == self._cache_key:
            return self._cached_layout

        self._cached_layout = build_layout(
            self._tasks,
            open_state=self.open_state,
            zoom=self.zoom,
            now=self._clock(),
            window=self.window,
            tz=self.tz,
        )
        self._cache_key = key
        return self._cached_layout

    def zoom_in(self) -> ZoomState:
        self.zoom = zoom_in(self.zoom, self.zoom_step)
        return self.zoom

    def zoom_out(self) -> ZoomState:
        self.zoom = zoom_out(self.zoom, self.zoom_step)
        return self.zoom

    def toggle_open(self, track_id: str) -> bool:
        self.open_state = toggle_track(self.open_state, track_id)
        return self.open_state[track_id]

    def element_clicked(self, element_id: str) -> Optional[Union[Task, Subtask]]:
        """
        Resolve a clicked element to its task or subtask.

        Notifies on_task_selected when the element exists. Unknown ids are
        ignored and return None.
        """
        element = find_element(self.layout()["tracks"], element_id)
        if element is None:
            logger.debug("Click on unknown element %r ignored", element_id)
            return None

        record = route_click(element)
        if self.on_task_selected is not None:
            self.on_task_selected(record)
        return record
