# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.repository.task import TaskFileError, TaskRepository
from trackline.service.layout import TimelineEngine
from trackline.service.timebar import generate_timebar
from trackline.service.visible_range import RANGE_PRESETS, visible_range
from trackline.template.zoom import get_zoom_template
from trackline.terminal.parse import parse_datetime, parse_zoom_steps
from trackline.view.gantt import gantt_view
from trackline.view.timebar import timebar_view
from trackline.view.tracks import tracks_view

TaskFileArgument = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file containing a list of tasks"),
]

TimezoneOption = Annotated[
    Optional[str],
    typer.Option("--tz", help="Timezone for month and week boundaries"),
]


def _resolve_timezone(name: str) -> str:
    try:
        pendulum.timezone(name)
    except Exception as e:
        typer.echo(f"Error: unknown timezone '{name}': {e}", err=True)
        raise typer.Exit(1)
    return name


def _build_engine(
    task_file: Path,
    tz: Optional[str],
    range_preset: Optional[str] = None,
    open_ids: Optional[list[str]] = None,
    close_ids: Optional[list[str]] = None,
    zoom_in_steps: int = 0,
    zoom_out_steps: int = 0,
) -> TimelineEngine:
    config = CONFIGURATION_REPO.get_config()
    timezone = _resolve_timezone(tz or config["timezone"])

    try:
        tasks = TaskRepository(task_file).get_all_tasks()
        zoom = get_zoom_template(config)
    except (TaskFileError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    engine = TimelineEngine(
        tasks, zoom=zoom, zoom_step=config["zoom_step"], tz=timezone
    )

    if range_preset is not None:
        if range_preset not in RANGE_PRESETS:
            typer.echo(
                f"Error: range must be one of {', '.join(RANGE_PRESETS)}", err=True
            )
            raise typer.Exit(1)
        engine.set_window(visible_range(range_preset, tz=timezone))  # type: ignore[arg-type]

    for track_id in open_ids or []:
        engine.open_state[track_id] = True
    for track_id in close_ids or []:
        engine.open_state[track_id] = False

    try:
        for _ in range(zoom_in_steps):
            engine.zoom_in()
        for _ in range(zoom_out_steps):
            engine.zoom_out()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    return engine


def gantt(
    task_file: TaskFileArgument,
    range_preset: Annotated[
        Optional[str],
        typer.Option(
            "--range",
            "-r",
            help="Fixed window around today: week, month, quarter or default",
        ),
    ] = None,
    open_ids: Annotated[
        Optional[list[str]],
        typer.Option("--open", "-o", help="Track ids to expand (accepts multiple)"),
    ] = None,
    close_ids: Annotated[
        Optional[list[str]],
        typer.Option("--close", "-c", help="Track ids to collapse (accepts multiple)"),
    ] = None,
    zoom_in_steps: Annotated[
        int,
        typer.Option("--zoom-in", "-zi", parser=parse_zoom_steps, help="Zoom in N steps"),
    ] = 0,
    zoom_out_steps: Annotated[
        int,
        typer.Option(
            "--zoom-out", "-zo", parser=parse_zoom_steps, help="Zoom out N steps"
        ),
    ] = 0,
    tz: TimezoneOption = None,
    left_width: Annotated[
        Optional[int],
        typer.Option("--left-width", "-lw", help="Width of left column for track titles"),
    ] = None,
) -> None:
    """Show the tasks of a file as a gantt chart grouped by project."""
    engine = _build_engine(
        task_file,
        tz,
        range_preset=range_preset,
        open_ids=open_ids,
        close_ids=close_ids,
        zoom_in_steps=zoom_in_steps,
        zoom_out_steps=zoom_out_steps,
    )
    config = CONFIGURATION_REPO.get_config()
    gantt_view(
        engine.layout(),
        console=Console(),
        left_column_width=left_width or config["left_column_width"],
        tz=engine.tz,
    )


def tracks(
    task_file: TaskFileArgument,
    tz: TimezoneOption = None,
) -> None:
    """Show the track tree of a file with track and element ids."""
    engine = _build_engine(task_file, tz)
    tracks_view(engine.layout(), console=Console(), tz=engine.tz)


def timebar(
    start: Annotated[
        pendulum.DateTime,
        typer.Argument(
            parser=parse_datetime,
            help="Window start (YYYY-MM-DD, today, now, or day offset like 1, -1)",
        ),
    ],
    end: Annotated[
        pendulum.DateTime,
        typer.Argument(
            parser=parse_datetime,
            help="Window end (YYYY-MM-DD, today, now, or day offset like 1, -1)",
        ),
    ],
    tz: TimezoneOption = None,
) -> None:
    """Show the month and week segments covering a window."""
    timezone = _resolve_timezone(tz or CONFIGURATION_REPO.get_config()["timezone"])
    if end < start:
        typer.echo("Error: end must not be before start", err=True)
        raise typer.Exit(1)

    segments = generate_timebar(
        {"start": start, "end": end, "now": pendulum.now("UTC")}, tz=timezone
    )
    timebar_view(segments, console=Console(), tz=timezone)
