# SPDX-License-Identifier: MIT

from typing import Iterator, Optional

import pendulum
from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from trackline.color import BORDER_STYLES, rich_style
from trackline.model.layout import Layout
from trackline.model.timebar import TimebarSegment
from trackline.model.track import Element, Track
from trackline.view.header import header

DAYS_PER_WEEK = 7

OPEN_MARKER = "▾"
CLOSED_MARKER = "▸"

LEGEND = [
    ("green", "Completed"),
    ("blue", "In Progress"),
    ("gray", "To Do"),
    ("red", "Blocked"),
    ("purple", "Other"),
    ("slate", "Subtask"),
]


def days_per_column(zoom_factor: float) -> int:
    """One column per week at zoom 1, narrowing to one column per day."""
    return max(1, round(DAYS_PER_WEEK / zoom_factor))


def generate_columns(
    start: pendulum.DateTime, end: pendulum.DateTime, step_days: int
) -> list[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    Split the window into consecutive column intervals.

    Args:
        start: Window start
        end: Window end
        step_days: Number of days each column covers

    Returns:
        List of (column start, column end) pairs, end inclusive
    """
    columns = []
    current = start.start_of("day")
    while current <= end:
        column_end = current.add(days=step_days - 1).end_of("day")
        columns.append((current, column_end))
        current = current.add(days=step_days)
    return columns


def visible_tracks(
    tracks: list[Track], depth: int = 0
) -> Iterator[tuple[Track, int]]:
    """Yield tracks in display order, skipping the children of closed tracks."""
    for track in tracks:
        yield track, depth
        if track["has_children"] and track["is_open"]:
            yield from visible_tracks(track["tracks"], depth + 1)


def _column_index(
    columns: list[tuple[pendulum.DateTime, pendulum.DateTime]],
    instant: pendulum.DateTime,
) -> Optional[int]:
    for i, (column_start, column_end) in enumerate(columns):
        if column_start <= instant <= column_end:
            return i
    return None


def _format_left_column(track: Track, depth: int, left_column_width: int) -> str:
    marker = " "
    if track["has_children"]:
        marker = OPEN_MARKER if track["is_open"] else CLOSED_MARKER
    title = track["title"]
    if track["kind"] == "project":
        title = f"{title} ({track['task_count']})"

    left_col = f"{'  ' * depth}{marker} {title}"
    if len(left_col) > left_column_width:
        return left_col[: left_column_width - 3] + "..."
    return left_col.ljust(left_column_width)


def _build_label_row(
    segments: list[TimebarSegment],
    columns: list[tuple[pendulum.DateTime, pendulum.DateTime]],
    left_column_width: int,
    style: str,
) -> Text:
    cells = [" "] * len(columns)
    for segment in segments:
        first = _column_index(columns, segment["start"])
        if first is None and segment["start"] < columns[0][0]:
            first = 0
        if first is None:
            continue
        last = _column_index(columns, segment["end"])
        if last is None:
            last = len(columns) - 1
        # Segments sharing a column keep the first label
        while first <= last and cells[first] != " ":
            first += 1
        if first > last:
            continue
        span = last - first + 1
        label = segment["label"]
        if segment["granularity"] == "week":
            number = label.rsplit(" ", 1)[-1]
            label = f"W{number}" if span > len(number) else number
        label = label[:span].ljust(span)
        for offset, char in enumerate(label):
            if first + offset < len(cells):
                cells[first + offset] = char

    row = Text(" " * left_column_width)
    row.append("".join(cells), style=style)
    return row


def _build_track_row(
    track: Track,
    depth: int,
    columns: list[tuple[pendulum.DateTime, pendulum.DateTime]],
    now_column: Optional[int],
    left_column_width: int,
) -> Text:
    row = Text()
    element: Optional[Element] = track["elements"][0] if track["elements"] else None

    left_style = "bold" if track["kind"] == "project" else ""
    if element is not None and element["style"]["border"] is not None:
        left_style = BORDER_STYLES.get(element["style"]["border"], left_style)
    elif element is not None and element["style"]["muted"]:
        left_style = "dim"
    row.append(_format_left_column(track, depth, left_column_width), style=left_style)

    if element is None:
        for i in range(len(columns)):
            if i == now_column:
                row.append("│", style="red")
            else:
                row.append("·", style="dim")
        return row

    bar_style = rich_style(element["style"]["color"])
    if element["style"]["emphasized"]:
        bar_style += " bold"

    start_column = _column_index(columns, element["start"])
    end_column = _column_index(columns, element["end"])

    for i, (column_start, column_end) in enumerate(columns):
        overlaps = element["start"] <= column_end and element["end"] >= column_start
        if not overlaps:
            if i == now_column:
                row.append("│", style="red")
            else:
                row.append(" ")
            continue

        if start_column == i and end_column == i:
            row.append("●", style=bar_style)
        elif start_column == i:
            row.append("◄", style=bar_style)
        elif end_column == i:
            row.append("►", style=bar_style)
        else:
            row.append("━", style=bar_style)
    return row


def gantt_rows(layout: Layout, left_column_width: int = 40) -> list[Text]:
    """
    Build the header and track rows of a gantt chart for a layout.

    Columns cover the layout window and narrow as the zoom factor grows.
    Children of closed tracks are not shown.
    """
    columns = generate_columns(
        layout["start"], layout["end"], days_per_column(layout["zoom"]["factor"])
    )
    if not columns:
        return []

    months = [s for s in layout["timebar"] if s["granularity"] == "month"]
    weeks = [s for s in layout["timebar"] if s["granularity"] == "week"]

    rows = [
        _build_label_row(months, columns, left_column_width, "bold"),
        _build_label_row(weeks, columns, left_column_width, "dim"),
        Text("─" * (left_column_width + len(columns)), style="dim"),
    ]

    now_column = _column_index(columns, layout["now"])
    for track, depth in visible_tracks(layout["tracks"]):
        rows.append(
            _build_track_row(track, depth, columns, now_column, left_column_width)
        )
    return rows


def legend() -> Text:
    text = Text()
    for token, label in LEGEND:
        text.append("■ ", style=rich_style(token))
        text.append(f"{label}  ")
    text.append("▌", style=BORDER_STYLES["red"])
    text.append(" High priority  ")
    text.append("▌", style=BORDER_STYLES["amber"])
    text.append(" Medium priority")
    return text


def gantt_view(
    layout: Layout,
    console: Optional[Console] = None,
    left_column_width: int = 40,
    tz: str = "UTC",
) -> None:
    """
    Display a layout as a gantt chart.

    Args:
        layout: The render payload to draw
        console: Console to print on (defaults to a new one)
        left_column_width: Width of the left column for track titles
        tz: Timezone used for the displayed dates
    """
    if console is None:
        console = Console()

    header(console, "gantt")

    if not layout["tracks"]:
        console.print("\n[dim]No tasks in timeline[/dim]\n")
        return

    date_range_str = (
        f"{layout['start'].in_tz(tz).format('YYYY-MM-DD')} to "
        f"{layout['end'].in_tz(tz).format('YYYY-MM-DD')}"
    )
    console.print(
        f"\n[bold]{date_range_str}[/bold] (zoom: {layout['zoom']['factor']:.2f})\n"
    )

    chart = Group(*gantt_rows(layout, left_column_width))
    console.print(Padding(chart, (0, 0, 1, 0)), crop=False, soft_wrap=True)
    console.print(legend())
    console.print()
