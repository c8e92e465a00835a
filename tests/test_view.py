"""Tests for the rich terminal views."""

import pendulum
import pytest
from rich.console import Console

from trackline.service.layout import build_layout
from trackline.service.timebar import generate_timebar
from trackline.service.zoom import make_zoom_state
from trackline.view import state as view_state
from trackline.view.gantt import (
    days_per_column,
    gantt_rows,
    gantt_view,
    generate_columns,
    visible_tracks,
)
from trackline.view.timebar import timebar_view
from trackline.view.tracks import tracks_view


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=200, color_system=None)


@pytest.fixture
def layout(make_task, now):
    tasks = [
        make_task(
            title="Build",
            status="In Progress",
            priority="High",
            created_time="2024-03-01",
            due_date="2024-03-20",
            section="Alpha",
            subtasks=[{"title": "Wire up"}],
        ),
        make_task(title="Test", created_time="2024-03-05", section="Beta"),
    ]
    return build_layout(tasks, now=now)


class TestColumns:
    def test_days_per_column_narrows_with_zoom(self):
        assert days_per_column(1) == 7
        assert days_per_column(1.728) == 4
        assert days_per_column(7) == 1
        assert days_per_column(20) == 1

    def test_columns_cover_window(self):
        start = pendulum.datetime(2024, 2, 1, tz="UTC")
        end = pendulum.datetime(2024, 2, 29, tz="UTC").end_of("day")
        columns = generate_columns(start, end, 7)
        assert len(columns) == 5
        assert columns[0][0] == start
        assert columns[-1][1] >= end


class TestVisibleTracks:
    def test_closed_tracks_hide_children(self, make_task, now):
        tasks = [
            make_task(created_time="2024-03-01", section="A", subtasks=[{"title": "s"}])
        ]
        layout = build_layout(tasks, now=now)
        assert [t["id"] for t, _ in visible_tracks(layout["tracks"])] == [
            "project-0",
            "task-0-0",
        ]

        layout = build_layout(tasks, open_state={"task-0-0": True}, now=now)
        assert [(t["id"], d) for t, d in visible_tracks(layout["tracks"])] == [
            ("project-0", 0),
            ("task-0-0", 1),
            ("subtask-0-0-0", 2),
        ]

        layout = build_layout(tasks, open_state={"project-0": False}, now=now)
        assert [t["id"] for t, _ in visible_tracks(layout["tracks"])] == ["project-0"]


class TestGanttView:
    def test_rows(self, layout):
        rows = gantt_rows(layout, left_column_width=30)
        plain = [row.plain for row in rows]

        # two label rows, separator, two projects and two tasks
        assert len(plain) == 7
        assert "February 2024"[:4] in plain[0]
        assert plain[1][30:].startswith("12345")
        assert plain[3].startswith("▾ 📁 Alpha (1)")
        assert "Build" in plain[4]
        assert "◄" in plain[4] and "►" in plain[4]

    def test_render(self, layout, console):
        view_state.set_show_header(True)
        gantt_view(layout, console=console, left_column_width=30)
        output = console.export_text()
        assert "trackline" in output
        assert "2024-02-01 to 2024-05-31" in output
        assert "High priority" in output
        assert "Test" in output

    def test_render_empty(self, console, now):
        gantt_view(build_layout([], now=now), console=console)
        assert "No tasks in timeline" in console.export_text()

    def test_zoomed_layout_has_more_columns(self, make_task, now):
        tasks = [make_task(created_time="2024-03-01")]
        wide = gantt_rows(build_layout(tasks, now=now))
        narrow = gantt_rows(
            build_layout(tasks, zoom=make_zoom_state(7, 1, 20), now=now)
        )
        assert len(narrow[2].plain) > len(wide[2].plain)


class TestOtherViews:
    def test_tracks_view_lists_all_ids(self, layout, console):
        tracks_view(layout, console=console)
        output = console.export_text()
        for track_id in ["project-0", "task-0-0", "subtask-0-0-0", "project-1"]:
            assert track_id in output
        assert "element-task-0-0" in output

    def test_timebar_view(self, console):
        window = {
            "start": pendulum.datetime(2024, 2, 1, tz="UTC"),
            "end": pendulum.datetime(2024, 2, 29, tz="UTC"),
            "now": pendulum.datetime(2024, 2, 1, tz="UTC"),
        }
        timebar_view(generate_timebar(window), console=console)
        output = console.export_text()
        assert "February 2024" in output
        assert "Week 5" in output
        assert "2024-02-29" in output
