"""Tests for the task file and configuration repositories."""

from pathlib import Path

import pendulum
import pytest

from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.repository.task import TaskFileError, TaskRepository
from trackline.service.layout import build_layout

TASKS_YAML = """
- id: 7
  title: Plan launch
  status: In Progress
  priority: High
  progress: 30
  created_time: 2024-03-15
  due_date: "2024-04-01T00:00:00Z"
  properties:
    Project:
      name: Launch
  subtasks:
    - title: Draft
    - Review
- title: Loose end
  created_time: not-a-date
  last_edited_time: 2024-03-20T09:00:00Z
"""


@pytest.fixture
def task_file(tmp_path: Path) -> Path:
    path = tmp_path / "tasks.yaml"
    path.write_text(TASKS_YAML)
    return path


class TestTaskRepository:
    def test_loads_and_fills_defaults(self, task_file):
        tasks = TaskRepository(task_file).get_all_tasks()

        assert len(tasks) == 2
        first, second = tasks
        assert first["id"] == "7"
        assert first["title"] == "Plan launch"
        assert first["is_completed"] is False
        assert first["subtasks"] == [{"title": "Draft"}, {"title": "Review"}]
        assert second["id"] == "2"
        assert second["status"] is None
        assert second["properties"] == {}
        assert second["subtasks"] == []
        assert second["progress"] == 0

    def test_loaded_tasks_lay_out(self, task_file):
        now = pendulum.datetime(2024, 3, 20, tz="UTC")
        layout = build_layout(TaskRepository(task_file).get_all_tasks(), now=now)

        assert [t["title"] for t in layout["tracks"]] == ["📁 Launch", "📁 General Tasks"]
        launch_task = layout["tracks"][0]["tracks"][0]
        assert launch_task["elements"][0]["end"] == pendulum.datetime(2024, 4, 1, tz="UTC")
        assert launch_task["elements"][0]["style"]["emphasized"] is True
        assert len(launch_task["tracks"]) == 2

        loose = layout["tracks"][1]["tracks"][0]["elements"][0]
        assert loose["start"] == pendulum.datetime(2024, 3, 20, 9, tz="UTC")
        assert loose["end"] == pendulum.datetime(2024, 3, 27, 9, tz="UTC")

    def test_json_is_accepted(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text('[{"title": "From JSON", "section": "Imports"}]')
        tasks = TaskRepository(path).get_all_tasks()
        assert tasks[0]["title"] == "From JSON"
        assert tasks[0]["section"] == "Imports"

    def test_empty_file_has_no_tasks(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert TaskRepository(path).get_all_tasks() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(TaskFileError):
            TaskRepository(tmp_path / "missing.yaml").get_all_tasks()

    def test_non_list_document(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("title: not a list\n")
        with pytest.raises(TaskFileError):
            TaskRepository(path).get_all_tasks()

    def test_non_mapping_entry(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("- just a string\n")
        with pytest.raises(TaskFileError):
            TaskRepository(path).get_all_tasks()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("- title: [unclosed\n")
        with pytest.raises(TaskFileError):
            TaskRepository(path).get_all_tasks()


class TestConfigurationRepository:
    def test_defaults_without_file(self, isolated_config):
        config = CONFIGURATION_REPO.get_config()
        assert config["timezone"] == "UTC"
        assert config["zoom_min"] == 1.0
        assert config["zoom_max"] == 20.0

    def test_missing_keys_are_filled(self, isolated_config):
        isolated_config.write_text("timezone: Europe/Berlin\n")
        config = CONFIGURATION_REPO.get_config()
        assert config["timezone"] == "Europe/Berlin"
        assert config["zoom_step"] == 1.2
        assert config["log_level"] == "WARNING"

    def test_update_and_flush(self, isolated_config):
        CONFIGURATION_REPO.update_config(zoom_max=10.0, log_level="debug")
        assert CONFIGURATION_REPO.flush() is True
        assert CONFIGURATION_REPO.flush() is False

        CONFIGURATION_REPO.reset()
        config = CONFIGURATION_REPO.get_config()
        assert config["zoom_max"] == 10.0
        assert config["log_level"] == "DEBUG"

    def test_get_config_returns_copy(self, isolated_config):
        config = CONFIGURATION_REPO.get_config()
        config["timezone"] = "Asia/Tokyo"
        assert CONFIGURATION_REPO.get_config()["timezone"] == "UTC"

    def test_non_mapping_file(self, isolated_config):
        isolated_config.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            CONFIGURATION_REPO.get_config()
