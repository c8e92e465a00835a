"""Shared fixtures for trackline tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pendulum
import pytest

from trackline import configuration
from trackline.model.task import Task
from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.template.task import get_task_template


@pytest.fixture
def now() -> pendulum.DateTime:
    """A pinned current instant."""
    return pendulum.datetime(2024, 3, 20, 12, 0, tz="UTC")


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build a task record from the template with overrides."""
    counter = {"value": 0}

    def _make_task(**overrides: Any) -> Task:
        counter["value"] += 1
        task = get_task_template()
        task["id"] = f"t{counter['value']}"
        task["title"] = f"Task {counter['value']}"
        task.update(overrides)  # type: ignore[typeddict-item]
        return task

    return _make_task


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration at a temporary file and reset the repository."""
    config_path = tmp_path / "config" / "config.yaml"
    config_path.parent.mkdir(parents=True)
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    CONFIGURATION_REPO.reset()
    yield config_path
    CONFIGURATION_REPO.reset()
