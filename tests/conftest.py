# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_client.core.controller import TaskListController
from todo_client.core.state import AppState

from .fakes import FakeTaskApi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        environment="test",
        api_base_url="http://backend.test/api",
        http_timeout_seconds=None,
        offline=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def seed_records() -> list[dict]:
    return [
        {"id": "1", "title": "Write report", "isComplete": False},
        {"id": "2", "title": "Call plumber", "isComplete": True},
        {"id": "3", "title": "Buy stamps", "isComplete": False},
    ]


@pytest.fixture()
def api(seed_records: list[dict]) -> FakeTaskApi:
    return FakeTaskApi([dict(r) for r in seed_records])


@pytest.fixture()
def controller(api: FakeTaskApi) -> TaskListController:
    return TaskListController(api)


@pytest.fixture()
def loaded(controller: TaskListController, api: FakeTaskApi) -> TaskListController:
    """Controller after a successful initial load; call log reset."""
    assert controller.load_all()
    api.calls.clear()
    return controller


@pytest.fixture()
def state(settings: SimpleNamespace, api: FakeTaskApi, loaded: TaskListController) -> AppState:
    return AppState(settings=settings, api=api, controller=loaded)
