# src/todo_client/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- picks the backend (HTTP or offline demo),
- wires the controller into AppState.
"""

from __future__ import annotations

import logging

from ..api.client import HttpTaskApi
from ..api.offline import OfflineTaskApi
from ..config import get_settings
from ..core.controller import TaskListController
from ..core.ports import TaskApi
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_api(settings) -> TaskApi:
    if getattr(settings, "offline", False):
        logger.info("Using offline in-memory backend.")
        return OfflineTaskApi()

    logger.info("Using backend %s", settings.api_base_url)
    return HttpTaskApi(settings.api_base_url, timeout_s=settings.http_timeout_seconds)


def create_initial_state(*, settings=None, ansi: bool = False) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    api = create_api(settings)
    return AppState(
        settings=settings,
        api=api,
        controller=TaskListController(api),
        ansi=ansi,
    )
