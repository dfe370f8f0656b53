# tests/test_render.py

from __future__ import annotations

from todo_client.connectors.render import MSG_EMPTY, MSG_LOADING, render_state
from todo_client.core.models import Task
from todo_client.core.state import ControllerState


def test_loading_hides_rows() -> None:
    out = render_state(ControllerState(tasks=(Task("1", "A"),), loading=True))
    assert out == MSG_LOADING


def test_empty_list_message() -> None:
    assert render_state(ControllerState()) == MSG_EMPTY


def test_error_is_shown_above_rows() -> None:
    snap = ControllerState(tasks=(Task("1", "A"),), error="Failed to add task (HTTP 500)")
    lines = render_state(snap).splitlines()
    assert lines[0] == "Error: Failed to add task (HTTP 500)"
    assert "A" in lines[1]


def test_rows_show_checkbox_and_strike_through_only_with_ansi() -> None:
    snap = ControllerState(tasks=(Task("1", "Open", False), Task("2", "Done", True)))

    plain = render_state(snap).splitlines()
    assert plain[0] == "  1. [ ] Open  (id=1)"
    assert plain[1] == "  2. [x] Done  (id=2)"

    fancy = render_state(snap, ansi=True).splitlines()
    assert "\033[9m" in fancy[1]
    assert "\033[9m" not in fancy[0]


def test_extra_server_fields_are_not_rendered() -> None:
    snap = ControllerState(tasks=(Task("1", "A", extra={"createdAt": "2024-01-01"}),))
    assert "createdAt" not in render_state(snap)
    assert "2024-01-01" not in render_state(snap)
