# src/todo_client/connectors/render.py

from __future__ import annotations

from ..core.state import ControllerState

MSG_LOADING = "Loading tasks..."
MSG_EMPTY = "No tasks yet. Add one above!"

_STRIKE_ON = "\033[9m"
_DIM_ON = "\033[2m"
_RESET = "\033[0m"


def render_title(title: str, complete: bool, *, ansi: bool) -> str:
    if complete and ansi:
        return f"{_STRIKE_ON}{_DIM_ON}{title}{_RESET}"
    return title


def render_state(state: ControllerState, *, ansi: bool = False) -> str:
    """
    Text view of the list, in the same order the web page shows it:
    loading line, error line, then either the empty message or the rows.
    """
    lines: list[str] = []

    if state.loading:
        lines.append(MSG_LOADING)

    if state.error:
        lines.append(f"Error: {state.error}")

    if not state.loading:
        if not state.tasks:
            lines.append(MSG_EMPTY)
        else:
            for i, task in enumerate(state.tasks, start=1):
                box = "[x]" if task.is_complete else "[ ]"
                title = render_title(task.title, task.is_complete, ansi=ansi)
                lines.append(f"{i:>3}. {box} {title}  (id={task.id})")

    return "\n".join(lines)
