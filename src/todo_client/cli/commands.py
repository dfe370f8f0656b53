# src/todo_client/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.render import render_state
from ..core.models import Task
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that get the rest of the line untouched as args[0].
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.update(n.lower() for n in [name, *aliases])

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        if name in self._raw:
            args = line[1:].lstrip().split(None, 1)[1:]
        else:
            args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other text is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _view(state: AppState) -> str:
    return render_state(state.controller.state, ansi=state.ansi)


def resolve_task(state: AppState, ref: str) -> Task | None:
    """
    Find a task by 1-based row number (as shown by /list) or by id.
    Row numbers win when both could match.
    """
    tasks = state.controller.state.tasks
    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1]
    return state.controller.state.find(ref)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _view(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    title = args[0] if args else ""
    if not title.strip():
        return "Usage: /add <title>"
    state.controller.add_task(title)
    return _view(state)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle 2     -> flip row 2
    /toggle <id>  -> flip task by id
    """
    if not args:
        return "Usage: /toggle <row|id>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task matches '{args[0]}'."
    state.controller.toggle_task(task.id, task.is_complete, task.title)
    return _view(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <row|id>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task matches '{args[0]}'."
    state.controller.delete_task(task.id)
    return _view(state)


def cmd_reload(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    logger.debug("Reload requested.")
    if emit is not None:
        emit("Loading tasks...")
    state.controller.load_all()
    return _view(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    snap = state.controller.state
    done = sum(1 for t in snap.tasks if t.is_complete)
    backend = "offline (in-memory)" if getattr(settings, "offline", False) else getattr(settings, "api_base_url", "?")
    return (
        "Status:\n"
        f"  Backend: {backend}\n"
        f"  Environment: {getattr(settings, 'environment', '?')}\n"
        f"  Tasks: {len(snap.tasks)} ({done} done)\n"
        f"  Last error: {snap.error or '-'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", raw=True)
registry.register(
    "toggle", cmd_toggle, help_text="Mark done/undone: /toggle <row|id>.", aliases=["done", "x"]
)
registry.register("rm", cmd_delete, help_text="Delete a task: /rm <row|id>.", aliases=["del", "delete"])
registry.register("reload", cmd_reload, help_text="Fetch the full list from the backend again.")
registry.register("status", cmd_status, help_text="Show backend and list status.")
