# src/todo_client/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .render import render_state

logger = logging.getLogger(__name__)

PROMPT = "New task> "


def _print_view(state: AppState) -> None:
    print(render_state(state.controller.state, ansi=state.ansi), flush=True)


def handle_line(state: AppState, line: str) -> str:
    """
    One round of the form: slash commands go to the registry, any other text
    is submitted as a new task title. Returns what should be printed.
    """

    def emit(text: str) -> None:
        # Immediate feedback before a blocking request.
        print(text, flush=True)

    try:
        cmd_response = command_registry.handle(state, line, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    state.controller.set_draft(line)
    state.controller.add_task()
    return render_state(state.controller.state, ansi=state.ansi)


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    logger.info("Console connector started.")
    print(f"[{app_name}] Type a task and press Enter to add it. Use /help for commands, /exit to quit.\n")

    _print_view(state)

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        print(handle_line(state, user_input), flush=True)

    logger.info("Console connector finished.")


def stdout_supports_ansi() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
