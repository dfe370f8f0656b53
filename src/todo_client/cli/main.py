# src/todo_client/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task list once,
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, stdout_supports_ansi
from ..connectors.render import MSG_LOADING
from ..core.state import AppState, ControllerState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.api.close()
    except Exception:
        logger.debug("API client close failed.", exc_info=True)


def _announce_loading(snapshot: ControllerState) -> None:
    if snapshot.loading:
        print(MSG_LOADING, flush=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings, ansi=stdout_supports_ansi())

    def _handle_sigterm(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise SystemExit(0)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not available on every platform / outside the main thread.
        pass

    try:
        unsubscribe = state.controller.subscribe(_announce_loading)
        state.controller.load_all()
        unsubscribe()

        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
