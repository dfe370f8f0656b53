# src/todo_client/core/errors.py

"""
Error taxonomy for talking to the task backend.

All three causes reach the user as one flat message, but callers can still
tell them apart by type.
"""

from __future__ import annotations


class TaskApiError(Exception):
    """Base class for every failed backend call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(TaskApiError):
    """Transport failure: connection refused, DNS, reset, timeout."""


class HttpStatusError(TaskApiError):
    """Backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(TaskApiError):
    """Body is not JSON, has the wrong shape, or a record lacks id/title."""


def friendly_error_message(err: Exception, action: str | None = None) -> str:
    """
    One-line, user-facing description of a failure.

    `action` names what the user tried ("Failed to add task"); without it the
    error's own message is used.
    """
    if isinstance(err, TaskApiError):
        head = action or err.message
        if isinstance(err, NetworkError):
            return f"{head} (backend unreachable)"
        if isinstance(err, HttpStatusError):
            return f"{head} (HTTP {err.status_code})"
        if isinstance(err, MalformedPayloadError):
            return f"{head} (unexpected response)"
        return head
    msg = str(err).strip()
    return action or msg or "Unknown error."
