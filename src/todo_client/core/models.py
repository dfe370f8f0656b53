# src/todo_client/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Wire names used by the backend.
FIELD_ID = "id"
FIELD_TITLE = "title"
FIELD_IS_COMPLETE = "isComplete"

_KNOWN_FIELDS = {FIELD_ID, FIELD_TITLE, FIELD_IS_COMPLETE}


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item as returned by the backend.

    Notes:
    - id is assigned by the backend and never changes.
    - extra keeps any additional server fields (createdAt, ...) for debugging;
      they are never sent back or rendered.
    """

    id: str
    title: str
    is_complete: bool = False
    extra: dict[str, Any] = field(default_factory=dict, compare=False)


def _coerce_id(raw: Any) -> str | None:
    # bool is an int subclass; True is not an id.
    if isinstance(raw, bool):
        return None
    # 0 is falsy on the wire and treated as a missing id.
    if isinstance(raw, int) and raw != 0:
        return str(raw)
    if isinstance(raw, str) and raw:
        return raw
    return None


def task_from_payload(raw: Any) -> Task | None:
    """Parse one server record. Returns None for malformed records."""
    if not isinstance(raw, dict):
        return None

    task_id = _coerce_id(raw.get(FIELD_ID))
    if task_id is None:
        return None

    title = raw.get(FIELD_TITLE)
    if not isinstance(title, str) or not title:
        return None

    extra = {k: v for k, v in raw.items() if k not in _KNOWN_FIELDS}
    return Task(
        id=task_id,
        title=title,
        is_complete=bool(raw.get(FIELD_IS_COMPLETE) or False),
        extra=extra,
    )


def tasks_from_payload(items: list[Any]) -> list[Task]:
    """Keep only well-formed records, in server order."""
    out: list[Task] = []
    for item in items:
        task = task_from_payload(item)
        if task is not None:
            out.append(task)
    return out


def create_body(title: str) -> dict[str, Any]:
    return {FIELD_TITLE: title}


def update_body(title: str, is_complete: bool) -> dict[str, Any]:
    # The backend expects the whole record on PUT.
    return {FIELD_TITLE: title, FIELD_IS_COMPLETE: is_complete}
