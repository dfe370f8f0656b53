# src/todo_client/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No backend required at import time.
- Base URL resolution: explicit override -> production address -> local address.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

PRODUCTION_API_BASE_URL = "https://f8-zoom-node-day-1-backend.onrender.com/api"
LOCAL_API_BASE_URL = "http://localhost:3000/api"

_PRODUCTION_ENVS = {"production", "prod"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def resolve_api_base_url(override: str | None, environment: str) -> str:
    """
    Pick the backend base URL.

    An explicit override wins; otherwise production builds talk to the hosted
    backend and everything else to a local one.
    """
    if override is not None and override.strip():
        url = override.strip()
    elif environment.strip().lower() in _PRODUCTION_ENVS:
        url = PRODUCTION_API_BASE_URL
    else:
        url = LOCAL_API_BASE_URL
    return url.rstrip("/")


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    environment: str

    # ---- Backend ----
    api_base_url: str
    http_timeout_seconds: float | None
    offline: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in _PRODUCTION_ENVS

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        environment = _env(_k("ENV"), "development")

        api_base_url = resolve_api_base_url(os.getenv(_k("API_BASE_URL")), environment)
        # Unset means "no explicit timeout": failures come from the transport only.
        http_timeout_seconds = _env_float(_k("HTTP_TIMEOUT_SECONDS"), None)
        offline = _env_bool(_k("OFFLINE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            environment=environment,
            api_base_url=api_base_url,
            http_timeout_seconds=http_timeout_seconds,
            offline=offline,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
