# src/termtodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default, so a bare `termtodo` just works.
- Paths live under a gitignored local data dir unless overridden.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TERMTODO"
DEFAULT_APP_NAME = "Rusty To-Do List"


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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    log_dir: Path

    # ---- UI ----
    startup_delay: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), DEFAULT_APP_NAME).strip() or DEFAULT_APP_NAME
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/termtodo"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.db")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        # Seconds the loading placeholder stays up; 0 shows the list immediately.
        startup_delay = _env_float(_k("STARTUP_DELAY"), 5.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            log_dir=log_dir,
            startup_delay=startup_delay,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
