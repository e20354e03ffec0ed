# src/taskflow/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every key has a default, malformed values fall back to it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKFLOW"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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
    log_to_file: bool
    data_dir: Path

    # ---- Console output ----
    show_banner: bool
    clear_screen: bool
    color: bool

    # ---- Terminal input ----
    escape_timeout: float

    @property
    def log_file(self) -> Path:
        return self.data_dir / "taskflow.log"

    @staticmethod
    def from_env() -> "Settings":
        # NO_COLOR (https://no-color.org) wins over TASKFLOW_COLOR.
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        return Settings(
            app_name=_env(_k("APP_NAME"), "TaskFlow"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskflow")),
            show_banner=_env_bool(_k("SHOW_BANNER"), True),
            clear_screen=_env_bool(_k("CLEAR_SCREEN"), True),
            color=color,
            escape_timeout=_env_float(_k("ESCAPE_TIMEOUT"), 0.05),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
