# src/peanut/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from the environment after startup.
- Every knob has a sane default, so a bare `peanut` just works.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from . import __version__

ENV_PREFIX = "PEANUT"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    version: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    # ---- Console behaviour ----
    page_size: int
    list_errors_fatal: bool
    reset_page_on_filter: bool
    single_key_menus: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "peanut").strip() or "peanut"
        version = _env(_k("VERSION"), __version__).strip() or __version__
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/peanut"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "peanut.sqlite3")

        # A page of zero rows would make next/prev meaningless.
        page_size = max(1, _env_int(_k("PAGE_SIZE"), 10))

        # Historically a failed list query ended the whole session, keep that by default.
        list_errors_fatal = _env_bool(_k("LIST_ERRORS_FATAL"), True)
        reset_page_on_filter = _env_bool(_k("RESET_PAGE_ON_FILTER"), False)
        single_key_menus = _env_bool(_k("SINGLE_KEY_MENUS"), True)

        return Settings(
            app_name=app_name,
            version=version,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            page_size=page_size,
            list_errors_fatal=list_errors_fatal,
            reset_page_on_filter=reset_page_on_filter,
            single_key_menus=single_key_menus,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
