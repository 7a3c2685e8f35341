# src/stmta/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing touches the network at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "STMTA"

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "todoApp"
DEFAULT_COLLECTION = "todos"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


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
    # ---- Logging ----
    log_level: str
    log_to_file: bool
    data_dir: Path

    # ---- Document store ----
    mongo_uri: str
    db_name: str
    collection_name: str
    server_timeout_ms: int

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_FILE"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path("~/.local/stmta").expanduser())

        mongo_uri = _first_env(_k("MONGO_URI"), "MONGODB_URI", default=DEFAULT_MONGO_URI) or DEFAULT_MONGO_URI
        db_name = _env(_k("DB_NAME"), DEFAULT_DB_NAME).strip() or DEFAULT_DB_NAME
        collection_name = _env(_k("COLLECTION"), DEFAULT_COLLECTION).strip() or DEFAULT_COLLECTION

        server_timeout_ms = _env_int(_k("SERVER_TIMEOUT_MS"), 5000)
        if server_timeout_ms <= 0:
            server_timeout_ms = 5000

        return Settings(
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            mongo_uri=mongo_uri.strip(),
            db_name=db_name,
            collection_name=collection_name,
            server_timeout_ms=server_timeout_ms,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
