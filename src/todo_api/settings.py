from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import ConfigError

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DATABASE_URL: connection string passed to the database driver (required)
    - DB_DRIVER: database driver identifier, e.g. 'sqlite3' (required)
    - PORT: HTTP listen port. Default 5000
    - HOST: HTTP listen address. Default '0.0.0.0'
    - LOG_LEVEL: root logging level. Default 'INFO'
    """

    database_url: str
    db_driver: str
    port: int
    host: str
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _require_env(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise ConfigError(f"environment variable {name} is not set")
    return value


def _parse_port(value: str) -> int:
    try:
        port = int(value.strip())
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer, got {value!r}") from e
    if not (1 <= port <= 65535):
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


# PUBLIC_INTERFACE
def load_env_file(path: Union[str, Path, None] = None) -> bool:
    """
    Seed os.environ from a local KEY=VALUE file (default: ./.env).

    Blank lines and '#' comments are skipped and surrounding quotes are
    stripped. Variables already present in the environment are left untouched.

    Returns:
        True if the file existed and was read, False otherwise.
    """
    env_file = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_file.is_file():
        return False
    with open(env_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                value = value.strip().strip("'\"")
                os.environ.setdefault(key.strip(), value)
    return True


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables.

    Raises:
        ConfigError: if DATABASE_URL or DB_DRIVER is missing, or PORT is invalid.
    """
    database_url = _require_env("DATABASE_URL")
    db_driver = _require_env("DB_DRIVER").lower()
    port = _parse_port(_get_env("PORT", str(DEFAULT_PORT)))
    host = _get_env("HOST", DEFAULT_HOST).strip()
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        database_url=database_url,
        db_driver=db_driver,
        port=port,
        host=host,
        log_level=log_level,
    )
