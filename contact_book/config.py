"""Configuration helpers for the contact book."""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_STORAGE_DIR = Path(__file__).resolve().parents[1] / "contacts_store"
DEFAULT_API_URL = "http://localhost:3000/api/contacts"

# Connection constants for the contacts database; env vars override them.
DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = 3306
DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = "sa123"
DEFAULT_DB_NAME = "AntigravityMVC"

DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 3000


class ConfigError(RuntimeError):
    """Raised when configuration values are invalid."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration shared by the CLI, the models and the API."""

    environment: str = "local"
    storage_dir: Path = DEFAULT_STORAGE_DIR
    storage_force_memory: bool = False
    api_url: str = DEFAULT_API_URL
    api_timeout: Optional[float] = None
    db_host: str = DEFAULT_DB_HOST
    db_port: int = DEFAULT_DB_PORT
    db_user: str = DEFAULT_DB_USER
    db_password: str = DEFAULT_DB_PASSWORD
    db_name: str = DEFAULT_DB_NAME
    database_url: Optional[str] = None
    server_host: str = DEFAULT_SERVER_HOST
    server_port: int = DEFAULT_SERVER_PORT
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _float_env(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(*, dotenv: bool = True) -> Settings:
    """Load settings from environment variables.

    Args:
        dotenv: Read a ``.env`` file from the working directory first. Values
            already present in the environment win.

    Returns:
        Settings with every default applied.

    Raises:
        ConfigError: if a numeric variable cannot be parsed.
    """

    if dotenv:
        load_dotenv(override=False)

    database_url = os.getenv("CONTACTS_DATABASE_URL", "").strip() or None

    return Settings(
        environment=os.getenv("CONTACTS_ENV", "local"),
        storage_dir=Path(os.getenv("CONTACTS_STORAGE_DIR", DEFAULT_STORAGE_DIR)),
        storage_force_memory=os.getenv("CONTACTS_STORAGE_FORCE_MEMORY", "0") == "1",
        api_url=os.getenv("CONTACTS_API_URL", DEFAULT_API_URL).rstrip("/"),
        api_timeout=_float_env("CONTACTS_API_TIMEOUT"),
        db_host=os.getenv("CONTACTS_DB_HOST", DEFAULT_DB_HOST),
        db_port=_int_env("CONTACTS_DB_PORT", DEFAULT_DB_PORT),
        db_user=os.getenv("CONTACTS_DB_USER", DEFAULT_DB_USER),
        db_password=os.getenv("CONTACTS_DB_PASSWORD", DEFAULT_DB_PASSWORD),
        db_name=os.getenv("CONTACTS_DB_NAME", DEFAULT_DB_NAME),
        database_url=database_url,
        server_host=os.getenv("CONTACTS_SERVER_HOST", DEFAULT_SERVER_HOST),
        server_port=_int_env("CONTACTS_SERVER_PORT", DEFAULT_SERVER_PORT),
        log_level=os.getenv("CONTACTS_LOG_LEVEL", "INFO").upper(),
    )
