"""
Environment-driven settings.

Everything is read lazily so tests can tweak `os.environ` before the app
touches the database.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def app_env() -> str:
    return os.environ.get("APP_ENV", "development").strip().lower() or "development"


def is_testing() -> bool:
    return app_env() == "test"


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's sslmode parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    """
    DSN for the active environment.

    APP_ENV=test reads TEST_DATABASE_URL so the suite never touches the
    development database.
    """
    name = "TEST_DATABASE_URL" if is_testing() else "DATABASE_URL"
    url = os.environ.get(name, "").strip()
    if not url:
        raise RuntimeError(f"{name} is not set.")
    return _sanitize_database_url(url)


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 1)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), pool_min_size())


def command_timeout() -> float:
    return _env_float("DB_COMMAND_TIMEOUT", 30.0)


def create_schema_on_startup() -> bool:
    return _env_bool("DB_CREATE_SCHEMA")


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
