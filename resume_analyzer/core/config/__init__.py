from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    trust_x_forwarded_for: bool
    cors_allowed_origins: tuple[str, ...]
    history_enabled: bool
    history_db_path: str
    history_retention_days: int
    resume_min_chars: int
    resume_max_chars: int
    stored_resume_chars: int
    stored_job_description_chars: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "10/minute") or "10/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
        ],
    ),
    history_enabled=_get_env_bool("HISTORY_ENABLED", True),
    history_db_path=_get_env("HISTORY_DB_PATH", "data/history.db") or "data/history.db",
    history_retention_days=_get_env_int("HISTORY_RETENTION_DAYS", 180),
    resume_min_chars=_get_env_int("RESUME_MIN_CHARS", 100),
    resume_max_chars=_get_env_int("RESUME_MAX_CHARS", 25000),
    stored_resume_chars=_get_env_int("STORED_RESUME_CHARS", 2000),
    stored_job_description_chars=_get_env_int("STORED_JOB_DESCRIPTION_CHARS", 1000),
)

if settings.resume_min_chars > settings.resume_max_chars:
    raise RuntimeError("RESUME_MIN_CHARS must not exceed RESUME_MAX_CHARS.")

__all__ = ["Settings", "settings"]
