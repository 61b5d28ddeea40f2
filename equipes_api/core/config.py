"""
Configuration helpers for the equipes backend.

Routers/services receive a Settings object instead of fetching os.environ
directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

SAVE_MODES = ("open", "registered")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    database_sslmode: str
    cors_origin: str
    host: str
    port: int
    save_mode: str
    placeholder_credential: str
    log_level: str
    log_file: str | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    save_mode = (os.getenv("SAVE_MODE") or "open").strip().lower()
    if save_mode not in SAVE_MODES:
        raise RuntimeError(f"SAVE_MODE must be one of {', '.join(SAVE_MODES)} (got {save_mode!r}).")

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        database_sslmode=(os.getenv("DATABASE_SSLMODE") or "").strip(),
        cors_origin=os.getenv("CORS_ORIGIN", "https://tes-1-w5nn.onrender.com").rstrip("/"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        save_mode=save_mode,
        placeholder_credential=os.getenv("PLACEHOLDER_CREDENTIAL", "no_password_needed"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
