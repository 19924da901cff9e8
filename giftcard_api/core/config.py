"""
Configuration helpers for the gift card backend.

Exposes a frozen Settings object read from environment variables (port,
admin credentials, storage paths, CORS) so that routers/services do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    admin_username: str
    admin_password: str
    admin_password_hash: str
    data_dir: str
    static_dir: str
    cors_origins: tuple[str, ...]
    log_level: str

    @property
    def uses_default_credentials(self) -> bool:
        return (
            self.admin_username == DEFAULT_ADMIN_USERNAME
            and self.admin_password == DEFAULT_ADMIN_PASSWORD
            and not self.admin_password_hash
        )


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    def _level(value: str | None, default: str = "INFO") -> str:
        level = (value or "").strip().upper()
        return level if level in LOG_LEVELS else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        admin_username=os.getenv("ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME),
        admin_password=os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
        admin_password_hash=(os.getenv("ADMIN_PASSWORD_HASH") or "").strip(),
        data_dir=os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data")),
        static_dir=os.getenv("STATIC_DIR", os.path.join(os.getcwd(), "web")),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=_level(os.getenv("LOG_LEVEL")),
    )
