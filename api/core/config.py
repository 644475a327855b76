"""
Environment-driven settings.

Every value has a local-development default so the service starts against a
stock PostgreSQL on localhost. Set `DATABASE_URL` to override the discrete
DB_* fields in one go.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only query params such as sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class DatabaseSettings:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "123456"
    database: str = "shop_order_db"
    charset: str = "UTF8"
    dsn: str | None = None
    min_size: int = 1
    max_size: int = 5
    command_timeout: int = 30

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        url = os.environ.get("DATABASE_URL", "").strip()
        return cls(
            host=_env_str("DB_HOST", cls.host),
            port=_env_int("DB_PORT", cls.port),
            user=_env_str("DB_USER", cls.user),
            password=_env_str("DB_PASSWORD", cls.password),
            database=_env_str("DB_NAME", cls.database),
            charset=_env_str("DB_CHARSET", cls.charset),
            dsn=_sanitize_database_url(url) if url else None,
            min_size=_env_int("DB_POOL_MIN_SIZE", cls.min_size),
            max_size=_env_int("DB_POOL_MAX_SIZE", cls.max_size),
            command_timeout=_env_int("DB_COMMAND_TIMEOUT", cls.command_timeout),
        )

    def describe(self) -> str:
        """
        host/database of the effective target, without credentials.
        """
        if self.dsn:
            parts = urlsplit(self.dsn)
            return f"{parts.hostname or '?'}/{parts.path.lstrip('/') or '?'}"
        return f"{self.host}/{self.database}"

    def pool_kwargs(self) -> dict:
        """
        Keyword arguments for `asyncpg.create_pool`.
        """
        kwargs: dict = {
            "min_size": self.min_size,
            "max_size": self.max_size,
            "command_timeout": self.command_timeout,
            "server_settings": {"client_encoding": self.charset},
        }
        if self.dsn:
            kwargs["dsn"] = self.dsn
        else:
            kwargs.update(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database,
            )
        return kwargs


@dataclass(frozen=True)
class Settings:
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    log_level: str = "INFO"
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            database=DatabaseSettings.from_env(),
            api_host=_env_str("API_HOST", defaults.api_host),
            api_port=_env_int("API_PORT", defaults.api_port),
            log_level=_env_str("LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=_env_list("CORS_ORIGINS", defaults.cors_origins),
        )
