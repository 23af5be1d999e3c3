"""
Runtime configuration sourced from environment variables.

Loaded once and cached; call `refresh_config_cache()` after changing the
environment (tests do this via monkeypatch).
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Literal, Optional


@dataclass(frozen=True)
class ServerConfig:
    host: str
    grpc_port: int
    http_port: int
    grpc_max_workers: int

    @property
    def grpc_address(self) -> str:
        return f"{self.host}:{self.grpc_port}"


@dataclass(frozen=True)
class DatabaseConfig:
    url: str
    pool_size: int
    pool_timeout: int
    echo: bool


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    format: Literal["text", "json"]


@dataclass(frozen=True)
class AppConfig:
    env: Literal["development", "production"]
    server: ServerConfig
    database: DatabaseConfig
    logging: LoggingConfig
    shutdown_timeout_ms: int

    def redacted(self) -> dict:
        """Config as a dict with the database password masked."""
        data = asdict(self)
        data["database"]["url"] = _redact_url(self.database.url)
        return data


def _get_env(key: str, default: Optional[str] = None) -> str:
    value = os.getenv(key)
    if value is None or value == "":
        if default is None:
            raise ValueError(f"Environment variable {key} is required")
        return default
    return value


def _get_env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {key} must be a valid number") from None


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _redact_url(url: str) -> str:
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    creds, host = rest.rsplit("@", 1)
    user = creds.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


def get_database_url() -> str:
    """DATABASE_URL if set, otherwise assembled from the POSTGRES_* parts."""
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    parts = {
        "POSTGRES_USER": os.getenv("POSTGRES_USER"),
        "POSTGRES_PASSWORD": os.getenv("POSTGRES_PASSWORD"),
        "POSTGRES_HOST": os.getenv("POSTGRES_HOST"),
        "POSTGRES_PORT": os.getenv("POSTGRES_PORT"),
        "POSTGRES_DB": os.getenv("POSTGRES_DB"),
    }
    missing = [name for name, value in parts.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{parts['POSTGRES_USER']}:{parts['POSTGRES_PASSWORD']}"
        f"@{parts['POSTGRES_HOST']}:{parts['POSTGRES_PORT']}/{parts['POSTGRES_DB']}"
    )


def load_config() -> AppConfig:
    env = _get_env("APP_ENV", "development")
    if env not in ("development", "production"):
        raise ValueError(f"APP_ENV must be 'development' or 'production', got {env!r}")

    log_format = _get_env("LOG_FORMAT", "text").lower()
    if log_format not in ("text", "json"):
        raise ValueError(f"LOG_FORMAT must be 'text' or 'json', got {log_format!r}")

    return AppConfig(
        env=env,
        server=ServerConfig(
            host=_get_env("SERVER_HOST", "0.0.0.0"),
            grpc_port=_get_env_int("GRPC_PORT", 50051),
            http_port=_get_env_int("HTTP_PORT", 3000),
            grpc_max_workers=_get_env_int("GRPC_MAX_WORKERS", 10),
        ),
        database=DatabaseConfig(
            url=get_database_url(),
            pool_size=_get_env_int("DB_POOL_SIZE", 5),
            pool_timeout=_get_env_int("DB_POOL_TIMEOUT", 30),
            echo=_normalize_bool(os.getenv("DB_ECHO"), default=False),
        ),
        logging=LoggingConfig(
            level=_get_env("LOG_LEVEL", "DEBUG" if env == "development" else "INFO").upper(),
            format=log_format,
        ),
        shutdown_timeout_ms=_get_env_int("SHUTDOWN_TIMEOUT", 5000),
    )


@lru_cache(maxsize=None)
def get_config() -> AppConfig:
    return load_config()


def refresh_config_cache() -> None:
    get_config.cache_clear()
