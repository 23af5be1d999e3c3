import json
import logging

import pytest
import structlog

from qservice.config import LoggingConfig, get_config, get_database_url, load_config, refresh_config_cache
from qservice.logging_setup import configure_logging

_ENV = [
    "APP_ENV", "SERVER_HOST", "GRPC_PORT", "HTTP_PORT", "GRPC_MAX_WORKERS", "DATABASE_URL",
    "POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB",
    "DB_POOL_SIZE", "DB_POOL_TIMEOUT", "DB_ECHO", "LOG_LEVEL", "LOG_FORMAT", "SHUTDOWN_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    refresh_config_cache()
    yield
    refresh_config_cache()


def test_defaults():
    cfg = load_config()
    assert cfg.env == "development"
    assert cfg.server.grpc_address == "0.0.0.0:50051"
    assert cfg.server.http_port == 3000
    assert cfg.server.grpc_max_workers == 10
    assert (cfg.database.pool_size, cfg.database.pool_timeout, cfg.database.echo) == (5, 30, False)
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.format == "text"
    assert cfg.shutdown_timeout_ms == 5000


def test_production_defaults_to_info(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert load_config().logging.level == "INFO"


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("GRPC_PORT", "abc")
    with pytest.raises(ValueError, match="GRPC_PORT must be a valid number"):
        load_config()


def test_invalid_env_and_format(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")
    with pytest.raises(ValueError):
        load_config()
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValueError):
        load_config()


def test_database_url_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL")
    for name, value in {
        "POSTGRES_USER": "u", "POSTGRES_PASSWORD": "p", "POSTGRES_HOST": "h",
        "POSTGRES_PORT": "5432", "POSTGRES_DB": "d",
    }.items():
        monkeypatch.setenv(name, value)
    assert get_database_url() == "postgresql://u:p@h:5432/d"


def test_missing_database_parts_are_all_named(monkeypatch):
    monkeypatch.delenv("DATABASE_URL")
    monkeypatch.setenv("POSTGRES_USER", "u")
    with pytest.raises(ValueError) as ei:
        get_database_url()
    msg = str(ei.value)
    assert msg.startswith("Missing required database environment variables:")
    for name in ("POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB"):
        assert name in msg
    assert "POSTGRES_USER" not in msg


def test_get_config_is_cached_until_refresh(monkeypatch):
    first = get_config()
    monkeypatch.setenv("HTTP_PORT", "8080")
    assert get_config() is first
    refresh_config_cache()
    assert get_config().server.http_port == 8080


def test_redacted_masks_password(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:secret@db:5432/q")
    monkeypatch.setenv("DB_ECHO", "true")
    cfg = load_config()
    assert cfg.database.echo is True
    assert cfg.redacted()["database"]["url"] == "postgresql://user:***@db:5432/q"


def test_json_logging_format():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(LoggingConfig(level="INFO", format="json"))
        formatter = root.handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
        record = logging.LogRecord("qservice.x", logging.INFO, __file__, 1, "event: k=%s", ("v",), None)
        payload = json.loads(formatter.format(record))
        assert payload["event"] == "event: k=v"
        assert payload["level"] == "info"
        assert payload["logger"] == "qservice.x"
        assert payload["timestamp"].endswith("Z")
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
