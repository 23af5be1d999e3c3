import os

import pytest

from qservice.config import AppConfig, DatabaseConfig, LoggingConfig, ServerConfig
from qservice.container import build_container
from qservice.db.database import Datasource

# Config loading in tests must never require real POSTGRES_* parts.
os.environ.setdefault("DATABASE_URL", "sqlite://")

AUTHOR_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        env="development",
        server=ServerConfig(host="127.0.0.1", grpc_port=0, http_port=0, grpc_max_workers=4),
        database=DatabaseConfig(url="sqlite://", pool_size=5, pool_timeout=30, echo=False),
        logging=LoggingConfig(level="DEBUG", format="text"),
        shutdown_timeout_ms=1000,
    )


@pytest.fixture
def datasource(app_config):
    """Fresh in-memory SQLite schema per test."""
    ds = Datasource.from_config(app_config.database)
    ds.create_schema()
    yield ds
    ds.dispose()


@pytest.fixture
def container(app_config, datasource):
    return build_container(app_config, datasource)


@pytest.fixture
def author_id() -> str:
    return AUTHOR_ID
