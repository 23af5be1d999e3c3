"""
Explicit dependency wiring.

`build_container()` constructs the datasource and repositories once at
process start; transports receive the container and build use cases per
request from it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from qservice.config import AppConfig, get_config
from qservice.db.database import Datasource
from qservice.db.repositories import SqlCategoryRepository, SqlPostRepository
from qservice.domain import CategoryRepository, PostRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    config: AppConfig
    datasource: Datasource
    category_repository: CategoryRepository
    post_repository: PostRepository

    def close(self) -> None:
        self.datasource.dispose()


def build_container(
    config: Optional[AppConfig] = None,
    datasource: Optional[Datasource] = None,
) -> ServiceContainer:
    config = config or get_config()
    datasource = datasource or Datasource.from_config(config.database)
    logger.info("container_built: env=%s dialect=%s", config.env, datasource.engine.dialect.name)
    return ServiceContainer(
        config=config,
        datasource=datasource,
        category_repository=SqlCategoryRepository(datasource),
        post_repository=SqlPostRepository(datasource),
    )
