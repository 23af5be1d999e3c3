import os

import pytest
from sqlalchemy import create_engine, inspect

from alembic import command
from alembic.config import Config

from qservice.db.database import Datasource
from qservice.db.repositories import SqlCategoryRepository, SqlPostRepository
from qservice.domain import Category, FindAllCategoriesInput, Post
from qservice.errors import AlreadyExistsError, BadRequestError

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(
        os.getenv("RUN_E2E_MIGRATIONS") != "1",
        reason="Set RUN_E2E_MIGRATIONS=1 to run PostgreSQL migration tests",
    ),
]

AUTHOR = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


def _repo_root() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _alembic_config() -> Config:
    # No ini file: keeps alembic from reconfiguring logging for the test run.
    cfg = Config()
    cfg.set_main_option("script_location", os.path.join(_repo_root(), "migrations"))
    return cfg


@pytest.fixture(scope="module")
def pg_url():
    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image) as pg:
        url = pg.get_connection_url()
        previous = os.environ.get("TEST_DATABASE_URL")
        os.environ["TEST_DATABASE_URL"] = url
        try:
            yield url
        finally:
            if previous is None:
                os.environ.pop("TEST_DATABASE_URL", None)
            else:
                os.environ["TEST_DATABASE_URL"] = previous


@pytest.fixture
def migrated(pg_url):
    cfg = _alembic_config()
    command.upgrade(cfg, "head")
    ds = Datasource(pg_url)
    yield ds
    ds.dispose()
    command.downgrade(cfg, "base")


def test_upgrade_creates_tables_and_downgrade_removes_them(pg_url):
    cfg = _alembic_config()
    engine = create_engine(pg_url)
    try:
        command.upgrade(cfg, "head")
        insp = inspect(engine)
        assert {"categories", "posts"} <= set(insp.get_table_names())
        index_names = {i["name"] for i in insp.get_indexes("categories")}
        assert {"uq_categories_name", "idx_categories_parent_id"} <= index_names

        command.downgrade(cfg, "base")
        insp = inspect(engine)
        assert "categories" not in insp.get_table_names()
        assert "posts" not in insp.get_table_names()
    finally:
        engine.dispose()


def test_repositories_against_postgres(migrated):
    categories = SqlCategoryRepository(migrated)
    math = categories.create(Category(name="Math"))
    algebra = categories.create(Category(name="Algebra", parent_id=math.id))

    assert categories.find_one_by_name("Math").id == math.id
    with pytest.raises(AlreadyExistsError):
        categories.create(Category(name="Math"))

    assert categories.validate_category_path([math.id, algebra.id]) is True
    assert categories.validate_category_path([algebra.id]) is False
    assert [c.name for c in categories.find_all(FindAllCategoriesInput(query="alg"))] == ["Algebra"]

    with pytest.raises(BadRequestError):
        categories.delete(math.id)

    posts = SqlPostRepository(migrated)
    created = posts.create(Post(title="t", content="c", author_id=AUTHOR))
    assert posts.find_by_author(AUTHOR) == [created]
