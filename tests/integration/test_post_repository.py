import pytest

from qservice.db.repositories import SqlPostRepository
from qservice.domain import Post
from qservice.errors import NotFoundError

OTHER_AUTHOR = "0f8fad5b-d9cb-469f-a165-70867728950e"
MISSING_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"


@pytest.fixture
def repo(datasource):
    return SqlPostRepository(datasource)


def _post(author_id, title, ts):
    return Post(title=title, content="body", author_id=author_id, created_at=ts, updated_at=ts)


def test_create_and_find_one(repo, author_id):
    created = repo.create(Post(title="Hello", content="World", author_id=author_id))
    assert repo.find_one(created.id) == created
    assert repo.find_one(MISSING_ID) is None


def test_find_by_author_newest_first(repo, author_id):
    repo.create(_post(author_id, "old", "2024-01-01T00:00:00.000Z"))
    repo.create(_post(author_id, "new", "2024-03-01T00:00:00.000Z"))
    repo.create(_post(author_id, "mid", "2024-02-01T00:00:00.000Z"))
    repo.create(_post(OTHER_AUTHOR, "other", "2024-04-01T00:00:00.000Z"))
    assert [p.title for p in repo.find_by_author(author_id)] == ["new", "mid", "old"]
    assert repo.find_by_author(MISSING_ID) == []


def test_update(repo, author_id):
    created = repo.create(_post(author_id, "t", "2024-01-01T00:00:00.000Z"))
    updated = repo.update(created.id, {"title": "t2"})
    assert updated.title == "t2"
    assert updated.content == "body"
    assert updated.updated_at != "2024-01-01T00:00:00.000Z"
    assert updated.created_at == "2024-01-01T00:00:00.000Z"


def test_update_missing(repo):
    with pytest.raises(NotFoundError):
        repo.update(MISSING_ID, {"title": "x"})


def test_delete(repo, author_id):
    created = repo.create(Post(title="a", content="b", author_id=author_id))
    repo.delete(created.id)
    assert repo.find_one(created.id) is None
