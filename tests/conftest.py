# tests/conftest.py
import mongomock
import pytest

from sbs import create_app
from sbs.model.database import Database


@pytest.fixture
def database():
    """Storage handle backed by an in-memory MongoDB."""
    db = Database(mongomock.MongoClient(), database_name="sbs_test", collection_name="articles")
    yield db
    db.close()


@pytest.fixture
def app(database):
    return create_app(database, {"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_article_payload() -> dict:
    return {
        "title": "Hello Mongo",
        "content": "Documents all the way down.",
        "author": "sbs",
    }


@pytest.fixture
def create_article(client):
    """Helper that POSTs a payload and returns the parsed envelope."""

    def _create(payload: dict) -> dict:
        response = client.post("/articles", json=payload)
        assert response.status_code == 200
        return response.get_json()

    return _create
