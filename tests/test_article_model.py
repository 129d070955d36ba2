import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect, PyMongoError

from sbs.model.article import Article
from sbs.model.article_model import ArticleModel
from sbs.model.errors import BackendError, NotFoundError


@pytest.fixture
def article_model(database) -> ArticleModel:
    return ArticleModel(database)


@pytest.fixture
def article(sample_article_payload) -> Article:
    return Article.from_json(sample_article_payload)


def test_insert_then_get_returns_same_fields(article_model, article):
    article_id = article_model.insert_article(article)

    stored = article_model.get_article_by_id(article_id)

    assert stored.id == article_id
    assert (stored.title, stored.content, stored.author) == (article.title, article.content, article.author)


def test_get_unknown_id_raises_not_found(article_model):
    with pytest.raises(NotFoundError):
        article_model.get_article_by_id(ObjectId())


def test_get_backend_failure_is_not_reported_as_not_found(article_model, database, mocker):
    mocker.patch.object(database.articles, "find_one", side_effect=AutoReconnect("connection reset"))

    with pytest.raises(BackendError) as exc_info:
        article_model.get_article_by_id(ObjectId())
    assert "connection reset" in str(exc_info.value)


def test_insert_failure_raises_backend_error(article_model, article, database, mocker):
    mocker.patch.object(database.articles, "insert_one", side_effect=PyMongoError("write refused"))

    with pytest.raises(BackendError):
        article_model.insert_article(article)


def test_get_all_articles_empty(article_model):
    assert article_model.get_all_articles() == []


def test_get_all_articles_returns_every_document(article_model, article):
    ids = {article_model.insert_article(Article(article.title, article.content, article.author)) for _ in range(3)}

    assert {a.id for a in article_model.get_all_articles()} == ids


def test_get_all_articles_aborts_on_undecodable_document(article_model, article, database):
    article_model.insert_article(article)
    database.articles.insert_one({"title": ["not", "text"], "content": "c", "author": "a"})

    with pytest.raises(BackendError):
        article_model.get_all_articles()


def test_get_all_articles_aborts_on_cursor_failure(article_model, database, mocker):
    def failing_cursor():
        yield {"_id": ObjectId(), "title": "t", "content": "c", "author": "a"}
        raise PyMongoError("cursor died")

    cursor = mocker.MagicMock()
    cursor.__enter__.return_value = failing_cursor()
    cursor.__exit__.return_value = False
    mocker.patch.object(database.articles, "find", return_value=cursor)

    with pytest.raises(BackendError):
        article_model.get_all_articles()
    cursor.__exit__.assert_called_once()
