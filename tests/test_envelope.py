from bson import ObjectId

from sbs.model.article import Article
from sbs.model.envelope import ArticleList, Envelope, IdOnly, NoData, SingleArticleList
from sbs.model.errors import BackendError, InputError, NotFoundError


def test_success_with_id_only_payload():
    oid = ObjectId()
    envelope = Envelope.success(IdOnly(oid))

    assert envelope.is_success
    assert envelope.data.kind == "id-only"
    assert envelope.to_dict() == {"status": 200, "message": "Success", "data": {"id": str(oid)}}


def test_single_article_list_wraps_article_in_list():
    article = Article(title="t", content="c", author="a", id=ObjectId())
    rendered = Envelope.success(SingleArticleList(article)).to_dict()

    assert rendered["data"] == [article.to_json()]


def test_empty_article_list_renders_empty_list():
    assert Envelope.success(ArticleList([])).to_dict()["data"] == []


def test_errors_map_to_status_and_null_data():
    for error, status in ((InputError("bad"), 400), (NotFoundError("gone"), 404), (BackendError("down"), 500)):
        rendered = Envelope.from_error(error).to_dict()
        assert rendered == {"status": status, "message": str(error), "data": None}


def test_failure_defaults_to_no_data():
    envelope = Envelope.failure(405, "nope")
    assert isinstance(envelope.data, NoData)
    assert not envelope.is_success
