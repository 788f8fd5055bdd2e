from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.errors import DecodeError, RemoteRejected
from app.routers import articles
from app.schemas.post import ArticleContent, ArticleIndex, ArticleSummary
from tests.conftest import FakeIndexBuilder, FakePostsService


def make_app(builder=None, service=None):
    app = FastAPI()
    app.dependency_overrides[deps.get_index_builder] = lambda: builder or FakeIndexBuilder()
    app.dependency_overrides[deps.get_posts_service] = lambda: service or FakePostsService()
    app.include_router(articles.router)
    return app


def test_list_articles_returns_index():
    index = ArticleIndex(
        path="/content/blog",
        articles=[
            ArticleSummary(title="Beta", path="content/blog/b.md"),
            ArticleSummary(title="alpha", path="content/blog/a.md"),
        ],
    )
    builder = FakeIndexBuilder(index=index)
    client = TestClient(make_app(builder=builder))

    res = client.get("/articles", params={"path": "/content/blog"})

    assert res.status_code == 200
    body = res.json()
    assert body["path"] == "/content/blog"
    assert [a["title"] for a in body["articles"]] == ["Beta", "alpha"]
    assert builder.paths == ["/content/blog"]


def test_list_articles_requires_path():
    client = TestClient(make_app())

    res = client.get("/articles")

    assert res.status_code == 422


def test_list_articles_surfaces_listing_failure():
    builder = FakeIndexBuilder(error=RemoteRejected("Not Found", 404))
    client = TestClient(make_app(builder=builder))

    res = client.get("/articles", params={"path": "missing"})

    assert res.status_code == 502
    assert res.json()["detail"] == "Not Found"


def test_list_articles_returns_500_on_unexpected_error():
    client = TestClient(make_app(builder=FakeIndexBuilder(error=RuntimeError("boom"))))

    res = client.get("/articles", params={"path": "content"})

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve articles"


def test_get_article_success():
    article = ArticleContent(
        title="Hello",
        path="content/blog/hello.md",
        content="Body",
        html="<p>Body</p>",
    )
    client = TestClient(make_app(service=FakePostsService(article_return=article)))

    res = client.get(
        "/articles/content", params={"path": "content/blog/hello.md", "title": "Hello"}
    )

    assert res.status_code == 200
    assert res.json() == article.model_dump()


def test_get_article_reports_decode_error():
    service = FakePostsService(error=DecodeError("Could not decode file content"))
    client = TestClient(make_app(service=service))

    res = client.get("/articles/content", params={"path": "content/blog/x.md"})

    assert res.status_code == 502
    assert res.json()["detail"] == "Could not decode file content"
