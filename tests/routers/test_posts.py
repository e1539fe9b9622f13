from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.routers import posts
from app.schemas.blog import PageContext, PostsPageProps
from app.services.posts_service import PageNotFound
from tests.conftest import FakePostsService, make_data


def make_app(fake_service: FakePostsService):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.include_router(posts.router)
    return app


def test_posts_index_renders_first_page():
    service = FakePostsService(html="<h1>Posts</h1>")
    client = TestClient(make_app(service))

    res = client.get("/posts")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert res.text == "<h1>Posts</h1>"
    assert service.pages == [1]


def test_posts_page_renders_requested_page():
    service = FakePostsService()
    client = TestClient(make_app(service))

    res = client.get("/posts/3")

    assert res.status_code == 200
    assert service.pages == [3]


def test_posts_page_returns_404_when_out_of_range():
    client = TestClient(make_app(FakePostsService(error=PageNotFound(9, 2))))

    res = client.get("/posts/9")

    assert res.status_code == 404
    assert res.json()["detail"] == "Page not found"


def test_posts_page_rejects_non_numeric_page():
    client = TestClient(make_app(FakePostsService()))
    assert client.get("/posts/abc").status_code == 422


def test_posts_page_passes_through_http_exception():
    error = HTTPException(status_code=418, detail="teapot")
    client = TestClient(make_app(FakePostsService(error=error)))

    res = client.get("/posts")

    assert res.status_code == 418
    assert res.json()["detail"] == "teapot"


def test_posts_page_returns_500_on_unexpected_error(caplog):
    client = TestClient(make_app(FakePostsService(error=RuntimeError("boom"))))

    with caplog.at_level("ERROR"):
        res = client.get("/posts/2")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to render posts"
    assert any("boom" in rec.message for rec in caplog.records)


def test_posts_props_returns_data_and_page_context():
    props = PostsPageProps(
        data=make_data(2),
        pageContext=PageContext(base="/posts", currentPage=2, pageCount=5),
    )
    service = FakePostsService(props=props)
    client = TestClient(make_app(service))

    res = client.get("/api/posts", params={"page": 2})

    assert res.status_code == 200
    body = res.json()
    assert body["pageContext"]["base"] == "/posts"
    assert body["pageContext"]["currentPage"] == 2
    assert body["pageContext"]["pageCount"] == 5
    edges = body["data"]["allMarkdownRemark"]["edges"]
    assert [e["node"]["id"] for e in edges] == ["id-1", "id-2"]
    assert service.pages == [2]


def test_posts_props_returns_404_when_out_of_range():
    client = TestClient(make_app(FakePostsService(error=PageNotFound(4, 1))))
    assert client.get("/api/posts", params={"page": 4}).status_code == 404


def test_posts_props_returns_500_on_unexpected_error():
    client = TestClient(make_app(FakePostsService(error=RuntimeError("boom"))))

    res = client.get("/api/posts")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to load posts"
