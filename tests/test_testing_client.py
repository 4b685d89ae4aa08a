"""Tests for bookshelf.testing — in-process ASGI TestClient."""

from bookshelf import App
from bookshelf.http.request import Request
from bookshelf.testing import TestClient


class TestTestClient:
    async def test_runs_lifecycle_hooks(self) -> None:
        app = App()
        events: list[str] = []

        @app.on_startup
        async def startup() -> None:
            events.append("startup")

        @app.on_shutdown
        def shutdown() -> None:
            events.append("shutdown")

        async with TestClient(app):
            assert events == ["startup"]
        assert events == ["startup", "shutdown"]

    async def test_query_string_split(self) -> None:
        app = App()

        @app.route("/search")
        def search(request: Request) -> str:
            return request.path

        async with TestClient(app) as client:
            response = await client.get("/search?q=dune")

        assert response.text == "/search"

    async def test_response_headers(self) -> None:
        app = App()

        @app.route("/v1/books", methods=["POST"])
        def create() -> tuple[str, int, dict[str, str]]:
            return "made", 201, {"X-Tag": "t"}

        async with TestClient(app) as client:
            response = await client.post("/v1/books")

        assert response.status == 201
        assert response.header("X-TAG") == "t"
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.header("content-length") == "4"
        assert response.header("x-missing") is None
