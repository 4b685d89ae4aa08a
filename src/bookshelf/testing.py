"""In-process client for exercising an app from async tests.

Requests go straight into the ASGI callable; nothing listens on a
socket. Entering the client runs the app's startup, leaving it runs the
shutdown hooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bookshelf.app import App


@dataclass(frozen=True, slots=True)
class TestResponse:
    """What the app sent back: status, header pairs and body bytes."""

    __test__ = False

    status: int
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode()

    @property
    def content_type(self) -> str | None:
        return self.header("content-type")

    def header(self, name: str) -> str | None:
        """First value of header *name*, case-insensitively."""
        name = name.lower()
        return next((value for key, value in self.headers if key == name), None)


class TestClient:
    """Drive an app through ASGI::

        async with TestClient(create_app()) as client:
            response = await client.get("/v1/healthcheck")
            assert response.text == "status: available\\n"
    """

    __test__ = False
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        await self.app.startup()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.app.shutdown()

    async def get(self, path: str) -> TestResponse:
        return await self.request("GET", path)

    async def head(self, path: str) -> TestResponse:
        return await self.request("HEAD", path)

    async def post(self, path: str) -> TestResponse:
        return await self.request("POST", path)

    async def put(self, path: str) -> TestResponse:
        return await self.request("PUT", path)

    async def delete(self, path: str) -> TestResponse:
        return await self.request("DELETE", path)

    async def request(self, method: str, path: str) -> TestResponse:
        """Send one request without a body and collect the reply."""
        path, _, query = path.partition("?")
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "scheme": "http",
            "path": path,
            "raw_path": path.encode(),
            "query_string": query.encode(),
            "headers": [],
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": b"", "more_body": False}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await self.app(scope, receive, send)

        (start,) = [m for m in sent if m["type"] == "http.response.start"]
        headers = tuple((k.decode("latin-1"), v.decode("latin-1")) for k, v in start["headers"])
        body = b"".join(m.get("body", b"") for m in sent if m["type"] == "http.response.body")
        return TestResponse(start["status"], headers, body)
