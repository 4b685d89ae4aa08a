"""Tests for bookshelf.middleware.recorder — pass-through status capture."""

from typing import Any

from bookshelf.middleware.recorder import ResponseRecorder


def _sink() -> tuple[list[dict[str, Any]], Any]:
    messages: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    return messages, send


class TestResponseRecorder:
    def test_defaults_to_200(self) -> None:
        _, send = _sink()
        recorder = ResponseRecorder(send)
        assert recorder.status == 200
        assert recorder.started is False
        assert recorder.body_bytes == 0

    async def test_records_explicit_status(self) -> None:
        _, send = _sink()
        recorder = ResponseRecorder(send)

        await recorder({"type": "http.response.start", "status": 201, "headers": []})

        assert recorder.status == 201
        assert recorder.started is True

    async def test_forwards_every_message_unchanged(self) -> None:
        messages, send = _sink()
        recorder = ResponseRecorder(send)
        start = {"type": "http.response.start", "status": 204, "headers": [(b"x-a", b"1")]}
        body = {"type": "http.response.body", "body": b""}

        await recorder(start)
        await recorder(body)

        assert messages == [start, body]
        assert messages[0] is start

    async def test_counts_body_bytes(self) -> None:
        _, send = _sink()
        recorder = ResponseRecorder(send)

        await recorder({"type": "http.response.start", "status": 200, "headers": []})
        await recorder({"type": "http.response.body", "body": b"hello ", "more_body": True})
        await recorder({"type": "http.response.body", "body": b"world"})

        assert recorder.body_bytes == 11

    async def test_body_without_start_keeps_default(self) -> None:
        _, send = _sink()
        recorder = ResponseRecorder(send)

        await recorder({"type": "http.response.body", "body": b"x"})

        assert recorder.status == 200
        assert recorder.started is False
