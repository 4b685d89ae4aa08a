"""Response recorder — observe what a handler chain sends.

Wraps an ASGI ``send`` callable. Every message is forwarded unchanged;
the recorder only keeps a copy of the status code and a count of body
bytes so outer middleware can report on them afterwards.
"""

from collections.abc import MutableMapping
from typing import Any

from bookshelf._internal.asgi import Send


class ResponseRecorder:
    """A pass-through ``send`` that remembers the response status.

    ``status`` is 200 until an ``http.response.start`` message goes
    through; from then on it holds the status that message carried.
    """

    __slots__ = ("body_bytes", "started", "status", "_send")

    def __init__(self, send: Send) -> None:
        self._send = send
        self.status: int = 200
        self.started: bool = False
        self.body_bytes: int = 0

    async def __call__(self, message: MutableMapping[str, Any]) -> None:
        msg_type = message["type"]
        if msg_type == "http.response.start":
            self.status = message["status"]
            self.started = True
        elif msg_type == "http.response.body":
            self.body_bytes += len(message.get("body", b""))
        await self._send(message)
