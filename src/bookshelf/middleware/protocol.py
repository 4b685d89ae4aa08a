"""The middleware shape.

A middleware receives the raw ASGI triple plus ``next``, the rest of the
chain. It may hand ``next`` a different ``send`` (the access log passes a
``ResponseRecorder``) and may act after ``next`` returns.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from bookshelf._internal.asgi import Receive, Scope, Send

Next: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


class Middleware(Protocol):
    """Any ``async (scope, receive, send, next) -> None`` callable.

    Functions and objects both qualify::

        async def server_header(scope, receive, send, next):
            async def tagged(message):
                if message["type"] == "http.response.start":
                    message["headers"] = [*message["headers"], (b"server", b"bookshelf")]
                await send(message)

            await next(scope, receive, tagged)
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send, next: Next) -> None: ...
