"""Request pipeline: route, call the handler, send its response.

Middleware wraps ``handle_request``; nothing in here knows about it.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from bookshelf._internal.asgi import Receive, Scope, Send
from bookshelf.errors import HTTPError
from bookshelf.http.request import Request
from bookshelf.http.response import Response
from bookshelf.routing.router import Router
from bookshelf.server.negotiation import negotiate
from bookshelf.server.sender import send_response

logger = logging.getLogger("bookshelf.server")


async def handle_request(scope: Scope, receive: Receive, send: Send, *, router: Router) -> None:
    """Answer one ``http`` scope.

    An ``HTTPError`` from the router or the handler is answered with its
    status and headers and no body. Other exceptions are not caught.
    """
    if scope["type"] != "http":
        return

    method, path = scope["method"], scope["path"]
    try:
        match = router.match(method, path)
        request = Request.from_scope(scope, match.path_params)
        response = negotiate(await call_handler(match.route.handler, request))
    except HTTPError as exc:
        logger.debug("%s %s answered %d: %s", method, path, exc.status, exc.detail)
        response = Response(status=exc.status, headers=exc.headers)

    await send_response(response, send, head=method == "HEAD")


async def call_handler(handler: Callable[..., Any], request: Request) -> Any:
    """Call *handler* with the arguments it names, awaiting a coroutine result.

    A parameter called ``request`` or annotated ``Request`` receives the
    request. A parameter named after the route's capture receives the
    captured value as the route's converter produced it: ``{id}`` gives
    ``str``, ``{id:int}`` gives ``int``. Annotations never convert.
    """
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in request.path_params:
            kwargs[name] = request.path_params[name]

    result = handler(**kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
