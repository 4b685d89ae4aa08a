"""Turn whatever a handler returned into a ``Response``."""

from collections.abc import Mapping
from typing import Any

from bookshelf.errors import ConfigurationError
from bookshelf.http.response import Response


def negotiate(value: Any) -> Response:
    """Map a handler's return value to a ``Response``.

    ==============================  ====================================
    ``Response``                    used as is
    ``None``                        200, empty body
    ``str``                         200, ``text/plain; charset=utf-8``
    ``bytes``                       200, ``application/octet-stream``
    ``(body, status)``              body as above, with *status*
    ``(body, status, headers)``     the same plus extra headers
    ==============================  ====================================
    """
    match value:
        case Response():
            return value
        case None:
            return Response()
        case str():
            return Response(value)
        case bytes():
            return Response(value, content_type="application/octet-stream")
        case (body, int() as status):
            return negotiate(body).with_status(status)
        case (body, int() as status, Mapping() as headers):
            return negotiate(body).with_status(status).with_headers(headers)
    msg = (
        f"Cannot convert {type(value).__name__} to a response; return str, "
        "bytes, None, a Response or a (body, status) tuple."
    )
    raise ConfigurationError(msg)
