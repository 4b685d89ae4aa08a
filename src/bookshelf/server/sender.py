"""Write a ``Response`` to an ASGI ``send`` callable."""

from bookshelf._internal.asgi import Send
from bookshelf.http.response import Response


def has_body(status: int) -> bool:
    """1xx, 204 and 304 responses never carry content (RFC 9110)."""
    return status >= 200 and status not in (204, 304)


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* as one start message and one body message.

    Bodiless statuses get neither ``content-type`` nor ``content-length``.
    For *head* the headers describe the body a GET would get, and the body
    itself is left out.
    """
    headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    ]
    body = b""
    if has_body(response.status):
        body = response.encode()
        headers.append((b"content-type", response.content_type.encode("latin-1")))
        headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
