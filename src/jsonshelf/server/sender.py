"""Writes a Response to the ASGI ``send`` channel."""

from jsonshelf._internal.asgi import Send
from jsonshelf.http.response import Response

# statuses that never carry a message body, besides the 1xx range
_BODILESS = frozenset({204, 304})


def _encode(name: str, value: str) -> tuple[bytes, bytes]:
    return name.lower().encode("latin-1"), value.encode("latin-1")


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Emit ``http.response.start`` then a single ``http.response.body``.

    ``content-length`` always describes the body a GET would receive;
    with *head* set the body message is empty. Bodies attached to 1xx,
    204 or 304 responses are dropped.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODILESS else response.body

    headers = [_encode("content-type", response.content_type)]
    headers.extend(_encode(name, value) for name, value in response.headers)
    headers.append(_encode("content-length", str(len(body))))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
