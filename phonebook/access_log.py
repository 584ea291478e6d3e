"""Per-request access logging.

Emits one line per HTTP request on the ``phonebook.access`` logger:

    POST /api/persons 201 61 - 4.2 ms {"name": "Ada", "number": "040-1234567"}
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger("phonebook.access")

MAX_LOGGED_BODY = 1024


class AccessLogMiddleware:
    """ASGI middleware that logs method, path, status, size, latency and request body."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        body = bytearray()
        status_code = 500
        content_length = "-"

        async def receive_wrapper():
            message = await receive()
            if message["type"] == "http.request" and len(body) < MAX_LOGGED_BODY:
                body.extend(message.get("body", b""))
            return message

        async def send_wrapper(message):
            nonlocal status_code, content_length
            if message["type"] == "http.response.start":
                status_code = message["status"]
                for name, value in message.get("headers", []):
                    if name.lower() == b"content-length":
                        content_length = value.decode("latin-1")
            await send(message)

        try:
            await self.app(scope, receive_wrapper, send_wrapper)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{scope['method']} {scope['path']} {status_code} {content_length} "
                f"- {elapsed_ms:.1f} ms {format_body(bytes(body))}"
            )


def format_body(body: bytes) -> str:
    """Request body as log text: ``-`` when empty, cut at MAX_LOGGED_BODY bytes."""
    if not body:
        return "-"
    text = body[:MAX_LOGGED_BODY].decode("utf-8", errors="replace")
    if len(body) > MAX_LOGGED_BODY:
        text += "..."
    return text
