"""Permissive CORS headers on every HTTP response."""

from __future__ import annotations

from typing import Any

CORS_HEADERS: tuple[tuple[bytes, bytes], ...] = (
    (b"access-control-allow-origin", b"*"),
    (b"access-control-allow-methods", b"POST, GET, OPTIONS, PUT, DELETE"),
    (b"access-control-allow-headers", b"Content-Type"),
)
_CORS_HEADER_NAMES = frozenset(name for name, _ in CORS_HEADERS)


class CORSHeadersMiddleware:
    """Append fixed CORS headers to all responses, errors included.

    Pure ASGI so the headers are added whether or not the request carried an
    ``Origin`` header, unlike Starlette's ``CORSMiddleware``.
    """

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = [
                    (key, value)
                    for key, value in message.get("headers", [])
                    if key.lower() not in _CORS_HEADER_NAMES
                ]
                headers.extend(CORS_HEADERS)
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, send_with_headers)
