import logging

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from resumatch.core.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """Reject request bodies larger than ``max_size_mb`` with a 413.

    A declared ``Content-Length`` is checked up front. Bodies sent without
    one (chunked uploads) are read and counted before the app sees them.
    """

    def __init__(self, app: ASGIApp, max_size_mb: int) -> None:
        self.app = app
        self.max_size_mb = max_size_mb
        self.max_bytes = max_size_mb * 1024 * 1024

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > self.max_bytes:
                await self._reject(scope, receive, send)
                return
            await self.app(scope, receive, send)
            return

        buffered: list[Message] = []
        received = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_bytes:
                await self._reject(scope, receive, send)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        error = PayloadTooLargeError(self.max_size_mb)
        logger.warning("%s %s rejected: %s", scope.get("method"), scope.get("path"), error.detail)
        response = JSONResponse(status_code=error.status_code, content={"error": error.detail})
        await response(scope, receive, send)
