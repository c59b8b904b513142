import logging
import time

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs method, path and elapsed time for every HTTP request."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send)
        finally:
            logger.info(
                "Request %s %s - Duration: %.6fs",
                scope["method"],
                scope["path"],
                time.perf_counter() - start,
            )
