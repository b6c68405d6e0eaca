import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class ProcessingTimeMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, slow_request_ms: float = 1000):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        processing_time = (time.perf_counter() - start_time) * 1000
        if processing_time > self.slow_request_ms:
            logger.warning(
                "Slow request %s %s took %.2f ms",
                request.method,
                request.url.path,
                processing_time,
            )

        response.headers["X-Process-Time-MS"] = str(round(processing_time, 2))

        return response
