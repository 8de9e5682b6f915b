"""Request logging middleware"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api.access")

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with method, path, status code and duration

    The correlation ID comes from the incoming X-Correlation-ID header
    (or a new UUID-4) and is echoed on the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())

        start = time.monotonic()
        response = None
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            duration_ms = round((time.monotonic() - start) * 1000, 2)
            status_code = response.status_code if response is not None else 500
            logger.info(
                "%s %s -> %s (%.2f ms) correlation_id=%s",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                correlation_id,
            )
