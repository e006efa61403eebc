"""Request Logging — one structured log line per HTTP request.

Invariants:
    - Every response carries an X-Request-ID header (echoed if the client sent one)
    - request.state.request_id is set before the route runs (error bodies echo it)
    - Logged fields: request_id, method, path, status, duration_ms
    - Requests that raise are logged with status 500 and the exception re-raised

Design Decisions:
    - Plain @app.middleware("http") over a BaseHTTPMiddleware subclass: no state to hold
"""

import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logging middleware to the app."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            logger.info(
                "http request",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status": status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )
