"""Per-request id and access log line."""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from lunch_roulette.core.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id, reusing the caller's when it sends one.

    The id is published through ``request_id_var`` so every log line written
    while the search runs (entry, upstream failure, result count) carries it.
    """

    async def dispatch(self, request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.2f}ms",
            extra={
                "request_id": request_id,
                "duration_ms": duration_ms,
                "status_code": response.status_code,
                "has_coordinates": bool(
                    request.query_params.get("latitude") and request.query_params.get("longitude")
                ),
            },
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
