"""FastAPI middleware for request tracing and metrics"""

import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from bonai_rewards.infrastructure.observability.metrics import request_duration_histogram

UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """
    Route template the request matched, e.g. /v1/brands/{index}/claim.

    Raw paths would open one label per brand index or per bogus URL, so
    requests no route matched share a single label.
    """
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, honouring one supplied by the client"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record latency per route template and log each completed request"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time
        endpoint = endpoint_label(request)
        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(duration)

        logging.getLogger("bonai_rewards.api").debug(
            "Request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "endpoint": endpoint,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 3),
            },
        )
        return response
