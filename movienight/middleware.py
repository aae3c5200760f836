import time
import uuid
import logging
from typing import Any, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

def _request_context(request: Request, request_id: str, started: float) -> Dict[str, Any]:
    return {
        "request_id": request_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
    }

class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a correlation id, echoed in the response headers
    and attached to each log line about the request.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            # Only reached when no exception handler produced a response
            context = _request_context(request, request_id, started)
            logger.error("Request failed", extra={**context, "error": str(e)})
            raise

        context = _request_context(request, request_id, started)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = str(context["duration_ms"])
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={**context, "status_code": response.status_code}
        )
        return response
