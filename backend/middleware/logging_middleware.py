"""
Logging middleware for FastAPI
Logs all HTTP requests with timing, status codes, and context
"""
import re
import time
from typing import Callable, Optional, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from utils.logger import get_logger
from utils.log_context import generate_request_id, request_context

logger = get_logger(__name__)

# /api/{resource}/{website_id}[/{id}]
_RESOURCE_PATH = re.compile(r"^/api/(?P<resource>ftp|database|websites)/(?P<website_id>\d+)(?:/|$)")


def extract_website_context(path: str) -> Tuple[Optional[str], Optional[int]]:
    """
    Pull the resource name and website id out of a request path

    Returns:
        (resource, website_id), either of which may be None
    """
    match = _RESOURCE_PATH.match(path)
    if not match:
        return None, None
    return match.group("resource"), int(match.group("website_id"))


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests and responses with structured logging
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        req_id = request.headers.get("X-Request-ID") or generate_request_id()
        resource, website_id = extract_website_context(request.url.path)

        start_time = time.time()

        with request_context(request_id=req_id, website_id=website_id, resource=resource):
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = int((time.time() - start_time) * 1000)
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    duration_ms=duration_ms,
                    error=str(e),
                    exc_info=True
                )
                raise

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

            response.headers["X-Request-ID"] = req_id
            return response
