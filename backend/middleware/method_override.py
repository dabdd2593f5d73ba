"""
HTTP method override middleware
Lets form-only clients send PUT/PATCH/DELETE as a POST
"""
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from utils.logger import get_logger

logger = get_logger(__name__)

OVERRIDE_HEADER = "X-HTTP-Method-Override"
OVERRIDE_PARAM = "_method"
ALLOWED_OVERRIDES = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """
    Rewrite POST requests carrying an X-HTTP-Method-Override header
    (or a _method query parameter) to the requested method
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST":
            override = request.headers.get(OVERRIDE_HEADER) or request.query_params.get(OVERRIDE_PARAM)
            if override and override.upper() in ALLOWED_OVERRIDES:
                # call_next forwards this same scope to the router
                request.scope["method"] = override.upper()
                logger.debug("HTTP method overridden", path=request.url.path, method=override.upper())

        return await call_next(request)
