"""
Logging context management for propagating request information across logs
Uses contextvars for async-safe context propagation
"""
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Generator, Optional

import structlog

# Context variables for request tracking
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
website_id_var: ContextVar[Optional[int]] = ContextVar("website_id", default=None)


def generate_request_id() -> str:
    """Generate a short unique request ID"""
    return str(uuid.uuid4())[:8]


def get_request_id() -> Optional[str]:
    """Get current request ID from context"""
    return request_id_var.get()


def get_website_id() -> Optional[int]:
    """Get current website ID from context"""
    return website_id_var.get()


@contextmanager
def request_context(
    request_id: Optional[str] = None,
    website_id: Optional[int] = None,
    resource: Optional[str] = None
) -> Generator[str, None, None]:
    """
    Context manager for HTTP request tracking

    Args:
        request_id: Request ID (auto-generated if not provided)
        website_id: Website the request operates on, if any
        resource: Credential resource name (ftp, database), if any

    Yields:
        request_id: The request ID for this context

    Example:
        with request_context(website_id=1, resource="ftp") as req_id:
            logger.info("Processing request")
    """
    if request_id is None:
        request_id = generate_request_id()

    context: Dict[str, Any] = {"request_id": request_id}
    if website_id is not None:
        context["website_id"] = website_id
        website_id_var.set(website_id)
    if resource is not None:
        context["resource"] = resource

    request_id_var.set(request_id)
    structlog.contextvars.bind_contextvars(**context)

    try:
        yield request_id
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        request_id_var.set(None)
        if website_id is not None:
            website_id_var.set(None)
