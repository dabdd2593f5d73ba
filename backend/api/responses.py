"""
Helpers shared by the routers: JSON envelopes and request body parsing
"""
import json
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from schemas.envelope import ApiResponse
from services.results import OperationResult, ResultKind
from utils.logger import get_logger

logger = get_logger(__name__)

WEBSITE_NOT_FOUND = "Website not found"

# Largest value a BIGINT primary key can hold
MAX_ID = 2 ** 63 - 1


def envelope(
    status_code: int,
    success: bool,
    message: Optional[str] = None,
    record: Optional[Dict[str, Any]] = None,
    records: Optional[List[Dict[str, Any]]] = None,
    errors: Optional[Dict[str, List[str]]] = None
) -> JSONResponse:
    """Build a JSONResponse carrying the standard envelope"""
    body = ApiResponse(
        success=success,
        message=message,
        record=record,
        records=records,
        errors=errors
    )
    return JSONResponse(status_code=status_code, content=body.to_content())


def website_not_found() -> JSONResponse:
    return envelope(status.HTTP_404_NOT_FOUND, False, message=WEBSITE_NOT_FOUND)


def failure_response(result: OperationResult, not_found_message: str) -> JSONResponse:
    """
    Map a failed OperationResult to its HTTP response

    NOT_FOUND -> 404, VALIDATION_ERROR -> 400 with errors, anything else -> 500
    """
    if result.kind == ResultKind.NOT_FOUND:
        return envelope(status.HTTP_404_NOT_FOUND, False, message=result.message or not_found_message)
    if result.kind == ResultKind.VALIDATION_ERROR:
        return envelope(status.HTTP_400_BAD_REQUEST, False, message=result.message, errors=result.errors)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, False, message=result.message)


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Dependency reading the request body as a flat dict

    Form-encoded (or multipart) bodies are the primary format; JSON objects
    are accepted as well. An empty body yields an empty dict.

    Raises:
        HTTPException: 400 for JSON that does not parse or is not an object,
            415 for a non-empty body in any other content type
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}

    if content_type.startswith("application/json"):
        try:
            payload = json.loads(body)
        except ValueError:
            logger.warning("Malformed JSON body", path=request.url.path)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body")
        if not isinstance(payload, dict):
            logger.warning("JSON body is not an object", path=request.url.path)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="JSON body must be an object")
        return payload

    logger.warning("Unsupported request body", path=request.url.path, content_type=content_type)
    raise HTTPException(
        status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        detail=f"Unsupported content type: {content_type or 'none'}"
    )
