"""
Website API endpoints (parent records for credentials)
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from api.responses import MAX_ID, WEBSITE_NOT_FOUND, envelope, failure_response, read_payload
from database import get_db
from services.results import ResultKind
from services.website_service import WebsiteService
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/websites", tags=["websites"])


@router.get("")
def list_websites(db: Session = Depends(get_db)):
    """List all websites"""
    result = WebsiteService(db).list()
    if not result.ok:
        return failure_response(result, WEBSITE_NOT_FOUND)
    return envelope(status.HTTP_200_OK, True, records=result.value)


@router.get("/{website_id}")
def get_website(website_id: int = Path(..., ge=1, le=MAX_ID), db: Session = Depends(get_db)):
    """Get a single website by ID"""
    result = WebsiteService(db).details(website_id)
    if not result.ok:
        return failure_response(result, WEBSITE_NOT_FOUND)
    return envelope(status.HTTP_200_OK, True, record=result.value)


@router.post("", status_code=status.HTTP_201_CREATED)
def add_website(payload: Dict[str, Any] = Depends(read_payload), db: Session = Depends(get_db)):
    """Create a new website"""
    result = WebsiteService(db).add(payload)
    if not result.ok:
        if result.kind == ResultKind.STORAGE_ERROR:
            logger.error("Error adding website", error=result.message)
        return failure_response(result, WEBSITE_NOT_FOUND)

    logger.info("Website added", website_id=result.value["id"])
    return envelope(
        status.HTTP_201_CREATED, True,
        message="Website has been added.",
        record=result.value
    )


@router.delete("/{website_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_website(website_id: int = Path(..., ge=1, le=MAX_ID), db: Session = Depends(get_db)):
    """Delete a website and every credential record it owns"""
    result = WebsiteService(db).delete(website_id)
    if not result.ok:
        if result.kind == ResultKind.STORAGE_ERROR:
            logger.error("Error deleting website", website_id=website_id, error=result.message)
        return failure_response(result, WEBSITE_NOT_FOUND)

    logger.info("Website deleted", website_id=website_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
