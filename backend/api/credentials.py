"""
API routes for per-website credential records (FTP logins, database logins)

Every resource exposes the same five endpoints:
    GET    /api/{resource}/{website_id}        list
    GET    /api/{resource}/{website_id}/{id}   details
    POST   /api/{resource}/{website_id}        add
    PUT    /api/{resource}/{website_id}/{id}   update
    DELETE /api/{resource}/{website_id}/{id}   delete
"""
from typing import Any, Dict, Type

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from api.responses import MAX_ID, envelope, failure_response, read_payload, website_not_found
from database import get_db
from services.credential_service import CredentialService
from services.database_login_service import DatabaseLoginService
from services.ftp_service import FTPService
from services.results import ResultKind
from services.website_service import WebsiteService
from utils.logger import get_logger

logger = get_logger(__name__)


def create_credential_router(resource: str, service_class: Type[CredentialService], label: str) -> APIRouter:
    """
    Build the CRUD router for one credential resource

    Args:
        resource: URL segment (e.g. "ftp")
        service_class: Repository bound to the resource's table
        label: Human-readable name used in messages (e.g. "FTP login")
    """
    router = APIRouter(prefix=f"/api/{resource}", tags=[resource])
    not_found_message = f"{label} credentials not found"

    def _website_exists(db: Session, website_id: int) -> bool:
        return WebsiteService(db).get_website(website_id) is not None

    @router.get("/{website_id}", name=f"list_{resource}")
    def list_records(
        website_id: int = Path(..., ge=1, le=MAX_ID),
        db: Session = Depends(get_db)
    ):
        """
        List all records for a website
        """
        if not _website_exists(db, website_id):
            return website_not_found()

        result = service_class(db).list(website_id)
        if not result.ok:
            logger.error(f"Error listing {label}s", website_id=website_id, error=result.message)
            return failure_response(result, not_found_message)

        return envelope(status.HTTP_200_OK, True, records=result.value)

    @router.get("/{website_id}/{record_id}", name=f"get_{resource}")
    def get_record(
        website_id: int = Path(..., ge=1, le=MAX_ID),
        record_id: int = Path(..., ge=1, le=MAX_ID),
        db: Session = Depends(get_db)
    ):
        """
        Get a single record, scoped to its website
        """
        if not _website_exists(db, website_id):
            return website_not_found()

        result = service_class(db).details(record_id, website_id)
        if not result.ok:
            return failure_response(result, not_found_message)

        return envelope(status.HTTP_200_OK, True, record=result.value)

    @router.post("/{website_id}", name=f"add_{resource}", status_code=status.HTTP_201_CREATED)
    def add_record(
        website_id: int = Path(..., ge=1, le=MAX_ID),
        payload: Dict[str, Any] = Depends(read_payload),
        db: Session = Depends(get_db)
    ):
        """
        Add a new record to a website (form-encoded or JSON body)
        """
        if not _website_exists(db, website_id):
            return website_not_found()

        result = service_class(db).add(website_id, payload)
        if not result.ok:
            if result.kind == ResultKind.STORAGE_ERROR:
                logger.error(f"Error adding {label}", website_id=website_id, error=result.message)
            return failure_response(result, not_found_message)

        logger.info(f"{label} added", record_id=result.value["id"], website_id=website_id)
        return envelope(
            status.HTTP_201_CREATED, True,
            message=f"{label} has been added.",
            record=result.value
        )

    @router.put("/{website_id}/{record_id}", name=f"update_{resource}")
    @router.patch("/{website_id}/{record_id}", include_in_schema=False)
    def update_record(
        website_id: int = Path(..., ge=1, le=MAX_ID),
        record_id: int = Path(..., ge=1, le=MAX_ID),
        payload: Dict[str, Any] = Depends(read_payload),
        db: Session = Depends(get_db)
    ):
        """
        Update a record (only the fields sent are changed)
        """
        if not _website_exists(db, website_id):
            return website_not_found()

        result = service_class(db).update(record_id, website_id, payload)
        if not result.ok:
            if result.kind == ResultKind.STORAGE_ERROR:
                logger.error(f"Error updating {label}", record_id=record_id, website_id=website_id, error=result.message)
            return failure_response(result, not_found_message)

        logger.info(f"{label} updated", record_id=record_id, website_id=website_id)
        return envelope(
            status.HTTP_200_OK, True,
            message=f"{label} has been updated.",
            record=result.value
        )

    @router.delete("/{website_id}/{record_id}", name=f"delete_{resource}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_record(
        website_id: int = Path(..., ge=1, le=MAX_ID),
        record_id: int = Path(..., ge=1, le=MAX_ID),
        db: Session = Depends(get_db)
    ):
        """
        Delete a record
        """
        if not _website_exists(db, website_id):
            return website_not_found()

        service = service_class(db)
        existing = service.details(record_id, website_id)
        if not existing.ok:
            return failure_response(existing, not_found_message)

        result = service.delete(record_id)
        if not result.ok:
            logger.error(f"Error deleting {label}", record_id=record_id, website_id=website_id, error=result.message)
            return failure_response(result, not_found_message)

        logger.info(f"{label} deleted", record_id=record_id, website_id=website_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


ftp_router = create_credential_router("ftp", FTPService, "FTP login")
database_router = create_credential_router("database", DatabaseLoginService, "Database login")
