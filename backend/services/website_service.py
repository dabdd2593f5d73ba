"""
Website Service - Parent website records owning the credential tables
"""
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Website
from schemas.website import WebsiteCreate, WebsiteResponse
from services.results import OperationResult
from utils.logger import get_logger
from utils.validation import error_map

logger = get_logger(__name__)


class WebsiteService:
    """Service for website lookups and management"""

    def __init__(self, db: Session):
        self.db = db

    def _failure(self, operation: str, error: SQLAlchemyError, **context) -> OperationResult:
        self.db.rollback()
        logger.error("Website storage operation failed", operation=operation, error=str(error), **context)
        return OperationResult.storage_error(str(error))

    def get_website(self, website_id: int) -> Optional[Website]:
        """Return the website or None; storage errors propagate to the caller"""
        return self.db.query(Website).filter(Website.id == website_id).first()

    def website_exists(self, website_id: int) -> bool:
        return self.db.query(Website.id).filter(Website.id == website_id).count() > 0

    def list(self) -> OperationResult:
        try:
            websites = self.db.query(Website).order_by(Website.name.asc(), Website.id.asc()).all()
        except SQLAlchemyError as e:
            return self._failure("list", e)
        return OperationResult.success(
            [WebsiteResponse.model_validate(website).model_dump(mode="json") for website in websites]
        )

    def details(self, website_id: int) -> OperationResult:
        try:
            website = self.get_website(website_id)
        except SQLAlchemyError as e:
            return self._failure("details", e, website_id=website_id)
        if website is None:
            return OperationResult.not_found("Website not found")
        return OperationResult.success(WebsiteResponse.model_validate(website).model_dump(mode="json"))

    def add(self, data: Optional[Mapping[str, Any]]) -> OperationResult:
        try:
            values = WebsiteCreate.model_validate(data or {}).model_dump()
        except ValidationError as e:
            return OperationResult.invalid(error_map(e, WebsiteCreate))

        try:
            website = Website(**values)
            self.db.add(website)
            self.db.commit()
            self.db.refresh(website)
        except SQLAlchemyError as e:
            return self._failure("add", e)

        return OperationResult.success(WebsiteResponse.model_validate(website).model_dump(mode="json"))

    def delete(self, website_id: int) -> OperationResult:
        """Delete a website together with its credential records"""
        try:
            website = self.get_website(website_id)
            if website is None:
                return OperationResult.not_found("Website not found")
            self.db.delete(website)
            self.db.commit()
        except SQLAlchemyError as e:
            return self._failure("delete", e, website_id=website_id)
        return OperationResult.success()
