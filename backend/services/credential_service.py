"""
Credential Service - Shared repository logic for per-website credential records

Each resource (FTP logins, database logins) subclasses CredentialService and
declares its model plus the pydantic schemas used to validate and serialize it.
Operations never raise for expected outcomes; they return an OperationResult.
"""
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import Base
from services.results import OperationResult
from services.website_service import WebsiteService
from utils.logger import get_logger
from utils.validation import error_map, merge_errors

logger = get_logger(__name__)


class CredentialService:
    """Repository for one credential table, bound to an explicit database session"""

    model: ClassVar[Type[Base]]
    create_schema: ClassVar[Type[BaseModel]]
    update_schema: ClassVar[Type[BaseModel]]
    response_schema: ClassVar[Type[BaseModel]]

    def __init__(self, db: Session):
        self.db = db

    @property
    def fields(self) -> Tuple[str, ...]:
        """Whitelisted writable fields"""
        return tuple(self.create_schema.model_fields)

    def _serialize(self, instance) -> Dict[str, Any]:
        return self.response_schema.model_validate(instance).model_dump(mode="json")

    def _storage_failure(self, operation: str, error: SQLAlchemyError, **context) -> OperationResult:
        self.db.rollback()
        logger.error(
            "Credential storage operation failed",
            table=self.model.__tablename__,
            operation=operation,
            error=str(error),
            **context
        )
        return OperationResult.storage_error(str(error))

    def _find(self, record_id: int, website_id: Optional[int] = None):
        query = self.db.query(self.model).filter(self.model.id == record_id)
        if website_id:
            query = query.filter(self.model.website_id == website_id)
        return query.first()

    def list(self, website_id: int) -> OperationResult:
        """
        List every record belonging to a website, oldest first
        """
        try:
            records = (
                self.db.query(self.model)
                .filter(self.model.website_id == website_id)
                .order_by(self.model.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            return self._storage_failure("list", e, website_id=website_id)

        return OperationResult.success([self._serialize(record) for record in records])

    def details(self, record_id: int, website_id: Optional[int] = None) -> OperationResult:
        """
        Fetch one record, scoped to the website when website_id is given
        """
        try:
            record = self._find(record_id, website_id)
        except SQLAlchemyError as e:
            return self._storage_failure("details", e, record_id=record_id, website_id=website_id)

        if record is None:
            return OperationResult.not_found()
        return OperationResult.success(self._serialize(record))

    def check_website(self, website_id: Optional[int]) -> Dict[str, List[str]]:
        """Website id must be set and reference an existing website"""
        if not website_id:
            return {"website_id": ["Website is required."]}
        if not WebsiteService(self.db).website_exists(website_id):
            return {"website_id": ["Website does not exist."]}
        return {}

    def validate(
        self,
        website_id: Optional[int],
        data: Mapping[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Dict[str, List[str]]]:
        """
        Validate a full record against create_schema plus the website rule

        Returns:
            (values, errors): the whitelisted values when valid, and every
            violation found, keyed by field
        """
        values = None
        schema_errors: Dict[str, List[str]] = {}
        try:
            values = self.create_schema.model_validate(data).model_dump()
        except ValidationError as e:
            schema_errors = error_map(e, self.create_schema)

        errors = merge_errors(self.check_website(website_id), schema_errors)
        return (None if errors else values), errors

    def add(self, website_id: int, data: Optional[Mapping[str, Any]]) -> OperationResult:
        """
        Validate and insert a new record for a website

        Args:
            website_id: Owning website
            data: Incoming fields; anything outside the whitelist is ignored

        Returns:
            OperationResult with the created record (including its generated id)
        """
        try:
            values, errors = self.validate(website_id, data or {})
            if errors:
                return OperationResult.invalid(errors)

            record = self.model(website_id=website_id, **values)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            return self._storage_failure("add", e, website_id=website_id)

        return OperationResult.success(self._serialize(record))

    def update(self, record_id: int, website_id: int, data: Optional[Mapping[str, Any]]) -> OperationResult:
        """
        Merge the whitelisted incoming fields over an existing record and save it

        Fields absent from data keep their stored values. The merged record is
        validated as a whole before anything is written.
        """
        try:
            changes = self.update_schema.model_validate(data or {}).model_dump(exclude_unset=True)
        except ValidationError as e:
            return OperationResult.invalid(error_map(e, self.update_schema))

        try:
            record = self._find(record_id, website_id)
            if record is None:
                return OperationResult.not_found()

            merged = {field: getattr(record, field) for field in self.fields}
            merged.update(changes)

            values, errors = self.validate(website_id, merged)
            if errors:
                return OperationResult.invalid(errors)

            for field in changes:
                setattr(record, field, values[field])

            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            return self._storage_failure("update", e, record_id=record_id, website_id=website_id)

        return OperationResult.success(self._serialize(record))

    def delete(self, record_id: int) -> OperationResult:
        """
        Hard delete a record; deleting a missing record is not an error
        """
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == record_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            return self._storage_failure("delete", e, record_id=record_id)

        return OperationResult.success(deleted)
