"""
Pydantic schemas for database login records

Field titles are the labels used in validation messages.
"""
from datetime import datetime
from typing import Literal, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validation import require_value

DatabaseType = Literal["mysql", "sqlite", "mssql", "oracle", "pgsql", "access", "other"]
DATABASE_TYPES = get_args(DatabaseType)


class DatabaseLoginBase(BaseModel):
    """Base schema for a database login"""
    type: str = Field(..., description="Type: mysql, sqlite, mssql, oracle, pgsql, access, other")
    database: Optional[str] = Field(None, description="Database name")
    hostname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    url: Optional[str] = Field(None, description="Admin panel URL (e.g. phpMyAdmin)")
    notes: Optional[str] = None


class DatabaseLoginCreate(BaseModel):
    """Schema for creating a database login (also checks a merged record on update)"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: DatabaseType = Field(..., title="Database type")
    database: Optional[str] = Field(None, title="Database", max_length=100)
    hostname: Optional[str] = Field(None, title="Hostname", max_length=100)
    username: Optional[str] = Field(None, title="Username", max_length=100)
    password: Optional[str] = Field(None, title="Password", max_length=100)
    url: Optional[str] = Field(None, title="URL", max_length=255)
    notes: Optional[str] = Field(None, title="Notes", max_length=65535)

    @field_validator("type", mode="before")
    @classmethod
    def type_required(cls, v):
        return require_value(v)


class DatabaseLoginUpdate(BaseModel):
    """Schema for updating a database login (all fields optional)"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: Optional[str] = None
    database: Optional[str] = None
    hostname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    url: Optional[str] = None
    notes: Optional[str] = None


class DatabaseLoginResponse(DatabaseLoginBase):
    """Schema for database login response"""
    id: int
    website_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
