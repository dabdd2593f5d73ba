"""
Pydantic schemas for FTP login records

Field titles are the labels used in validation messages.
"""
from datetime import datetime
from typing import Literal, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validation import require_value

FTPType = Literal["ftp", "sftp", "ftps", "webdav", "other"]
FTP_TYPES = get_args(FTPType)


class FTPLoginBase(BaseModel):
    """Base schema for an FTP login"""
    type: str = Field(..., description="Type: ftp, sftp, ftps, webdav, other")
    hostname: Optional[str] = Field(None, description="FTP server hostname")
    username: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = Field(None, description="Remote path to the document root")
    notes: Optional[str] = None


class FTPLoginCreate(BaseModel):
    """Schema for creating an FTP login (also checks a merged record on update)"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: FTPType = Field(..., title="FTP type")
    hostname: Optional[str] = Field(None, title="Hostname", max_length=100)
    username: Optional[str] = Field(None, title="Username", max_length=100)
    password: Optional[str] = Field(None, title="Password", max_length=100)
    path: Optional[str] = Field(None, title="Path", max_length=255)
    notes: Optional[str] = Field(None, title="Notes", max_length=65535)

    @field_validator("type", mode="before")
    @classmethod
    def type_required(cls, v):
        return require_value(v)


class FTPLoginUpdate(BaseModel):
    """Schema for updating an FTP login (all fields optional)"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: Optional[str] = None
    hostname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    notes: Optional[str] = None


class FTPLoginResponse(FTPLoginBase):
    """Schema for FTP login response"""
    id: int
    website_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
