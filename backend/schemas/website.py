"""
Website Pydantic schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validation import require_value


class WebsiteBase(BaseModel):
    name: str
    domain: Optional[str] = None
    notes: Optional[str] = None


class WebsiteCreate(BaseModel):
    """Schema for creating a website"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., title="Website name", max_length=255)
    domain: Optional[str] = Field(None, title="Domain", max_length=255)
    notes: Optional[str] = Field(None, title="Notes", max_length=65535)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v):
        return require_value(v)


class WebsiteResponse(WebsiteBase):
    """Schema for website response"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
