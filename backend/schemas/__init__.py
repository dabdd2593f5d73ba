"""
Pydantic schemas for request/response serialization
"""
from .envelope import ApiResponse
from .website import (
    WebsiteBase,
    WebsiteCreate,
    WebsiteResponse
)
from .ftp_login import (
    FTP_TYPES,
    FTPLoginBase,
    FTPLoginCreate,
    FTPLoginUpdate,
    FTPLoginResponse
)
from .database_login import (
    DATABASE_TYPES,
    DatabaseLoginBase,
    DatabaseLoginCreate,
    DatabaseLoginUpdate,
    DatabaseLoginResponse
)

__all__ = [
    "ApiResponse",
    "WebsiteBase",
    "WebsiteCreate",
    "WebsiteResponse",
    "FTP_TYPES",
    "FTPLoginBase",
    "FTPLoginCreate",
    "FTPLoginUpdate",
    "FTPLoginResponse",
    "DATABASE_TYPES",
    "DatabaseLoginBase",
    "DatabaseLoginCreate",
    "DatabaseLoginUpdate",
    "DatabaseLoginResponse"
]
