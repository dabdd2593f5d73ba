"""
Repositories for websites and their credential records
"""
from .results import OperationResult, ResultKind
from .website_service import WebsiteService
from .ftp_service import FTPService
from .database_login_service import DatabaseLoginService

__all__ = [
    "OperationResult",
    "ResultKind",
    "WebsiteService",
    "FTPService",
    "DatabaseLoginService"
]
