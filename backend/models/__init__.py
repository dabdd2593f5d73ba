"""
SQLAlchemy models
"""
from .website import Website
from .ftp_login import FTPLogin
from .database_login import DatabaseLogin

__all__ = [
    "Website",
    "FTPLogin",
    "DatabaseLogin"
]
