"""
FTP Service - Repository for FTP login credentials
"""
from models import FTPLogin
from schemas.ftp_login import FTPLoginCreate, FTPLoginResponse, FTPLoginUpdate
from services.credential_service import CredentialService


class FTPService(CredentialService):
    """FTP logins stored in the ftp_data table"""

    model = FTPLogin
    create_schema = FTPLoginCreate
    update_schema = FTPLoginUpdate
    response_schema = FTPLoginResponse
