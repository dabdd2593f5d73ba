"""
Database Login Service - Repository for database login credentials
"""
from models import DatabaseLogin
from schemas.database_login import DatabaseLoginCreate, DatabaseLoginResponse, DatabaseLoginUpdate
from services.credential_service import CredentialService


class DatabaseLoginService(CredentialService):
    """Database logins stored in the database_data table"""

    model = DatabaseLogin
    create_schema = DatabaseLoginCreate
    update_schema = DatabaseLoginUpdate
    response_schema = DatabaseLoginResponse
