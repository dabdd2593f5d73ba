"""
System information and status schemas
"""
from pydantic import BaseModel


class BackendStatus(BaseModel):
    """Backend API status"""
    status: str  # 'connected' or 'error'
    latency: int  # milliseconds
    version: str


class DatabaseStatus(BaseModel):
    """Database status"""
    status: str
    connected: bool


class SystemStatusResponse(BaseModel):
    """System status response"""
    success: bool
    backend: BackendStatus
    database: DatabaseStatus


class SystemInfoResponse(BaseModel):
    """System information response"""
    success: bool
    platform_name: str
    tagline: str
    version: str
    fastapi_version: str
    python_version: str
    environment: str
