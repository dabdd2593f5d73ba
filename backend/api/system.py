"""
System status and information endpoints
"""
import platform
import time

import fastapi
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from schemas.system import BackendStatus, DatabaseStatus, SystemInfoResponse, SystemStatusResponse
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/status", response_model=SystemStatusResponse)
def get_system_status(db: Session = Depends(get_db)):
    """
    Get real-time status for the backend and database
    """
    start_time = time.time()

    try:
        db.execute(text("SELECT 1"))
        database_status = DatabaseStatus(status="connected", connected=True)
    except SQLAlchemyError as e:
        logger.error("Database health check failed", error=str(e))
        database_status = DatabaseStatus(status="error", connected=False)

    backend_status = BackendStatus(
        status="connected",
        latency=int((time.time() - start_time) * 1000),
        version=settings.VERSION
    )

    return SystemStatusResponse(
        success=database_status.connected,
        backend=backend_status,
        database=database_status
    )


@router.get("/info", response_model=SystemInfoResponse)
def get_system_info():
    """
    Get platform information
    """
    return SystemInfoResponse(
        success=True,
        platform_name=settings.PROJECT_NAME,
        tagline=settings.PROJECT_TAGLINE,
        version=settings.VERSION,
        fastapi_version=fastapi.__version__,
        python_version=platform.python_version(),
        environment=settings.ENVIRONMENT
    )
