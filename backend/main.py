"""
SiteKeeper API - FastAPI application entry point

Routes are registered explicitly; every error is rendered in the same
{success, message, errors} envelope as the endpoints themselves.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import credentials, system, websites
from api.responses import envelope
from config import settings
from database import init_db
from middleware.logging_middleware import LoggingMiddleware
from middleware.method_override import MethodOverrideMiddleware
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle"""
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_dir=settings.LOG_DIR,
        enable_file_logging=settings.ENABLE_FILE_LOGGING,
        max_bytes=settings.LOG_FILE_MAX_BYTES,
        backup_count=settings.LOG_FILE_BACKUP_COUNT
    )
    init_db()
    logger.info("SiteKeeper API started", version=settings.VERSION, environment=settings.ENVIRONMENT)
    yield
    logger.info("SiteKeeper API shutting down")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    version=settings.VERSION,
    lifespan=lifespan
)

# Last added runs first: method override must happen before logging and routing
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(MethodOverrideMiddleware)

app.include_router(system.router)
app.include_router(websites.router)
app.include_router(credentials.ftp_router)
app.include_router(credentials.database_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes, disallowed methods, etc."""
    return envelope(exc.status_code, False, message=str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed path or query parameters (e.g. a non-numeric website id)"""
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "request"
        errors.setdefault(field, []).append(error["msg"])

    logger.warning("Request validation failed", path=request.url.path, errors=errors)
    return envelope(status.HTTP_400_BAD_REQUEST, False, message="Data is invalid", errors=errors)


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all for anything the routes did not turn into a response"""
    logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=True)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, False, message=str(exc))
