"""
Structured logging configuration using structlog
JSON logs for production, human-readable console logs for development
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor

# Credential records carry secrets; never let them reach a log line
SENSITIVE_KEYS = (
    "password", "passwd", "token", "secret", "api_key",
    "authorization", "cookie", "csrf"
)

REDACTED = "***REDACTED***"


def add_severity_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add severity level to log output (for log shippers expecting it)
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["severity"] = method_name.upper()
    return event_dict


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if any(s in str(key).lower() for s in SENSITIVE_KEYS) else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value


def filter_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Replace the value of any sensitive key (recursively) with a placeholder
    """
    return _redact(event_dict)


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_dir: str = "logs",
    enable_file_logging: bool = False,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure structured logging for the application

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        log_dir: Directory for log files
        enable_file_logging: Also write app.log and error.log to log_dir
        max_bytes: Maximum size per log file
        backup_count: Number of backup files to keep
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_severity_level,
        filter_sensitive_data,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if enable_file_logging:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        root_logger = logging.getLogger()

        # Main application log (all levels)
        app_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / "app.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        app_handler.setLevel(level)
        root_logger.addHandler(app_handler)

        # Error log (errors only)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / "error.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

    # Silence noisy loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("FTP login added", record_id=12, website_id=1)
    """
    return structlog.get_logger(name)