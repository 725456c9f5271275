"""Logging for the stockroom service.

Records flow through the standard library root logger, which writes to the
console and to two rotating files under ``LOG_DIR``. structlog formats the
events on top of it: JSON lines in deployed environments, a rich console
view everywhere else.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

DEFAULT_ENVIRONMENT = "development"
DEPLOYED_ENVIRONMENTS = frozenset({"production", "staging"})

LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

LOG_FILE = "stockroom.log"
ERROR_LOG_FILE = "stockroom_error.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Only warnings and above from these
NOISY_LOGGERS = ("protean", "asyncio", "httpx", "sqlalchemy.engine")


def current_environment() -> str:
    """The first of `ENV`, `ENVIRONMENT` and `PROTEAN_ENV` that is set."""
    for variable in ("ENV", "ENVIRONMENT", "PROTEAN_ENV"):
        value = os.getenv(variable)
        if value:
            return value.lower()
    return DEFAULT_ENVIRONMENT


def log_level(environment: str | None = None) -> str:
    """`LOG_LEVEL` when set, otherwise the level mapped to the environment."""
    environment = environment or current_environment()
    return os.getenv("LOG_LEVEL", LEVEL_BY_ENVIRONMENT.get(environment, "INFO")).upper()


def log_directory() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


def _rotating_file(path: Path, level: str | int) -> RotatingFileHandler:
    handler = RotatingFileHandler(filename=path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    handler.setLevel(level)
    return handler


def build_handlers(level: str, directory: Path) -> list[logging.Handler]:
    """Console, full log file and error-only log file."""
    directory.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    return [
        console,
        _rotating_file(directory / LOG_FILE, level),
        _rotating_file(directory / ERROR_LOG_FILE, logging.ERROR),
    ]


def renderer_for(environment: str):
    if environment in DEPLOYED_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )


def _processors(environment: str) -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        renderer_for(environment),
    ]


def configure_logging() -> None:
    """Install the handlers on the root logger and configure structlog."""
    environment = current_environment()
    level = log_level(environment)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = build_handlers(level, log_directory())
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=_processors(environment),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values that every later event on this request carries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
