"""
Quality standard: One log stream.
Reason: Our code, uvicorn and SQLAlchemy all end up in the same loguru sinks,
so a failing source and the request that triggered it sit next to each other.
"""
import logging
import sys
from pathlib import Path

from loguru import logger

from lex_event_hub.core.config import IS_PRODUCTION, LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSS} {level} {name}:{line} {message}"

# Third-party loggers routed through loguru
FORWARDED = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy", "httpx")


class InterceptHandler(logging.Handler):
    """Hands stdlib records to loguru, keeping level and call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def forward_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in FORWARDED:
        std_logger = logging.getLogger(name)
        std_logger.handlers = []
        std_logger.propagate = True


def setup_logger(log_dir: str = LOG_DIR, level: str = LOG_LEVEL, serialize: bool = IS_PRODUCTION):
    """
    Console sink at `level`, plus a rotating DEBUG file under `log_dir`.
    In production the file holds one JSON object per line for the log shipper.
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=not serialize)
    logger.add(
        directory / "lex_events.log",
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="10 MB",
        retention="14 days",
        compression="zip",
        serialize=serialize,
    )
    forward_stdlib_logging()
    return logger


log = setup_logger()
