"""
Logging configuration helpers.
Console output is always enabled; production runs additionally keep one log file per level.
Modules log through named loggers and never configure handlers themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dryclean.common.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Level name -> file name written under LOG_DIR in production.
LEVEL_FILES: dict[int, str] = {
    logging.ERROR: "error.log",
    logging.WARNING: "warning.log",
    logging.INFO: "info.log",
    logging.DEBUG: "debug.log",
}

_LOGGING_CONFIGURED = False


class ExactLevelFilter(logging.Filter):
    """Pass only records of a single level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == self.level


def resolve_level(level_name: str) -> int:
    """Map a level name such as `warn` or `DEBUG` to a logging level, defaulting to INFO."""

    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_level_file_handlers(log_dir: str | Path) -> list[logging.Handler]:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = []
    for level, file_name in LEVEL_FILES.items():
        handler = logging.FileHandler(directory / file_name, encoding="utf-8")
        handler.setLevel(level)
        handler.addFilter(ExactLevelFilter(level))
        handler.setFormatter(formatter)
        handlers.append(handler)
    return handlers


def configure_logging(settings: Settings | None = None) -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved = settings or get_settings()
    level = resolve_level(resolved.LOG_LEVEL)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if resolved.is_production:
        handlers.extend(build_level_file_handlers(resolved.LOG_DIR))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    _LOGGING_CONFIGURED = True
