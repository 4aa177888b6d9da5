"""
Logging utilities for argmatch.

This module provides:
- Test/production environment tagging of log records
- A one-call console/file logging setup
- Applying a ``ParserConfig`` log level to the package loggers
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Literal

import structlog

if TYPE_CHECKING:
    from argmatch.core.config.parser_config import ParserConfig

PACKAGE_LOGGER_NAME = "argmatch"
DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    """Detect if we're running under pytest.

    Returns:
        True if running under pytest, False otherwise
    """
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Get the environment tag for logging.

    Returns:
        'test' if running under pytest, 'prod' otherwise
    """
    return "test" if _is_running_under_pytest() else "prod"


_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger of the same name.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    # Leaves the global structlog configuration untouched
    return structlog.wrap_logger(  # type: ignore[return-value]
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        super().__init__(fmt or DEFAULT_LOG_FORMAT, datefmt, style=style)

    def format(self, record: logging.LogRecord) -> str:
        # Records from handlers installed before the filter still need a tag
        if not hasattr(record, "env_tag"):
            record.env_tag = _get_environment_tag()
        return super().format(record)


def install_environment_tagging() -> None:
    """Install environment tagging filter on the root logger and its handlers."""
    root = logging.getLogger()
    filter_instance = EnvironmentTaggingFilter()
    root.addFilter(filter_instance)

    for handler in list(root.handlers):
        handler.addFilter(filter_instance)
        formatter = handler.formatter
        if isinstance(formatter, logging.Formatter) and not isinstance(
            formatter, EnvironmentTaggingFormatter
        ):
            handler.setFormatter(
                EnvironmentTaggingFormatter(
                    fmt=formatter._fmt, datefmt=formatter.datefmt
                )
            )


def configure_logging_with_environment_tagging(
    level: int = logging.INFO,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure logging with environment tagging.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    install_environment_tagging()


def configure_logging(config: ParserConfig) -> logging.Logger:
    """Apply the configured level to the ``argmatch`` logger hierarchy.

    Handlers are left to the application; this only sets the threshold, and
    only when the config names a level.

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if config.log_level is not None:
        package_logger.setLevel(config.log_level.to_logging_level())
    return package_logger
