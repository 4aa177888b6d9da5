from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum

from pydantic import ConfigDict

from argmatch.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_REJECT_DUPLICATE_NAMES = "ARGMATCH_REJECT_DUPLICATE_NAMES"
ENV_REJECT_DUPLICATE_ALIASES = "ARGMATCH_REJECT_DUPLICATE_ALIASES"
ENV_LOG_LEVEL = "ARGMATCH_LOG_LEVEL"


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        return int(getattr(logging, self.value))


class ParserConfig(DomainModel):
    """Behavioural switches for ``TokenParser``."""

    model_config = ConfigDict(frozen=True)

    # Reject a second definition with an already registered name
    reject_duplicate_names: bool = True
    # Reject a second definition with an already registered short alias
    reject_duplicate_aliases: bool = True
    # Threshold for the ``argmatch`` loggers; None leaves it to the application
    log_level: LogLevel | None = None

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> ParserConfig:
        """Create a ParserConfig from ``ARGMATCH_*`` environment variables.

        Returns:
            ParserConfig instance
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ

        log_level: LogLevel | None = None
        raw_level = env.get(ENV_LOG_LEVEL)
        if raw_level:
            try:
                log_level = LogLevel(raw_level.strip().upper())
            except ValueError:
                logger.warning(
                    "Ignoring unknown %s value %r", ENV_LOG_LEVEL, raw_level
                )

        return cls(
            reject_duplicate_names=_env_to_bool(
                ENV_REJECT_DUPLICATE_NAMES, True, env
            ),
            reject_duplicate_aliases=_env_to_bool(
                ENV_REJECT_DUPLICATE_ALIASES, True, env
            ),
            log_level=log_level,
        )
