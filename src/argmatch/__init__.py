"""argmatch: match command-line tokens against registered argument definitions."""

from argmatch.core.common.exceptions import (
    ArgMatchError,
    ConfigurationError,
    DuplicateDefinitionError,
    DuplicateTokenError,
    InvalidCommandError,
    InvalidCommandReason,
    MissingArgumentError,
    UnexpectedTokenError,
)
from argmatch.core.common.logging_utils import configure_logging
from argmatch.core.config.parser_config import LogLevel, ParserConfig
from argmatch.core.domain.argument_definition import (
    ArgumentDefinition,
    ArgumentKind,
    flag,
    input_option,
    param,
)
from argmatch.core.interfaces.token_parser_interface import ITokenParser, ParseResult
from argmatch.core.services.token_parser import TokenParser

__version__ = "0.1.0"

__all__ = [
    "ArgMatchError",
    "ArgumentDefinition",
    "ArgumentKind",
    "ConfigurationError",
    "DuplicateDefinitionError",
    "DuplicateTokenError",
    "ITokenParser",
    "InvalidCommandError",
    "InvalidCommandReason",
    "LogLevel",
    "MissingArgumentError",
    "ParseResult",
    "ParserConfig",
    "TokenParser",
    "UnexpectedTokenError",
    "configure_logging",
    "flag",
    "input_option",
    "param",
]
