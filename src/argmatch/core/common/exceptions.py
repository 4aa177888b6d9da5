"""
Exception classes for argmatch.

Parse failures form a closed set rooted at ``InvalidCommandError``; each one
carries an ``InvalidCommandReason`` so callers can branch exhaustively on the
reason instead of inspecting messages. Registration problems are reported
as ``ConfigurationError``.
"""

from __future__ import annotations

from enum import Enum


class ArgMatchError(Exception):
    """Base exception class for all argmatch errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                value = getattr(self, attr_name)
                error_dict[attr_name] = (
                    value.value if isinstance(value, Enum) else value
                )

        return {"error": error_dict}


class InvalidCommandReason(str, Enum):
    """Why a token sequence was rejected."""

    UNEXPECTED = "unexpected"
    DUPLICATE = "duplicate"
    MISSING = "missing"


class InvalidCommandError(ArgMatchError):
    """Raised when a token sequence does not match the registered arguments."""

    reason: InvalidCommandReason

    def __init__(
        self,
        reason: InvalidCommandReason,
        message: str,
        token: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, reason=reason, token=token, **kwargs)


class UnexpectedTokenError(InvalidCommandError):
    """Raised when a token matches no option, alias or free positional slot."""

    def __init__(self, token: str, details: dict | None = None, **kwargs):
        super().__init__(
            InvalidCommandReason.UNEXPECTED,
            f"Invalid command, unexpected token '{token}'",
            token=token,
            details=details,
            **kwargs,
        )


class DuplicateTokenError(InvalidCommandError):
    """Raised when an argument would be stored in the result a second time."""

    def __init__(self, token: str, details: dict | None = None, **kwargs):
        super().__init__(
            InvalidCommandReason.DUPLICATE,
            f"Invalid command, duplicate token '{token}'",
            token=token,
            details=details,
            **kwargs,
        )


class MissingArgumentError(InvalidCommandError):
    """Raised when an option value or a positional parameter never arrives."""

    def __init__(
        self, argument: str | None = None, details: dict | None = None, **kwargs
    ):
        message = "Invalid command, missing argument"
        if argument:
            message = f"{message} '{argument}'"
        super().__init__(
            InvalidCommandReason.MISSING,
            message,
            details=details,
            argument=argument,
            **kwargs,
        )


class ConfigurationError(ArgMatchError):
    """Raised when the parser is configured inconsistently."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class DuplicateDefinitionError(ConfigurationError):
    """Raised when a registered name or short alias is registered again."""

    def __init__(
        self,
        name: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(
            message or f"Argument '{name}' is already registered",
            details,
            name=name,
            **kwargs,
        )
