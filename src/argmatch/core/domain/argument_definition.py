"""Argument definitions and their fluent builder.

An ``ArgumentDefinition`` describes one argument the parser recognises. It is
immutable: every builder call returns a new definition, so a partially built
definition can be shared and extended without affecting other users.

Example:
    >>> verbose = ArgumentDefinition.new().flag("verbose").short("v")
    >>> output = ArgumentDefinition.new().input("output").short("o")
    >>> source = ArgumentDefinition.new().param("source")
"""

from __future__ import annotations

from enum import Enum

from argmatch.core.domain.base import ValueObject

LONG_PREFIX = "--"
SHORT_PREFIX = "-"


class ArgumentKind(str, Enum):
    """How an argument is supplied on the command line."""

    PARAM = "param"  # bare token, filled in registration order
    INPUT = "input"  # option followed by exactly one value token
    FLAG = "flag"  # option with no value


class ArgumentDefinition(ValueObject):
    """Descriptor of a single recognised argument."""

    name: str = ""
    kind: ArgumentKind | None = None
    expects_value: bool = False
    short_alias: str | None = None
    consumed: bool = False

    @classmethod
    def new(cls) -> ArgumentDefinition:
        """Create an empty definition; chain builder calls to configure it."""
        return cls()

    def param(self, name: str) -> ArgumentDefinition:
        """A required positional parameter.

        Positional parameters are filled by bare tokens in the order they were
        registered with the parser.
        """
        return self.model_copy(
            update={
                "name": name,
                "kind": ArgumentKind.PARAM,
                "expects_value": False,
                "consumed": False,
            }
        )

    def input(self, name: str) -> ArgumentDefinition:
        """An option that must be followed directly by a value token."""
        return self.model_copy(
            update={"name": name, "kind": ArgumentKind.INPUT, "expects_value": True}
        )

    def flag(self, name: str) -> ArgumentDefinition:
        """An option whose presence alone is the signal."""
        return self.model_copy(
            update={"name": name, "kind": ArgumentKind.FLAG, "expects_value": False}
        )

    def short(self, char: str) -> ArgumentDefinition:
        """Allow the argument to be invoked as ``-<char>`` as well.

        Raises:
            ValueError: If ``char`` is not exactly one character.
        """
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Short alias must be a single character, got {char!r}")
        return self.model_copy(update={"short_alias": char})

    def mark_consumed(self) -> ArgumentDefinition:
        """Return a copy of this positional parameter flagged as filled."""
        return self.model_copy(update={"consumed": True})

    @property
    def is_positional(self) -> bool:
        return self.kind is ArgumentKind.PARAM

    def matches_long(self, token: str) -> bool:
        """Whether ``token`` is exactly ``--<name>``."""
        return (
            bool(self.name)
            and token.startswith(LONG_PREFIX)
            and token[len(LONG_PREFIX) :] == self.name
        )

    def matches_short(self, token: str) -> bool:
        """Whether ``token`` is exactly ``-<short_alias>``."""
        return (
            self.short_alias is not None
            and len(token) == 2
            and token.startswith(SHORT_PREFIX)
            and token[1] == self.short_alias
        )


def param(name: str) -> ArgumentDefinition:
    """Shorthand for ``ArgumentDefinition.new().param(name)``."""
    return ArgumentDefinition.new().param(name)


def input_option(name: str) -> ArgumentDefinition:
    """Shorthand for ``ArgumentDefinition.new().input(name)``."""
    return ArgumentDefinition.new().input(name)


def flag(name: str) -> ArgumentDefinition:
    """Shorthand for ``ArgumentDefinition.new().flag(name)``."""
    return ArgumentDefinition.new().flag(name)
