from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from argmatch.core.domain.argument_definition import ArgumentDefinition

ParseResult = dict[str, str | None]


class ITokenParser(ABC):
    """Matches command-line tokens against registered argument definitions."""

    @abstractmethod
    def add(self, definition: ArgumentDefinition) -> None:
        """Register one argument definition.

        Args:
            definition: The definition to append
        """

    @abstractmethod
    def add_all(self, definitions: Iterable[ArgumentDefinition]) -> None:
        """Register several definitions, preserving their relative order.

        Args:
            definitions: The definitions to append
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of registered definitions."""

    @abstractmethod
    def definitions(self) -> tuple[ArgumentDefinition, ...]:
        """Return a snapshot of the registered definitions in order."""

    @abstractmethod
    def parse(self, tokens: Iterable[str]) -> ParseResult:
        """Parse a token sequence into a mapping of argument name to value.

        Args:
            tokens: The tokens to parse, program name excluded

        Returns:
            Argument names mapped to their value, or None for flags

        Raises:
            InvalidCommandError: On the first token that violates the rules
        """
