"""Nominal marker base classes for model standardization.

`DomainModel` marks Pydantic-based domain and configuration models and
`InternalDTO` marks internal dataclass-based DTOs, so static type checkers
(mypy) can tell the two families apart.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and configuration models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Argument definitions and configs are identified by name when present
        if getattr(self, "name", None):
            return f'<{class_name} name="{self.name}">'  # type: ignore[attr-defined]

        return f"<{class_name}>"


class InternalDTO:
    """Nominal marker for internal dataclass DTOs.

    This is a plain marker class intended to be mixed into dataclass
    definitions to make their intent explicit for mypy checks.
    """
