from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from argmatch.core.interfaces.model_bases import DomainModel


class ValueObject(DomainModel):
    """Frozen model compared by field values.

    Argument definitions derive from this so every builder step yields a new
    object and two definitions built the same way compare equal.
    """

    model_config = ConfigDict(frozen=True)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False

        return self.model_dump() == other.model_dump()

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValueObject:
        """Rebuild a value object from ``to_dict`` output."""
        return cls(**data)
