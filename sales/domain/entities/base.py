"""
Entity base class

Entities are identified by a generated id rather than by their attributes.
"""
from __future__ import annotations
from typing import Any
from uuid import UUID, uuid4


class Entity:
    """Base for domain entities with identity-based equality."""

    def __init__(self) -> None:
        self._id: UUID = uuid4()

    @property
    def id(self) -> UUID:
        return self._id

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
