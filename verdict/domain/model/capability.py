"""Voting capabilities for host entities.

Any host entity class acquires a voting role by inheriting `Votable` and/or
`Voter`:

    class Article(Votable, BaseModel):
        id: UUID
        title: str

    class Account(Voter, BaseModel):
        id: UUID

The entity only needs an `id` attribute. Its type name defaults to the class
name and can be pinned with `__entity_type__` so that renaming a class does
not orphan stored votes.
"""

from typing import ClassVar

from verdict.domain.value import EntityRef


class Entity:
    """Shared behaviour of the voting capabilities."""

    __entity_type__: ClassVar[str | None] = None

    @classmethod
    def entity_type(cls) -> str:
        """Type name stored in the polymorphic `*_type` columns."""
        return cls.__entity_type__ or cls.__name__

    @property
    def entity_ref(self) -> EntityRef | None:
        """Reference to this entity, or None while it has no persisted id."""
        entity_id = getattr(self, "id", None)
        if entity_id is None:
            return None
        return EntityRef(type=self.entity_type(), id=entity_id)


class Votable(Entity):
    """Capability of receiving votes."""

    pass


class Voter(Entity):
    """Capability of casting votes."""

    pass


def votable_ref(obj: object) -> EntityRef | None:
    """Reference for a votable, or None if `obj` cannot receive votes."""
    if not isinstance(obj, Votable):
        return None
    return obj.entity_ref


def voter_ref(obj: object) -> EntityRef | None:
    """Reference for a voter, or None if `obj` cannot cast votes."""
    if not isinstance(obj, Voter):
        return None
    return obj.entity_ref
