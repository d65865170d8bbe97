"""Identifier types for verdict entities.

Identifiers are opaque to the engine. Hosts store either UUID or integer
primary keys depending on `DatabaseSettings.id_type`.
"""

from typing import Literal, Union
from uuid import UUID

# Polymorphic entity identifier (votable or voter)
EntityId = Union[UUID, int]

# Vote primary key
VoteId = Union[UUID, int]

IdType = Literal["uuid", "integer", "bigint"]
