"""SQLAlchemy table definitions for verdict.

The votes table is built by a factory because the type of its id and
reference columns is chosen by configuration (`DatabaseSettings.id_type`).
It matches the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.types import TypeEngine

from verdict.domain.value import FEEDBACK_TAG_MAX_LENGTH, IdType
from verdict.util.error import ConfigurationError


def id_column_type(id_type: IdType) -> TypeEngine:
    """Column type for ids of the configured kind."""
    if id_type == "uuid":
        return UUID(as_uuid=True)
    if id_type == "bigint":
        return BigInteger()
    if id_type == "integer":
        return Integer()
    raise ConfigurationError("database.id_type", id_type)


def create_votes_table(metadata: MetaData, id_type: IdType = "uuid") -> Table:
    """Define the votes table on `metadata`.

    Args:
        metadata: Metadata to attach the table to
        id_type: Type of the primary key and of the entity reference columns

    Returns:
        The votes table
    """
    if id_type == "uuid":
        id_column = Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=text("gen_random_uuid()"),
        )
    else:
        id_column = Column(
            "id", id_column_type(id_type), primary_key=True, autoincrement=True
        )

    table = Table(
        "votes",
        metadata,
        id_column,
        Column("votable_type", String(255), nullable=False),
        Column("votable_id", id_column_type(id_type), nullable=False),
        Column("voter_type", String(255), nullable=False),
        Column("voter_id", id_column_type(id_type), nullable=False),
        Column("direction", Boolean, nullable=False),  # true = up, false = down
        Column("comment", Text, nullable=True),
        Column(
            "feedback_tags",
            postgresql.ARRAY(String(FEEDBACK_TAG_MAX_LENGTH)),
            nullable=False,
            server_default="{}",
        ),
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=text("NOW()"),
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=text("NOW()"),
        ),
        # One vote per voter per votable; the arbiter of concurrent first votes
        UniqueConstraint(
            "voter_type",
            "voter_id",
            "votable_type",
            "votable_id",
            name="uq_votes_voter_votable",
        ),
    )

    Index("idx_votes_votable", table.c.votable_type, table.c.votable_id)
    Index("idx_votes_voter", table.c.voter_type, table.c.voter_id)

    return table

