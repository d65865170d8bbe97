"""create_votes

Create the polymorphic votes table:
- One row per (voter, votable) pair, enforced by uq_votes_voter_votable
- Direction stored as a boolean (true = up, false = down)
- Optional comment and feedback tags

The id and entity reference columns use DATABASE__ID_TYPE (uuid, integer
or bigint) at migration time.

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from verdict.config import Settings
from verdict.domain.value import FEEDBACK_TAG_MAX_LENGTH
from verdict.persistence.tables import id_column_type


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    id_type = Settings().database.id_type

    if id_type == "uuid":
        id_column = sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        )
    else:
        id_column = sa.Column(
            "id", id_column_type(id_type), autoincrement=True, nullable=False
        )

    op.create_table(
        "votes",
        id_column,
        sa.Column("votable_type", sa.String(255), nullable=False),
        sa.Column("votable_id", id_column_type(id_type), nullable=False),
        sa.Column("voter_type", sa.String(255), nullable=False),
        sa.Column("voter_id", id_column_type(id_type), nullable=False),
        sa.Column("direction", sa.Boolean(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column(
            "feedback_tags",
            postgresql.ARRAY(sa.String(FEEDBACK_TAG_MAX_LENGTH)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "voter_type",
            "voter_id",
            "votable_type",
            "votable_id",
            name="uq_votes_voter_votable",
        ),
    )

    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])
    op.create_index("idx_votes_voter", "votes", ["voter_type", "voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter", table_name="votes")
    op.drop_index("idx_votes_votable", table_name="votes")
    op.drop_table("votes")
