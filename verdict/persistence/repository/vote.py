"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import Table, and_, delete, exists, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from verdict.domain.error import NotFoundError
from verdict.domain.model import Vote
from verdict.domain.repository import VoteRepository
from verdict.domain.value import EntityId, EntityRef, VoteId
from verdict.persistence.mappers import row_to_vote, vote_to_dict


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession, table: Table) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            table: Votes table built for the configured id type
        """
        self.session = session
        self.table = table

    def _votable_is(self, votable: EntityRef) -> ColumnElement[bool]:
        return and_(
            self.table.c.votable_type == votable.type,
            self.table.c.votable_id == votable.id,
        )

    def _voter_is(self, voter: EntityRef) -> ColumnElement[bool]:
        return and_(
            self.table.c.voter_type == voter.type,
            self.table.c.voter_id == voter.id,
        )

    def _has_comment(self) -> ColumnElement[bool]:
        return and_(self.table.c.comment.is_not(None), self.table.c.comment != "")

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(self.table).where(self.table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific votable."""
        stmt = select(self.table).where(self._voter_is(voter), self._votable_is(votable))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_votable(
        self,
        votable: EntityRef,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> List[Vote]:
        """Find votes on a votable, oldest first."""
        stmt = select(self.table).where(self._votable_is(votable))
        if direction is not None:
            stmt = stmt.where(self.table.c.direction.is_(direction))
        if with_comments:
            stmt = stmt.where(self._has_comment())
        stmt = stmt.order_by(self.table.c.created_at, self.table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_voter(
        self,
        voter: EntityRef,
        votable_type: Optional[str] = None,
        direction: Optional[bool] = None,
    ) -> List[Vote]:
        """Find votes cast by a voter, oldest first."""
        stmt = select(self.table).where(self._voter_is(voter))
        if votable_type is not None:
            stmt = stmt.where(self.table.c.votable_type == votable_type)
        if direction is not None:
            stmt = stmt.where(self.table.c.direction.is_(direction))
        stmt = stmt.order_by(self.table.c.created_at, self.table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_votable(
        self, votable: EntityRef, direction: Optional[bool] = None
    ) -> int:
        """Count votes on a votable."""
        stmt = (
            select(func.count())
            .select_from(self.table)
            .where(self._votable_is(votable))
        )
        if direction is not None:
            stmt = stmt.where(self.table.c.direction.is_(direction))

        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists(
        self,
        voter: EntityRef,
        votable: EntityRef,
        direction: Optional[bool] = None,
    ) -> bool:
        """Check whether a voter has voted on a votable."""
        condition = and_(self._voter_is(voter), self._votable_is(votable))
        if direction is not None:
            condition = and_(condition, self.table.c.direction.is_(direction))

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def find_votable_ids(
        self,
        votable_type: str,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> List[EntityId]:
        """Find distinct ids of voted votables, ordered by their first vote."""
        stmt = select(self.table.c.votable_id).where(
            self.table.c.votable_type == votable_type
        )
        if direction is not None:
            stmt = stmt.where(self.table.c.direction.is_(direction))
        if with_comments:
            stmt = stmt.where(self._has_comment())
        # One row per votable however many votes it has
        stmt = stmt.group_by(self.table.c.votable_id).order_by(
            func.min(self.table.c.created_at)
        )

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The insert runs in a SAVEPOINT so that a unique constraint violation
        leaves the request transaction usable for the retry.
        """
        values = vote_to_dict(vote)
        stmt = insert(self.table).values(**values).returning(self.table.c.id)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return vote.model_copy(update={"id": result.scalar_one()})

    async def update(self, vote: Vote) -> Vote:
        """Overwrite the mutable fields of a persisted vote."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == vote.id)
            .values(
                direction=vote.direction,
                comment=vote.comment,
                feedback_tags=vote.feedback_tags,
                updated_at=vote.updated_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError("Vote", str(vote.id))
        return vote

    async def delete_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> bool:
        """Delete a voter's vote on a votable."""
        stmt = delete(self.table).where(self._voter_is(voter), self._votable_is(votable))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_entity(self, entity: EntityRef) -> int:
        """Delete every vote cast by or on an entity."""
        stmt = delete(self.table).where(
            or_(self._votable_is(entity), self._voter_is(entity))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
