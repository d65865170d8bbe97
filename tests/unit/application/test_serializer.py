"""Unit tests for VoteSerializer."""

from uuid import uuid4

from verdict.application.serializer import VoteSerializer, default_voter_serializer
from verdict.domain.model import Vote
from verdict.domain.value import EntityRef, VoteType


def stored_vote(**fields) -> Vote:
    return Vote.for_pair(
        EntityRef(type="Article", id=uuid4()),
        EntityRef(type="Account", id=7),
        id=uuid4(),
        direction=False,
        **fields,
    )


class TestVoteSerializer:
    """Tests for API vote rendering."""

    def test_default_voter_rendering(self):
        """Voters render as id and type."""
        data = VoteSerializer().serialize(stored_vote(comment="Meh"))

        assert data.voter == {"id": "7", "type": "Account"}
        assert data.vote_type == VoteType.DOWN
        assert data.comment == "Meh"

    def test_custom_voter_serializer(self):
        """Hosts choose how voters are shown."""
        serializer = VoteSerializer(voter_serializer=lambda ref: f"user-{ref.id}")

        assert serializer.serialize(stored_vote()).voter == "user-7"

    def test_tags_are_emitted_as_stored(self):
        """Tags no longer in the catalog are still shown verbatim."""
        data = VoteSerializer().serialize(stored_vote(feedback_tags=["retired"]))

        assert data.feedback_tags == ["retired"]

    def test_serialize_many_keeps_order(self):
        votes = [stored_vote(comment="1"), stored_vote(comment="2")]

        assert [d.comment for d in VoteSerializer().serialize_many(votes)] == [
            "1",
            "2",
        ]

    def test_default_voter_serializer_with_uuid(self):
        voter_id = uuid4()

        assert default_voter_serializer(EntityRef(type="Account", id=voter_id)) == {
            "id": str(voter_id),
            "type": "Account",
        }
