"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from quotevote.domain.model.vote import Vote
from quotevote.domain.repository.vote import VoteRepository
from quotevote.domain.value import QuoteId, UserId, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_user_and_quote(
        self, user_id: UserId, quote_id: QuoteId
    ) -> Optional[Vote]:
        """Find a user's vote on a quote."""
        for vote in self._votes:
            if vote.user_id == user_id and vote.quote_id == quote_id:
                return vote
        return None

    async def find_by_quote(self, quote_id: QuoteId) -> list[Vote]:
        """Find all votes on a quote."""
        return [v for v in self._votes if v.quote_id == quote_id]

    async def count_by_quote(self, quote_id: QuoteId, vote_type: VoteType) -> int:
        """Count votes of one type on a quote."""
        return sum(
            1
            for v in self._votes
            if v.quote_id == quote_id and v.vote_type == vote_type
        )

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this quote
        """
        existing = await self.find_by_user_and_quote(vote.user_id, vote.quote_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip a vote to a new type."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.model_copy(
                    update={"vote_type": vote_type, "updated_at": datetime.now()}
                )
                self._votes[i] = updated
                return updated
        return None

    async def delete_by_quote(self, quote_id: QuoteId) -> int:
        """Delete every vote on a quote."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.quote_id != quote_id]
        return before - len(self._votes)
