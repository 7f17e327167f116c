"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quotevote.domain.model.vote import Vote
from quotevote.domain.value import QuoteId, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_quote(
        self, user_id: UserId, quote_id: QuoteId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific quote.

        Args:
            user_id: The user's ID
            quote_id: The quote's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_quote(self, quote_id: QuoteId) -> List[Vote]:
        """Find all votes on a quote.

        Args:
            quote_id: The quote's ID

        Returns:
            List of votes on the quote
        """
        pass

    @abstractmethod
    async def count_by_quote(self, quote_id: QuoteId, vote_type: VoteType) -> int:
        """Count votes of one type on a quote.

        Args:
            quote_id: The quote's ID
            vote_type: Which votes to count

        Returns:
            Number of matching votes
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on this quote
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Change the type of an existing vote.

        Args:
            vote_id: The vote ID
            vote_type: New vote type

        Returns:
            The updated vote, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_quote(self, quote_id: QuoteId) -> int:
        """Delete every vote on a quote.

        Args:
            quote_id: The quote's ID

        Returns:
            Number of votes deleted
        """
        pass
