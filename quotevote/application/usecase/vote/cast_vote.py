"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotevote.application.usecase.quote.common import QuoteResponse
from quotevote.domain.service import VoteService
from quotevote.domain.value import CallerIdentity, QuoteId, UserId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    quote_id: UUID
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class CastVoteUseCase:
    """Use case for upvoting or downvoting a quote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> QuoteResponse:
        """Execute vote flow.

        Args:
            request: Quote, caller and direction

        Returns:
            The quote with its updated counters

        Raises:
            NotFoundError: If the quote doesn't exist
            DuplicateVoteError: If the caller already voted in this direction
            VoteTimeoutError: If the quote stayed locked past the timeout
        """
        caller = CallerIdentity(user_id=UserId(UUID(request.user_id)))
        quote = await self.vote_service.apply_vote(
            QuoteId(request.quote_id), caller, request.direction
        )
        return QuoteResponse.from_domain(quote)
