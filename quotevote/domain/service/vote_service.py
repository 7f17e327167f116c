"""Vote domain service.

Resolves a caller's prior vote on a quote against a requested direction
and keeps the quote's cached counters in step with the Vote records.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quotevote.config import VotingSettings
from quotevote.domain.error import DuplicateVoteError
from quotevote.domain.model.quote import Quote
from quotevote.domain.model.vote import Vote
from quotevote.domain.repository import VoteRepository
from quotevote.domain.value import (
    CallerIdentity,
    QuoteId,
    UserId,
    VoteDirection,
    VoteId,
    VoteType,
)

from .base import Service
from .lock import QuoteLockRegistry
from .quote_service import QuoteService


_DELTA_ARGUMENT = {
    VoteType.UPVOTE: "upvotes_delta",
    VoteType.DOWNVOTE: "downvotes_delta",
}


def _counter_deltas(
    added: VoteType, removed: VoteType | None = None
) -> dict[str, int]:
    deltas = {"upvotes_delta": 0, "downvotes_delta": 0}
    deltas[_DELTA_ARGUMENT[added]] += 1
    if removed is not None:
        deltas[_DELTA_ARGUMENT[removed]] -= 1
    return deltas


class VoteService(Service):
    """Domain service for vote operations.

    Every mutation of a quote's votes runs under that quote's lock and,
    with PostgreSQL, inside one transaction with the quote row locked.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        quote_service: QuoteService,
        quote_locks: QuoteLockRegistry,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            quote_service: Quote domain service
            quote_locks: Process-wide per-quote locks
            voting_settings: Lock timeout configuration
        """
        self.vote_repository = vote_repository
        self.quote_service = quote_service
        self.quote_locks = quote_locks
        self.voting_settings = voting_settings

    async def apply_vote(
        self, quote_id: QuoteId, caller: CallerIdentity, direction: VoteDirection
    ) -> Quote:
        """Cast, or switch, the caller's vote on a quote.

        - No prior vote: record one and increment the matching counter.
        - Prior vote in the same direction: rejected, nothing changes.
        - Prior vote in the other direction: flip it, decrement the old
          counter (never below 0) and increment the new one.

        Args:
            quote_id: Quote ID
            caller: Authenticated caller
            direction: Requested direction

        Returns:
            The quote with its updated counters

        Raises:
            NotFoundError: If the quote doesn't exist
            DuplicateVoteError: If the caller already voted this way
            VoteTimeoutError: If the quote lock couldn't be acquired in time
        """
        requested = direction.vote_type
        with logfire.span(
            "vote_service.apply_vote",
            quote_id=str(quote_id),
            user_id=str(caller.user_id),
            direction=direction.value,
        ):
            async with self.quote_locks.hold(
                quote_id, timeout=self.voting_settings.lock_timeout_seconds
            ):
                quote = await self.quote_service.get_quote(quote_id, for_update=True)

                existing = await self.vote_repository.find_by_user_and_quote(
                    caller.user_id, quote_id
                )

                if existing is None:
                    return await self._record_vote(quote, caller.user_id, requested)

                if existing.vote_type == requested:
                    logfire.warn(
                        "Duplicate vote attempt",
                        quote_id=str(quote_id),
                        user_id=str(caller.user_id),
                        vote_type=requested.value,
                    )
                    raise DuplicateVoteError(str(quote_id), requested.value)

                return await self._flip_vote(existing, requested)

    async def _record_vote(
        self, quote: Quote, user_id: UserId, vote_type: VoteType
    ) -> Quote:
        now = datetime.now()
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            quote_id=quote.id,
            vote_type=vote_type,
            created_at=now,
            updated_at=now,
        )

        try:
            await self.vote_repository.save(vote)
        except IntegrityError:
            # Another process inserted this user's vote first
            logfire.warn(
                "Concurrent duplicate vote insert",
                quote_id=str(quote.id),
                user_id=str(user_id),
            )
            raise DuplicateVoteError(str(quote.id), vote_type.value)

        updated = await self.quote_service.adjust_counters(
            quote.id, **_counter_deltas(vote_type)
        )
        logfire.info(
            "Vote recorded",
            quote_id=str(quote.id),
            user_id=str(user_id),
            vote_type=vote_type.value,
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
        )
        return updated

    async def _flip_vote(self, vote: Vote, vote_type: VoteType) -> Quote:
        await self.vote_repository.update_vote_type(vote.id, vote_type)

        updated = await self.quote_service.adjust_counters(
            vote.quote_id, **_counter_deltas(vote_type, removed=vote.vote_type)
        )
        logfire.info(
            "Vote switched",
            quote_id=str(vote.quote_id),
            user_id=str(vote.user_id),
            old_vote_type=vote.vote_type.value,
            new_vote_type=vote_type.value,
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
        )
        return updated

    async def reconcile_counters(self, quote_id: QuoteId) -> Quote:
        """Recompute a quote's counters from its Vote records.

        Idempotent. Repairs drift left by a crash between the vote write
        and the counter write on stores without multi-record transactions.

        Args:
            quote_id: Quote ID

        Returns:
            The quote with reconciled counters

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span("vote_service.reconcile_counters", quote_id=str(quote_id)):
            async with self.quote_locks.hold(
                quote_id, timeout=self.voting_settings.lock_timeout_seconds
            ):
                quote = await self.quote_service.get_quote(quote_id, for_update=True)

                upvotes = await self.vote_repository.count_by_quote(
                    quote_id, VoteType.UPVOTE
                )
                downvotes = await self.vote_repository.count_by_quote(
                    quote_id, VoteType.DOWNVOTE
                )

                if quote.upvotes == upvotes and quote.downvotes == downvotes:
                    return quote

                logfire.warn(
                    "Quote counters drifted, reconciling",
                    quote_id=str(quote_id),
                    cached_upvotes=quote.upvotes,
                    cached_downvotes=quote.downvotes,
                    upvotes=upvotes,
                    downvotes=downvotes,
                )
                return await self.quote_service.set_counters(
                    quote_id, upvotes, downvotes
                )
