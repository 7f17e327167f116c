"""Unit tests for QuoteService."""

from datetime import datetime
from uuid import uuid4

import pytest

from quotevote.config import VotingSettings
from quotevote.domain.error import InvalidArgumentError, NotFoundError
from quotevote.domain.model.vote import Vote
from quotevote.domain.repository import VoteRepository
from quotevote.domain.service import QuoteLockRegistry, QuoteService, VoteService
from quotevote.domain.value import (
    CallerIdentity,
    QuoteId,
    QuoteQuery,
    UserId,
    VoteDirection,
    VoteId,
    VoteType,
)
from quotevote.persistence.repository.inmemory import (
    InMemoryQuoteRepository,
    InMemoryVoteRepository,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class CascadingQuoteRepository(InMemoryQuoteRepository):
    """Drops a quote's votes along with it, like ON DELETE CASCADE."""

    def __init__(self, vote_repository: InMemoryVoteRepository) -> None:
        super().__init__()
        self.vote_repository = vote_repository

    async def delete(self, quote_id: QuoteId) -> bool:
        deleted = await super().delete(quote_id)
        if deleted:
            await self.vote_repository.delete_by_quote(quote_id)
        return deleted


class TestCreateQuote:
    """Tests for create_quote method."""

    @pytest.mark.asyncio
    async def test_create_quote_starts_with_zero_counters(self, unit_env):
        """New quotes should have no votes."""
        quote_service = await unit_env.get(QuoteService)

        quote = await quote_service.create_quote("Less is more", "Mies van der Rohe")

        assert quote.text == "Less is more"
        assert quote.author == "Mies van der Rohe"
        assert quote.upvotes == 0
        assert quote.downvotes == 0
        assert quote.created_at is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("author", [None, "", "   "])
    async def test_missing_author_defaults_to_unknown(self, unit_env, author):
        """Absent or blank author should be stored as Unknown."""
        quote_service = await unit_env.get(QuoteService)

        quote = await quote_service.create_quote("Less is more", author)

        assert quote.author == "Unknown"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_text_is_rejected(self, unit_env, text):
        """Blank text should raise InvalidArgumentError."""
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(InvalidArgumentError, match="text is required"):
            await quote_service.create_quote(text, "Anon")


class TestUpdateQuote:
    """Tests for update_quote method."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        """Omitted fields should keep their values."""
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Less is more", "Mies")

        # Act
        updated = await quote_service.update_quote(quote.id, text="Less is a bore")

        # Assert
        assert updated.text == "Less is a bore"
        assert updated.author == "Mies"

    @pytest.mark.asyncio
    async def test_update_preserves_vote_counters(self, unit_env):
        """Editing text must not touch the counters."""
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        vote_service = await unit_env.get(VoteService)
        quote = await quote_service.create_quote("Less is more")
        voter = CallerIdentity(user_id=UserId(uuid4()))
        await vote_service.apply_vote(quote.id, voter, VoteDirection.UP)

        # Act
        updated = await quote_service.update_quote(quote.id, author="Mies")

        # Assert
        assert updated.upvotes == 1
        assert updated.author == "Mies"

    @pytest.mark.asyncio
    async def test_blank_author_on_update_becomes_unknown(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Less is more", "Mies")

        updated = await quote_service.update_quote(quote.id, author="  ")

        assert updated.author == "Unknown"

    @pytest.mark.asyncio
    async def test_blank_text_on_update_is_rejected(self, unit_env):
        """Provided-but-blank text should raise InvalidArgumentError."""
        quote_service = await unit_env.get(QuoteService)
        quote = await quote_service.create_quote("Less is more")

        with pytest.raises(InvalidArgumentError):
            await quote_service.update_quote(quote.id, text=" ")

        assert (await quote_service.get_quote(quote.id)).text == "Less is more"

    @pytest.mark.asyncio
    async def test_update_missing_quote_raises_not_found(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(NotFoundError):
            await quote_service.update_quote(QuoteId(uuid4()), text="Hello")


class TestDeleteQuote:
    """Tests for delete_quote method."""

    @pytest.mark.asyncio
    async def test_delete_removes_quote_and_its_votes(self, unit_env):
        """Deleting a quote should cascade to its votes only."""
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        doomed = await quote_service.create_quote("Ephemeral")
        kept = await quote_service.create_quote("Eternal")
        for quote in (doomed, kept):
            await vote_service.apply_vote(
                quote.id, CallerIdentity(user_id=UserId(uuid4())), VoteDirection.UP
            )

        # Act
        removed = await quote_service.delete_quote(doomed.id)

        # Assert
        assert removed == 1
        with pytest.raises(NotFoundError):
            await quote_service.get_quote(doomed.id)
        assert await vote_repo.find_by_quote(doomed.id) == []
        assert len(await vote_repo.find_by_quote(kept.id)) == 1

    @pytest.mark.asyncio
    async def test_delete_reports_votes_removed_by_store_cascade(self):
        """Votes the store drops together with the quote are still counted."""
        # Arrange
        vote_repo = InMemoryVoteRepository()
        quote_service = QuoteService(
            quote_repository=CascadingQuoteRepository(vote_repo),
            vote_repository=vote_repo,
            quote_locks=QuoteLockRegistry(),
            voting_settings=VotingSettings(),
        )
        quote = await quote_service.create_quote("Ephemeral")
        for vote_type in (VoteType.UPVOTE, VoteType.DOWNVOTE):
            now = datetime.now()
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=UserId(uuid4()),
                    quote_id=quote.id,
                    vote_type=vote_type,
                    created_at=now,
                    updated_at=now,
                )
            )

        # Act
        removed = await quote_service.delete_quote(quote.id)

        # Assert
        assert removed == 2
        assert await vote_repo.find_by_quote(quote.id) == []

    @pytest.mark.asyncio
    async def test_delete_missing_quote_raises_not_found(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        with pytest.raises(NotFoundError):
            await quote_service.delete_quote(QuoteId(uuid4()))

    @pytest.mark.asyncio
    async def test_vote_after_delete_raises_not_found(self, unit_env):
        """A deleted quote can't be voted on."""
        quote_service = await unit_env.get(QuoteService)
        vote_service = await unit_env.get(VoteService)
        quote = await quote_service.create_quote("Ephemeral")
        await quote_service.delete_quote(quote.id)

        with pytest.raises(NotFoundError):
            await vote_service.apply_vote(
                quote.id, CallerIdentity(user_id=UserId(uuid4())), VoteDirection.UP
            )


class TestListQuotes:
    """Tests for list_quotes method."""

    @pytest.mark.asyncio
    async def test_pagination_over_25_quotes(self, unit_env):
        """25 quotes at limit 10 should give 3 pages, the last holding 5."""
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        for i in range(25):
            await quote_service.create_quote(f"Quote number {i}")

        # Act
        first = await quote_service.list_quotes(QuoteQuery(page=1, limit=10))
        last = await quote_service.list_quotes(QuoteQuery(page=3, limit=10))
        beyond = await quote_service.list_quotes(QuoteQuery(page=4, limit=10))

        # Assert
        assert first.total == 25
        assert first.total_pages == 3
        assert len(first.data) == 10
        assert len(last.data) == 5
        assert beyond.data == []
        assert beyond.total == 25

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, unit_env):
        """Consecutive pages should partition the result set."""
        quote_service = await unit_env.get(QuoteService)
        for i in range(12):
            await quote_service.create_quote(f"Quote number {i}")

        page1 = await quote_service.list_quotes(QuoteQuery(page=1, limit=5))
        page2 = await quote_service.list_quotes(QuoteQuery(page=2, limit=5))
        page3 = await quote_service.list_quotes(QuoteQuery(page=3, limit=5))

        ids = [q.id for page in (page1, page2, page3) for q in page.data]
        assert len(ids) == 12
        assert len(set(ids)) == 12

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, unit_env):
        """Search should match text regardless of case."""
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        await quote_service.create_quote("The only way out is THROUGH")
        await quote_service.create_quote("Walk through walls")
        await quote_service.create_quote("Stay the course")

        # Act
        result = await quote_service.list_quotes(QuoteQuery(search="through"))

        # Assert
        assert result.total == 2
        assert {q.text for q in result.data} == {
            "The only way out is THROUGH",
            "Walk through walls",
        }

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, unit_env):
        quote_service = await unit_env.get(QuoteService)
        await quote_service.create_quote("100% effort")
        await quote_service.create_quote("Full effort")

        result = await quote_service.list_quotes(QuoteQuery(search="100%"))

        assert [q.text for q in result.data] == ["100% effort"]

    @pytest.mark.asyncio
    async def test_empty_store_has_zero_pages(self, unit_env):
        quote_service = await unit_env.get(QuoteService)

        result = await quote_service.list_quotes(QuoteQuery())

        assert result.total == 0
        assert result.total_pages == 0
        assert result.data == []
