"""Unit tests for reconciling counters one quote per transaction."""

from uuid import uuid4

import pytest

from quotevote.application.usecase.vote import (
    ReconcileCountersRequest,
    ReconcileCountersUseCase,
)
from quotevote.domain.service import QuoteService, VoteService
from quotevote.domain.value import CallerIdentity, UserId, VoteDirection
from scripts.reconcile_counters import reconcile_quote
from tests.di import build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReconcileSelectedQuotes:
    """ReconcileCountersUseCase limited to given quote IDs."""

    @pytest.mark.asyncio
    async def test_only_requested_quotes_are_touched(self, unit_env):
        # Arrange
        quote_service = await unit_env.get(QuoteService)
        use_case = await unit_env.get(ReconcileCountersUseCase)
        target = await quote_service.create_quote("Target")
        other = await quote_service.create_quote("Other")
        for quote in (target, other):
            await quote_service.set_counters(quote.id, upvotes=3, downvotes=3)

        # Act
        result = await use_case.execute(
            ReconcileCountersRequest(quote_ids=[target.id])
        )

        # Assert
        assert (result.checked, result.repaired) == (1, 1)
        repaired = await quote_service.get_quote(target.id)
        untouched = await quote_service.get_quote(other.id)
        assert (repaired.upvotes, repaired.downvotes) == (0, 0)
        assert (untouched.upvotes, untouched.downvotes) == (3, 3)

    @pytest.mark.asyncio
    async def test_missing_quote_is_skipped(self, unit_env):
        use_case = await unit_env.get(ReconcileCountersUseCase)

        result = await use_case.execute(ReconcileCountersRequest(quote_ids=[uuid4()]))

        assert (result.checked, result.repaired) == (0, 0)


class TestReconcileScript:
    """The reconcile script opens one request scope per quote."""

    @pytest.mark.asyncio
    async def test_each_quote_reconciled_in_its_own_scope(self):
        # Arrange
        container = build_test_container()
        async with container() as setup:
            quote_service = await setup.get(QuoteService)
            vote_service = await setup.get(VoteService)
            healthy = await quote_service.create_quote("Healthy")
            drifted = await quote_service.create_quote("Drifted")
            await vote_service.apply_vote(
                drifted.id, CallerIdentity(user_id=UserId(uuid4())), VoteDirection.UP
            )
            await quote_service.set_counters(drifted.id, upvotes=0, downvotes=2)

        # Act
        healthy_result = await reconcile_quote(container, healthy.id)
        drifted_result = await reconcile_quote(container, drifted.id)

        # Assert
        assert (healthy_result.checked, healthy_result.repaired) == (1, 0)
        assert (drifted_result.checked, drifted_result.repaired) == (1, 1)
        async with container() as check:
            quote_service = await check.get(QuoteService)
            fixed = await quote_service.get_quote(drifted.id)
        assert (fixed.upvotes, fixed.downvotes) == (1, 0)

        await container.close()
