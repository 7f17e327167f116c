"""Unit tests for create, update and delete quote use cases."""

from uuid import uuid4

import pytest

from quotevote.application.usecase.quote import (
    CreateQuoteRequest,
    CreateQuoteUseCase,
    DeleteQuoteRequest,
    DeleteQuoteUseCase,
    UpdateQuoteRequest,
    UpdateQuoteUseCase,
)
from quotevote.domain.error import InvalidArgumentError, NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestQuoteLifecycle:
    """Create, edit and delete a quote through the use cases."""

    @pytest.mark.asyncio
    async def test_create_update_delete(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateQuoteUseCase)
        update = await unit_env.get(UpdateQuoteUseCase)
        delete = await unit_env.get(DeleteQuoteUseCase)

        # Act
        created = await create.execute(CreateQuoteRequest(text="Veni, vidi, vici"))
        updated = await update.execute(
            UpdateQuoteRequest(quote_id=created.id, author="Julius Caesar")
        )
        deleted = await delete.execute(DeleteQuoteRequest(quote_id=created.id))

        # Assert
        assert created.author == "Unknown"
        assert updated.text == "Veni, vidi, vici"
        assert updated.author == "Julius Caesar"
        assert deleted.deleted is True

    @pytest.mark.asyncio
    async def test_create_without_text_raises(self, unit_env):
        """Missing text should surface as InvalidArgumentError."""
        create = await unit_env.get(CreateQuoteUseCase)

        with pytest.raises(InvalidArgumentError):
            await create.execute(CreateQuoteRequest(author="Nobody"))

    @pytest.mark.asyncio
    async def test_update_and_delete_unknown_quote_raise(self, unit_env):
        update = await unit_env.get(UpdateQuoteUseCase)
        delete = await unit_env.get(DeleteQuoteUseCase)
        missing = uuid4()

        with pytest.raises(NotFoundError):
            await update.execute(UpdateQuoteRequest(quote_id=missing, text="Hi"))
        with pytest.raises(NotFoundError):
            await delete.execute(DeleteQuoteRequest(quote_id=missing))

    @pytest.mark.asyncio
    async def test_response_uses_camel_case_timestamps(self, unit_env):
        create = await unit_env.get(CreateQuoteUseCase)

        created = await create.execute(CreateQuoteRequest(text="Veni, vidi, vici"))
        body = created.model_dump(by_alias=True)

        assert "createdAt" in body
        assert "updatedAt" in body
        assert body["upvotes"] == 0
