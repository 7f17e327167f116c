"""Quote and vote routes.

Every route here requires an authenticated caller.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel

from quotevote.application.usecase.quote import (
    CreateQuoteRequest,
    CreateQuoteUseCase,
    DeleteQuoteRequest,
    DeleteQuoteResponse,
    DeleteQuoteUseCase,
    ListQuotesRequest,
    ListQuotesResponse,
    ListQuotesUseCase,
    QuoteResponse,
    UpdateQuoteRequest,
    UpdateQuoteUseCase,
)
from quotevote.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from quotevote.config import AuthSettings
from quotevote.domain.error import DomainError
from quotevote.domain.service import JWTService
from quotevote.domain.value import VoteDirection
from quotevote.interface.api.identity import require_user_id
from quotevote.interface.error import to_http_exception
from quotevote.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"], route_class=DishkaRoute)


class QuoteEditBody(BaseModel):
    """Fields accepted when editing a quote."""

    text: str | None = None
    author: str | None = None


@router.get("", response_model=ListQuotesResponse)
async def list_quotes(
    request: Request,
    list_quotes_use_case: FromDishka[ListQuotesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    order: str | None = None,
    filter: str | None = None,
) -> ListQuotesResponse:
    """List quotes with search, filter, sort and pagination.

    Invalid parameter values fall back to their defaults.

    Example:
        GET /quotes?page=2&limit=10&search=life&sortBy=createdAt&order=asc
    """
    require_user_id(request, jwt_service, auth_settings)

    return await list_quotes_use_case.execute(
        ListQuotesRequest(
            page=page,
            limit=limit,
            search=search,
            sort_by=sort_by,
            order=order,
            filter=filter,
        )
    )


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    body: CreateQuoteRequest,
    request: Request,
    create_quote_use_case: FromDishka[CreateQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> QuoteResponse:
    """Create a quote.

    Raises:
        HTTPException: 401 if not authenticated, 400 if text is blank
    """
    require_user_id(request, jwt_service, auth_settings)

    try:
        return await create_quote_use_case.execute(body)
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{quote_id}", response_model=QuoteResponse)
async def update_quote(
    quote_id: UUID,
    body: QuoteEditBody,
    request: Request,
    update_quote_use_case: FromDishka[UpdateQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> QuoteResponse:
    """Edit the text and/or author of a quote.

    Raises:
        HTTPException: 401 if not authenticated, 400 on blank text,
            404 if the quote doesn't exist
    """
    require_user_id(request, jwt_service, auth_settings)

    try:
        return await update_quote_use_case.execute(
            UpdateQuoteRequest(quote_id=quote_id, text=body.text, author=body.author)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{quote_id}", response_model=DeleteQuoteResponse)
async def delete_quote(
    quote_id: UUID,
    request: Request,
    delete_quote_use_case: FromDishka[DeleteQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteQuoteResponse:
    """Delete a quote and all of its votes.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the quote doesn't exist
    """
    require_user_id(request, jwt_service, auth_settings)

    try:
        return await delete_quote_use_case.execute(
            DeleteQuoteRequest(quote_id=quote_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


async def _cast_vote(
    quote_id: UUID,
    direction: VoteDirection,
    request: Request,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_settings: AuthSettings,
) -> QuoteResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(quote_id=quote_id, user_id=user_id, direction=direction)
        )
    except DomainError as e:
        logger.info(f"Vote {direction.value} on {quote_id} rejected: {e}")
        raise to_http_exception(e)


@router.patch("/{quote_id}/upvote", response_model=QuoteResponse)
async def upvote_quote(
    quote_id: UUID,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> QuoteResponse:
    """Upvote a quote, or switch an existing downvote to an upvote.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the quote doesn't
            exist, 409 if already upvoted, 503 if the quote stayed busy
    """
    return await _cast_vote(
        quote_id,
        VoteDirection.UP,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_settings,
    )


@router.patch("/{quote_id}/downvote", response_model=QuoteResponse)
async def downvote_quote(
    quote_id: UUID,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> QuoteResponse:
    """Downvote a quote, or switch an existing upvote to a downvote.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the quote doesn't
            exist, 409 if already downvoted, 503 if the quote stayed busy
    """
    return await _cast_vote(
        quote_id,
        VoteDirection.DOWN,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_settings,
    )
