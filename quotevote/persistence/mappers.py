"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from quotevote.domain.model import Quote, User, Vote
from quotevote.domain.value import QuoteId, UserId, Username, VoteId, VoteType


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }


def row_to_quote(row: Dict[str, Any]) -> Quote:
    """Convert database row to Quote domain model.

    Args:
        row: Database row as dict

    Returns:
        Quote domain model
    """
    return Quote(
        id=QuoteId(_uuid(row["id"])),
        text=row["text"],
        author=row["author"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def quote_to_dict(quote: Quote) -> Dict[str, Any]:
    """Convert Quote domain model to database dict."""
    return quote.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        quote_id=QuoteId(_uuid(row["quote_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data
