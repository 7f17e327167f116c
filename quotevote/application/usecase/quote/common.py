"""Quote response models shared by quote and vote use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from quotevote.domain.model import Quote


class QuoteResponse(BaseModel):
    """Quote as returned by the API."""

    id: str
    text: str
    author: str
    upvotes: int
    downvotes: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_domain(cls, quote: Quote) -> "QuoteResponse":
        """Build response from a domain quote."""
        return cls(
            id=str(quote.id),
            text=quote.text,
            author=quote.author,
            upvotes=quote.upvotes,
            downvotes=quote.downvotes,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )
