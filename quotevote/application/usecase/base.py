"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases take a request model, call into the domain and return a
    response model. Domain errors propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
