"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase
from .reconcile_counters import (
    ReconcileCountersRequest,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "ReconcileCountersRequest",
    "ReconcileCountersResponse",
    "ReconcileCountersUseCase",
]
