"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from quotevote.domain.error import (
    AlreadyExistsError,
    DomainError,
    DuplicateVoteError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    VoteTimeoutError,
)

# Most specific first; the first isinstance match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (DuplicateVoteError, status.HTTP_409_CONFLICT),
    (VoteTimeoutError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error (500 if unmapped)."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: DomainError) -> HTTPException:
    """Build the HTTPException a route should raise for a domain error.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the mapped status and the error message
    """
    status_code = status_for(error)
    headers = None
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        headers = {"Retry-After": "1"}
    return HTTPException(status_code=status_code, detail=str(error), headers=headers)
