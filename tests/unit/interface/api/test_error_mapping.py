"""Unit tests for domain error to HTTP translation."""

import pytest

from quotevote.domain.error import (
    AlreadyExistsError,
    DomainError,
    DuplicateVoteError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    VoteTimeoutError,
)
from quotevote.interface.error import to_http_exception


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidArgumentError("Quote text is required"), 400),
        (UnauthorizedError("Invalid credentials"), 401),
        (NotFoundError("Quote", "abc"), 404),
        (AlreadyExistsError("User", "alice"), 409),
        (DuplicateVoteError("abc", "upvote"), 409),
        (VoteTimeoutError("abc", 5.0), 503),
        (DomainError("unexpected"), 500),
    ],
)
def test_domain_errors_map_to_status_codes(error, status_code):
    """Each domain error should carry its own HTTP status and message."""
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == str(error)


def test_vote_timeout_asks_client_to_retry():
    exc = to_http_exception(VoteTimeoutError("abc", 5.0))

    assert exc.headers == {"Retry-After": "1"}
