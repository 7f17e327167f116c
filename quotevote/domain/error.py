"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when input violates a domain rule (e.g. blank quote text)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when creating a resource whose unique key is taken."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class DuplicateVoteError(DomainError):
    """Raised when a user repeats the vote they already hold on a quote."""

    def __init__(self, quote_id: str, vote_type: str):
        self.quote_id = quote_id
        self.vote_type = vote_type
        super().__init__(f"User already cast {vote_type} on quote {quote_id}")


class UnauthorizedError(DomainError):
    """Raised on bad credentials or a missing/invalid session."""

    pass


class VoteTimeoutError(DomainError):
    """Raised when a vote could not acquire its quote lock in time.

    Nothing has been written when this is raised.
    """

    def __init__(self, quote_id: str, timeout: float):
        self.quote_id = quote_id
        self.timeout = timeout
        super().__init__(
            f"Timed out after {timeout}s waiting to update quote {quote_id}"
        )
