"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries a human-readable, field-level message that is safe to show
    to API clients as-is.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    The message is the stable client-facing text, e.g. "Post not found".
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a write loses a race against a concurrent write."""

    pass


class VoteConflictError(ConflictError):
    """Raised when a vote insert violates the one-vote-per-voter constraint."""

    def __init__(self, target: str, voter: str):
        self.target = target
        self.voter = voter
        super().__init__(f"Concurrent vote by {voter} on {target}")
