"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities, such as a
    vote that changes both the vote ledger and a post's counters.
    """

    pass
