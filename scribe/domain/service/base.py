"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the logic that sits between use cases and the
    repository/storage interfaces.
    """

    pass
