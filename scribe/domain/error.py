"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Field-level validation failure.

    ``errors`` maps each failing field to its list of messages.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(f"Validation failed for: {', '.join(sorted(errors))}")
