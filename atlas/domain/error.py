"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when a caller-supplied identifier is not a well-formed ID.

    Raised before any store access so malformed input never costs a query.
    """

    def __init__(self, resource: str, raw_value: str):
        self.resource = resource
        self.raw_value = raw_value
        super().__init__(f"Invalid {resource} ID format")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
