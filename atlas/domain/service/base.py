"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans repositories or does not belong
    to a single entity, such as paginating a comment thread.
    """

    pass
