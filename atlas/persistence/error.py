"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StoreUnavailableError(PersistenceError):
    """The comment store could not answer in time.

    Raised for connection failures and statement timeouts. Callers should
    surface it as a transient failure; the request is safe to retry.
    """

    pass
