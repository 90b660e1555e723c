"""Interface layer errors.

Maps domain and persistence failures onto HTTP responses. Anything not
listed here propagates and becomes a 500.
"""

from fastapi import HTTPException, status

from atlas.domain.error import InvalidIdentifierError, NotFoundError
from atlas.persistence.error import StoreUnavailableError

# Errors a route translates; everything else propagates
HANDLED_ERRORS = (InvalidIdentifierError, NotFoundError, StoreUnavailableError)


def to_http_exception(error: Exception) -> HTTPException:
    """Build the HTTP error for a handled failure.

    Args:
        error: One of ``HANDLED_ERRORS``

    Returns:
        HTTPException carrying a human-readable detail
    """
    if isinstance(error, InvalidIdentifierError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, StoreUnavailableError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment store temporarily unavailable, retry the request",
        )
    raise TypeError(f"Unhandled error type: {type(error).__name__}")
