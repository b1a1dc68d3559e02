"""Translation of domain errors to HTTP errors."""

from fastapi import HTTPException, status

from paire.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    InvitationEmailMismatchError,
    InvitationExpiredError,
    InvitationNotActionableError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvitationNotActionableError, status.HTTP_404_NOT_FOUND),
    (InvitationEmailMismatchError, status.HTTP_403_FORBIDDEN),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvitationExpiredError, status.HTTP_410_GONE),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException a route should raise."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
    )
