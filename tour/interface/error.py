"""Interface layer errors.

Translates domain errors into HTTP errors and renders the JSON error body
``{"error": {"code": ..., "message": ...}}`` shared by all endpoints.
"""

from fastapi import HTTPException, status

from tour.domain.error import (
    BusinessRuleViolationError,
    DeliveryError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

ERROR_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    422: "VALIDATION_ERROR",
    429: "TOO_MANY_REQUESTS",
    502: "BAD_GATEWAY",
}


def error_code(status_code: int) -> str:
    """Machine readable code for an HTTP status."""
    return ERROR_CODES.get(status_code, "INTERNAL_ERROR")


def error_body(status_code: int, message: str) -> dict:
    return {"error": {"code": error_code(status_code), "message": message}}


def http_error_from_domain(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, NotAuthorizedError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, (BusinessRuleViolationError, ValidationError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, DeliveryError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(status_code=status_code, detail=str(error))
