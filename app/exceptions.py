from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when request input is missing or has the wrong shape (400)."""

    http_status = 400
    default_message = "Invalid input"


class UnauthorizedError(DailyDietError):
    """Raised when a request carries no session cookie (401)."""

    http_status = 401
    default_message = "Unauthorized"


class NotFoundError(DailyDietError):
    """Raised when a requested resource is absent or not owned by the caller (404)."""

    http_status = 404
    default_message = "Not found"


class InternalError(DailyDietError):
    """Raised when the store fails to produce a result (500)."""

    http_status = 500
    default_message = "Internal error"
