"""Custom exceptions for price watch actions.

Each exception carries a stable error code and the HTTP status it is
reported with.
"""


class ActionError(Exception):
    """Base exception for user-facing action failures."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, detail=None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class UnauthorizedError(ActionError):
    """No authenticated user on the request."""

    code = "UNAUTHORIZED"
    status_code = 401
    default_message = "You must be signed in to perform this action."


class NotFoundError(ActionError):
    """Record missing or not owned by the caller."""

    code = "NOT_FOUND"
    status_code = 404
    default_message = "Price watch item not found."


class ValidationFailedError(ActionError):
    """Input rejected before the action ran."""

    code = "BAD_REQUEST"
    status_code = 400
    default_message = "Invalid input."
