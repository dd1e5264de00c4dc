from fastapi import status


class RollcallError(Exception):
    """Base exception for errors reported back to the API caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(RollcallError):
    """Raised when required fields are missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Unauthorized(RollcallError):
    """Raised when the admin secret is missing or wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Conflict(RollcallError):
    """Raised when a unique key is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(RollcallError):
    """Raised for unexpected storage or connection failures."""
