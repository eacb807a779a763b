"""Error taxonomy shared by services and the HTTP layer."""


class SaveFarmError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(SaveFarmError):
    """Missing or invalid required fields."""

    status_code = 400


class ConflictError(SaveFarmError):
    """Duplicate username on registration.

    Reported as 400 so existing clients keep treating it as a form error.
    """

    status_code = 400


class UnauthorizedError(SaveFarmError):
    """Bad credentials at login."""

    status_code = 401


class UnauthenticatedError(SaveFarmError):
    """Missing or unknown session token."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class NotFoundError(SaveFarmError):
    """Unknown recipe, meal or log entry."""

    status_code = 404


class StorageError(SaveFarmError):
    """JSON document could not be read, parsed or written."""

    status_code = 500


class UpstreamError(SaveFarmError):
    """A third-party HTTP service failed."""

    status_code = 502
