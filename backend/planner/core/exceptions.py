"""
Custom exception classes for unified error handling.

Every error carries the HTTP status it is rendered with. Messages of
5xx errors never reach the client; see `access.json_response`.
"""


class AppBaseError(Exception):
    """Base exception for all application errors."""
    status_code: int = 500

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class BadRequestError(AppBaseError):
    """Raised for malformed bodies, missing or malformed ids."""
    status_code = 400


class UnauthorizedError(AppBaseError):
    """Raised when the admin token is missing, wrong, or not configured."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class MethodNotAllowedError(AppBaseError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class StoreError(AppBaseError):
    """Raised when the data store call fails (connectivity, constraints, ...)."""
    status_code = 500


class RecordNotFoundError(StoreError):
    """Raised when an update by id matches no row.

    Still rendered as a 500: callers cannot tell it apart from any other
    store failure.
    """

    def __init__(self, table: str, record_id: str):
        super().__init__(
            message=f"No row in '{table}' with id {record_id}",
            detail="update matched zero rows",
        )
        self.table = table
        self.record_id = record_id


class ConfigurationError(StoreError):
    """Raised when the store credentials are missing."""
