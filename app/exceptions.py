"""Application error taxonomy. Each error carries the HTTP status it maps to."""


class AppError(Exception):
    """Base exception for all domain errors."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400


class AuthError(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class PermissionDeniedError(AppError):
    """Authenticated but not allowed to act on this resource."""

    status_code = 403


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    status_code = 404


class StateError(AppError):
    """Operation is not valid for the entity's current state."""

    status_code = 400


class ConflictError(AppError):
    """Uniqueness violation that an upsert could not resolve."""

    status_code = 409


class StoreError(AppError):
    """Underlying database failure."""

    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)
