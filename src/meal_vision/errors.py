"""Application error types rendered by the API layer."""

from typing import Any


class AppError(Exception):
    """Base exception carrying an HTTP status and optional details."""

    def __init__(self, message: str, status_code: int = 400, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(AppError):
    """Input rejected before any state change."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=422, details=details)


class PortionValidationError(ValidationError):
    """Portion edit with a non-positive or non-finite gram value."""

    def __init__(self, portion_grams: float):
        super().__init__(
            message="Portion must be greater than zero",
            details={"portion_grams": portion_grams},
        )


class NotFoundError(AppError):
    """Resource not found for the requesting user."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            status_code=404,
            details={"resource": resource, "id": resource_id},
        )


class AuthenticationError(AppError):
    """Missing or invalid bearer token."""

    def __init__(self, details: Any = None):
        super().__init__(message="Unauthorized", status_code=401, details=details)


class ProfileRequiredError(AppError):
    """An operation needs a stored user profile."""

    def __init__(self):
        super().__init__(
            message="Profile required",
            status_code=409,
            details=(
                "Please complete your profile first to get personalized "
                "recommendations."
            ),
        )


class PersistenceError(AppError):
    """A database write or read was rejected."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=500, details=details)


class VisionInferenceError(AppError):
    """The vision model call failed (network, auth, quota)."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=502, details=details)
