"""Custom exceptions for whereto."""


class WheretoError(Exception):
    """Base error, rendered as a JSON error response."""

    status_code = 500


class ValidationError(WheretoError):
    """Raised when inputs are invalid or incomplete."""

    status_code = 400


class AuthError(WheretoError):
    """Raised when an operation needs an authenticated user."""

    status_code = 403


class NotFoundError(WheretoError):
    """Raised when no schedules exist for the requested route."""

    status_code = 404


class ProviderError(WheretoError):
    """Raised when the schedule data provider fails."""


class NotImplementedFeatureError(WheretoError):
    """Raised for operations that are accepted but not built."""

    status_code = 501
