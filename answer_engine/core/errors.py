"""Error taxonomy shared by services and routes.

Services raise these; the handlers registered in ``answer_engine.main``
render them as ``{"message": ...}`` with the matching status code.
"""
from typing import Any, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, **self.extra}


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation error"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Not authenticated"


class NotFoundError(AppError):
    """Entity absent or not owned by the caller.

    Both cases share one response so non-owners cannot probe for ids.
    """

    status_code = 404
    default_message = "Not found"


class PreconditionFailedError(AppError):
    """A moderation transition was requested from the wrong state.

    Rendered as 404 like an ownership miss; the dashboard treats both as
    "nothing to act on".
    """

    status_code = 404
    default_message = "Content not in a valid state for this action"


class UpstreamError(AppError):
    status_code = 502
    default_message = "AI service temporarily unavailable"


class ConfigurationError(AppError):
    status_code = 500
    default_message = "Service is not configured"


class InternalError(AppError):
    status_code = 500
