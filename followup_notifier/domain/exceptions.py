"""
Domain exceptions - Semantic error types for the follow-up flow.

Every failure of the follow-up pipeline is one of these. The API layer
turns them into the uniform error envelope.
"""

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
MISSING_FIELDS_MESSAGE = "Missing required fields: requestId or userId"
INVALID_FIELDS_MESSAGE = "Invalid fields: requestId and userId must be strings"


class FollowUpError(Exception):
    """Base class for follow-up domain errors."""

    pass


class MethodNotAllowed(FollowUpError):
    """Inbound method is neither POST nor OPTIONS."""

    def __init__(self) -> None:
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE)


class TriggerValidationError(FollowUpError):
    """requestId or userId is missing, empty, or not a string."""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE) -> None:
        super().__init__(message)


class RecordLookupError(FollowUpError):
    """Store query failed or did not return exactly one row."""

    pass


class DeliveryError(FollowUpError):
    """Email provider rejected or failed to accept the message."""

    pass
