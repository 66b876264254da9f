"""
Domain layer - Pure business logic with zero framework imports.

This package contains the follow-up flow: the records it reads, the
ports it needs from infrastructure and the service that ties them
together.
"""

from .exceptions import (
    DeliveryError,
    FollowUpError,
    MethodNotAllowed,
    RecordLookupError,
    TriggerValidationError,
)
from .followup import FollowUpService
from .ports import (
    EmailSender,
    FollowUpRenderer,
    OutboundEmail,
    RecordStore,
    RequestRecord,
    Trigger,
    UserRecord,
)

__all__ = [
    "DeliveryError",
    "EmailSender",
    "FollowUpError",
    "FollowUpRenderer",
    "FollowUpService",
    "MethodNotAllowed",
    "OutboundEmail",
    "RecordLookupError",
    "RecordStore",
    "RequestRecord",
    "Trigger",
    "TriggerValidationError",
    "UserRecord",
]
