"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the records the domain works with and the interfaces
(ports) it requires from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class Trigger:
    """Inbound payload naming the user and the request to follow up on."""

    request_id: str
    user_id: str


@dataclass(frozen=True)
class UserRecord:
    """Projection of a row in the `users` collection."""

    email: str
    full_name: str


@dataclass(frozen=True)
class RequestRecord:
    """Projection of a row in the `requests` collection."""

    title: str
    description: str
    created_at: datetime


@dataclass(frozen=True)
class OutboundEmail:
    """Rendered message ready for the email provider."""

    sender: str
    recipient: str
    subject: str
    html: str


class RecordStore(Protocol):
    """Port interface for the external structured-data store."""

    async def fetch_user(self, user_id: str) -> UserRecord:
        """
        Fetch exactly one user by id.

        Raises:
            RecordLookupError: If the query fails or does not match exactly one row
        """
        ...

    async def fetch_request(self, request_id: str) -> RequestRecord:
        """
        Fetch exactly one request by id.

        Raises:
            RecordLookupError: If the query fails or does not match exactly one row
        """
        ...


class FollowUpRenderer(Protocol):
    """Port interface for rendering the follow-up email body."""

    def render(self, user: UserRecord, request: RequestRecord, request_link: str) -> str:
        """Return the HTML body for the follow-up email."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    async def send(self, email: OutboundEmail) -> str:
        """
        Submit a message to the delivery service.

        Returns:
            Provider-assigned message identifier

        Raises:
            DeliveryError: If the provider reports a failure
        """
        ...
