"""
Follow-up domain service - orchestrates a single follow-up notification.

Pipeline (strictly sequential, first failure short-circuits):

    validate trigger -> fetch user -> fetch request -> render -> send

Nothing is retried or persisted here. Delivery guarantees belong to the
email provider; calling twice sends twice.
"""

import logging
from dataclasses import dataclass
from urllib.parse import quote

from .exceptions import TriggerValidationError
from .ports import EmailSender, FollowUpRenderer, OutboundEmail, RecordStore, Trigger

logger = logging.getLogger(__name__)


@dataclass
class FollowUpService:
    """
    Domain service for follow-up emails.

    Looks up the user and the request, renders the message and hands it
    to the email sender.
    """

    store: RecordStore
    renderer: FollowUpRenderer
    email_sender: EmailSender
    app_url: str
    sender_address: str

    async def send_follow_up(self, trigger: Trigger) -> str:
        """
        Send the follow-up email for one request.

        Args:
            trigger: Request and user identifiers from the inbound body

        Returns:
            Provider-assigned message identifier

        Raises:
            TriggerValidationError: If either identifier is empty
            RecordLookupError: If the user or the request cannot be fetched
            DeliveryError: If the email provider reports a failure
        """
        self._validate(trigger)

        user = await self.store.fetch_user(trigger.user_id)
        request = await self.store.fetch_request(trigger.request_id)

        html = self.renderer.render(user, request, self.request_link(trigger.request_id))
        email = OutboundEmail(
            sender=self.sender_address,
            recipient=user.email,
            subject=f"Follow-up: {request.title}",
            html=html,
        )

        email_id = await self.email_sender.send(email)
        logger.info(
            "Follow-up sent for request %s to %s (email id %s)",
            trigger.request_id,
            user.email,
            email_id,
        )
        return email_id

    def request_link(self, request_id: str) -> str:
        """Deep link back to the request in the application."""
        return f"{self.app_url.rstrip('/')}/requests/{quote(request_id, safe='')}"

    def _validate(self, trigger: Trigger) -> None:
        if not trigger.request_id or not trigger.user_id:
            raise TriggerValidationError()
