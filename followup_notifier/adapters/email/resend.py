"""
Resend email sender adapter - Implements EmailSender protocol.

Submits messages to the Resend HTTP API (`POST /emails`). The provider
owns delivery guarantees; this adapter makes exactly one call per message.
"""

import logging

import httpx

from followup_notifier.adapters._utils import error_message
from followup_notifier.domain.exceptions import DeliveryError
from followup_notifier.domain.ports import OutboundEmail

logger = logging.getLogger(__name__)


class ResendEmailSender:
    """
    Implements EmailSender protocol via the Resend API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        api_url: str = "https://api.resend.com",
    ) -> None:
        """
        Initialize sender with a shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            api_key: Resend API key
            api_url: Resend API base URL
        """
        self._client = http_client
        self._url = f"{api_url.rstrip('/')}/emails"
        self._headers = {"Authorization": f"Bearer {api_key}"}

    async def send(self, email: OutboundEmail) -> str:
        """
        Send one message through Resend.

        Returns:
            The Resend message id

        Raises:
            DeliveryError: On transport failure, an error response, or a
                success response without an id
        """
        payload = {
            "from": email.sender,
            "to": email.recipient,
            "subject": email.subject,
            "html": email.html,
        }

        try:
            response = await self._client.post(self._url, json=payload, headers=self._headers)
        except httpx.HTTPError as e:
            raise DeliveryError(str(e) or type(e).__name__) from e

        if response.is_error:
            raise DeliveryError(error_message(response))

        try:
            email_id = response.json().get("id")
        except (ValueError, AttributeError) as e:
            raise DeliveryError(f"Unexpected response from email provider: {response.text}") from e

        if not email_id:
            raise DeliveryError(f"Unexpected response from email provider: {response.text}")

        logger.debug("Resend accepted message %s for %s", email_id, email.recipient)
        return str(email_id)
