"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging follow-up messages for local development.
"""

import logging
from uuid import uuid4

from followup_notifier.domain.ports import OutboundEmail

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Selected with EMAIL_BACKEND=console; nothing leaves the process.
    """

    async def send(self, email: OutboundEmail) -> str:
        """
        Log the message at INFO level (simulates email delivery).

        Returns:
            A locally generated message id prefixed with "console-"
        """
        email_id = f"console-{uuid4()}"
        logger.info(
            "[FOLLOW-UP] To: %s Subject: %s Id: %s\n%s",
            email.recipient,
            email.subject,
            email_id,
            email.html,
        )
        return email_id
