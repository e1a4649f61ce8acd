"""
Verification email pipeline - core business logic.

This module handles one SNS registration notification:
1. Parse the registration from the first SNS record
2. Build the verification link
3. Render the HTML email
4. Send it through the injected email sender
5. Return HandlerResult (200 sent, 400 send failed)

Payload errors propagate to Lambda (invocation fault). Send errors are
caught, logged and returned as a 400 result.
"""

import logging
from typing import Dict, Any, Optional

from .models import (
    UserRegistration,
    OutboundEmailRequest,
    HandlerResult,
    VerificationEmailSettings,
)
from services import templates as template_service

logger = logging.getLogger(__name__)


class VerificationEmailProcessor:
    """
    Turns a registration notification into exactly one verification email.

    Args:
        sender: Object with send(OutboundEmailRequest) -> message id
        settings: Sender, subject and verification URL (defaults from env)
    """

    def __init__(self, sender, settings: Optional[VerificationEmailSettings] = None):
        self.sender = sender
        self.settings = settings or VerificationEmailSettings.from_env()

    def process(self, event: Dict[str, Any]) -> HandlerResult:
        """
        Process an SNS event carrying a user registration.

        Args:
            event: Lambda event with SNS records

        Returns:
            HandlerResult: sent() or send_failed()

        Raises:
            KeyError, IndexError, ValueError: If the event or message is malformed
        """
        registration = self._parse_registration(event)
        logger.info(f"Parsed registration for {registration.email}")

        request = self.build_request(registration)

        try:
            message_id = self.sender.send(request)
        except Exception as e:
            logger.error(f"Failed to send verification email to {registration.email}: {e}", exc_info=True)
            return HandlerResult.send_failed()

        logger.info(f"Verification email sent to {registration.email}: message_id={message_id}")
        return HandlerResult.sent()

    def build_request(self, registration: UserRegistration) -> OutboundEmailRequest:
        """Build the outbound email for a registration."""
        verification_link = template_service.build_verification_link(
            self.settings.verification_base_url,
            registration.email,
            registration.token
        )

        html_body = template_service.render_verification_email(
            first_name=registration.first_name,
            last_name=registration.last_name,
            verification_link=verification_link
        )

        return OutboundEmailRequest(
            to_addresses=[registration.email],
            source=self.settings.sender_address,
            subject=self.settings.subject,
            html_body=html_body
        )

    def _parse_registration(self, event: Dict[str, Any]) -> UserRegistration:
        """
        Extract the registration from the first SNS record.

        Raises:
            KeyError: If Records/Sns/Message is missing
            IndexError: If Records is empty
            ValueError: If the message is not a valid registration
        """
        records = event['Records']
        if len(records) > 1:
            logger.warning(f"Received {len(records)} records, only the first is processed")

        message = records[0]['Sns']['Message']
        return UserRegistration.from_message(message)
