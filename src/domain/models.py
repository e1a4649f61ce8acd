"""
Data models for the verification email domain.

These type-safe data structures define clear contracts between the Lambda
entry point, the processor and the SES sender.
"""

import json
import os
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

DEFAULT_VERIFICATION_BASE_URL = 'http://prod.polepeddiaravind.me/v1/verifyUserEmail'
DEFAULT_SENDER_ADDRESS = 'aravind@yprod.polepeddiaravind.me'
DEFAULT_SUBJECT = 'Subscribe to the link to use service'

REQUIRED_REGISTRATION_FIELDS = ('first_name', 'last_name', 'email', 'token')


@dataclass
class UserRegistration:
    """
    User registration data carried in the SNS message.

    Attributes:
        first_name: Display first name (used verbatim in the email body)
        last_name: Display last name (used verbatim in the email body)
        email: Destination address
        token: Opaque verification token
        username: Present in the payload but unused
        password: Present in the payload but unused (never shown in repr)
    """
    first_name: str
    last_name: str
    email: str
    token: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_message(cls, message: str) -> 'UserRegistration':
        """
        Decode the serialized SNS message into a UserRegistration.

        Args:
            message: JSON string from the SNS record

        Returns:
            UserRegistration: Parsed registration

        Raises:
            json.JSONDecodeError: If the message is not valid JSON
            ValueError: If the payload is not an object or lacks required fields
        """
        payload = json.loads(message)

        if not isinstance(payload, dict):
            raise ValueError(
                f"Registration message must be a JSON object, got {type(payload).__name__}"
            )

        missing = [name for name in REQUIRED_REGISTRATION_FIELDS if name not in payload]
        if missing:
            raise ValueError(f"Registration message missing fields: {', '.join(missing)}")

        return cls(
            first_name=payload['first_name'],
            last_name=payload['last_name'],
            email=payload['email'],
            token=payload['token'],
            username=payload.get('username'),
            password=payload.get('password')
        )


@dataclass
class OutboundEmailRequest:
    """
    A single email to be handed to the sending provider.

    Attributes:
        to_addresses: Destination list (one address per invocation)
        source: Sender address
        subject: Subject line
        html_body: Rendered HTML body
    """
    to_addresses: List[str]
    source: str
    subject: str
    html_body: str

    def to_ses_params(self) -> Dict[str, Any]:
        """Convert to keyword arguments for SES send_email."""
        return {
            'Source': self.source,
            'Destination': {
                'ToAddresses': list(self.to_addresses),
            },
            'Message': {
                'Subject': {'Data': self.subject},
                'Body': {
                    'Html': {'Data': self.html_body}
                },
            },
        }


@dataclass
class HandlerResult:
    """
    Outcome of one invocation, returned to Lambda as a plain dict.

    Attributes:
        status_code: 200 when the email was sent, 400 when sending failed
        body: Short human-readable outcome
    """
    status_code: int
    body: str

    @classmethod
    def sent(cls) -> 'HandlerResult':
        return cls(status_code=200, body='Email sent!')

    @classmethod
    def send_failed(cls) -> 'HandlerResult':
        return cls(status_code=400, body='Sending failed')

    @property
    def success(self) -> bool:
        return self.status_code == 200

    def to_dict(self) -> Dict[str, Any]:
        return {
            'statusCode': self.status_code,
            'body': self.body
        }


@dataclass
class VerificationEmailSettings:
    """
    Fixed values used to build every verification email.

    Attributes:
        verification_base_url: Verification endpoint, without query string
        sender_address: SES verified sender
        subject: Subject line
    """
    verification_base_url: str = DEFAULT_VERIFICATION_BASE_URL
    sender_address: str = DEFAULT_SENDER_ADDRESS
    subject: str = DEFAULT_SUBJECT

    @classmethod
    def from_env(cls) -> 'VerificationEmailSettings':
        """Read settings from environment variables, falling back to defaults."""
        return cls(
            verification_base_url=os.environ.get('VERIFICATION_BASE_URL', DEFAULT_VERIFICATION_BASE_URL),
            sender_address=os.environ.get('SENDER_EMAIL', DEFAULT_SENDER_ADDRESS),
            subject=os.environ.get('EMAIL_SUBJECT', DEFAULT_SUBJECT)
        )
