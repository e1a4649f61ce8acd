"""
Amazon SES operations for Lambda handlers.

This module provides the email-sending collaborator used by the
verification email processor.
"""

import logging
import os
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.models import OutboundEmailRequest

logger = logging.getLogger(__name__)

# Configure SES client with timeouts to prevent infinite hangs
ses_config = Config(
    retries={
        'total_max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,  # 10 seconds to establish connection
    read_timeout=30      # 30 seconds max for reading response
)


class EmailDeliveryError(Exception):
    """Raised when SES rejects or cannot accept a send request."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


def create_ses_client(region: Optional[str] = None):
    """
    Create a boto3 SES client with timeout configuration.

    Args:
        region: AWS region (defaults to AWS_REGION, then AWS_DEFAULT_REGION)

    Returns:
        boto3.client: Configured SES client
    """
    region = region or os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', 'us-east-1'))

    client = boto3.client('ses', region_name=region, config=ses_config)
    logger.info(
        f"SES client initialized: region={region}, "
        f"connect_timeout=10s, read_timeout=30s, total_max_attempts=1 (no retries)"
    )
    return client


class SesEmailSender:
    """
    Sends OutboundEmailRequest objects through Amazon SES.

    Create once per process and reuse across warm invocations.
    """

    def __init__(self, client=None):
        self.client = client or create_ses_client()

    def send(self, request: OutboundEmailRequest) -> str:
        """
        Send one email through SES.

        Args:
            request: Email to send

        Returns:
            str: SES message id

        Raises:
            EmailDeliveryError: If SES rejects the request or is unreachable

        Example:
            >>> sender = SesEmailSender()
            >>> sender.send(OutboundEmailRequest(
            ...     to_addresses=["jane@example.com"],
            ...     source="noreply@example.com",
            ...     subject="Hello",
            ...     html_body="<p>Hi</p>"
            ... ))
            '0100018c...'
        """
        try:
            response = self.client.send_email(**request.to_ses_params())
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            logger.error(
                f"SES rejected email to {request.to_addresses}: "
                f"error_code={error_code}, error_message={error_message}"
            )
            raise EmailDeliveryError(
                f"SES send_email failed: {error_code}: {error_message}",
                error_code=error_code
            ) from e
        except BotoCoreError as e:
            logger.error(f"SES unreachable while sending to {request.to_addresses}: {e}")
            raise EmailDeliveryError(f"SES send_email failed: {e}") from e

        message_id = response['MessageId']
        logger.info(f"SES accepted email to {request.to_addresses}: message_id={message_id}")
        return message_id
