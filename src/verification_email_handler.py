"""
AWS Lambda handler for sending user verification emails from SNS.

Thin orchestration layer that delegates to VerificationEmailProcessor.
Policy: send failures return statusCode 400 (no rethrow, so no Lambda retry).
Malformed payloads raise and fail the invocation.
"""

import logging
import os
from typing import Dict, Any

from domain.models import VerificationEmailSettings
from domain.verification_processor import VerificationEmailProcessor
from services.ses import SesEmailSender

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')

# Initialize sender and processor once at module level (reused across invocations)
settings = VerificationEmailSettings.from_env()
ses_sender = SesEmailSender()
verification_processor = VerificationEmailProcessor(sender=ses_sender, settings=settings)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Send a verification email for a registration delivered by SNS.

    Args:
        event: Lambda event with SNS records
        context: Lambda context

    Returns:
        Dict with statusCode (200 or 400) and body
    """
    logger.info(f"Environment: {ENVIRONMENT}")
    logger.info(f"Received {len(event.get('Records', []))} SNS record(s)")

    result = verification_processor.process(event)

    if result.success:
        logger.info("Verification email processed: sent")
    else:
        logger.warning(f"Verification email processed with ERRORS: {result.body}")

    return result.to_dict()

