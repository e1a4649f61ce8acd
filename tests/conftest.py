"""
Pytest configuration and fixtures for all tests.
"""

import json
import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')


@pytest.fixture
def make_sns_event():
    """Factory wrapping a registration payload in an SNS Lambda event."""
    def _make(payload):
        return {
            "Records": [{
                "EventSource": "aws:sns",
                "EventVersion": "1.0",
                "Sns": {
                    "Type": "Notification",
                    "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
                    "Subject": None,
                    "Message": payload if isinstance(payload, str) else json.dumps(payload)
                }
            }]
        }
    return _make


@pytest.fixture
def registration_payload():
    """Registration payload as published to SNS by the user service."""
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "password": "s3cret-Passw0rd",
        "username": "jane@x.com",
        "email": "jane@x.com",
        "token": "abc123"
    }


@pytest.fixture
def sns_event():
    """Load sample SNS event from test data."""
    with open(os.path.join(os.path.dirname(__file__), 'events', 'sns-event.json')) as f:
        return json.load(f)
