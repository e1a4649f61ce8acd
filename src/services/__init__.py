"""
Service functions for Lambda handler operations.

This package contains the SES email-sending collaborator and the email
template helpers.
"""

__all__ = ['ses', 'templates']
