"""
Email template utilities.

Templates are plain HTML files packaged with the Lambda under templates/
and cached in memory for warm invocations.
"""

import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

VERIFICATION_TEMPLATE = 'verification_email.html'

# Path to templates directory (relative to this file)
# src/services/templates.py -> src/templates/
# In Lambda: /var/task/templates/
TEMPLATES_DIR = Path(__file__).parent.parent / 'templates'

# Module-level cache: {template_name: content}
_template_cache: Dict[str, str] = {}


def build_verification_link(base_url: str, email: str, token: str) -> str:
    """
    Build the link the user clicks to verify their address.

    Values are concatenated as-is; they are not percent-encoded.

    Example:
        >>> build_verification_link("http://host/v1/verifyUserEmail", "a@b.com", "t1")
        'http://host/v1/verifyUserEmail?email=a@b.com&token=t1'
    """
    return f'{base_url}?email={email}&token={token}'


def load_template(template_name: str) -> str:
    """
    Load an email template from the templates directory.

    Args:
        template_name: Template file name (e.g., "verification_email.html")

    Returns:
        str: Template content

    Raises:
        ValueError: If the template file does not exist
    """
    if template_name in _template_cache:
        return _template_cache[template_name]

    template_path = TEMPLATES_DIR / template_name
    try:
        with open(template_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        logger.error(f"Template not found: {template_path}")
        raise ValueError(f"Template '{template_name}' not found")

    logger.info(f"Loaded template {template_name}: {len(content)} characters")
    _template_cache[template_name] = content
    return content


def format_template(template: str, **values) -> str:
    """
    Substitute {placeholders} in a template.

    Values are inserted verbatim (no HTML escaping); braces inside values
    are not interpreted as placeholders.

    Raises:
        ValueError: If the template references a value that was not given
    """
    try:
        return template.format(**values)
    except KeyError as e:
        missing_var = str(e).strip("'")
        logger.error(f"Missing variable in template: {missing_var}")
        raise ValueError(f"Missing required variable in template: {missing_var}")


def render_verification_email(first_name: str, last_name: str, verification_link: str) -> str:
    """Render the HTML body of the verification email."""
    template = load_template(VERIFICATION_TEMPLATE)
    return format_template(
        template,
        first_name=first_name,
        last_name=last_name,
        verification_link=verification_link
    )


def clear_cache() -> None:
    """Clear the template cache."""
    _template_cache.clear()
