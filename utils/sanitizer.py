"""
Input Sanitization Module

Cleans user-entered names and free text before storage.
"""

import re


def sanitize_text(text, max_length=10000):
    """
    Strip and truncate free text.

    Jinja autoescapes on render, so text is stored as typed rather than
    HTML-escaped.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove null bytes and control characters, keep newlines and tabs
    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=200, default=''):
    """
    Sanitize a single-line name (material, recipe, packaging, product).

    Args:
        name: The name to sanitize
        max_length: Maximum allowed length (default 200)
        default: Returned when nothing is left after cleaning

    Returns:
        Sanitized name
    """
    if not name:
        return default

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length - 3] + '...'

    return name or default


def sanitize_email(email, max_length=255):
    """Lower-cased email, or '' if it does not look like one."""
    email = sanitize_name(email, max_length=max_length).lower()
    if not re.fullmatch(r'[^@\s]+@[^@\s]+\.[^@\s]+', email):
        return ''
    return email
