"""
Input Sanitization Module

Cleans names typed into the ingredient and product forms before they are
stored and echoed back to the browser.
"""

import html
import re


def sanitize_name(name, max_length=200):
    """
    Sanitize an ingredient or product name for safe storage and display.

    Returns an empty string when nothing printable is left, so callers can
    treat it as a missing name.
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    name = html.escape(name)

    if len(name) > max_length:
        name = name[:max_length - 3] + '...'

    return name
