"""Text sanitization utilities."""

import re
from typing import Any

LABEL_MAX_LENGTH = 120
STATEMENT_MAX_LENGTH = 1000


def sanitize_text(text: str | None, max_length: int = 500) -> str | None:
    """
    Sanitize untrusted text fields.

    Removes control characters and truncates to max_length.
    Apply to: goal labels, purpose statements, free-text answers.

    Args:
        text: Text to sanitize (may be None)
        max_length: Maximum length before truncation

    Returns:
        Sanitized text or None if input was None
    """
    if text is None:
        return None

    # Remove control characters (including \r, \x00-\x1f, \x7f-\x9f)
    text = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", text)

    # Truncate if needed
    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text.strip()


def sanitize_label(text: Any) -> str | None:
    """Sanitize a short display label; blank or non-string labels become None."""
    if not isinstance(text, str):
        return None
    cleaned = sanitize_text(text, max_length=LABEL_MAX_LENGTH)
    return cleaned or None
