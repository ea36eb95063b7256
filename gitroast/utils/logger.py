"""Logging configuration and log-redaction helpers"""

import logging
import re
import sys
from typing import Any, Optional

REDACTED = "***REDACTED***"
MAX_LOGGED_TEXT = 500

_SENSITIVE_KEYS = (
    "authorization",
    "api_key",
    "apikey",
    "token",
    "secret",
    "password",
    "session",
    "cookie",
)

_PAYLOAD_KEYS = ("body", "prompt", "content", "response_text")

_INLINE_CREDENTIAL = re.compile(
    r"(?i)\b(authorization|access_token|api_key|apikey|token|key|secret|password)"
    r"(\s*[:=]\s*)"
    r"(?:bearer\s+)?"
    r"[^\s&,;\"']+"
)
_BEARER_TOKEN = re.compile(r"(?i)\b(bearer)(\s+)[^\s&,;\"']+")


def setup_logger(
    name: str,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with consistent formatting

    Args:
        name: Logger name
        level: Logging level
        format_string: Custom format string

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if format_string is None:
        format_string = (
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SENSITIVE_KEYS)


def _scrub_text(text: str) -> str:
    for pattern in (_INLINE_CREDENTIAL, _BEARER_TOKEN):
        text = pattern.sub(lambda match: f"{match.group(1)}{match.group(2)}{REDACTED}", text)
    return text


def sanitize_for_log(value: Any, key: Optional[str] = None) -> Any:
    """
    Mask credentials and bulky payloads before they reach a log record

    Args:
        value: Value to sanitize (str, dict, list or scalar)
        key: Field name the value was stored under, if any

    Returns:
        Sanitized copy of the value
    """
    if key is not None and _is_sensitive_key(key):
        return REDACTED

    if isinstance(value, dict):
        return {item_key: sanitize_for_log(item, key=str(item_key)) for item_key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [sanitize_for_log(item) for item in value]

    if isinstance(value, str):
        if key is not None and key.lower() in _PAYLOAD_KEYS:
            return f"<redacted payload: {len(value)} chars>"
        scrubbed = _scrub_text(value)
        if len(scrubbed) > MAX_LOGGED_TEXT:
            return f"<redacted payload: {len(scrubbed)} chars>"
        return scrubbed

    return value


def sanitize_log_extra(**fields: Any) -> dict[str, Any]:
    """Build an ``extra=`` mapping with every field sanitized."""
    return {name: sanitize_for_log(value, key=name) for name, value in fields.items()}
