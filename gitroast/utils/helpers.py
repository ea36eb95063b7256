"""Utility helper functions"""

from datetime import UTC, datetime
from typing import Any, Optional

SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365


def parse_datetime(raw: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp into an aware datetime

    Naive values are assumed to be UTC. The original offset is kept so
    calendar-day checks see the day the caller supplied.

    Args:
        raw: ISO string, datetime, or anything else

    Returns:
        Aware datetime, or None when the value cannot be parsed
    """
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw.strip():
        text = raw.strip().replace("Z", "+00:00")
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    return ensure_aware(value)


def coerce_count(raw: Any) -> int:
    """Coerce a counter-like value to a non-negative int, 0 when invalid."""
    if isinstance(raw, bool):
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return max(0, value)


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def age_in_days(moment: Optional[datetime], now: datetime) -> Optional[float]:
    """Fractional days between ``moment`` and ``now``, None if unknown."""
    if moment is None:
        return None
    return (ensure_aware(now) - ensure_aware(moment)).total_seconds() / SECONDS_PER_DAY


def age_in_years(moment: Optional[datetime], now: datetime) -> Optional[float]:
    """Fractional years (365-day years) between ``moment`` and ``now``."""
    days = age_in_days(moment, now)
    if days is None:
        return None
    return days / DAYS_PER_YEAR


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate string to maximum length

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated string
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)
