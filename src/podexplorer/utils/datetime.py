"""Date helpers for displaying catalog timestamps."""

from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes so timestamps compare safely."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_date(value: datetime | None, placeholder: str = "N/A") -> str:
    """Format a timestamp as a human-readable date.

    Args:
        value: Timestamp to format, or None when the record has none
        placeholder: Text returned for missing timestamps

    Returns:
        Date like "March 5, 2024", or the placeholder
    """
    if value is None:
        return placeholder
    return f"{value.strftime('%B')} {value.day}, {value.year}"
