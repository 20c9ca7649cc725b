"""Display formatting helpers for pod rows.

All helpers return strings ready to be placed in a table cell and never
raise on missing values; absent data renders as one of the sentinels from
``kubeglance.constants.values``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone

from kubeglance.constants.values import (
    MEGABYTE,
    MISSING_VALUE,
    NA_VALUE,
    ZERO_VALUE,
)


def na(value: str | None) -> str:
    """Return the value or the n/a sentinel when it is empty."""
    if not value:
        return NA_VALUE
    return value


def to_mb(value: int) -> int:
    """Convert bytes to whole MiB, truncating toward zero."""
    megabytes = abs(value) // MEGABYTE
    return megabytes if value >= 0 else -megabytes


def to_mc(value: int) -> str:
    """Format a millicore count."""
    if value == 0:
        return ZERO_VALUE
    return str(value)


def to_mi(value: int) -> str:
    """Format a MiB count."""
    if value == 0:
        return ZERO_VALUE
    return str(value)


def to_percentage(value: int, total: int) -> int:
    """Return value as a floored percentage of total (0 when total is 0)."""
    if total == 0:
        return 0
    return value * 100 // total


def to_percentage_str(value: int, total: int) -> str:
    """Format value as a percentage of total, n/a when total is 0."""
    if total == 0:
        return NA_VALUE
    return str(to_percentage(value, total))


def map_to_str(labels: Mapping[str, str] | None) -> str:
    """Render a label mapping as sorted ``k=v`` pairs separated by a space."""
    if not labels:
        return MISSING_VALUE
    return " ".join(f"{key}={labels[key]}" for key in sorted(labels))


def as_status(diagnostic: str | None) -> str:
    """Render a readiness diagnostic for the VALID column."""
    if diagnostic is None:
        return ""
    return diagnostic


def human_duration(delta: timedelta) -> str:
    """Format a duration the way kubectl prints resource ages.

    Precision drops as the duration grows: seconds up to two minutes,
    minutes and seconds up to ten minutes, then minutes, hours, days
    and years.
    """
    seconds = int(delta.total_seconds())
    # Up to one second of clock skew still reads as "now".
    if seconds < -1:
        return "<invalid>"
    if seconds < 0:
        return "0s"
    if seconds < 60 * 2:
        return f"{seconds}s"

    minutes = seconds // 60
    if minutes < 10:
        remainder = seconds % 60
        return f"{minutes}m" if remainder == 0 else f"{minutes}m{remainder}s"
    if minutes < 60 * 3:
        return f"{minutes}m"

    hours = minutes // 60
    if hours < 8:
        remainder = minutes % 60
        return f"{hours}h" if remainder == 0 else f"{hours}h{remainder}m"
    if hours < 48:
        return f"{hours}h"
    if hours < 24 * 8:
        remainder = hours % 24
        return f"{hours // 24}d" if remainder == 0 else f"{hours // 24}d{remainder}h"
    if hours < 24 * 365 * 2:
        return f"{hours // 24}d"
    if hours < 24 * 365 * 8:
        days = (hours // 24) % 365
        years = hours // 24 // 365
        return f"{years}y" if days == 0 else f"{years}y{days}d"
    return f"{hours // 24 // 365}y"


def to_age(timestamp: datetime | None, now: datetime | None = None) -> str:
    """Format the age of a resource created at ``timestamp``."""
    if timestamp is None:
        return NA_VALUE
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    return human_duration(current - timestamp)


__all__ = [
    "as_status",
    "human_duration",
    "map_to_str",
    "na",
    "to_age",
    "to_mb",
    "to_mc",
    "to_mi",
    "to_percentage",
    "to_percentage_str",
]
