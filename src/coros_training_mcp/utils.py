"""
Shared utility functions for COROS MCP server.

Sport/date parsing and formatting helpers used across domain modules.
"""

import re

from coros_training_mcp.sdk.errors import ValidationError
from coros_training_mcp.sdk.types import SPORT_NAME_TO_CODE, SPORT_TYPE_LABELS, SportType

_DAY_PATTERN = re.compile(r"[0-9]{8}")


def resolve_sport(sport: str) -> SportType:
    """Resolve a sport name ("run", "bike", ...) to its program sport code.

    Raises:
        ValidationError: If the sport is unknown
    """
    code = SPORT_NAME_TO_CODE.get((sport or "").strip().lower())
    if code is None:
        raise ValidationError(
            f"Unknown sport '{sport}'. "
            f"Use: {', '.join(sorted(SPORT_NAME_TO_CODE.keys()))}"
        )
    return code


def validate_day(day: str) -> str:
    """Check a COROS day string.

    Args:
        day: Date in YYYYMMDD format

    Returns:
        The day unchanged

    Raises:
        ValidationError: If the day is not 8 digits
    """
    if not isinstance(day, str) or not _DAY_PATTERN.fullmatch(day):
        raise ValidationError(f"Day must be YYYYMMDD format, got '{day}'")
    return day


def get_sport_name(sport_type) -> str:
    """Get human-readable sport name from a program sport type code."""
    if sport_type is None:
        return "Unknown"
    try:
        return SPORT_TYPE_LABELS.get(int(sport_type), f"type {sport_type}")
    except (TypeError, ValueError):
        return f"type {sport_type}"


def format_duration(seconds: int) -> str:
    """Format seconds into human-readable duration.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string like "1h01m01s" or "25m30s"
    """
    if not seconds or seconds <= 0:
        return "0s"
    seconds = int(seconds)
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h > 0:
        return f"{h}h{m:02d}m{s:02d}s"
    if m > 0:
        return f"{m}m{s:02d}s"
    return f"{s}s"
