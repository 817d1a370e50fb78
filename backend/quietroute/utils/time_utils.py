"""
Time and date utility functions for QuietRoute scoring.

All functions take the local time explicitly; nothing here reads the clock.
"""
from datetime import datetime
from typing import Iterable, Tuple

from quietroute.services.scoring_config import (
    NIGHT_ENDS_BEFORE_HOUR,
    NIGHT_BEGINS_AFTER_HOUR,
    SCHOOL_DAYS,
    NIGHTLIFE_DAYS,
)


def is_night(hour: int) -> bool:
    """
    Check whether a local hour counts as night for lighting purposes.

    Night is before 06:00 or from 19:00 onwards (hour > 18). The boundary is
    fixed and not configurable per city.

    Args:
        hour: Local hour (0-23)

    Returns:
        True if the hour is at night

    Example:
        >>> is_night(5), is_night(6), is_night(18), is_night(19)
        (True, False, False, True)
    """
    return hour < NIGHT_ENDS_BEFORE_HOUR or hour > NIGHT_BEGINS_AFTER_HOUR


def is_school_day(current_time: datetime) -> bool:
    """Monday to Friday."""
    return current_time.weekday() in SCHOOL_DAYS


def is_weekend_night_day(current_time: datetime) -> bool:
    """Friday, Saturday or Sunday."""
    return current_time.weekday() in NIGHTLIFE_DAYS


def hour_in_windows(hour: int, windows: Iterable[Tuple[int, int]]) -> bool:
    """
    Check whether an hour falls inside any inclusive (start, end) window.

    Example:
        >>> hour_in_windows(9, [(7, 9), (14, 16)])
        True
        >>> hour_in_windows(10, [(7, 9), (14, 16)])
        False
    """
    return any(start <= hour <= end for start, end in windows)


def align_timezone(value: datetime, reference: datetime) -> datetime:
    """
    Make value comparable with reference.

    Naive values are taken to be in the reference's timezone; aware values
    compared against a naive reference are converted to naive local time.

    Example:
        >>> from datetime import timezone
        >>> aware = datetime(2024, 7, 16, 8, 0, tzinfo=timezone.utc)
        >>> align_timezone(datetime(2024, 7, 16, 7, 0), aware).tzinfo
        datetime.timezone.utc
    """
    if reference.tzinfo is not None and value.tzinfo is None:
        return value.replace(tzinfo=reference.tzinfo)
    if reference.tzinfo is None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value
