"""
Zone Weighting Module - QuietRoute Comfort Scoring

Calculates the time-dependent multiplier for segments flagged as school,
nightlife or market zones. Zone effects model objective crowd and noise
patterns, so they apply regardless of user preferences.

Rules (local time):
  school:    Mon-Fri, hour in [7, 9] ∪ [14, 16]      -> ×1.8
  nightlife: Fri/Sat/Sun, hour >= 21 or hour <= 2    -> ×2.0
  market:    any day, hour in [8, 20]                -> ×1.5

Active zones compound multiplicatively; with no active zone the multiplier
is 1.0.
"""
from datetime import datetime

from quietroute.services.scoring_config import (
    SCHOOL_ZONE_MULTIPLIER,
    SCHOOL_ZONE_HOURS,
    NIGHTLIFE_ZONE_MULTIPLIER,
    NIGHTLIFE_STARTS_AT_HOUR,
    NIGHTLIFE_ENDS_AT_HOUR,
    MARKET_ZONE_MULTIPLIER,
    MARKET_ZONE_HOURS,
    MIN_ZONE_MULTIPLIER,
    MAX_ZONE_MULTIPLIER,
)
from quietroute.utils.time_utils import (
    hour_in_windows,
    is_school_day,
    is_weekend_night_day,
)


def is_school_zone_active(current_time: datetime) -> bool:
    """School run hours on a weekday."""
    return is_school_day(current_time) and hour_in_windows(
        current_time.hour, SCHOOL_ZONE_HOURS
    )


def is_nightlife_zone_active(current_time: datetime) -> bool:
    """Late evening or small hours on Friday, Saturday or Sunday."""
    hour = current_time.hour
    late = hour >= NIGHTLIFE_STARTS_AT_HOUR or hour <= NIGHTLIFE_ENDS_AT_HOUR
    return is_weekend_night_day(current_time) and late


def is_market_zone_active(current_time: datetime) -> bool:
    """Market trading hours, every day."""
    return hour_in_windows(current_time.hour, [MARKET_ZONE_HOURS])


def calculate_zone_multiplier(
    school_zone: bool,
    nightlife_zone: bool,
    market_zone: bool,
    current_time: datetime,
) -> float:
    """
    Calculate the temporal zone multiplier for a segment.

    Args:
        school_zone: Segment lies in a school zone
        nightlife_zone: Segment lies in a bar/club area
        market_zone: Segment lies in a market area
        current_time: Local time of travel (injected, never read from the clock)

    Returns:
        Multiplier from 1.0 to 5.4

    Example:
        >>> from datetime import datetime
        >>> # Tuesday 08:30
        >>> calculate_zone_multiplier(True, False, False, datetime(2024, 7, 16, 8, 30))
        1.8
        >>> # Tuesday 08:30, school + market
        >>> round(calculate_zone_multiplier(True, False, True, datetime(2024, 7, 16, 8, 30)), 2)
        2.7
    """
    return calculate_zone_multiplier_detailed(
        school_zone, nightlife_zone, market_zone, current_time
    )["final_multiplier"]


def calculate_zone_multiplier_detailed(
    school_zone: bool,
    nightlife_zone: bool,
    market_zone: bool,
    current_time: datetime,
) -> dict:
    """
    Calculate the zone multiplier with a per-zone breakdown.

    Returns a dictionary for UI display and debugging.

    Args:
        school_zone: Segment lies in a school zone
        nightlife_zone: Segment lies in a bar/club area
        market_zone: Segment lies in a market area
        current_time: Local time of travel

    Returns:
        Dictionary with keys:
        - 'school_active': bool (flag set and rule met)
        - 'nightlife_active': bool
        - 'market_active': bool
        - 'final_multiplier': float
    """
    school_active = school_zone and is_school_zone_active(current_time)
    nightlife_active = nightlife_zone and is_nightlife_zone_active(current_time)
    market_active = market_zone and is_market_zone_active(current_time)

    multiplier = 1.0
    if school_active:
        multiplier *= SCHOOL_ZONE_MULTIPLIER
    if nightlife_active:
        multiplier *= NIGHTLIFE_ZONE_MULTIPLIER
    if market_active:
        multiplier *= MARKET_ZONE_MULTIPLIER

    return {
        "school_active": school_active,
        "nightlife_active": nightlife_active,
        "market_active": market_active,
        "final_multiplier": max(MIN_ZONE_MULTIPLIER, min(MAX_ZONE_MULTIPLIER, multiplier)),
    }
