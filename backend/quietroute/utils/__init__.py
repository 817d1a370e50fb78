"""
QuietRoute Utility Functions

This module provides utility functions for the comfort scoring engine:
- Geographic calculations (Haversine distance, endpoint distance, bounding boxes)
- Time operations (night hours, weekday/weekend windows)
"""

# Geographic utilities
from .geo_utils import (
    haversine_distance,
    distance_to_endpoints,
    get_bounding_box,
)

# Time utilities
from .time_utils import (
    is_night,
    is_school_day,
    is_weekend_night_day,
    hour_in_windows,
    align_timezone,
)

__all__ = [
    # Geographic
    "haversine_distance",
    "distance_to_endpoints",
    "get_bounding_box",
    # Time
    "is_night",
    "is_school_day",
    "is_weekend_night_day",
    "hour_in_windows",
    "align_timezone",
]
