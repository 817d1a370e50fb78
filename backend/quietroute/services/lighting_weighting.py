"""
Lighting Weighting Module - QuietRoute Comfort Scoring

Calculates the darkness multiplier for a road segment from its lit status,
the user's brightness preference and whether it is currently night.

Formula:
  multiplier = 1.0 + (base_weight - 1.0) × brightness
  clamped to [MIN_DARKNESS_MULTIPLIER, MAX_DARKNESS_MULTIPLIER]

Lighting is irrelevant by day and for users with brightness = 0; both cases
return exactly 1.0.
"""
from typing import Dict

from quietroute.services.road_attributes import LitStatus
from quietroute.services.scoring_config import (
    LIGHTING_WEIGHTS,
    MIN_DARKNESS_MULTIPLIER,
    MAX_DARKNESS_MULTIPLIER,
)

LIGHTING_WEIGHT_BY_STATUS: Dict[LitStatus, float] = {
    lit_status: LIGHTING_WEIGHTS[lit_status.value] for lit_status in LitStatus
}


def calculate_darkness_multiplier(
    lit_status: LitStatus,
    brightness: float,
    night: bool,
) -> float:
    """
    Calculate the darkness multiplier for a road segment.

    Args:
        lit_status: Lit status of the segment
        brightness: User brightness preference (0 = don't care, 1 = very lit)
        night: Whether the route is being walked at night

    Returns:
        Multiplier from 0.5 to 2.5 (1.0 = neutral)

    Example:
        >>> calculate_darkness_multiplier(LitStatus.NO, 1.0, night=True)
        2.0
        >>> calculate_darkness_multiplier(LitStatus.NO, 1.0, night=False)
        1.0
        >>> calculate_darkness_multiplier(LitStatus.UNKNOWN, 0.5, night=True)
        1.25
    """
    if brightness == 0 or not night:
        return 1.0

    base_weight = LIGHTING_WEIGHT_BY_STATUS[lit_status]
    scaled = 1.0 + (base_weight - 1.0) * brightness

    return max(MIN_DARKNESS_MULTIPLIER, min(MAX_DARKNESS_MULTIPLIER, scaled))
