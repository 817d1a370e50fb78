"""
Noise Weighting Module - QuietRoute Comfort Scoring

Calculates the noise multiplier for a road segment from its road class and
the user's quietness preference.

Formula:
  multiplier = 1.0 + (base_weight - 1.0) × quietness
  clamped to [MIN_NOISE_MULTIPLIER, MAX_NOISE_MULTIPLIER]

quietness = 0 short-circuits to exactly 1.0, so users who do not care about
noise get distance-only costs.
"""
from typing import Dict

from quietroute.services.road_attributes import RoadClass
from quietroute.services.scoring_config import (
    NOISE_WEIGHTS,
    MIN_NOISE_MULTIPLIER,
    MAX_NOISE_MULTIPLIER,
)

# Built per member so a missing weight fails at import, not at request time
NOISE_WEIGHT_BY_CLASS: Dict[RoadClass, float] = {
    road_class: NOISE_WEIGHTS[road_class.value] for road_class in RoadClass
}


def calculate_noise_multiplier(road_class: RoadClass, quietness: float) -> float:
    """
    Calculate the noise multiplier for a road segment.

    Interpolates linearly between neutral (1.0) and the road class base weight
    by the quietness preference.

    Args:
        road_class: Road class of the segment
        quietness: User quietness preference (0 = don't care, 1 = very quiet)

    Returns:
        Multiplier from 0.5 to 3.0 (1.0 = neutral, > 1 = avoid, < 1 = prefer)

    Example:
        >>> calculate_noise_multiplier(RoadClass.MOTORWAY, 1.0)
        3.0
        >>> calculate_noise_multiplier(RoadClass.FOOTWAY, 0.5)
        0.75
        >>> calculate_noise_multiplier(RoadClass.PRIMARY, 0.0)
        1.0
    """
    if quietness == 0:
        return 1.0

    base_weight = get_noise_weight(road_class)
    scaled = 1.0 + (base_weight - 1.0) * quietness

    return max(MIN_NOISE_MULTIPLIER, min(MAX_NOISE_MULTIPLIER, scaled))


def get_noise_weight(road_class: RoadClass) -> float:
    """
    Get the base noise weight for a road class.

    Useful for UI display and algorithm explanation.

    Example:
        >>> get_noise_weight(RoadClass.UNKNOWN)
        1.0
    """
    return NOISE_WEIGHT_BY_CLASS[road_class]
