"""
QuietRoute Edge Cost Evaluator

Combines the four multiplier models with a segment's physical length into
one scalar comfort cost.

Pipeline per segment:
1. Noise multiplier    (road class × quietness)
2. Darkness multiplier (lit status × brightness, night only)
3. Report multiplier   (nearby active reports)
4. Zone multiplier     (school / nightlife / market windows)
5. cost = distance_meters × noise × darkness × reports × zone

Multipliers combine multiplicatively so that one severe factor can dominate
the cost on its own. Every multiplier is positive and bounded, which keeps
costs safe for a shortest-path search.
"""
from datetime import datetime
from typing import Dict, List, Sequence

from quietroute.services.lighting_weighting import calculate_darkness_multiplier
from quietroute.services.noise_weighting import calculate_noise_multiplier
from quietroute.services.preferences import Preferences
from quietroute.services.report_weighting import (
    Report,
    calculate_reports_multiplier_detailed,
)
from quietroute.services.road_attributes import RoadSegment
from quietroute.services.scoring_vectorized import (
    calculate_reports_multiplier_detailed_vectorized,
)
from quietroute.services.zone_weighting import calculate_zone_multiplier_detailed
from quietroute.utils.time_utils import is_night


def calculate_edge_cost(
    segment: RoadSegment,
    preferences: Preferences,
    reports: Sequence[Report],
    current_time: datetime,
) -> float:
    """
    Calculate the comfort-weighted cost of one road segment.

    Args:
        segment: Road segment with static attributes
        preferences: User comfort preferences
        reports: Active reports in the region
        current_time: Local time of travel (injected for determinism)

    Returns:
        Weighted cost in "comfort meters" (>= 0)

    Example:
        >>> from datetime import datetime
        >>> from quietroute.services.road_attributes import RoadClass
        >>> segment = RoadSegment(road_class=RoadClass.MOTORWAY, distance_meters=200)
        >>> calculate_edge_cost(segment, Preferences(1.0, 0.0), [], datetime(2024, 7, 14, 12))
        600.0
    """
    return calculate_edge_cost_detailed(
        segment, preferences, reports, current_time
    )["total_cost"]


def calculate_edge_cost_detailed(
    segment: RoadSegment,
    preferences: Preferences,
    reports: Sequence[Report],
    current_time: datetime,
    use_vectorized: bool = False,
) -> Dict:
    """
    Calculate the cost of one segment with a full multiplier breakdown.

    Args:
        segment: Road segment with static attributes
        preferences: User comfort preferences
        reports: Active reports in the region
        current_time: Local time of travel
        use_vectorized: Use the NumPy report multiplier (same result)

    Returns:
        Dictionary with all multipliers and metadata
    """
    night = is_night(current_time.hour)

    # 1. Noise
    noise_multiplier = calculate_noise_multiplier(
        road_class=segment.road_class,
        quietness=preferences.quietness,
    )

    # 2. Darkness
    darkness_multiplier = calculate_darkness_multiplier(
        lit_status=segment.lit,
        brightness=preferences.brightness,
        night=night,
    )

    # 3. Reports
    if use_vectorized:
        reports_result = calculate_reports_multiplier_detailed_vectorized(segment, reports)
    else:
        reports_result = calculate_reports_multiplier_detailed(segment, reports)
    reports_multiplier = reports_result["final_multiplier"]

    # 4. Zones
    zone_result = calculate_zone_multiplier_detailed(
        school_zone=segment.school_zone,
        nightlife_zone=segment.nightlife_zone,
        market_zone=segment.market_zone,
        current_time=current_time,
    )
    zone_multiplier = zone_result["final_multiplier"]

    total_multiplier = (
        noise_multiplier
        * darkness_multiplier
        * reports_multiplier
        * zone_multiplier
    )

    return {
        "segment_id": segment.segment_id,
        "distance_meters": segment.distance_meters,
        "noise_multiplier": noise_multiplier,
        "darkness_multiplier": darkness_multiplier,
        "reports_multiplier": reports_multiplier,
        "zone_multiplier": zone_multiplier,
        "total_multiplier": total_multiplier,
        "total_cost": segment.distance_meters * total_multiplier,
        "is_night": night,
        "zone_breakdown": zone_result,
        "contributing_reports": reports_result["contributing_reports"],
    }


def calculate_path_cost(
    segments: Sequence[RoadSegment],
    preferences: Preferences,
    reports: Sequence[Report],
    current_time: datetime,
    use_vectorized: bool = False,
) -> Dict:
    """
    Sum edge costs along an ordered sequence of segments.

    Args:
        segments: Segments making up a path
        preferences: User comfort preferences
        reports: Active reports in the region
        current_time: Local time of travel
        use_vectorized: Use the NumPy report multiplier for every segment

    Returns:
        Dictionary with:
        - 'total_cost': float
        - 'total_distance_meters': float
        - 'edges': list of per-segment breakdowns (input order)
    """
    edges: List[Dict] = [
        calculate_edge_cost_detailed(
            segment, preferences, reports, current_time, use_vectorized=use_vectorized
        )
        for segment in segments
    ]

    return {
        "total_cost": sum(edge["total_cost"] for edge in edges),
        "total_distance_meters": sum(edge["distance_meters"] for edge in edges),
        "edges": edges,
    }
