"""
Report Weighting Module - QuietRoute Comfort Scoring

Calculates the penalty (or bonus) a road segment receives from nearby
crowd-submitted reports. Influence decays linearly with distance and
vanishes at the influence radius.

Formula:
  distance = min(d(report, segment start), d(report, segment end))
  impact   = category_weight × (1 - distance / REPORT_INFLUENCE_RADIUS_M)
  multiplier = 1.0 + Σ impact   (reports with distance < radius only)
  clamped to [MIN_REPORTS_MULTIPLIER, MAX_REPORTS_MULTIPLIER]

Hazard categories carry positive weights; comfort categories (safe, quiet)
carry negative weights and make a segment cheaper than baseline.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Sequence

from quietroute.services.road_attributes import RoadSegment
from quietroute.services.scoring_config import (
    REPORT_CATEGORY_WEIGHTS,
    REPORT_INFLUENCE_RADIUS_M,
    MIN_REPORTS_MULTIPLIER,
    MAX_REPORTS_MULTIPLIER,
)
from quietroute.utils.geo_utils import distance_to_endpoints, get_bounding_box


class ReportCategory(str, Enum):
    """Kinds of user reports."""

    LOUD = "loud"
    DARK = "dark"
    CROWDED = "crowded"
    OBSTRUCTION = "obstruction"
    SAFE = "safe"
    QUIET = "quiet"


REPORT_WEIGHT_BY_CATEGORY: Dict[ReportCategory, float] = {
    category: REPORT_CATEGORY_WEIGHTS[category.value] for category in ReportCategory
}


@dataclass(frozen=True)
class Report:
    """
    An active user report, as returned by the report store.

    Attributes:
        latitude: Report location latitude
        longitude: Report location longitude
        category: Kind of report
        created_at: When the report was submitted
        report_id: Store identifier (None for ad-hoc reports)
    """

    latitude: float
    longitude: float
    category: ReportCategory
    created_at: datetime
    report_id: Optional[int] = None


def get_category_weight(category: ReportCategory) -> float:
    """
    Get the signed impact weight of a report category.

    Example:
        >>> get_category_weight(ReportCategory.OBSTRUCTION)
        3.0
        >>> get_category_weight(ReportCategory.QUIET)
        -0.5
    """
    return REPORT_WEIGHT_BY_CATEGORY[category]


def calculate_report_impact(category: ReportCategory, distance_m: float) -> float:
    """
    Calculate the impact of one report at a given distance.

    Args:
        category: Report category
        distance_m: Distance from the report to the segment (meters)

    Returns:
        Signed impact; 0.0 at or beyond the influence radius,
        the full category weight at distance 0

    Example:
        >>> calculate_report_impact(ReportCategory.LOUD, 25.0)
        1.0
        >>> calculate_report_impact(ReportCategory.LOUD, 50.0)
        0.0
    """
    if distance_m >= REPORT_INFLUENCE_RADIUS_M:
        return 0.0

    return get_category_weight(category) * (1 - distance_m / REPORT_INFLUENCE_RADIUS_M)


def calculate_reports_multiplier(
    segment: RoadSegment,
    reports: Sequence[Report],
) -> float:
    """
    Calculate the report multiplier for a segment.

    Args:
        segment: Road segment (only its endpoints are used)
        reports: Active reports in the region (already filtered for expiry)

    Returns:
        Multiplier from 0.1 to 5.0 (1.0 = no nearby reports)

    Example:
        >>> segment = RoadSegment(coordinates=((22.5726, 88.3639), (22.5736, 88.3639)))
        >>> calculate_reports_multiplier(segment, [])
        1.0
    """
    return calculate_reports_multiplier_detailed(segment, reports)["final_multiplier"]


def calculate_reports_multiplier_detailed(
    segment: RoadSegment,
    reports: Sequence[Report],
) -> dict:
    """
    Calculate the report multiplier with a breakdown of contributing reports.

    Args:
        segment: Road segment (only its endpoints are used)
        reports: Active reports in the region

    Returns:
        Dictionary with keys:
        - 'raw_multiplier': float (before clamping)
        - 'final_multiplier': float
        - 'contributing_reports': list of dicts with report_id, category,
          distance_m and impact, nearest first
    """
    if not reports:
        return {
            "raw_multiplier": 1.0,
            "final_multiplier": 1.0,
            "contributing_reports": [],
        }

    total = 1.0
    contributing: List[dict] = []

    for report in reports:
        distance_m = distance_to_endpoints(
            report.latitude, report.longitude, segment.coordinates
        )
        if distance_m >= REPORT_INFLUENCE_RADIUS_M:
            continue

        impact = calculate_report_impact(report.category, distance_m)
        total += impact
        contributing.append(
            {
                "report_id": report.report_id,
                "category": report.category.value,
                "distance_m": distance_m,
                "impact": impact,
            }
        )

    contributing.sort(key=lambda r: r["distance_m"])

    return {
        "raw_multiplier": total,
        "final_multiplier": max(MIN_REPORTS_MULTIPLIER, min(MAX_REPORTS_MULTIPLIER, total)),
        "contributing_reports": contributing,
    }


def filter_reports_near_segments(
    segments: Sequence[RoadSegment],
    reports: Sequence[Report],
) -> List[Report]:
    """
    Keep only reports that could influence at least one segment.

    Reports outside the bounding box of every segment coordinate, padded by
    the influence radius, are dropped; order is preserved. Segments without
    coordinates are infinitely far from every report.

    Args:
        segments: Segments of the path being costed
        reports: Active reports from the report store

    Returns:
        Reports inside the padded region
    """
    coordinates = [point for segment in segments for point in segment.coordinates]
    if not coordinates:
        return []

    south, north, west, east = get_bounding_box(
        coordinates, padding_m=REPORT_INFLUENCE_RADIUS_M
    )

    return [
        report
        for report in reports
        if south <= report.latitude <= north and west <= report.longitude <= east
    ]
