"""
Edge Cost API Endpoint

POST /api/v1/edges/cost - Comfort-weighted cost of road segments
"""
import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, status

from quietroute.config import settings
from quietroute.schemas.edge import (
    ContributingReport,
    EdgeCostBreakdown,
    EdgeCostRequest,
    EdgeCostResponse,
)
from quietroute.services.edge_cost import calculate_path_cost
from quietroute.services.preferences import InvalidPreferencesError
from quietroute.services.report_retention import filter_active_reports
from quietroute.services.report_weighting import filter_reports_near_segments
from quietroute.utils.time_utils import is_night

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/edges/cost", response_model=EdgeCostResponse)
def calculate_edge_costs(request: EdgeCostRequest):
    """
    Calculate comfort-weighted costs for a sequence of road segments.

    **Multipliers** (combined multiplicatively with segment length):
    - Noise: road class × quietness
    - Darkness: lit status × brightness (night only)
    - Reports: nearby active reports (expired ones are dropped first)
    - Zones: school / nightlife / market time windows

    `current_time` is the local time of travel; the server clock is read
    here, once, when it is omitted.
    """
    try:
        preferences = request.preferences.to_preferences()
    except InvalidPreferencesError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    current_time = request.current_time or datetime.now()

    segments = [segment.to_segment() for segment in request.segments]
    reports = filter_active_reports(
        [report.to_report() for report in request.reports], current_time
    )

    nearby_reports = filter_reports_near_segments(segments, reports)

    use_vectorized = settings.USE_VECTORIZED_SCORING
    if use_vectorized:
        logger.info(f"Using VECTORIZED report scoring for {len(nearby_reports)} reports")
    else:
        logger.info(f"Using LOOP-BASED report scoring for {len(nearby_reports)} reports")

    result = calculate_path_cost(
        segments, preferences, nearby_reports, current_time, use_vectorized=use_vectorized
    )

    logger.info(
        f"Costed {len(segments)} segments with {len(reports)} active reports: "
        f"total={result['total_cost']:.1f} over {result['total_distance_meters']:.0f}m"
    )

    edges = [
        EdgeCostBreakdown(
            segment_id=edge["segment_id"],
            road_class=segment.road_class.value,
            lit=segment.lit.value,
            distance_meters=edge["distance_meters"],
            noise_multiplier=round(edge["noise_multiplier"], 4),
            darkness_multiplier=round(edge["darkness_multiplier"], 4),
            reports_multiplier=round(edge["reports_multiplier"], 4),
            zone_multiplier=round(edge["zone_multiplier"], 4),
            total_multiplier=round(edge["total_multiplier"], 4),
            total_cost=round(edge["total_cost"], 2),
            contributing_reports=[
                ContributingReport(
                    report_id=r["report_id"],
                    category=r["category"],
                    distance_m=round(r["distance_m"], 1),
                    impact=round(r["impact"], 4),
                )
                for r in edge["contributing_reports"]
            ],
        )
        for segment, edge in zip(segments, result["edges"])
    ]

    return EdgeCostResponse(
        total_cost=round(result["total_cost"], 2),
        total_distance_meters=result["total_distance_meters"],
        current_time=current_time,
        is_night=is_night(current_time.hour),
        active_reports=len(reports),
        edges=edges,
    )
