"""
Vectorized Comfort Scoring - NumPy Optimized

NumPy-vectorized versions of the report-proximity model and the route scorer
for batch evaluation.

Instead of looping one report (or route) at a time, we:
1. Convert inputs to NumPy arrays
2. Compute distances, impacts and scores with vectorized operations
3. Rebuild the same result types as the scalar modules

Results match report_weighting.py and route_scoring.py exactly (up to
floating point rounding).
"""
import math
from typing import List, Sequence

import numpy as np

from quietroute.services.preferences import Preferences
from quietroute.services.report_weighting import Report, REPORT_WEIGHT_BY_CATEGORY
from quietroute.services.road_attributes import RoadSegment
from quietroute.services.route_scoring import (
    CandidateRoute,
    ScoredRoute,
    rank_routes,
)
from quietroute.services.scoring_config import (
    EARTH_RADIUS_M,
    REPORT_INFLUENCE_RADIUS_M,
    MIN_REPORTS_MULTIPLIER,
    MAX_REPORTS_MULTIPLIER,
    SPEED_SATURATION_MPS,
    TURN_DENSITY_FACTOR,
    NOISE_SPEED_WEIGHT,
    NOISE_TURN_WEIGHT,
    MIN_NOISE_SCORE,
    MAX_NOISE_SCORE,
    LIGHTING_FROM_NOISE_FACTOR,
    MIN_LIGHTING_SCORE,
    MAX_LIGHTING_SCORE,
    MIN_OVERALL_SCORE,
    MAX_OVERALL_SCORE,
)


def haversine_distance_vectorized(
    lat1: float,
    lon1: float,
    lat2_array: np.ndarray,
    lon2_array: np.ndarray,
) -> np.ndarray:
    """
    Vectorized haversine distance calculation.

    Calculates distance from one point to N points simultaneously.

    Args:
        lat1: Single latitude (degrees)
        lon1: Single longitude (degrees)
        lat2_array: Array of N latitudes (degrees)
        lon2_array: Array of N longitudes (degrees)

    Returns:
        Array of N distances in meters
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = np.radians(lat2_array)
    lon2_rad = np.radians(lon2_array)

    # Haversine formula
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_reports_multiplier_vectorized(
    segment: RoadSegment,
    reports: Sequence[Report],
) -> float:
    """
    Vectorized report multiplier for one segment against N reports.

    Args:
        segment: Road segment (only its endpoints are used)
        reports: Active reports in the region

    Returns:
        Multiplier from 0.1 to 5.0 (1.0 = no nearby reports)
    """
    return calculate_reports_multiplier_detailed_vectorized(segment, reports)["final_multiplier"]


def calculate_reports_multiplier_detailed_vectorized(
    segment: RoadSegment,
    reports: Sequence[Report],
) -> dict:
    """
    Vectorized version of report_weighting.calculate_reports_multiplier_detailed.

    Returns:
        Dictionary with 'raw_multiplier', 'final_multiplier' and
        'contributing_reports' (nearest first)
    """
    if not reports or not segment.coordinates:
        return {
            "raw_multiplier": 1.0,
            "final_multiplier": 1.0,
            "contributing_reports": [],
        }

    report_lats = np.array([r.latitude for r in reports], dtype=float)
    report_lons = np.array([r.longitude for r in reports], dtype=float)
    weights = np.array(
        [REPORT_WEIGHT_BY_CATEGORY[r.category] for r in reports], dtype=float
    )

    start_lat, start_lon = segment.coordinates[0]
    end_lat, end_lon = segment.coordinates[-1]

    distances = np.minimum(
        haversine_distance_vectorized(start_lat, start_lon, report_lats, report_lons),
        haversine_distance_vectorized(end_lat, end_lon, report_lats, report_lons),
    )

    in_range = distances < REPORT_INFLUENCE_RADIUS_M
    impacts = np.where(
        in_range,
        weights * (1 - distances / REPORT_INFLUENCE_RADIUS_M),
        0.0,
    )

    total = 1.0 + float(impacts.sum())

    # Stable sort keeps input order for equidistant reports
    nearest_first = np.flatnonzero(in_range)
    nearest_first = nearest_first[np.argsort(distances[nearest_first], kind="stable")]

    contributing = [
        {
            "report_id": reports[i].report_id,
            "category": reports[i].category.value,
            "distance_m": float(distances[i]),
            "impact": float(impacts[i]),
        }
        for i in nearest_first
    ]

    return {
        "raw_multiplier": total,
        "final_multiplier": max(MIN_REPORTS_MULTIPLIER, min(MAX_REPORTS_MULTIPLIER, total)),
        "contributing_reports": contributing,
    }


def calculate_noise_scores_vectorized(
    distances: np.ndarray,
    durations: np.ndarray,
    step_counts: np.ndarray,
) -> np.ndarray:
    """
    Vectorized noise score for N routes.

    Args:
        distances: Route lengths in meters
        durations: Route durations in seconds
        step_counts: Number of steps per route

    Returns:
        Array of N noise scores (0.1-0.9)
    """
    # Speed proxy; zero duration -> 0
    safe_durations = np.where(durations > 0, durations, 1.0)
    speed_scores = np.where(
        durations > 0,
        np.minimum(1.0, (distances / safe_durations) / SPEED_SATURATION_MPS),
        0.0,
    )

    # Turn-density proxy; no steps or zero length -> 0 turns/km
    has_turns = (step_counts > 0) & (distances > 0)
    safe_km = np.where(distances > 0, distances / 1000, 1.0)
    turns_per_km = np.where(has_turns, step_counts / safe_km, 0.0)
    turn_scores = 1 / (1 + TURN_DENSITY_FACTOR * turns_per_km)

    noise = NOISE_SPEED_WEIGHT * speed_scores + NOISE_TURN_WEIGHT * turn_scores

    return np.clip(noise, MIN_NOISE_SCORE, MAX_NOISE_SCORE)


def score_and_rank_routes_vectorized(
    routes: Sequence[CandidateRoute],
    preferences: Preferences,
) -> List[ScoredRoute]:
    """
    Vectorized version of route_scoring.score_and_rank_routes.

    Args:
        routes: Candidate routes in oracle order
        preferences: User comfort preferences

    Returns:
        Scored routes, best first, with exactly one recommended
    """
    if not routes:
        return []

    distances = np.array([r.distance_meters for r in routes], dtype=float)
    durations = np.array([r.duration_seconds for r in routes], dtype=float)
    step_counts = np.array([len(r.steps) for r in routes], dtype=float)

    noise_scores = calculate_noise_scores_vectorized(distances, durations, step_counts)
    lighting_scores = np.clip(
        noise_scores * LIGHTING_FROM_NOISE_FACTOR, MIN_LIGHTING_SCORE, MAX_LIGHTING_SCORE
    )

    quietness_scores = 100 - noise_scores * preferences.quietness * 100
    brightness_scores = lighting_scores * preferences.brightness * 100
    overall_scores = np.clip(
        (quietness_scores + brightness_scores) / 2, MIN_OVERALL_SCORE, MAX_OVERALL_SCORE
    )

    scored = [
        ScoredRoute(
            route=route,
            noise_score=float(noise_scores[i]),
            lighting_score=float(lighting_scores[i]),
            safety_score=float(lighting_scores[i]),
            overall_score=float(overall_scores[i]),
        )
        for i, route in enumerate(routes)
    ]

    # Python's sort is stable; np.argsort default is not
    return rank_routes(scored)
