"""
QuietRoute Route Scorer - Main Orchestrator

Scores and ranks candidate routes returned by the routing oracle.

The oracle returns geometry and pace, not road attributes, so route-level
scores are derived from two proxies:
  - Speed: a high average speed implies major-road travel (louder)
  - Turn density: many turns per km implies winding local streets (quieter)

Scoring Pipeline:
1. speed_score    = min(1, avg_speed / 15 m/s)
2. turn_score     = 1 / (1 + 0.1 × turns_per_km)
3. noise_score    = clamp(0.1, 0.9, 0.7 × speed_score + 0.3 × turn_score)
4. lighting_score = clamp(0.2, 0.9, 1.2 × noise_score)
   (busier roads are assumed to be better lit)
5. safety_score   = lighting_score
6. overall_score  = ((100 - noise × quietness × 100) + (lighting × brightness × 100)) / 2
7. Sort by overall score (descending, stable) and mark the top route recommended
"""
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from quietroute.services.preferences import Preferences
from quietroute.services.scoring_config import (
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

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteStep:
    """
    One maneuver step of a candidate route.

    Attributes:
        latitude: Maneuver location latitude
        longitude: Maneuver location longitude
        distance_meters: Length of the step
        duration_seconds: Travel time of the step
    """

    latitude: float
    longitude: float
    distance_meters: float
    duration_seconds: float


@dataclass(frozen=True)
class CandidateRoute:
    """
    One candidate path from the routing oracle.

    Attributes:
        route_id: Identifier (e.g., "route-0", in oracle order)
        geometry: Ordered (lat, lon) pairs along the path
        distance_meters: Total path length
        duration_seconds: Total travel time
        steps: Maneuver steps, flattened across legs
    """

    route_id: str
    geometry: Tuple[Tuple[float, float], ...]
    distance_meters: float
    duration_seconds: float
    steps: Tuple[RouteStep, ...] = ()


@dataclass(frozen=True)
class ScoredRoute:
    """
    A candidate route annotated with comfort scores.

    The wrapped route is never modified; scoring builds a new value.

    Attributes:
        route: The original candidate route
        noise_score: 0.1-0.9, higher = louder (more major-road character)
        lighting_score: 0.2-0.9, higher = better lit
        safety_score: Same as lighting_score
        overall_score: 0-100, higher = better match to preferences
        recommended: True for the top-ranked route only
    """

    route: CandidateRoute
    noise_score: float
    lighting_score: float
    safety_score: float
    overall_score: float
    recommended: bool = False


def calculate_speed_score(distance_meters: float, duration_seconds: float) -> float:
    """
    Map average speed to [0, 1]; saturates at 15 m/s (54 km/h).

    A zero duration yields 0.0 instead of dividing by zero.

    Example:
        >>> calculate_speed_score(1500, 100)
        1.0
        >>> calculate_speed_score(1000, 0)
        0.0
    """
    if duration_seconds <= 0:
        return 0.0

    avg_speed = distance_meters / duration_seconds
    return min(1.0, avg_speed / SPEED_SATURATION_MPS)


def calculate_turns_per_km(step_count: int, distance_meters: float) -> float:
    """
    Steps per kilometer of route.

    Zero steps, or a zero-length route, yields 0.0.
    """
    if step_count == 0 or distance_meters <= 0:
        return 0.0

    return step_count / (distance_meters / 1000)


def calculate_turn_score(step_count: int, distance_meters: float) -> float:
    """
    Map turn density to (0, 1]; a straight route with no turns scores 1.0.

    Example:
        >>> calculate_turn_score(0, 1000)
        1.0
        >>> calculate_turn_score(10, 1000)
        0.5
    """
    turns_per_km = calculate_turns_per_km(step_count, distance_meters)
    return 1 / (1 + TURN_DENSITY_FACTOR * turns_per_km)


def calculate_noise_score(route: CandidateRoute) -> float:
    """
    Estimate how loud a route is from its speed and turn density.

    Args:
        route: Candidate route

    Returns:
        Noise score from 0.1 to 0.9 (higher = louder)
    """
    speed_score = calculate_speed_score(route.distance_meters, route.duration_seconds)
    turn_score = calculate_turn_score(len(route.steps), route.distance_meters)

    noise = NOISE_SPEED_WEIGHT * speed_score + NOISE_TURN_WEIGHT * turn_score

    return max(MIN_NOISE_SCORE, min(MAX_NOISE_SCORE, noise))


def calculate_lighting_score(noise_score: float) -> float:
    """
    Estimate lighting from the noise score.

    Example:
        >>> calculate_lighting_score(0.5)
        0.6
        >>> calculate_lighting_score(0.9)
        0.9
    """
    return max(MIN_LIGHTING_SCORE, min(MAX_LIGHTING_SCORE, noise_score * LIGHTING_FROM_NOISE_FACTOR))


def calculate_overall_score(
    noise_score: float,
    lighting_score: float,
    preferences: Preferences,
) -> float:
    """
    Blend route scores with user preferences into a 0-100 match score.

    With both preferences at 0 every route scores exactly 50.

    Example:
        >>> calculate_overall_score(0.5, 0.6, Preferences(0.0, 0.0))
        50.0
    """
    quietness_score = 100 - noise_score * preferences.quietness * 100
    brightness_score = lighting_score * preferences.brightness * 100

    overall = (quietness_score + brightness_score) / 2

    return max(MIN_OVERALL_SCORE, min(MAX_OVERALL_SCORE, overall))


def score_route(route: CandidateRoute, preferences: Preferences) -> ScoredRoute:
    """
    Score one candidate route.

    Args:
        route: Candidate route from the oracle
        preferences: User comfort preferences

    Returns:
        ScoredRoute (recommended=False; ranking sets the flag)
    """
    noise_score = calculate_noise_score(route)
    lighting_score = calculate_lighting_score(noise_score)
    overall_score = calculate_overall_score(noise_score, lighting_score, preferences)

    logger.debug(
        f"Route {route.route_id}: distance={route.distance_meters:.0f}m "
        f"duration={route.duration_seconds:.0f}s steps={len(route.steps)} "
        f"-> noise={noise_score:.2f} light={lighting_score:.2f} overall={overall_score:.2f}"
    )

    return ScoredRoute(
        route=route,
        noise_score=noise_score,
        lighting_score=lighting_score,
        safety_score=lighting_score,
        overall_score=overall_score,
    )


def rank_routes(scored_routes: Sequence[ScoredRoute]) -> List[ScoredRoute]:
    """
    Sort scored routes best-first and flag the top one as recommended.

    The sort is stable, so routes with equal scores keep the oracle's order.

    Args:
        scored_routes: Scored routes in oracle order

    Returns:
        New list, best first, with exactly one recommended route
        (empty if the input is empty)
    """
    ranked = sorted(scored_routes, key=lambda s: s.overall_score, reverse=True)

    return [
        replace(scored, recommended=(index == 0))
        for index, scored in enumerate(ranked)
    ]


def score_and_rank_routes(
    routes: Sequence[CandidateRoute],
    preferences: Preferences,
) -> List[ScoredRoute]:
    """
    Score every candidate route and rank them.

    Args:
        routes: Candidate routes in oracle order
        preferences: User comfort preferences

    Returns:
        Scored routes, best first, with exactly one recommended

    Example:
        >>> ranked = score_and_rank_routes(candidates, Preferences(1.0, 0.0))
        >>> ranked[0].recommended
        True
    """
    ranked = rank_routes([score_route(route, preferences) for route in routes])

    if ranked:
        logger.info(
            f"Ranked {len(ranked)} routes (quietness={preferences.quietness}, "
            f"brightness={preferences.brightness}); recommended {ranked[0].route.route_id}"
        )

    return ranked


def get_recommended_route(ranked_routes: Sequence[ScoredRoute]) -> Optional[ScoredRoute]:
    """Return the recommended route of a ranked list, or None if empty."""
    for scored in ranked_routes:
        if scored.recommended:
            return scored
    return None
