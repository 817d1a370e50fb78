"""
Route Scoring API Endpoints

POST /api/v1/routes       - Fetch candidate routes from the oracle and rank them
POST /api/v1/routes/score - Rank caller-supplied candidate routes
"""
import logging
from typing import List, Sequence

from fastapi import APIRouter, HTTPException, status

from quietroute.config import settings
from quietroute.schemas.routing import (
    RouteListResponse,
    RouteRequest,
    ScoredRouteResponse,
    ScoreRoutesRequest,
)
from quietroute.services.preferences import InvalidPreferencesError, Preferences
from quietroute.services.route_scoring import (
    CandidateRoute,
    ScoredRoute,
    get_recommended_route,
    score_and_rank_routes,
)
from quietroute.services.routing_oracle import RoutingOracleError, fetch_candidate_routes
from quietroute.services.scoring_vectorized import score_and_rank_routes_vectorized

router = APIRouter()
logger = logging.getLogger(__name__)


def rank_candidates(
    candidates: Sequence[CandidateRoute],
    preferences: Preferences,
) -> List[ScoredRoute]:
    """Score and rank with the implementation selected in settings."""
    if settings.USE_VECTORIZED_SCORING:
        logger.info(f"Using VECTORIZED scorer for {len(candidates)} routes")
        return score_and_rank_routes_vectorized(candidates, preferences)

    return score_and_rank_routes(candidates, preferences)


def build_route_list_response(
    ranked: Sequence[ScoredRoute],
    preferences: Preferences,
    source: str,
) -> RouteListResponse:
    recommended = get_recommended_route(ranked)
    return RouteListResponse(
        routes=[ScoredRouteResponse.from_scored(scored) for scored in ranked],
        recommended_route_id=recommended.route.route_id if recommended else None,
        metadata={
            "source": source,
            "num_routes": len(ranked),
            "quietness": preferences.quietness,
            "brightness": preferences.brightness,
        },
    )


@router.post("/routes", response_model=RouteListResponse)
def get_ranked_routes(request: RouteRequest):
    """
    Fetch walking routes between two points and rank them by comfort.

    **Pipeline**:
    - Request alternatives from the routing oracle (OSRM)
    - Score each route from its speed and turn density
    - Blend with quietness/brightness preferences into a 0-100 score
    - Sort best-first and mark the top route `recommended`

    **Errors**:
    - 502 if no routing server returns a route
    """
    try:
        preferences = request.preferences.to_preferences()
    except InvalidPreferencesError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        candidates = fetch_candidate_routes(
            origin_lat=request.origin.latitude,
            origin_lon=request.origin.longitude,
            destination_lat=request.destination.latitude,
            destination_lon=request.destination.longitude,
            profile=request.profile,
        )
    except RoutingOracleError as e:
        logger.error(f"Routing oracle failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Routing service unavailable: {e}",
        )

    ranked = rank_candidates(candidates, preferences)

    return build_route_list_response(ranked, preferences, source="oracle")


@router.post("/routes/score", response_model=RouteListResponse)
def score_routes(request: ScoreRoutesRequest):
    """
    Rank caller-supplied candidate routes by comfort.

    Routes keep their ids; equal scores keep the order they were sent in.
    """
    try:
        preferences = request.preferences.to_preferences()
    except InvalidPreferencesError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    candidates = [route.to_candidate() for route in request.routes]
    ranked = rank_candidates(candidates, preferences)

    return build_route_list_response(ranked, preferences, source="request")
