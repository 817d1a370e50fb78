"""
Pydantic schemas export.
"""
from quietroute.schemas.routing import (
    Coordinate,
    PreferencesSchema,
    RouteStepSchema,
    CandidateRouteSchema,
    RouteRequest,
    ScoreRoutesRequest,
    ScoredRouteResponse,
    RouteListResponse,
)
from quietroute.schemas.edge import (
    ReportSchema,
    RoadSegmentSchema,
    EdgeCostRequest,
    ContributingReport,
    EdgeCostBreakdown,
    EdgeCostResponse,
)
from quietroute.schemas.geocoding import (
    Place,
    GeocodeSearchResponse,
)

__all__ = [
    # Routing
    "Coordinate",
    "PreferencesSchema",
    "RouteStepSchema",
    "CandidateRouteSchema",
    "RouteRequest",
    "ScoreRoutesRequest",
    "ScoredRouteResponse",
    "RouteListResponse",
    # Edge cost
    "ReportSchema",
    "RoadSegmentSchema",
    "EdgeCostRequest",
    "ContributingReport",
    "EdgeCostBreakdown",
    "EdgeCostResponse",
    # Geocoding
    "Place",
    "GeocodeSearchResponse",
]
