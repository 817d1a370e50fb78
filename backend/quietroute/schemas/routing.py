"""
Pydantic schemas for route scoring API endpoints.

Defines request and response models for /api/v1/routes and /api/v1/routes/score.
"""
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from quietroute.services.preferences import Preferences
from quietroute.services.route_scoring import CandidateRoute, RouteStep, ScoredRoute


class Coordinate(BaseModel):
    """A geographic point in degrees."""

    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")


class PreferencesSchema(BaseModel):
    """
    User comfort preferences.

    Values outside [0, 1] are rejected with a 422, never clamped.
    """

    quietness: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="0 = ignore noise, 1 = strongly avoid loud roads",
    )
    brightness: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="0 = ignore lighting, 1 = strongly prefer lit roads",
    )

    def to_preferences(self) -> Preferences:
        return Preferences(quietness=self.quietness, brightness=self.brightness)


class RouteStepSchema(BaseModel):
    """One maneuver step of a route."""

    latitude: float
    longitude: float
    distance_meters: float = Field(..., ge=0.0)
    duration_seconds: float = Field(..., ge=0.0)


class CandidateRouteSchema(BaseModel):
    """A candidate route supplied by the caller."""

    route_id: str = Field(..., description="Caller-chosen route identifier")
    geometry: List[Tuple[float, float]] = Field(
        default_factory=list, description="Ordered [latitude, longitude] pairs"
    )
    distance_meters: float = Field(..., ge=0.0, description="Total length in meters")
    duration_seconds: float = Field(..., ge=0.0, description="Total travel time in seconds")
    steps: List[RouteStepSchema] = Field(default_factory=list)

    def to_candidate(self) -> CandidateRoute:
        return CandidateRoute(
            route_id=self.route_id,
            geometry=tuple(tuple(point) for point in self.geometry),
            distance_meters=self.distance_meters,
            duration_seconds=self.duration_seconds,
            steps=tuple(
                RouteStep(
                    latitude=step.latitude,
                    longitude=step.longitude,
                    distance_meters=step.distance_meters,
                    duration_seconds=step.duration_seconds,
                )
                for step in self.steps
            ),
        )


class RouteRequest(BaseModel):
    """
    Request schema for fetching and ranking routes.

    Example:
        {
            "origin": {"latitude": 22.5726, "longitude": 88.3639},
            "destination": {"latitude": 22.5448, "longitude": 88.3426},
            "preferences": {"quietness": 0.8, "brightness": 0.3}
        }
    """

    origin: Coordinate
    destination: Coordinate
    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)
    profile: Optional[str] = Field(
        default=None, description="Routing profile (default: server setting, usually 'foot')"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "origin": {"latitude": 22.5726, "longitude": 88.3639},
                "destination": {"latitude": 22.5448, "longitude": 88.3426},
                "preferences": {"quietness": 0.8, "brightness": 0.3},
            }
        }
    )


class ScoreRoutesRequest(BaseModel):
    """Request schema for ranking caller-supplied candidate routes."""

    routes: List[CandidateRouteSchema] = Field(..., min_length=1)
    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)


class ScoredRouteResponse(BaseModel):
    """A candidate route with its comfort scores."""

    route_id: str
    geometry: List[Tuple[float, float]]
    distance_meters: float
    duration_seconds: float
    steps: List[RouteStepSchema]
    noise_score: float = Field(..., description="0.1-0.9, higher = louder")
    lighting_score: float = Field(..., description="0.2-0.9, higher = better lit")
    safety_score: float = Field(..., description="Same as lighting_score")
    overall_score: float = Field(..., ge=0.0, le=100.0, description="0-100 preference match")
    recommended: bool

    @classmethod
    def from_scored(cls, scored: ScoredRoute) -> "ScoredRouteResponse":
        route = scored.route
        return cls(
            route_id=route.route_id,
            geometry=[tuple(point) for point in route.geometry],
            distance_meters=route.distance_meters,
            duration_seconds=route.duration_seconds,
            steps=[
                RouteStepSchema(
                    latitude=step.latitude,
                    longitude=step.longitude,
                    distance_meters=step.distance_meters,
                    duration_seconds=step.duration_seconds,
                )
                for step in route.steps
            ],
            noise_score=round(scored.noise_score, 4),
            lighting_score=round(scored.lighting_score, 4),
            safety_score=round(scored.safety_score, 4),
            overall_score=round(scored.overall_score, 2),
            recommended=scored.recommended,
        )


class RouteListResponse(BaseModel):
    """Ranked routes, best first."""

    routes: List[ScoredRouteResponse]
    recommended_route_id: Optional[str]
    metadata: Dict = Field(default_factory=dict)
