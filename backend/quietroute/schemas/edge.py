"""
Pydantic schemas for the edge cost API endpoint.

Road attributes arrive as raw OSM tag strings and are normalized with
parse_road_class / parse_lit_status; unknown values fall back to UNKNOWN.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from quietroute.schemas.routing import PreferencesSchema
from quietroute.services.report_weighting import Report, ReportCategory
from quietroute.services.road_attributes import (
    RoadSegment,
    parse_lit_status,
    parse_road_class,
)


class ReportSchema(BaseModel):
    """A user report as supplied by the report store."""

    report_id: Optional[int] = None
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    category: ReportCategory
    created_at: datetime

    def to_report(self) -> Report:
        return Report(
            latitude=self.latitude,
            longitude=self.longitude,
            category=self.category,
            created_at=self.created_at,
            report_id=self.report_id,
        )


class RoadSegmentSchema(BaseModel):
    """A road segment as supplied by the road-attribute store."""

    segment_id: Optional[str] = None
    road_class: Optional[str] = Field(default=None, description="OSM highway tag")
    lit: Optional[str] = Field(default=None, description="OSM lit tag")
    distance_meters: float = Field(..., ge=0.0)
    coordinates: List[Tuple[float, float]] = Field(
        default_factory=list, description="Ordered [latitude, longitude] pairs"
    )
    school_zone: bool = False
    nightlife_zone: bool = False
    market_zone: bool = False

    def to_segment(self) -> RoadSegment:
        return RoadSegment(
            road_class=parse_road_class(self.road_class),
            lit=parse_lit_status(self.lit),
            distance_meters=self.distance_meters,
            coordinates=tuple(tuple(point) for point in self.coordinates),
            school_zone=self.school_zone,
            nightlife_zone=self.nightlife_zone,
            market_zone=self.market_zone,
            segment_id=self.segment_id,
        )


class EdgeCostRequest(BaseModel):
    """
    Request schema for edge cost evaluation.

    current_time is the local time of travel; the server's local time is
    used when omitted.
    """

    segments: List[RoadSegmentSchema] = Field(..., min_length=1)
    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)
    reports: List[ReportSchema] = Field(default_factory=list)
    current_time: Optional[datetime] = None


class ContributingReport(BaseModel):
    """A report that changed a segment's cost."""

    report_id: Optional[int]
    category: str
    distance_m: float
    impact: float


class EdgeCostBreakdown(BaseModel):
    """Cost of one segment with every multiplier."""

    segment_id: Optional[str]
    road_class: str
    lit: str
    distance_meters: float
    noise_multiplier: float
    darkness_multiplier: float
    reports_multiplier: float
    zone_multiplier: float
    total_multiplier: float
    total_cost: float
    contributing_reports: List[ContributingReport]


class EdgeCostResponse(BaseModel):
    """Per-segment costs and the path total."""

    total_cost: float
    total_distance_meters: float
    current_time: datetime
    is_night: bool
    active_reports: int
    edges: List[EdgeCostBreakdown]
