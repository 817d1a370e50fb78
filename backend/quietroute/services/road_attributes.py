"""
Road Attributes - QuietRoute Comfort Scoring

Closed enumerations for the static road attributes the scoring engine reads,
plus normalizers that map raw OpenStreetMap tag values onto them.

Weight tables in the weighting modules are keyed by these enums and cover
every member, so an unrecognized tag is resolved once at the boundary
(to UNKNOWN) instead of through a silent dictionary default.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RoadClass(str, Enum):
    """OSM highway classes, ordered from loudest to quietest."""

    MOTORWAY = "motorway"
    TRUNK = "trunk"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    RESIDENTIAL = "residential"
    LIVING_STREET = "living_street"
    PEDESTRIAN = "pedestrian"
    PATH = "path"
    FOOTWAY = "footway"
    CYCLEWAY = "cycleway"
    UNKNOWN = "unknown"


class LitStatus(str, Enum):
    """OSM lit tag, reduced to the four levels the darkness model uses."""

    YES = "yes"
    LIMITED = "limited"
    NO = "no"
    UNKNOWN = "unknown"


# Link roads carry the same traffic as their parent class
_ROAD_CLASS_ALIASES = {
    "motorway_link": RoadClass.MOTORWAY,
    "trunk_link": RoadClass.TRUNK,
    "primary_link": RoadClass.PRIMARY,
    "secondary_link": RoadClass.SECONDARY,
    "tertiary_link": RoadClass.TERTIARY,
    "living": RoadClass.LIVING_STREET,
    "sidewalk": RoadClass.FOOTWAY,
    "steps": RoadClass.FOOTWAY,
}

_LIT_YES_VALUES = {"yes", "24/7", "automatic", "sunset-sunrise", "interval", "disused_but_lit"}
_LIT_LIMITED_VALUES = {"limited", "partial", "part"}
_LIT_NO_VALUES = {"no", "disused"}


def parse_road_class(raw: Optional[str]) -> RoadClass:
    """
    Normalize a raw highway tag to a RoadClass.

    Handles case, surrounding whitespace, dashes/spaces in place of
    underscores, and *_link variants.

    Args:
        raw: Raw OSM highway value (e.g., "Primary", "living-street")

    Returns:
        Matching RoadClass, or RoadClass.UNKNOWN if unrecognized

    Example:
        >>> parse_road_class("Living Street")
        <RoadClass.LIVING_STREET: 'living_street'>
        >>> parse_road_class("primary_link")
        <RoadClass.PRIMARY: 'primary'>
        >>> parse_road_class(None)
        <RoadClass.UNKNOWN: 'unknown'>
    """
    if not raw:
        return RoadClass.UNKNOWN

    key = raw.strip().lower().replace("-", "_").replace(" ", "_")

    if key in _ROAD_CLASS_ALIASES:
        return _ROAD_CLASS_ALIASES[key]

    try:
        return RoadClass(key)
    except ValueError:
        return RoadClass.UNKNOWN


def parse_lit_status(raw: Optional[str]) -> LitStatus:
    """
    Normalize a raw lit tag to a LitStatus.

    Args:
        raw: Raw OSM lit value (e.g., "yes", "24/7", "no")

    Returns:
        Matching LitStatus, or LitStatus.UNKNOWN if missing or unrecognized

    Example:
        >>> parse_lit_status("sunset-sunrise")
        <LitStatus.YES: 'yes'>
        >>> parse_lit_status("")
        <LitStatus.UNKNOWN: 'unknown'>
    """
    if not raw:
        return LitStatus.UNKNOWN

    value = raw.strip().lower()

    if value in _LIT_YES_VALUES:
        return LitStatus.YES
    elif value in _LIT_LIMITED_VALUES:
        return LitStatus.LIMITED
    elif value in _LIT_NO_VALUES:
        return LitStatus.NO
    else:
        return LitStatus.UNKNOWN


@dataclass(frozen=True)
class RoadSegment:
    """
    One road segment with its static attributes, as returned by the
    road-attribute store.

    Attributes:
        road_class: OSM highway class
        lit: Lit status
        distance_meters: Physical length of the segment (>= 0)
        coordinates: Ordered (lat, lon) pairs along the segment
        school_zone: Segment lies in a school zone
        nightlife_zone: Segment lies in a bar/club area
        market_zone: Segment lies in a market area
        segment_id: Store identifier (e.g., OSM way id), if any
    """

    road_class: RoadClass = RoadClass.UNKNOWN
    lit: LitStatus = LitStatus.UNKNOWN
    distance_meters: float = 0.0
    coordinates: Tuple[Tuple[float, float], ...] = ()
    school_zone: bool = False
    nightlife_zone: bool = False
    market_zone: bool = False
    segment_id: Optional[str] = None
