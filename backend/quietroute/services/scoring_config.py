"""
QuietRoute Comfort Scoring - Configuration

This module contains all tunable parameters for the comfort scoring engine.
Enum-keyed tables live next to their enums (road_attributes, report_weighting)
and are built from the raw values defined here.

All multiplier bands are documented so that edge costs stay positive and
monotonic if they are ever fed into a shortest-path search.
"""

# =============================================================================
# NOISE WEIGHTING PARAMETERS
# =============================================================================

# Base noise weight by OSM highway class (loudest to quietest)
# 1.0 = neutral, > 1 = avoid, < 1 = prefer
NOISE_WEIGHTS = {
    "motorway": 3.0,
    "trunk": 2.8,
    "primary": 2.5,
    "secondary": 2.0,
    "tertiary": 1.5,
    "residential": 1.0,
    "living_street": 0.8,
    "pedestrian": 0.6,
    "path": 0.5,
    "footway": 0.5,
    "cycleway": 0.7,
    "unknown": 1.0,     # Treated as residential
}

# Clamp band for the noise multiplier
MIN_NOISE_MULTIPLIER = 0.5
MAX_NOISE_MULTIPLIER = 3.0


# =============================================================================
# LIGHTING WEIGHTING PARAMETERS
# =============================================================================

# Base darkness weight by OSM lit status
LIGHTING_WEIGHTS = {
    "yes": 0.5,         # Well lit - prefer
    "limited": 1.0,     # Some lighting
    "no": 2.0,          # No lighting - avoid
    "unknown": 1.5,     # Assume moderate
}

# Clamp band for the darkness multiplier
MIN_DARKNESS_MULTIPLIER = 0.5
MAX_DARKNESS_MULTIPLIER = 2.5

# Night is hour < NIGHT_ENDS_BEFORE_HOUR or hour > NIGHT_BEGINS_AFTER_HOUR
NIGHT_ENDS_BEFORE_HOUR = 6
NIGHT_BEGINS_AFTER_HOUR = 18


# =============================================================================
# TEMPORAL ZONE PARAMETERS
# =============================================================================

# School zones: weekdays (Mon-Fri) during drop-off and pick-up
SCHOOL_ZONE_MULTIPLIER = 1.8
SCHOOL_ZONE_HOURS = [(7, 9), (14, 16)]  # Inclusive hour windows
SCHOOL_DAYS = [0, 1, 2, 3, 4]           # datetime.weekday(): Monday = 0

# Nightlife zones: weekend nights (Fri, Sat, Sun)
NIGHTLIFE_ZONE_MULTIPLIER = 2.0
NIGHTLIFE_STARTS_AT_HOUR = 21           # hour >= 21
NIGHTLIFE_ENDS_AT_HOUR = 2              # hour <= 2
NIGHTLIFE_DAYS = [4, 5, 6]              # Friday, Saturday, Sunday

# Market zones: every day during trading hours
MARKET_ZONE_MULTIPLIER = 1.5
MARKET_ZONE_HOURS = (8, 20)             # Inclusive

# Zone multipliers compound: 1.8 × 2.0 × 1.5 = 5.4 at most
MIN_ZONE_MULTIPLIER = 1.0
MAX_ZONE_MULTIPLIER = SCHOOL_ZONE_MULTIPLIER * NIGHTLIFE_ZONE_MULTIPLIER * MARKET_ZONE_MULTIPLIER


# =============================================================================
# REPORT PROXIMITY PARAMETERS
# =============================================================================

# Signed impact weight per report category
# Hazard reports raise cost, comfort reports (safe, quiet) lower it
REPORT_CATEGORY_WEIGHTS = {
    "loud": 2.0,
    "dark": 1.8,
    "crowded": 1.5,
    "obstruction": 3.0,
    "safe": -0.7,
    "quiet": -0.5,
}

# Reports at or beyond this distance from both segment endpoints are ignored
REPORT_INFLUENCE_RADIUS_M = 50.0

# Ceiling on the accumulated report multiplier
MAX_REPORTS_MULTIPLIER = 5.0

# Floor keeps costs positive when several comfort reports stack up
MIN_REPORTS_MULTIPLIER = 0.1


# =============================================================================
# REPORT RETENTION PARAMETERS
# =============================================================================

# Hours a report stays active after creation, by category
REPORT_RETENTION_HOURS = {
    "loud": 4,
    "crowded": 2,
    "obstruction": 4 * 7 * 24,   # 4 weeks
    "dark": 30 * 24,             # 30 days
    "safe": 7 * 24,              # 1 week
    "quiet": 7 * 24,             # 1 week
}


# =============================================================================
# ROUTE SCORING PARAMETERS
# =============================================================================

# Average speed (m/s) at which the speed proxy saturates (54 km/h)
SPEED_SATURATION_MPS = 15.0

# Turn density damping: turn_score = 1 / (1 + TURN_DENSITY_FACTOR * turns_per_km)
TURN_DENSITY_FACTOR = 0.1

# Noise score blend (speed is the stronger arterial-road signal)
NOISE_SPEED_WEIGHT = 0.7
NOISE_TURN_WEIGHT = 0.3
MIN_NOISE_SCORE = 0.1
MAX_NOISE_SCORE = 0.9

# Lighting is modeled as correlated with major-road character
LIGHTING_FROM_NOISE_FACTOR = 1.2
MIN_LIGHTING_SCORE = 0.2
MAX_LIGHTING_SCORE = 0.9

# Overall score range
MIN_OVERALL_SCORE = 0.0
MAX_OVERALL_SCORE = 100.0


# =============================================================================
# UTILITY CONSTANTS
# =============================================================================

# Earth radius for Haversine distance calculations (meters)
EARTH_RADIUS_M = 6371000.0
