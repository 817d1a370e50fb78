"""
Routing Oracle Service - Candidate Routes from OSRM

Fetches alternative walking routes between two points from an OSRM server
and converts them into CandidateRoute objects for the scorer.

API: http://project-osrm.org/docs/v5.24.0/api/#route-service
- GeoJSON coordinates are [lon, lat]; converted to (lat, lon) here
- Steps are flattened across legs; each step's location is its maneuver point

Servers are tried in order (primary, then fallback). Raw responses are cached
in Redis for ROUTE_CACHE_TTL_SECONDS.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from quietroute.config import settings
from quietroute.services.route_scoring import CandidateRoute, RouteStep
from quietroute.utils.cache import build_route_key, cache_get, cache_set

logger = logging.getLogger(__name__)


class RoutingOracleError(Exception):
    """Raised when no OSRM server returns a usable route."""


def build_route_url(
    server: str,
    profile: str,
    origin_lat: float,
    origin_lon: float,
    destination_lat: float,
    destination_lon: float,
) -> str:
    """
    Build the OSRM route URL (coordinates in lon,lat order).

    Example:
        >>> build_route_url("https://router.project-osrm.org", "foot", 22.57, 88.36, 22.58, 88.37)
        'https://router.project-osrm.org/route/v1/foot/88.36,22.57;88.37,22.58'
    """
    coords = f"{origin_lon},{origin_lat};{destination_lon},{destination_lat}"
    return f"{server}/route/v1/{profile}/{coords}"


def parse_osrm_route(route: Dict[str, Any], index: int) -> CandidateRoute:
    """
    Convert one OSRM route object into a CandidateRoute.

    Args:
        route: Route object from the OSRM "routes" array
        index: Position in the oracle's response (used for the id)

    Returns:
        CandidateRoute with (lat, lon) geometry and flattened steps
    """
    geometry = tuple(
        (float(lat), float(lon))
        for lon, lat in route.get("geometry", {}).get("coordinates", [])
    )

    steps: List[RouteStep] = []
    for leg in route.get("legs", []):
        for step in leg.get("steps", []):
            location = step.get("maneuver", {}).get("location") or [0.0, 0.0]
            steps.append(
                RouteStep(
                    latitude=float(location[1]),
                    longitude=float(location[0]),
                    distance_meters=float(step.get("distance", 0.0)),
                    duration_seconds=float(step.get("duration", 0.0)),
                )
            )

    return CandidateRoute(
        route_id=f"route-{index}",
        geometry=geometry,
        distance_meters=float(route.get("distance", 0.0)),
        duration_seconds=float(route.get("duration", 0.0)),
        steps=tuple(steps),
    )


def parse_osrm_response(data: Dict[str, Any]) -> List[CandidateRoute]:
    """
    Convert an OSRM route response into candidate routes (oracle order).

    Raises:
        RoutingOracleError: If the response code is not "Ok" or has no routes
    """
    if data.get("code") != "Ok" or not data.get("routes"):
        raise RoutingOracleError(
            f"No routes found (code={data.get('code')}, message={data.get('message')})"
        )

    return [parse_osrm_route(route, index) for index, route in enumerate(data["routes"])]


def _request_routes(
    server: str,
    profile: str,
    origin_lat: float,
    origin_lon: float,
    destination_lat: float,
    destination_lon: float,
    alternatives: int,
) -> Dict[str, Any]:
    """Make one OSRM request and return the decoded JSON body."""
    url = build_route_url(
        server, profile, origin_lat, origin_lon, destination_lat, destination_lon
    )
    params = {
        "overview": "full",
        "alternatives": str(alternatives) if alternatives > 0 else "false",
        "steps": "true",
        "geometries": "geojson",
    }

    response = requests.get(url, params=params, timeout=settings.OSRM_TIMEOUT_SECONDS)
    response.raise_for_status()

    return response.json()


def fetch_candidate_routes(
    origin_lat: float,
    origin_lon: float,
    destination_lat: float,
    destination_lon: float,
    profile: Optional[str] = None,
    alternatives: Optional[int] = None,
    servers: Optional[Sequence[str]] = None,
) -> List[CandidateRoute]:
    """
    Fetch candidate routes between two points.

    Args:
        origin_lat: Origin latitude (degrees)
        origin_lon: Origin longitude (degrees)
        destination_lat: Destination latitude (degrees)
        destination_lon: Destination longitude (degrees)
        profile: OSRM travel profile (default: settings.OSRM_PROFILE)
        alternatives: Number of alternatives to request (default: settings.OSRM_ALTERNATIVES)
        servers: OSRM base URLs to try in order (default: settings.osrm_servers)

    Returns:
        Candidate routes in oracle order

    Raises:
        RoutingOracleError: If every server fails or returns no routes
    """
    profile = profile or settings.OSRM_PROFILE
    alternatives = settings.OSRM_ALTERNATIVES if alternatives is None else alternatives
    servers = list(servers) if servers is not None else settings.osrm_servers

    cache_key = build_route_key(
        origin_lat, origin_lon, destination_lat, destination_lon, profile, alternatives
    )
    cached = cache_get(cache_key)
    if cached is not None:
        logger.info(f"Cache HIT for routes {cache_key}")
        return parse_osrm_response(cached)

    errors = []
    for server in servers:
        try:
            data = _request_routes(
                server,
                profile,
                origin_lat,
                origin_lon,
                destination_lat,
                destination_lon,
                alternatives,
            )
            routes = parse_osrm_response(data)
        except (requests.RequestException, ValueError, RoutingOracleError) as e:
            logger.warning(f"OSRM server {server} failed: {e}")
            errors.append(f"{server}: {e}")
            continue

        logger.info(f"Fetched {len(routes)} candidate routes from {server}")
        cache_set(cache_key, data, ttl_seconds=settings.ROUTE_CACHE_TTL_SECONDS)
        return routes

    raise RoutingOracleError("All routing servers failed: " + "; ".join(errors))
