"""
Geocoding Service - Free-text search and reverse lookup

Uses Nominatim (OpenStreetMap) to resolve place queries to coordinates.
Pure lookup: nothing here affects scoring.

API: https://nominatim.org/release-docs/latest/api/Overview/
- Requires an identifying User-Agent
- Usage policy: at most 1 request per second on the public server

Fallback: returns an empty list / None if the API is unavailable.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from quietroute.config import settings

logger = logging.getLogger(__name__)


def _headers() -> Dict[str, str]:
    return {"User-Agent": settings.GEOCODER_USER_AGENT}


def _normalize_place(place: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a Nominatim place into the response shape used by the API."""
    display_name = place.get("display_name", "")
    return {
        "place_id": place.get("place_id"),
        "name": place.get("name") or display_name.split(",")[0],
        "display_name": display_name,
        "latitude": float(place["lat"]),
        "longitude": float(place["lon"]),
        "type": place.get("type"),
    }


def search_location(
    query: str,
    limit: int = 5,
    viewbox: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Search for places matching a text query.

    Args:
        query: Free-text search (address, landmark, ...)
        limit: Maximum number of results
        viewbox: Optional "west,south,east,north" box to bias results toward
                 (default: settings.GEOCODER_VIEWBOX); results outside are
                 still allowed

    Returns:
        List of places with place_id, name, display_name, latitude,
        longitude and type; empty on failure

    Example:
        >>> results = search_location("Victoria Memorial, Kolkata", limit=1)
        >>> results[0]["latitude"]
        22.5448...
    """
    if not query or not query.strip():
        return []

    params = {
        "q": query.strip(),
        "format": "json",
        "addressdetails": 1,
        "limit": limit,
    }
    viewbox = viewbox or settings.GEOCODER_VIEWBOX
    if viewbox:
        params["viewbox"] = viewbox
        params["bounded"] = 0  # Prefer but don't limit to the box

    try:
        response = requests.get(
            f"{settings.NOMINATIM_URL}/search",
            params=params,
            headers=_headers(),
            timeout=settings.GEOCODER_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        results = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Geocoding failed for '{query}': {e}")
        return []

    places = []
    for place in results:
        try:
            places.append(_normalize_place(place))
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed geocoder result: {e}")

    logger.debug(f"Geocoded '{query}' -> {len(places)} results")
    return places


def reverse_geocode(latitude: float, longitude: float) -> Optional[Dict[str, Any]]:
    """
    Look up the place at a coordinate.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees

    Returns:
        Place dict (same shape as search_location results), or None if
        nothing was found or the API is unavailable
    """
    params = {
        "lat": latitude,
        "lon": longitude,
        "format": "json",
        "addressdetails": 1,
    }

    try:
        response = requests.get(
            f"{settings.NOMINATIM_URL}/reverse",
            params=params,
            headers=_headers(),
            timeout=settings.GEOCODER_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Reverse geocoding failed for ({latitude}, {longitude}): {e}")
        return None

    if not data or "error" in data:
        return None

    try:
        return _normalize_place(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Malformed reverse geocoding result: {e}")
        return None
