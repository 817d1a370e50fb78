"""
Geocoding API Endpoints

GET /api/v1/geocode/search  - Free-text place search
GET /api/v1/geocode/reverse - Place at a coordinate
"""
from fastapi import APIRouter, HTTPException, Query

from quietroute.schemas.geocoding import GeocodeSearchResponse, Place
from quietroute.services.geocoding_service import reverse_geocode, search_location

router = APIRouter()


@router.get("/geocode/search", response_model=GeocodeSearchResponse)
def geocode_search(
    q: str = Query(..., min_length=1, description="Search text"),
    limit: int = Query(5, ge=1, le=20, description="Maximum results"),
):
    """Search for places matching a text query."""
    results = search_location(q, limit=limit)
    return GeocodeSearchResponse(query=q, results=[Place(**place) for place in results])


@router.get("/geocode/reverse", response_model=Place)
def geocode_reverse(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
):
    """Look up the place at a coordinate."""
    place = reverse_geocode(lat, lon)
    if place is None:
        raise HTTPException(status_code=404, detail="No place found at this location")
    return Place(**place)
