"""
Pydantic schemas for geocoding API endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel


class Place(BaseModel):
    """A geocoded place."""

    place_id: Optional[int] = None
    name: str
    display_name: str
    latitude: float
    longitude: float
    type: Optional[str] = None


class GeocodeSearchResponse(BaseModel):
    """Results of a free-text search."""

    query: str
    results: List[Place]
