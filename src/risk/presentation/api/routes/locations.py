"""
API for location suggestions.
"""
import asyncio
from typing import List
from fastapi import FastAPI, Query
from .analyses import get_service
from .....common.schemas import LocationSchema

app = FastAPI()

@app.get("/locations/search", response_model=List[LocationSchema])
async def search_locations(q: str = Query(..., description="Free-text place query")):
    service = get_service()
    results = await asyncio.to_thread(service.search_locations, q)
    return [LocationSchema(lat=r.lat, lon=r.lon, display_name=r.display_name) for r in results]

@app.get("/locations/reverse", response_model=LocationSchema)
async def reverse_location(lat: float, lon: float):
    """Display name for coordinates; falls back to "lat, lon" when lookup fails."""
    service = get_service()
    result = await asyncio.to_thread(service.describe_coordinates, lat, lon)
    return LocationSchema(lat=result.lat, lon=result.lon, display_name=result.display_name)
