from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.errors import AppError, NotFoundError
from app.core.rate_limit import rate_limit
from app.schemas.distance import DistanceList, JourneySummary, RouteRecommendation, SenegalRoute
from app.services.distances import (
    calculate_total_journey,
    find_route,
    get_route_recommendations,
    list_routes,
    search_cities,
)

MAX_JOURNEY_STOPS = 15

router = APIRouter(
    prefix="/api/v1/distances",
    tags=["distances"],
    dependencies=[Depends(rate_limit("lenient"))],
)


@router.get("", response_model=SenegalRoute | DistanceList)
async def get_distances(
    from_city: Optional[str] = Query(None, alias="from", max_length=100),
    to_city: Optional[str] = Query(None, alias="to", max_length=100),
):
    """One route when both ends are given, otherwise the whole matrix."""
    if not from_city or not to_city:
        routes = list_routes()
        return DistanceList(distances=routes, count=len(routes))

    route = find_route(from_city, to_city)
    if route is None:
        raise NotFoundError(f"Route {from_city} → {to_city}")
    return route


@router.get("/cities", response_model=List[str])
async def cities(q: Optional[str] = Query(None, max_length=100)):
    return search_cities(q)


@router.get("/journey", response_model=JourneySummary)
async def journey(cities: List[str] = Query(...)):
    if not 2 <= len(cities) <= MAX_JOURNEY_STOPS:
        raise AppError(
            f"A journey needs between 2 and {MAX_JOURNEY_STOPS} cities",
            status_code=400,
            code="VALIDATION_ERROR",
        )
    return calculate_total_journey(cities)


@router.get("/recommendations", response_model=RouteRecommendation)
async def recommendations(
    from_city: str = Query(..., alias="from", min_length=1, max_length=100),
    to_city: str = Query(..., alias="to", min_length=1, max_length=100),
):
    return get_route_recommendations(from_city, to_city)
