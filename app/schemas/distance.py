from typing import List, Optional
from pydantic import BaseModel

from app.core.enums import RoadQuality, RestStopType


class SeasonalImpact(BaseModel):
    dry_season: float
    rainy_season: float


class RestStop(BaseModel):
    name: str
    km: int
    type: RestStopType
    duration: int
    optional: bool
    description: str


class SenegalRoute(BaseModel):
    from_city: str
    to_city: str
    distance: int
    duration: int
    road_quality: RoadQuality
    seasonal_impact: SeasonalImpact
    toll_cost: Optional[int] = None
    fuel_cost: int
    rest_stops: List[RestStop] = []
    warnings: List[str] = []
    driver_notes: str


class DistanceList(BaseModel):
    distances: List[SenegalRoute]
    count: int


class JourneySummary(BaseModel):
    total_distance: int
    total_duration: int
    total_cost: int
    routes: List[SenegalRoute]
    missing_legs: List[str]
    warnings: List[str]
    driver_advice: List[str]


class BudgetRange(BaseModel):
    min: float
    max: float


class RouteRecommendation(BaseModel):
    route: Optional[SenegalRoute] = None
    best_time: str
    vehicle_recommendation: str
    total_budget: BudgetRange
    driver_advice: str
