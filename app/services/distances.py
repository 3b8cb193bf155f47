"""Lookups over the static Senegal distance matrix"""
import logging
from datetime import date
from typing import List, Optional

from app.core.enums import RoadQuality, Season
from app.data.distances import SENEGAL_DISTANCES, SENEGAL_CITIES, PROMPT_CITIES
from app.schemas.distance import (
    BudgetRange,
    JourneySummary,
    RouteRecommendation,
    SenegalRoute,
)
from app.utils.numbers import round_half_up
from app.utils.text import fold

logger = logging.getLogger(__name__)

RAINY_MONTHS = {7, 8, 9, 10}
BUDGET_MARGIN = 1.5
SEASON_SENSITIVE_FACTOR = 1.3

ROUTES: List[SenegalRoute] = [SenegalRoute(**r) for r in SENEGAL_DISTANCES]


def _reverse(route: SenegalRoute) -> SenegalRoute:
    stops = [
        stop.model_copy(update={"km": route.distance - stop.km})
        for stop in reversed(route.rest_stops)
    ]
    return route.model_copy(
        update={"from_city": route.to_city, "to_city": route.from_city, "rest_stops": stops}
    )


def find_route(from_city: str, to_city: str) -> Optional[SenegalRoute]:
    a, b = fold(from_city), fold(to_city)
    for route in ROUTES:
        if fold(route.from_city) == a and fold(route.to_city) == b:
            return route
    for route in ROUTES:
        if fold(route.to_city) == a and fold(route.from_city) == b:
            return _reverse(route)
    return None


def list_routes() -> List[SenegalRoute]:
    return list(ROUTES)


def season_for(travel_date: date) -> Season:
    """Hivernage runs from July to October."""
    return Season.RAINY if travel_date.month in RAINY_MONTHS else Season.DRY


def seasonal_factor(route: SenegalRoute, season: Season) -> float:
    if season == Season.RAINY:
        return route.seasonal_impact.rainy_season
    return route.seasonal_impact.dry_season


def get_seasonal_duration(route: SenegalRoute, season: Season) -> int:
    return round_half_up(route.duration * seasonal_factor(route, season))


def route_cost(route: SenegalRoute) -> int:
    return route.fuel_cost + (route.toll_cost or 0)


def calculate_total_journey(cities: List[str]) -> JourneySummary:
    routes: List[SenegalRoute] = []
    missing: List[str] = []
    warnings: List[str] = []
    advice: List[str] = []

    for a, b in zip(cities, cities[1:]):
        route = find_route(a, b)
        if route is None:
            missing.append(f"{a} → {b}")
            continue
        routes.append(route)
        for warning in route.warnings:
            if warning not in warnings:
                warnings.append(warning)
        advice.append(f"{route.from_city} → {route.to_city}: {route.driver_notes}")

    if missing:
        logger.info(f"Journey has {len(missing)} leg(s) outside the distance matrix")

    return JourneySummary(
        total_distance=sum(r.distance for r in routes),
        total_duration=sum(r.duration for r in routes),
        total_cost=sum(route_cost(r) for r in routes),
        routes=routes,
        missing_legs=missing,
        warnings=warnings,
        driver_advice=advice,
    )


def get_route_recommendations(from_city: str, to_city: str) -> RouteRecommendation:
    route = find_route(from_city, to_city)
    if route is None:
        return RouteRecommendation(
            route=None,
            best_time="Route non disponible",
            vehicle_recommendation="Consultation nécessaire",
            total_budget=BudgetRange(min=0, max=0),
            driver_advice="Cette route nécessite une étude personnalisée. Contactez-moi directement.",
        )

    if route.road_quality in (RoadQuality.EXCELLENT, RoadQuality.GOOD):
        vehicle = "Véhicule standard suffisant"
    else:
        vehicle = "SUV/4x4 recommandé"

    if route.seasonal_impact.rainy_season > SEASON_SENSITIVE_FACTOR:
        best_time = "Période sèche recommandée (novembre-mai)"
    else:
        best_time = "Praticable toute l'année"

    cost = route_cost(route)
    return RouteRecommendation(
        route=route,
        best_time=best_time,
        vehicle_recommendation=vehicle,
        total_budget=BudgetRange(min=cost, max=cost * BUDGET_MARGIN),
        driver_advice=route.driver_notes,
    )


def known_cities() -> List[str]:
    cities: List[str] = []
    for route in ROUTES:
        for city in (route.from_city, route.to_city):
            if city not in cities:
                cities.append(city)
    return cities


def find_nearest_city(query: str) -> List[str]:
    q = fold(query)
    return [city for city in known_cities() if q in fold(city) or fold(city) in q]


def search_cities(query: Optional[str] = None) -> List[str]:
    if not query or not query.strip():
        return list(SENEGAL_CITIES)
    q = fold(query)
    matches = [city for city in SENEGAL_CITIES if q in fold(city)]
    for city in find_nearest_city(query):
        if city not in matches:
            matches.append(city)
    return matches


def extract_cities_from_prompt(prompt: str) -> List[str]:
    text = fold(prompt)
    return [city for city in PROMPT_CITIES if fold(city) in text]


def generate_distance_context(cities: List[str]) -> str:
    if len(cities) < 2:
        return ""

    lines = []
    for i, a in enumerate(cities):
        for b in cities[i + 1:]:
            route = find_route(a, b)
            if route is None:
                continue
            hours = round(route.duration / 60, 1)
            season_note = " (affecté par l'hivernage)" if route.seasonal_impact.rainy_season > SEASON_SENSITIVE_FACTOR else ""
            vehicle_note = ""
            if route.road_quality not in (RoadQuality.EXCELLENT, RoadQuality.GOOD):
                vehicle_note = " (SUV/4x4 recommandé)"
            lines.append(
                f"{a} ↔ {b}: {route.distance}km, {hours}h, route {route.road_quality.value}"
                f"{season_note}{vehicle_note}"
            )

    if not lines:
        return ""
    return "\n\nDONNÉES DISTANCES RÉELLES:\n" + "\n".join(lines) + "\n"
