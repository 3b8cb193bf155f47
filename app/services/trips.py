"""Quote orchestration: route lookup, pricing and a best-effort write of the lead"""
import asyncio
import logging
import time
from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.config import settings
from app.core.errors import NotFoundError, ServiceUnavailableError
from app.core.metrics import persistence_failures, quotes_generated
from app.core.response_builders import build_trip_request_response, build_trip_request_response_list
from app.models.trip import TripRequest, TripQuote
from app.schemas.trip import RouteStep, TripQuoteOut, TripRequestIn, TripRequestOut
from app.services.pricing import QuoteBreakdown, ResolvedRoute, calculate_quote, resolve_route
from app.services.whatsapp import build_whatsapp_url, format_quote_message

logger = logging.getLogger(__name__)


def demo_trip_id() -> str:
    return f"demo-{int(time.time() * 1000)}"


async def _write_trip(db: AsyncSession, trip: TripRequestIn, route: ResolvedRoute, breakdown: QuoteBreakdown) -> str:
    request = TripRequest(
        departure=trip.departure,
        destination=trip.destination,
        date=trip.date,
        time=trip.time,
        passengers=trip.passengers,
        duration_days=trip.duration_days,
        vehicle_type=trip.vehicle_type.value,
        customer_name=trip.customer_name,
        customer_phone=trip.customer_phone,
        customer_email=trip.customer_email,
        special_requests=trip.special_requests,
    )
    db.add(request)
    await db.flush()

    db.add(TripQuote(
        trip_request_id=request.id,
        distance=route.distance,
        duration=route.duration,
        duration_minutes=route.duration_minutes,
        base_price=breakdown.base_price,
        total_price=breakdown.total_price,
        traffic_multiplier=route.traffic_multiplier,
        route=route.steps,
        vehicle_info=breakdown.vehicle_info.model_dump(mode="json"),
    ))
    await db.commit()
    return str(request.id)


async def persist_trip(
    db: Optional[AsyncSession],
    trip: TripRequestIn,
    route: ResolvedRoute,
    breakdown: QuoteBreakdown,
) -> str:
    """Returns the stored id, or a synthetic demo id when the write cannot happen."""
    if db is None:
        logger.info("Persistence disabled, quote gets a demo id")
        return demo_trip_id()

    try:
        return await asyncio.wait_for(
            _write_trip(db, trip, route, breakdown),
            timeout=settings.DB_WRITE_TIMEOUT,
        )
    except Exception as e:
        logger.error(f"Failed to persist trip request, falling back to a demo id: {e}")
        persistence_failures.labels(table="trip_requests").inc()
        try:
            await db.rollback()
        except Exception as rollback_error:
            logger.warning(f"Rollback after failed trip write also failed: {rollback_error}")
        return demo_trip_id()


async def generate_quote(trip: TripRequestIn, db: Optional[AsyncSession] = None) -> TripQuoteOut:
    route = await resolve_route(trip.departure, trip.destination, travel_date=date.fromisoformat(trip.date))
    breakdown = calculate_quote(route, trip.vehicle_type)

    if trip.passengers > breakdown.vehicle_info.capacity:
        logger.info(
            f"{trip.passengers} passengers exceed the {trip.vehicle_type} capacity "
            f"of {breakdown.vehicle_info.capacity}"
        )

    trip_request_id = await persist_trip(db, trip, route, breakdown)

    quote = TripQuoteOut(
        trip_request_id=trip_request_id,
        distance=route.distance,
        duration=route.duration,
        duration_minutes=route.duration_minutes,
        base_price=breakdown.base_price,
        total_price=breakdown.total_price,
        traffic_multiplier=route.traffic_multiplier,
        route=[RouteStep(**step) for step in route.steps],
        vehicle_info=breakdown.vehicle_info,
    )
    quote.whatsapp_url = build_whatsapp_url(settings.WHATSAPP_PHONE_NUMBER, format_quote_message(trip, quote))

    quotes_generated.labels(vehicle_type=trip.vehicle_type.value, route_source=route.source).inc()
    logger.info(
        f"Quote {trip_request_id}: {trip.departure} -> {trip.destination}, "
        f"{route.distance} km, {breakdown.total_price} FCFA ({route.source})"
    )
    return quote


def _require_db(db: Optional[AsyncSession]) -> AsyncSession:
    if db is None:
        raise ServiceUnavailableError("Trip history requires a database")
    return db


async def list_trip_requests(db: Optional[AsyncSession], limit: int = 20, offset: int = 0) -> List[TripRequestOut]:
    db = _require_db(db)
    q = (
        select(TripRequest)
        .options(selectinload(TripRequest.quotes))
        .order_by(TripRequest.id.desc())
        .limit(limit)
        .offset(offset)
    )
    res = await db.execute(q)
    return build_trip_request_response_list(res.scalars().all())


async def get_trip_request(db: Optional[AsyncSession], trip_id: int) -> TripRequestOut:
    db = _require_db(db)
    res = await db.execute(
        select(TripRequest).where(TripRequest.id == trip_id).options(selectinload(TripRequest.quotes))
    )
    trip = res.scalars().first()
    if trip is None:
        raise NotFoundError("Trip request", trip_id)
    return build_trip_request_response(trip)
