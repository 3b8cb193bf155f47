from datetime import datetime, timezone
from typing import List, Optional
from app.models.trip import TripRequest, TripQuote
from app.models.itinerary import SavedItinerary
from app.schemas.trip import TripRequestIn, TripRequestRecord, TripRequestOut, TripQuoteOut
from app.schemas.itinerary import ItineraryOut


def build_quote_response(quote: TripQuote, whatsapp_url: Optional[str] = None) -> TripQuoteOut:
    return TripQuoteOut(
        trip_request_id=str(quote.trip_request_id),
        distance=quote.distance,
        duration=quote.duration,
        duration_minutes=quote.duration_minutes,
        base_price=quote.base_price,
        total_price=quote.total_price,
        traffic_multiplier=quote.traffic_multiplier,
        route=quote.route,
        vehicle_info=quote.vehicle_info,
        whatsapp_url=whatsapp_url,
    )


def build_trip_request_response(trip: TripRequest) -> TripRequestOut:
    latest = max(trip.quotes, key=lambda q: q.id) if trip.quotes else None
    return TripRequestOut(
        id=trip.id,
        departure=trip.departure,
        destination=trip.destination,
        date=trip.date,
        time=trip.time,
        passengers=trip.passengers,
        duration_days=trip.duration_days,
        vehicle_type=trip.vehicle_type,
        customer_name=trip.customer_name,
        customer_phone=trip.customer_phone,
        customer_email=trip.customer_email,
        special_requests=trip.special_requests,
        created_at=trip.created_at,
        quote=build_quote_response(latest) if latest else None,
    )


def build_trip_request_response_list(trips: list) -> List[TripRequestOut]:
    return [build_trip_request_response(trip) for trip in trips]


def build_itinerary_response(itinerary: SavedItinerary) -> ItineraryOut:
    return ItineraryOut(
        id=str(itinerary.id),
        title=itinerary.title,
        client_name=itinerary.client_name,
        client_phone=itinerary.client_phone,
        destinations=itinerary.destinations,
        itinerary_data=itinerary.itinerary_data,
        ai_recommendation=itinerary.ai_recommendation,
        whatsapp_message=itinerary.whatsapp_message,
        duration=itinerary.duration,
        budget_min=itinerary.budget_min,
        budget_max=itinerary.budget_max,
        budget_currency=itinerary.budget_currency,
        group_size=itinerary.group_size,
        created_at=itinerary.created_at,
    )


def to_trip_request_record(
    trip: TripRequestIn,
    record_id: str,
    created_at: Optional[datetime] = None,
) -> TripRequestRecord:
    # Already validated on the way in; the date check must not re-run for old records
    return TripRequestRecord.model_construct(
        **trip.model_dump(),
        id=record_id,
        created_at=created_at or datetime.now(timezone.utc),
    )


def to_trip_request_input(record: TripRequestRecord) -> TripRequestIn:
    return TripRequestIn.model_construct(**record.model_dump(exclude={"id", "created_at"}))
