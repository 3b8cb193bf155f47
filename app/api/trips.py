"""Trip quote endpoints and the driver's lead history"""
import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import rate_limit
from app.core.security import Driver, get_current_driver
from app.db.session import get_db
from app.schemas.trip import (
    EmailQuoteRequest,
    EmailQuoteResponse,
    TripQuoteOut,
    TripRequestIn,
    TripRequestOut,
    VehicleInfo,
)
from app.services.email import notify_driver_of_lead, send_quote_email
from app.services.pricing import list_vehicles
from app.services.trips import generate_quote, get_trip_request, list_trip_requests

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/trips", tags=["trips"])


@router.post("/quote", response_model=TripQuoteOut, dependencies=[Depends(rate_limit("normal"))])
async def create_quote(
    payload: TripRequestIn,
    background_tasks: BackgroundTasks,
    db: Optional[AsyncSession] = Depends(get_db),
):
    quote = await generate_quote(payload, db)
    background_tasks.add_task(notify_driver_of_lead, payload, quote)
    return quote


@router.get("/vehicles", response_model=List[VehicleInfo])
async def vehicles():
    return list_vehicles()


@router.post("/email-quote", response_model=EmailQuoteResponse, dependencies=[Depends(rate_limit("strict"))])
async def email_quote(payload: EmailQuoteRequest):
    email_id = await send_quote_email(payload.quote, payload.trip_data)
    return EmailQuoteResponse(success=True, email_id=email_id)


@router.get("", response_model=List[TripRequestOut])
async def list_trips(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Optional[AsyncSession] = Depends(get_db),
    driver: Driver = Depends(get_current_driver),
):
    return await list_trip_requests(db, limit=limit, offset=offset)


@router.get("/{trip_id}", response_model=TripRequestOut)
async def get_trip(
    trip_id: int,
    db: Optional[AsyncSession] = Depends(get_db),
    driver: Driver = Depends(get_current_driver),
):
    return await get_trip_request(db, trip_id)
