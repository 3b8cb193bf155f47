from typing import Optional

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import rate_limit
from app.db.session import get_db
from app.schemas.itinerary import ItineraryOut, SaveItineraryRequest, SaveItineraryResponse
from app.services.itineraries import get_itinerary, save_itinerary

router = APIRouter(prefix="/api/v1/itineraries", tags=["itineraries"])


@router.post("", response_model=SaveItineraryResponse, dependencies=[Depends(rate_limit("normal"))])
async def create_itinerary(
    payload: SaveItineraryRequest,
    db: Optional[AsyncSession] = Depends(get_db),
):
    return await save_itinerary(payload, db)


@router.get("/{itinerary_id}", response_model=ItineraryOut)
async def read_itinerary(
    itinerary_id: str = Path(..., max_length=64),
    db: Optional[AsyncSession] = Depends(get_db),
):
    return await get_itinerary(itinerary_id, db)
