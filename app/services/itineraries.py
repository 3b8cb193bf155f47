"""Saving advisor recommendations as shareable itineraries"""
import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.cache import MemoryCache
from app.core.config import settings
from app.core.errors import NotFoundError
from app.core.metrics import persistence_failures
from app.core.response_builders import build_itinerary_response
from app.models.itinerary import SavedItinerary
from app.schemas.itinerary import ItineraryDestination, ItineraryOut, SaveItineraryRequest, SaveItineraryResponse
from app.services.whatsapp import build_whatsapp_url, format_budget, format_itinerary_message

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 7
MAX_TITLE_DESTINATIONS = 3
DEFAULT_CLIENT_NAME = "Voyageur"
UNTITLED = "Voyage au Sénégal"

# Itineraries that could not be written to the database, oldest evicted first
_fallback_store = MemoryCache(max_size=settings.ITINERARY_FALLBACK_SIZE)


def clear_fallback_store() -> None:
    _fallback_store.clear()


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _positive_int(*candidates: Any, default: int) -> int:
    for value in candidates:
        try:
            number = int(value)
        except (TypeError, ValueError):
            continue
        if number > 0:
            return number
    return default


def _number(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number or None


def main_destinations(recommendation: Dict[str, Any]) -> List[ItineraryDestination]:
    raw = _section(recommendation, "itinerary").get("destinations") or []
    destinations = []
    for item in raw:
        if isinstance(item, dict) and item.get("name"):
            destinations.append(ItineraryDestination(
                id=str(item["id"]) if item.get("id") is not None else None,
                name=str(item["name"]),
                region=item.get("region"),
                type=item.get("type"),
            ))
        if len(destinations) == MAX_TITLE_DESTINATIONS:
            break
    return destinations


def build_itinerary(req: SaveItineraryRequest) -> ItineraryOut:
    itinerary = _section(req.recommendation, "itinerary")
    destinations = main_destinations(req.recommendation)

    duration = _positive_int(
        _section(req.extracted_info, "dates").get("duration"),
        itinerary.get("duration"),
        default=DEFAULT_DURATION,
    )
    group_size = _positive_int(_section(req.extracted_info, "groupInfo").get("size"), default=1)

    names = [d.name for d in destinations]
    title = f"{' + '.join(names) or UNTITLED} ({duration}j)"

    cost = _section(itinerary, "totalCost")
    budget_min = _number(cost.get("min"))
    budget_max = _number(cost.get("max"))
    currency = cost.get("currency") or "FCFA"

    message = format_itinerary_message(
        names,
        duration,
        format_budget(budget_min, budget_max, currency),
        group_size,
        req.client_name or DEFAULT_CLIENT_NAME,
    )

    return ItineraryOut(
        id="",
        title=title,
        client_name=req.client_name,
        client_phone=req.client_phone,
        destinations=destinations,
        itinerary_data=req.recommendation,
        ai_recommendation={
            "response": req.conversational_response,
            "extracted_info": req.extracted_info,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        whatsapp_message=message,
        duration=duration,
        budget_min=budget_min,
        budget_max=budget_max,
        budget_currency=currency,
        group_size=group_size,
    )


async def _write_itinerary(db: AsyncSession, itinerary: ItineraryOut) -> str:
    row = SavedItinerary(**itinerary.model_dump(mode="json", exclude={"id", "created_at"}))
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return str(row.id)


async def save_itinerary(req: SaveItineraryRequest, db: Optional[AsyncSession] = None) -> SaveItineraryResponse:
    itinerary = build_itinerary(req)
    persisted = False

    if db is not None:
        try:
            itinerary.id = await asyncio.wait_for(
                _write_itinerary(db, itinerary),
                timeout=settings.DB_WRITE_TIMEOUT,
            )
            persisted = True
        except Exception as e:
            logger.error(f"Failed to persist itinerary, keeping it in memory: {e}")
            persistence_failures.labels(table="saved_itineraries").inc()
            try:
                await db.rollback()
            except Exception as rollback_error:
                logger.warning(f"Rollback after failed itinerary write also failed: {rollback_error}")

    if not persisted:
        itinerary.id = f"demo-{uuid.uuid4()}"
        itinerary.created_at = datetime.now(timezone.utc)
        _fallback_store.set(itinerary.id, itinerary, settings.ITINERARY_FALLBACK_TTL)

    logger.info(f"Saved itinerary {itinerary.id}: {itinerary.title}")
    return SaveItineraryResponse(
        itinerary_id=itinerary.id,
        title=itinerary.title,
        whatsapp_message=itinerary.whatsapp_message,
        whatsapp_url=build_whatsapp_url(settings.WHATSAPP_PHONE_NUMBER, itinerary.whatsapp_message),
        planning_url=f"/planning/{itinerary.id}",
        persisted=persisted,
    )


async def get_itinerary(itinerary_id: str, db: Optional[AsyncSession] = None) -> ItineraryOut:
    stored = _fallback_store.get(itinerary_id)
    if stored is not None:
        return stored

    if db is None or not itinerary_id.isdigit():
        raise NotFoundError("Itinerary", itinerary_id)

    res = await db.execute(select(SavedItinerary).where(SavedItinerary.id == int(itinerary_id)))
    row = res.scalars().first()
    if row is None:
        raise NotFoundError("Itinerary", itinerary_id)
    return build_itinerary_response(row)
