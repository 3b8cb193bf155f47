from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import rate_limit
from app.db.session import get_db
from app.schemas.expert import DestinationList, ExpertRequest, ExpertResponse
from app.services.expert import advise, list_destinations

router = APIRouter(prefix="/api/v1/ai-expert", tags=["ai-expert"])


@router.post("", response_model=ExpertResponse, dependencies=[Depends(rate_limit("expert"))])
async def ask_expert(
    payload: ExpertRequest,
    db: Optional[AsyncSession] = Depends(get_db),
):
    return await advise(payload, db)


@router.get("", response_model=DestinationList, dependencies=[Depends(rate_limit("lenient"))])
async def destinations():
    return list_destinations()
