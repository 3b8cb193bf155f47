from fastapi import APIRouter, Depends

from app.core.rate_limit import rate_limit
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.advisor import chat

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


@router.post("", response_model=ChatResponse, dependencies=[Depends(rate_limit("chat"))])
async def send_message(payload: ChatRequest):
    return await chat(payload)
