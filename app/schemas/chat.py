from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.core.enums import AIProvider, ChatRole
from app.core.security import sanitize_input


class ChatMessage(BaseModel):
    role: ChatRole
    content: str = Field(..., max_length=5000)


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    conversation_history: List[ChatMessage] = Field(default_factory=list, max_length=50)

    @field_validator("message")
    @classmethod
    def clean_message(cls, v: str) -> str:
        v = sanitize_input(v, max_length=2000)
        if not v:
            raise ValueError("Message is empty")
        return v


class ChatResponse(BaseModel):
    response: str
    provider: AIProvider
    is_demo: bool
    conversation_id: str
    error: Optional[str] = None
