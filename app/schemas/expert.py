from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from app.core.enums import ExpertContext
from app.core.security import sanitize_input
from app.schemas.chat import ChatMessage


class ClientPreferences(BaseModel):
    interests: List[str] = Field(default_factory=list, max_length=20)
    cultural_immersion_level: str = "moderate"
    activity_level: str = "moderate"
    accommodation_preference: str = "mid-range"
    transport_comfort: str = "standard"


class ExpertRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    conversation_history: List[ChatMessage] = Field(default_factory=list, max_length=50)
    client_preferences: ClientPreferences = Field(default_factory=ClientPreferences)
    context: ExpertContext = ExpertContext.INITIAL_INQUIRY

    @field_validator("message")
    @classmethod
    def clean_message(cls, v: str) -> str:
        v = sanitize_input(v, max_length=2000)
        if not v:
            raise ValueError("Message is empty")
        return v


class SavedItinerarySummary(BaseModel):
    id: str
    title: str
    whatsapp_message: str
    whatsapp_url: str
    planning_url: str


class ExpertResponse(BaseModel):
    message: str
    recommendation: Dict[str, Any]
    extracted_info: Dict[str, Any]
    score: float
    context: ExpertContext
    detected_intent: str
    conversation_history: List[ChatMessage]
    suggested_actions: List[str]
    next_steps: List[str]
    saved_itinerary: Optional[SavedItinerarySummary] = None


class CostRange(BaseModel):
    min: float
    max: float
    currency: str
    includes: List[str] = []
    excludes: List[str] = []


class DurationEstimate(BaseModel):
    minimum: int
    recommended: int
    maximum: int
    notes: str


class DestinationSummary(BaseModel):
    id: str
    name: str
    region: str
    type: str
    description: str
    tags: List[str]
    estimated_duration: DurationEstimate
    cost: CostRange
    difficulty: str


class DestinationList(BaseModel):
    destinations: List[DestinationSummary]
    total_count: int
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
