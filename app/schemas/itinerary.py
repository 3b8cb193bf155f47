from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ItineraryDestination(BaseModel):
    id: Optional[str] = None
    name: str
    region: Optional[str] = None
    type: Optional[str] = None


class SaveItineraryRequest(BaseModel):
    recommendation: Dict[str, Any]
    extracted_info: Dict[str, Any] = Field(default_factory=dict)
    conversational_response: str = Field(..., min_length=1, max_length=5000)
    client_name: Optional[str] = Field(None, max_length=100)
    client_phone: Optional[str] = Field(None, max_length=20)


class SaveItineraryResponse(BaseModel):
    success: bool = True
    itinerary_id: str
    title: str
    whatsapp_message: str
    whatsapp_url: str
    planning_url: str
    persisted: bool


class ItineraryOut(BaseModel):
    id: str
    title: str
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    destinations: List[ItineraryDestination]
    itinerary_data: Dict[str, Any]
    ai_recommendation: Dict[str, Any]
    whatsapp_message: str
    duration: int
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    budget_currency: str = "FCFA"
    group_size: int = 1
    created_at: Optional[datetime] = None
