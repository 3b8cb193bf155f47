import re
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.enums import VehicleType
from app.core.security import sanitize_input

NAME_PATTERN = re.compile(r"^[a-zA-ZÀ-ÿĀ-ſ\s'-]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]+$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class RouteStep(BaseModel):
    instruction: str
    distance: str
    duration: str


class VehicleInfo(BaseModel):
    type: VehicleType
    name: str
    capacity: int
    features: List[str]
    price_per_km: int


class TripRequestIn(BaseModel):
    departure: str = Field(..., min_length=1, max_length=120)
    destination: str = Field(..., min_length=1, max_length=120)
    date: str
    time: str = "08:00"
    passengers: int = Field(..., ge=1, le=8)
    duration_days: int = Field(1, ge=1, le=30)
    vehicle_type: VehicleType = VehicleType.STANDARD
    customer_name: str = Field(..., min_length=2, max_length=100)
    customer_phone: str = Field(..., min_length=9, max_length=20)
    customer_email: EmailStr
    special_requests: Optional[str] = Field(None, max_length=500)

    @field_validator("departure", "destination")
    @classmethod
    def clean_place(cls, v: str) -> str:
        v = sanitize_input(v, max_length=120)
        if not v:
            raise ValueError("Place name is required")
        return v

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str) -> str:
        if not DATE_PATTERN.fullmatch(v):
            raise ValueError("Invalid date format (YYYY-MM-DD)")
        try:
            parsed = date.fromisoformat(v)
        except ValueError:
            raise ValueError("Invalid date")
        if parsed < date.today():
            raise ValueError("Date cannot be in the past")
        return v

    @field_validator("time")
    @classmethod
    def check_time(cls, v: str) -> str:
        if not TIME_PATTERN.fullmatch(v):
            raise ValueError("Invalid time format (HH:MM)")
        return v

    @field_validator("customer_name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not NAME_PATTERN.fullmatch(v):
            raise ValueError("Name contains invalid characters")
        return sanitize_input(v, max_length=100)

    @field_validator("customer_phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.fullmatch(v):
            raise ValueError("Invalid phone format")
        return sanitize_input(v, max_length=20)

    @field_validator("customer_email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("special_requests")
    @classmethod
    def clean_requests(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return sanitize_input(v, max_length=500) or None


class TripRequestRecord(TripRequestIn):
    """Trip request as held internally once it has an identity."""
    id: str
    created_at: datetime


class TripQuoteOut(BaseModel):
    trip_request_id: str
    distance: float
    duration: str
    duration_minutes: int
    base_price: float
    total_price: int
    traffic_multiplier: float
    currency: str = "FCFA"
    route: List[RouteStep]
    vehicle_info: VehicleInfo
    whatsapp_url: Optional[str] = None


class TripRequestOut(BaseModel):
    id: int
    departure: str
    destination: str
    date: str
    time: str
    passengers: int
    duration_days: int
    vehicle_type: VehicleType
    customer_name: str
    customer_phone: str
    customer_email: str
    special_requests: Optional[str] = None
    created_at: datetime
    quote: Optional[TripQuoteOut] = None


class EmailTripData(BaseModel):
    departure: str = Field(..., min_length=1, max_length=120)
    destination: str = Field(..., min_length=1, max_length=120)
    date: str
    time: str
    customer_name: str = Field(..., min_length=2, max_length=100)
    customer_phone: str = Field(..., min_length=9, max_length=20)
    customer_email: Optional[EmailStr] = None


class EmailQuoteRequest(BaseModel):
    quote: TripQuoteOut
    trip_data: EmailTripData


class EmailQuoteResponse(BaseModel):
    success: bool
    email_id: Optional[str] = None
