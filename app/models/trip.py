from sqlalchemy import Column, String, Integer, Float, ForeignKey, JSON
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class TripRequest(BaseModel):
    __tablename__ = "trip_requests"

    departure = Column(String(120), nullable=False)
    destination = Column(String(120), nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    passengers = Column(Integer, nullable=False)
    duration_days = Column(Integer, nullable=False, default=1)
    vehicle_type = Column(String(20), nullable=False)
    customer_name = Column(String(100), nullable=False)
    customer_phone = Column(String(20), nullable=False)
    customer_email = Column(String(255), nullable=False)
    special_requests = Column(String(500), nullable=True)

    quotes = relationship("TripQuote", back_populates="trip_request", cascade="all, delete-orphan")


class TripQuote(BaseModel):
    __tablename__ = "trip_quotes"

    trip_request_id = Column(ForeignKey("trip_requests.id"), nullable=False, index=True)
    trip_request = relationship("TripRequest", back_populates="quotes")

    distance = Column(Float, nullable=False)
    duration = Column(String(40), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    base_price = Column(Float, nullable=False)
    total_price = Column(Integer, nullable=False)
    traffic_multiplier = Column(Float, nullable=False)
    route = Column(JSON, nullable=False)
    vehicle_info = Column(JSON, nullable=False)
