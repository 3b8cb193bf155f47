from sqlalchemy import Column, String, Integer, Float, Text, JSON
from app.models.base import BaseModel


class SavedItinerary(BaseModel):
    __tablename__ = "saved_itineraries"

    title = Column(String(255), nullable=False)
    client_name = Column(String(100), nullable=True)
    client_phone = Column(String(20), nullable=True)
    destinations = Column(JSON, nullable=False)
    itinerary_data = Column(JSON, nullable=False)
    ai_recommendation = Column(JSON, nullable=False)
    whatsapp_message = Column(Text, nullable=False)
    duration = Column(Integer, nullable=False)
    budget_min = Column(Float, nullable=True)
    budget_max = Column(Float, nullable=True)
    budget_currency = Column(String(10), nullable=False, default="FCFA")
    group_size = Column(Integer, nullable=False, default=1)
