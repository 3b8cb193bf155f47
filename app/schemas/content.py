from typing import List, Optional
from pydantic import BaseModel, Field

from app.core.enums import GalleryCategory


class Testimonial(BaseModel):
    id: int
    name: str
    location: str
    date: str
    rating: int = Field(..., ge=1, le=5)
    text: str
    trip: str


class TestimonialList(BaseModel):
    testimonials: List[Testimonial]
    average_rating: float
    total_reviews: int
    formatted_rating: str
    formatted_reviews: str


class GalleryImage(BaseModel):
    id: str
    src: str
    alt: str
    title: str
    category: GalleryCategory
    description: Optional[str] = None
    featured: bool = False
