from typing import List, Optional

from fastapi import APIRouter, Query

from app.core.enums import GalleryCategory
from app.schemas.content import GalleryImage, TestimonialList
from app.services.content import get_gallery, get_testimonials

router = APIRouter(prefix="/api/v1/content", tags=["content"])


@router.get("/testimonials", response_model=TestimonialList)
async def testimonials():
    return get_testimonials()


@router.get("/gallery", response_model=List[GalleryImage])
async def gallery(
    category: Optional[GalleryCategory] = Query(None),
    featured: Optional[bool] = Query(None),
):
    return get_gallery(category, featured)
