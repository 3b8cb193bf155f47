from typing import List, Optional

from app.core.enums import GalleryCategory
from app.data.gallery import GALLERY_IMAGES
from app.data.testimonials import TESTIMONIALS
from app.schemas.content import GalleryImage, Testimonial, TestimonialList


def get_testimonials() -> TestimonialList:
    testimonials = [Testimonial(**t) for t in TESTIMONIALS]
    total = len(testimonials)
    average = sum(t.rating for t in testimonials) / total if total else 0.0
    return TestimonialList(
        testimonials=testimonials,
        average_rating=round(average, 2),
        total_reviews=total,
        formatted_rating=f"{average:.1f}/5",
        formatted_reviews=f"{total} avis",
    )


def get_gallery(category: Optional[GalleryCategory] = None, featured: Optional[bool] = None) -> List[GalleryImage]:
    images = [GalleryImage(**img) for img in GALLERY_IMAGES]
    if category is not None:
        images = [img for img in images if img.category == category]
    if featured is not None:
        images = [img for img in images if img.featured == featured]
    return images
