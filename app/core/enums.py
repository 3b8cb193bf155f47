from enum import Enum


class VehicleType(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    SUV = "suv"

    def __str__(self):
        return self.value


class AIProvider(str, Enum):
    GEMINI = "gemini"
    HUGGINGFACE = "huggingface"
    OPENAI = "openai"
    GROQ = "groq"
    DEMO = "demo"

    def __str__(self):
        return self.value


class RoadQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    CHALLENGING = "challenging"

    def __str__(self):
        return self.value


class Season(str, Enum):
    DRY = "dry"
    RAINY = "rainy"

    def __str__(self):
        return self.value


class RestStopType(str, Enum):
    FUEL = "fuel"
    FOOD = "food"
    RESTROOM = "restroom"
    SCENIC = "scenic"
    CULTURAL = "cultural"

    def __str__(self):
        return self.value


class GalleryCategory(str, Enum):
    VISITE = "visite"
    DESTINATION = "destination"

    def __str__(self):
        return self.value


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"

    def __str__(self):
        return self.value


class ExpertContext(str, Enum):
    INITIAL_INQUIRY = "initial_inquiry"
    PREFERENCE_GATHERING = "preference_gathering"
    ITINERARY_PROPOSAL = "itinerary_proposal"
    PRACTICAL_DETAILS = "practical_details"
    MODIFICATION_REQUEST = "modification_request"
    BOOKING_CONFIRMATION = "booking_confirmation"

    def __str__(self):
        return self.value
