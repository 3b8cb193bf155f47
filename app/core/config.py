from typing import Optional
from pydantic_settings import BaseSettings

PLACEHOLDER_VALUES = {"", "placeholder-key", "changeme"}


def is_configured(value: Optional[str]) -> bool:
    """An API key counts only when it is set to something other than a placeholder."""
    if value is None:
        return False
    value = value.strip()
    if value in PLACEHOLDER_VALUES:
        return False
    return not (value.startswith("your_") and value.endswith("_here"))


class Settings(BaseSettings):
    API_TITLE: str = "Transport Sénégal API"
    API_DESCRIPTION: str = "Trip quotes, distances and AI travel advice for a private driver in Senegal"
    API_VERSION: str = "1.0.0"

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    DATABASE_URL: Optional[str] = None
    DB_WRITE_TIMEOUT: float = 5.0

    REDIS_URL: Optional[str] = None

    SECRET_KEY: str = "dev-secret-change-me"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours
    DRIVER_USERNAME: str = "mbaye"
    DRIVER_PASSWORD_HASH: Optional[str] = None

    GEMINI_API_KEY: Optional[str] = None
    HUGGINGFACE_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    GROQ_API_KEY: Optional[str] = None
    AI_PROVIDER: Optional[str] = None
    AI_FALLBACK_PROVIDER: str = "demo"
    AI_TIMEOUT: float = 30.0
    AI_MAX_TOKENS: int = 1000
    AI_TEMPERATURE: float = 0.7

    GEMINI_MODEL: str = "gemini-1.5-flash"
    HUGGINGFACE_MODEL: str = "meta-llama/Llama-3.1-8B-Instruct"
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    RESEND_API_KEY: Optional[str] = None
    EMAIL_FROM: str = "Transport Sénégal <noreply@transport-senegal.com>"
    EMAIL_TIMEOUT: int = 10
    EMAIL_RETRIES: int = 2
    DRIVER_EMAIL: Optional[str] = None

    WHATSAPP_PHONE_NUMBER: str = "+33626388794"
    PUBLIC_BASE_URL: str = "http://localhost:8000"

    RATE_LIMIT_ENABLED: bool = True
    ROUTE_CACHE_TTL: int = 300  # 5 minutes
    ITINERARY_FALLBACK_SIZE: int = 500
    ITINERARY_FALLBACK_TTL: int = 7 * 24 * 3600  # 7 days

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
