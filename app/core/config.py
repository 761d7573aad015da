from decimal import Decimal
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    REDIS_URL: str = "redis://localhost:6379/0"
    PRICE_CACHE_TTL: int = 60   # 60 seconds

    TIER_CATALOG_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "tiers.json"

    CURRENCY: str = "eur"
    VAT_RATE: Decimal = Field(default=Decimal("10"), ge=0, le=100)             # percent, included in the fare
    COMMISSION_RATE: Decimal = Field(default=Decimal("20"), ge=0, le=100)      # percent kept by the platform
    COMMISSION_VAT_RATE: Decimal = Field(default=Decimal("20"), ge=0, le=100)  # percent charged on the commission

    API_TITLE: str = "VTC Fare Microservice"
    API_DESCRIPTION: str = "Fare estimation and checkout amounts for ride bookings"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
