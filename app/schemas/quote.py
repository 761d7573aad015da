from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.enums import ServiceOption


class OptionSelection(BaseModel):
    name: ServiceOption
    quantity: int = Field(default=1, ge=0)


class RouteRequest(BaseModel):
    distance: Optional[str] = None
    duration: Optional[str] = None
    stops: int = Field(default=0, ge=0)
    options: List[OptionSelection] = []
    passengers: int = Field(default=1, ge=1)


class QuoteRequest(RouteRequest):
    suitcases: int = Field(default=0, ge=0)
    backpacks: int = Field(default=0, ge=0)


class TierQuote(BaseModel):
    tier_id: str
    name: str
    estimated_price: Decimal
    display_price: str
    floor_applied: bool
    price_breakdown: dict


class QuoteResponse(BaseModel):
    route_complete: bool
    distance_km: Optional[Decimal] = None
    duration_minutes: Optional[int] = None
    currency: str
    quotes: List[TierQuote]
