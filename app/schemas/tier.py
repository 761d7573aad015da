from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal, model_validator

from app.core.enums import ServiceOption

Surcharge = condecimal(ge=0, allow_inf_nan=False)


class RateCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_fare: Decimal = Field(ge=0, allow_inf_nan=False)
    per_km: Decimal = Field(ge=0, allow_inf_nan=False)
    per_minute: Decimal = Field(ge=0, allow_inf_nan=False)
    per_stop: Decimal = Field(ge=0, allow_inf_nan=False)
    minimum_price: Decimal = Field(ge=0, allow_inf_nan=False)


class Capacity(BaseModel):
    model_config = ConfigDict(frozen=True)

    passengers: int = Field(ge=1)
    suitcases: int = Field(ge=0)
    backpacks: Optional[int] = Field(default=None, ge=0)


class ServiceTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    reference: str = ""
    description: str = ""
    rate_card: RateCard
    capacity: Capacity


class TierCatalogData(BaseModel):
    tiers: List[ServiceTier]
    options: Dict[ServiceOption, Surcharge] = {}

    @model_validator(mode="after")
    def check_unique_ids(self):
        seen = set()
        for tier in self.tiers:
            if tier.id in seen:
                raise ValueError(f"Duplicate service tier id '{tier.id}'")
            seen.add(tier.id)
        return self
