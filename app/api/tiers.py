from typing import List

from fastapi import APIRouter, Depends

from app.schemas.tier import ServiceTier
from app.services.catalog import TierCatalog, get_catalog

router = APIRouter(prefix="/tiers", tags=["tiers"])


@router.get("/", response_model=List[ServiceTier])
async def list_tiers(catalog: TierCatalog = Depends(get_catalog)):
    return catalog.tiers()


@router.get("/{tier_id}", response_model=ServiceTier)
async def get_tier(tier_id: str, catalog: TierCatalog = Depends(get_catalog)):
    return catalog.get_tier(tier_id)
