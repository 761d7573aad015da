"""Fare estimate endpoint with Redis caching"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.enums import RouteStatus
from app.core.metrics import cache_hits, cache_misses, floor_applied, quotes_computed
from app.core.redis import get_redis
from app.schemas.quote import QuoteRequest, QuoteResponse
from app.schemas.tier import ServiceTier
from app.services.booking import check_child_seats, rank_tiers
from app.services.catalog import TierCatalog, get_catalog
from app.services.route import parse_route
from app.utils.hashing import payload_hash

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


def _generate_cache_key(req: QuoteRequest, tiers: List[ServiceTier], surcharges: dict) -> str:
    # rate cards are part of the key so catalog edits never serve a stale price
    return "quote:" + payload_hash(
        req.model_dump(mode="json"),
        [tier.model_dump(mode="json") for tier in tiers],
        {str(name): str(amount) for name, amount in surcharges.items()},
        settings.CURRENCY,
    )


@router.post("/estimate", response_model=QuoteResponse)
async def estimate(req: QuoteRequest, catalog: TierCatalog = Depends(get_catalog)):
    tiers = catalog.eligible_tiers(req.passengers, req.suitcases, req.backpacks)
    options = catalog.resolve_options(req.options)
    check_child_seats(req.passengers, options)

    cache_key = _generate_cache_key(req, tiers, catalog.surcharges())
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(cache_key)
            if cached:
                cache_hits.labels(cache_key="quote").inc()
                return QuoteResponse.model_validate_json(cached)
            cache_misses.labels(cache_key="quote").inc()
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    route = parse_route(req.distance, req.duration)
    route_status = RouteStatus.COMPLETE if route is not None else RouteStatus.INCOMPLETE
    quotes = rank_tiers(tiers, route, req.stops, options, settings.CURRENCY)

    for quote in quotes:
        quotes_computed.labels(tier=quote.tier_id, route_status=str(route_status)).inc()
        if quote.floor_applied:
            floor_applied.labels(tier=quote.tier_id).inc()

    if not tiers:
        logger.info(
            f"No tier fits {req.passengers} passengers, {req.suitcases} suitcases, {req.backpacks} backpacks"
        )

    result = QuoteResponse(
        route_complete=route is not None,
        distance_km=route.distance_km if route else None,
        duration_minutes=route.duration_minutes if route else None,
        currency=settings.CURRENCY,
        quotes=quotes,
    )

    if redis is not None:
        try:
            await redis.set(cache_key, result.model_dump_json(), ex=settings.PRICE_CACHE_TTL)
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    return result
