import logging

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.metrics import checkouts
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.services.booking import check_child_seats
from app.services.catalog import TierCatalog, get_catalog
from app.services.checkout import build_checkout
from app.services.pricing import calculate_price
from app.services.route import parse_route

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("/", response_model=CheckoutResponse)
async def checkout(req: CheckoutRequest, catalog: TierCatalog = Depends(get_catalog)):
    """Final amounts to charge for the chosen tier. Never served from cache."""
    tier = catalog.get_tier(req.tier_id)
    options = catalog.resolve_options(req.options)
    check_child_seats(req.passengers, options)

    route = parse_route(req.distance, req.duration)
    if route is None:
        logger.warning(f"Checkout for tier {tier.id} with incomplete route, charging minimum price")

    price = calculate_price(tier.rate_card, route, req.stops, options)
    amounts = build_checkout(
        price,
        vat_rate=settings.VAT_RATE,
        commission_rate=settings.COMMISSION_RATE,
        commission_vat_rate=settings.COMMISSION_VAT_RATE,
    )
    checkouts.labels(tier=tier.id, payment_method=str(req.payment_method)).inc()

    return CheckoutResponse(
        tier_id=tier.id,
        route_complete=route is not None,
        payment_method=req.payment_method,
        currency=settings.CURRENCY,
        amount=amounts.amount,
        amount_minor=amounts.amount_minor,
        amount_excl_vat=amounts.amount_excl_vat,
        vat_rate=settings.VAT_RATE,
        vat_amount=amounts.vat_amount,
        commission_rate=settings.COMMISSION_RATE,
        commission_amount=amounts.commission_amount,
        commission_vat=amounts.commission_vat,
        driver_payout=amounts.driver_payout,
    )
