import logging
from typing import List, Optional, Sequence

from app.core.enums import CHILD_SEAT_OPTIONS
from app.core.exceptions import OptionLimitError
from app.schemas.quote import TierQuote
from app.schemas.tier import ServiceTier
from app.services.pricing import PricedOption, price_breakdown
from app.services.route import RouteMeasurement
from app.utils.money import format_amount, money

logger = logging.getLogger(__name__)


def max_child_seats(passengers: int) -> int:
    # one seat always stays free for an adult, three child seats at most
    if passengers >= 4:
        return 3
    if passengers <= 1:
        return 0
    return passengers - 1


def check_child_seats(passengers: int, options: Sequence[PricedOption]) -> None:
    selected = sum(option.quantity for option in options if option.name in CHILD_SEAT_OPTIONS)
    allowed = max_child_seats(passengers)
    if selected > allowed:
        raise OptionLimitError(selected, allowed)


def rank_tiers(
    tiers: Sequence[ServiceTier],
    route: Optional[RouteMeasurement],
    num_stops: int,
    options: Sequence[PricedOption],
    currency: str,
) -> List[TierQuote]:
    """Price every tier for one trip, cheapest first."""
    priced = []
    for tier in tiers:
        breakdown = price_breakdown(tier.rate_card, route, num_stops, options)
        logger.debug(f"Tier {tier.id} priced at {breakdown.total}")
        priced.append((breakdown.total, TierQuote(
            tier_id=tier.id,
            name=tier.name,
            estimated_price=money(breakdown.total),
            display_price=format_amount(breakdown.total, currency),
            floor_applied=breakdown.floor_applied,
            price_breakdown=breakdown.as_dict(),
        )))

    # stable: ties keep catalog order
    priced.sort(key=lambda item: item[0])
    return [quote for _, quote in priced]
