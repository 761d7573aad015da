"""Fare pricing engine.

    total = base_fare + km * per_km + minutes * per_minute
            + stops * per_stop + sum(option surcharge * quantity)
    price = max(total, minimum_price)

An incomplete route is priced at the tier's minimum price. All amounts are
Decimal and returned at full precision; rounding to cents is left to the
presentation layer (see app.utils.money).
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from app.core.enums import ServiceOption
from app.core.exceptions import PricingPreconditionError
from app.schemas.tier import RateCard
from app.services.route import RouteMeasurement, parse_route
from app.utils.money import money

ZERO = Decimal("0")


@dataclass(frozen=True)
class PricedOption:
    """An add-on selection with the per-unit surcharge resolved by the tier catalog."""
    name: ServiceOption
    quantity: int
    unit_surcharge: Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    total: Decimal
    route_complete: bool
    floor_applied: bool
    base_fare: Decimal = ZERO
    distance_cost: Decimal = ZERO
    time_cost: Decimal = ZERO
    stops_cost: Decimal = ZERO
    options_cost: Decimal = ZERO
    raw_price: Optional[Decimal] = None

    def as_dict(self) -> dict:
        """Cent-rounded components for API responses."""
        return {
            "base_fare": money(self.base_fare),
            "distance_cost": money(self.distance_cost),
            "time_cost": money(self.time_cost),
            "stops_cost": money(self.stops_cost),
            "options_cost": money(self.options_cost),
            "raw_price": money(self.raw_price) if self.raw_price is not None else None,
            "total": money(self.total),
        }


def _check_preconditions(num_stops: int, options: Sequence[PricedOption]) -> None:
    if num_stops < 0:
        raise PricingPreconditionError(f"Stop count must not be negative, got {num_stops}")
    for option in options:
        if option.quantity < 0:
            raise PricingPreconditionError(
                f"Quantity for option '{option.name}' must not be negative, got {option.quantity}"
            )
        if option.unit_surcharge < 0:
            raise PricingPreconditionError(
                f"Surcharge for option '{option.name}' must not be negative, got {option.unit_surcharge}"
            )


def price_breakdown(
    tier: RateCard,
    route: Optional[RouteMeasurement],
    num_stops: int = 0,
    options: Sequence[PricedOption] = (),
) -> PriceBreakdown:
    _check_preconditions(num_stops, options)

    if route is None:
        return PriceBreakdown(total=tier.minimum_price, route_complete=False, floor_applied=True)

    distance_cost = route.distance_km * tier.per_km
    time_cost = route.duration_minutes * tier.per_minute
    stops_cost = num_stops * tier.per_stop
    options_cost = sum(
        (option.unit_surcharge * option.quantity for option in options if option.quantity > 0),
        ZERO,
    )
    raw_price = tier.base_fare + distance_cost + time_cost + stops_cost + options_cost

    floor_applied = raw_price < tier.minimum_price
    return PriceBreakdown(
        total=tier.minimum_price if floor_applied else raw_price,
        route_complete=True,
        floor_applied=floor_applied,
        base_fare=tier.base_fare,
        distance_cost=distance_cost,
        time_cost=time_cost,
        stops_cost=stops_cost,
        options_cost=options_cost,
        raw_price=raw_price,
    )


def calculate_price(
    tier: RateCard,
    route: Optional[RouteMeasurement],
    num_stops: int = 0,
    options: Sequence[PricedOption] = (),
) -> Decimal:
    return price_breakdown(tier, route, num_stops, options).total


def price(
    tier: RateCard,
    distance: Optional[str],
    duration: Optional[str],
    num_stops: int = 0,
    options: Sequence[PricedOption] = (),
) -> Decimal:
    """Price a trip straight from route provider strings.

    Callers pricing several tiers for the same trip should call parse_route
    once and use calculate_price instead.
    """
    return calculate_price(tier, parse_route(distance, duration), num_stops, options)
