from decimal import Decimal

from pydantic import BaseModel

from app.core.enums import PaymentMethod
from app.schemas.quote import RouteRequest


class CheckoutRequest(RouteRequest):
    tier_id: str
    payment_method: PaymentMethod = PaymentMethod.CARD


class CheckoutResponse(BaseModel):
    tier_id: str
    route_complete: bool
    payment_method: PaymentMethod
    currency: str
    amount: Decimal
    amount_minor: int
    amount_excl_vat: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    commission_vat: Decimal
    driver_payout: Decimal
