"""Amounts needed by payment and invoicing once a tier has been chosen.

The fare is VAT-inclusive: the VAT share is extracted from it, not added.
The platform commission is taken on the gross fare and carries its own VAT.
"""
from dataclasses import dataclass
from decimal import Decimal

from app.utils.money import money, to_minor_units

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class CheckoutAmounts:
    amount: Decimal
    amount_minor: int
    amount_excl_vat: Decimal
    vat_amount: Decimal
    commission_amount: Decimal
    commission_vat: Decimal
    driver_payout: Decimal


def build_checkout(
    price: Decimal,
    vat_rate: Decimal,
    commission_rate: Decimal,
    commission_vat_rate: Decimal,
) -> CheckoutAmounts:
    amount = money(price)
    amount_excl_vat = money(amount * HUNDRED / (HUNDRED + vat_rate))
    commission_amount = money(amount * commission_rate / HUNDRED)
    return CheckoutAmounts(
        amount=amount,
        amount_minor=to_minor_units(amount),
        amount_excl_vat=amount_excl_vat,
        vat_amount=amount - amount_excl_vat,
        commission_amount=commission_amount,
        commission_vat=money(commission_amount * commission_vat_rate / HUNDRED),
        driver_payout=amount - commission_amount,
    )
