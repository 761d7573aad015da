from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> int:
    """Amount in cents, as payment gateways expect it."""
    return int((money(amount) * 100).to_integral_value())


def format_amount(amount: Decimal, currency: str) -> str:
    return f"{money(amount)} {currency.upper()}"
