"""Domain errors raised by the fare services and mapped to HTTP responses in app.main"""


class FareServiceError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class PricingPreconditionError(FareServiceError, ValueError):
    """A caller passed inputs the pricing engine refuses to price (negative counts)."""


class TierNotFoundError(FareServiceError):
    status_code = 404

    def __init__(self, tier_id: str):
        super().__init__(f"Service tier with id {tier_id} not found")
        self.tier_id = tier_id


class UnknownOptionError(FareServiceError):
    def __init__(self, option: str):
        super().__init__(f"No surcharge configured for option '{option}'")
        self.option = option


class OptionLimitError(FareServiceError):
    def __init__(self, selected: int, allowed: int):
        super().__init__(
            f"Too many child seats selected: {selected} requested, {allowed} allowed for this party size"
        )
        self.selected = selected
        self.allowed = allowed


class CatalogError(FareServiceError):
    status_code = 503
