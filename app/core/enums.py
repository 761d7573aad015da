from enum import Enum


class ServiceOption(str, Enum):
    CHILD_SEAT = "child_seat"
    BOOSTER_SEAT = "booster_seat"
    PET = "pet"

    def __str__(self):
        return self.value


# Options that occupy a passenger seat and count against the child seat limit
CHILD_SEAT_OPTIONS = frozenset({ServiceOption.CHILD_SEAT, ServiceOption.BOOSTER_SEAT})


class PaymentMethod(str, Enum):
    CARD = "card"
    CASH = "cash"
    DEFERRED = "deferred"

    def __str__(self):
        return self.value


class RouteStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"

    def __str__(self):
        return self.value
