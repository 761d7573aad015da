"""Parsing of route summaries (distance/duration display strings) into numeric measurements.

A route provider reports trips as localized strings such as "12,4 km" and
"1 h 05". They are parsed once, at the request boundary, into a
RouteMeasurement; ``None`` stands for a route that is not (yet) usable and is
an ordinary outcome, not an error.
"""
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

logger = logging.getLogger(__name__)

_DISTANCE_NOISE = re.compile(r"[^\d.-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_DURATION_TOKEN = re.compile(r"(\d+)\s*([^\W\d_]*)")
_MAX_AMOUNT_DIGITS = 9

MINUTES_PER_UNIT = {
    "d": 1440, "day": 1440, "days": 1440, "j": 1440, "jour": 1440, "jours": 1440,
    "h": 60, "hr": 60, "hrs": 60, "hour": 60, "hours": 60, "heure": 60, "heures": 60,
    "m": 1, "mn": 1, "min": 1, "mins": 1, "minute": 1, "minutes": 1,
}


@dataclass(frozen=True)
class RouteMeasurement:
    distance_km: Decimal
    duration_minutes: int


def parse_distance(text: Optional[str]) -> Optional[Decimal]:
    """Read kilometers from a string like "12.4 km" or "12,4 km".

    Commas are decimal separators. Everything but digits, periods and minus
    signs is dropped, then the leading numeric literal is read the way a
    float parser would ("1.234.5" reads as 1.234).
    """
    if not text:
        return None
    cleaned = _DISTANCE_NOISE.sub("", text.replace(",", "."))
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return None
    value = Decimal(match.group())
    if value < 0:
        return None
    # "-0" reads as 0
    return abs(value)


def parse_duration(text: Optional[str]) -> Optional[int]:
    """Read total minutes from a string like "25 min", "1 h 05" or "1 hour 5 mins".

    A lone number is a minute count. Otherwise every number needs a day, hour
    or minute unit, except a bare number right after an hour count, which is
    read as minutes. Counts longer than nine digits and anything else are
    unparseable instead of being guessed.
    """
    if not text:
        return None
    matches = _DURATION_TOKEN.findall(text)
    if not matches or any(len(amount.lstrip("0")) > _MAX_AMOUNT_DIGITS for amount, _ in matches):
        return None
    tokens = [(int(amount), unit.lower()) for amount, unit in matches]
    if len(tokens) == 1 and not tokens[0][1]:
        return tokens[0][0]

    total = 0
    previous_factor = None
    for index, (amount, unit) in enumerate(tokens):
        if unit:
            factor = MINUTES_PER_UNIT.get(unit)
            if factor is None:
                return None
        elif index == len(tokens) - 1 and previous_factor == 60:
            factor = 1
        else:
            return None
        total += amount * factor
        previous_factor = factor
    return total


def parse_route(distance: Optional[str], duration: Optional[str]) -> Optional[RouteMeasurement]:
    distance_km = parse_distance(distance)
    duration_minutes = parse_duration(duration)
    if distance_km is None or duration_minutes is None:
        logger.debug(f"Route summary incomplete (distance={distance!r}, duration={duration!r})")
        return None
    return RouteMeasurement(distance_km=distance_km, duration_minutes=duration_minutes)
