import pytest
from decimal import Decimal

from app.services.route import RouteMeasurement, parse_distance, parse_duration, parse_route

pytestmark = pytest.mark.parsing


class TestDistanceParsing:

    @pytest.mark.parametrize("text,expected", [
        ("12.4 km", Decimal("12.4")),
        ("12,4 km", Decimal("12.4")),
        ("10 km", Decimal("10")),
        ("0,8 km", Decimal("0.8")),
        ("15.3km", Decimal("15.3")),
        ("  7 km  ", Decimal("7")),
        (".5 km", Decimal("0.5")),
        ("1 234,5 km", Decimal("1234.5")),   # grouping spaces are stripped
        ("1.234.5 km", Decimal("1.234")),    # reads only the leading literal
        ("0 km", Decimal("0")),
    ])
    def test_parses_localized_distances(self, text, expected):
        assert parse_distance(text) == expected

    @pytest.mark.parametrize("text", [None, "", "km", "unknown", "-", "..", "-5 km"])
    def test_unreadable_distances(self, text):
        assert parse_distance(text) is None

    @pytest.mark.parametrize("text", ["-0 km", "-0,0 km"])
    def test_negative_zero_reads_as_zero(self, text):
        value = parse_distance(text)
        assert value == 0
        assert not value.is_signed()


class TestDurationParsing:

    @pytest.mark.parametrize("text,expected", [
        ("25 min", 25),
        ("25 mins", 25),
        ("18 minutes", 18),
        ("0 min", 0),
        ("45", 45),
        ("1 h 05", 65),
        ("1h05", 65),
        ("2 h", 120),
        ("1 hour 5 mins", 65),
        ("2 hours 30 mins", 150),
        ("1 heure 12 minutes", 72),
        ("1 day 2 hours", 1560),
        ("1 jour 3 h", 1620),
    ])
    def test_parses_minute_counts(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", [
        None,
        "",
        "min",
        "12 34",          # two bare numbers must not be concatenated into 1234
        "1 h 05 10",
        "10 sec",
        "5 min 30",       # bare number after minutes, not hours
        "9" * 5000 + " min",
        "1 h " + "1" * 10,
    ])
    def test_ambiguous_or_unreadable_durations(self, text):
        assert parse_duration(text) is None

    def test_composite_duration_is_not_concatenated(self):
        assert parse_duration("1 h 05") != 105

    def test_long_counts_within_limit(self):
        assert parse_duration("999999999 min") == 999999999
        assert parse_duration("0000000000045 min") == 45


class TestRouteParsing:

    def test_complete_route(self):
        route = parse_route("10,4 km", "20 min")
        assert route == RouteMeasurement(distance_km=Decimal("10.4"), duration_minutes=20)

    @pytest.mark.parametrize("distance,duration", [
        (None, "15 min"),
        ("10 km", None),
        (None, None),
        ("", ""),
        ("n/a", "15 min"),
        ("10 km", "soon"),
    ])
    def test_incomplete_route_is_none(self, distance, duration):
        assert parse_route(distance, duration) is None

    def test_measurement_is_immutable(self):
        route = parse_route("10 km", "15 min")
        with pytest.raises(AttributeError):
            route.distance_km = Decimal("1")
