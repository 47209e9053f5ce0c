"""
Tests for request line parsing and validation.

Covers both endpoint variants, number parsing, the order of range checks,
boundary values and the exact error texts returned to clients.
"""

import math

import pytest
from dewpoint.engine.errors import ErrorKind, MalformedRequestLine, RequestParseError
from dewpoint.engine.formatting import format_number
from dewpoint.engine.request_parser import parse_float, parse_request, validate_reading
from dewpoint.engine.variants.dewpoint_only import DewpointVariant
from dewpoint.engine.variants.mould import MouldIndexVariant
from dewpoint.models.reading import TemperatureHumidity


def _error(line: str, variant=None) -> RequestParseError:
    """Parse a line that must fail and return the raised error."""
    with pytest.raises(RequestParseError) as exc_info:
        parse_request(line, variant or MouldIndexVariant())
    return exc_info.value


# ---------------------------------------------------------------------------
# Generic /{t}/{rh} endpoint
# ---------------------------------------------------------------------------

class TestGenericPath:

    def setup_method(self):
        self.variant = MouldIndexVariant()

    def test_parses_request(self):
        assert parse_request("GET /15.7/87.1 HTTP/1.1", self.variant) == TemperatureHumidity(t=15.7, rh=87.1)

    def test_parses_negative_temperature(self):
        assert parse_request("GET /-3.2/97.3 HTTP/1.1", self.variant) == TemperatureHumidity(t=-3.2, rh=97.3)

    def test_parses_zero(self):
        assert parse_request("GET /0/0 HTTP/1.1", self.variant) == TemperatureHumidity(t=0.0, rh=0.0)

    def test_any_method_is_accepted(self):
        assert parse_request("POST /15.7/87.1 HTTP/1.1", self.variant) == TemperatureHumidity(t=15.7, rh=87.1)

    def test_extra_segments_are_ignored(self):
        assert parse_request("GET /1/2/3 HTTP/1.1", self.variant) == TemperatureHumidity(t=1.0, rh=2.0)

    def test_missing_fields(self):
        err = _error("GET /")
        assert err.kind == ErrorKind.MISSING_FIELD
        assert err.message == "t or rh is missing! Request must be /{t}/{rh}"

    def test_missing_rh(self):
        assert _error("GET /15.7 HTTP/1.1").message == "t or rh is missing! Request must be /{t}/{rh}"

    def test_empty_rh_segment_is_not_a_number(self):
        assert _error("GET /15.7/ HTTP/1.1").message == "Cannot convert rh to a float! Got ''!"

    def test_query_string_stays_in_segment(self):
        assert _error("GET /15.7/87.1?x=1 HTTP/1.1").message == "Cannot convert rh to a float! Got '87.1?x=1'!"

    def test_line_without_path_is_malformed(self):
        with pytest.raises(MalformedRequestLine):
            parse_request("GET", self.variant)

    def test_empty_line_is_malformed(self):
        with pytest.raises(MalformedRequestLine):
            parse_request("", self.variant)


# ---------------------------------------------------------------------------
# Fixed-prefix /dewpoint/{t}/{rh} endpoint
# ---------------------------------------------------------------------------

class TestDewpointPath:

    def setup_method(self):
        self.variant = DewpointVariant()

    def test_parses_request(self):
        reading = parse_request("GET /dewpoint/15.7/87.1 HTTP/1.1", self.variant)
        assert reading == TemperatureHumidity(t=15.7, rh=87.1)

    def test_post_is_rejected(self):
        err = _error("POST /dewpoint/15.7/87.1 HTTP/1.1", self.variant)
        assert err.kind == ErrorKind.WRONG_ROUTE
        assert err.message == "Only GET to /dewpoint is allowed!"

    def test_other_path_is_rejected(self):
        assert _error("GET /15.7/87.1 HTTP/1.1", self.variant).message == "Only GET to /dewpoint is allowed!"

    def test_prefix_without_trailing_slash_is_rejected(self):
        assert _error("GET /dewpoint HTTP/1.1", self.variant).kind == ErrorKind.WRONG_ROUTE

    def test_bare_method_is_wrong_route(self):
        assert _error("GET", self.variant).kind == ErrorKind.WRONG_ROUTE

    def test_missing_fields(self):
        err = _error("GET /dewpoint/", self.variant)
        assert err.kind == ErrorKind.MISSING_FIELD
        assert err.message == "t or rh is missing! Request must be /dewpoint/{t}/{rh}"

    def test_missing_rh(self):
        err = _error("GET /dewpoint/15.7 HTTP/1.1", self.variant)
        assert err.message == "t or rh is missing! Request must be /dewpoint/{t}/{rh}"

    def test_shares_number_validation(self):
        err = _error("GET /dewpoint/x/87.1 HTTP/1.1", self.variant)
        assert err.message == "Cannot convert t to a float! Got 'x'!"

    def test_shares_range_validation(self):
        err = _error("GET /dewpoint/15.7/100.1 HTTP/1.1", self.variant)
        assert err.message == "rh is too high! Got '100.1'! Max allowed rh is 100!"


# ---------------------------------------------------------------------------
# Number parsing
# ---------------------------------------------------------------------------

class TestNumberParsing:

    def test_t_not_a_number(self):
        err = _error("GET /foo/87.1 HTTP/1.1")
        assert err.kind == ErrorKind.INVALID_NUMBER
        assert err.message == "Cannot convert t to a float! Got 'foo'!"

    def test_rh_not_a_number(self):
        assert _error("GET /15.7/bar HTTP/1.1").message == "Cannot convert rh to a float! Got 'bar'!"

    def test_t_is_checked_before_rh(self):
        assert _error("GET /foo/bar HTTP/1.1").message == "Cannot convert t to a float! Got 'foo'!"

    @pytest.mark.parametrize("raw, expected", [
        ("15", 15.0),
        ("+15.5", 15.5),
        ("-0.5", -0.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e1", 10.0),
        ("2.5E-1", 0.25),
    ])
    def test_decimal_literals(self, raw, expected):
        assert parse_float("t", raw) == expected

    @pytest.mark.parametrize("raw", ["1_000", "", ".", "e5", "1e", "0x10", "١٢", "15,7", "--1"])
    def test_rejects_non_decimal_text(self, raw):
        with pytest.raises(RequestParseError) as exc_info:
            parse_float("t", raw)
        assert exc_info.value.message == f"Cannot convert t to a float! Got '{raw}'!"

    def test_infinity_is_a_number_but_out_of_range(self):
        assert _error("GET /inf/50 HTTP/1.1").message == "t is too high! Got 'inf'! Max allowed t is 80!"
        assert _error("GET /-Infinity/50 HTTP/1.1").message == "t is too low! Got '-inf'! Min allowed t is -40!"

    def test_nan_passes_range_checks(self):
        reading = parse_request("GET /NaN/50 HTTP/1.1", MouldIndexVariant())
        assert math.isnan(reading.t)
        assert reading.rh == 50.0


# ---------------------------------------------------------------------------
# Range checks
# ---------------------------------------------------------------------------

class TestRangeChecks:

    def test_t_too_high(self):
        err = _error("GET /1234/87.1 HTTP/1.1")
        assert err.kind == ErrorKind.OUT_OF_RANGE
        assert err.message == "t is too high! Got '1234'! Max allowed t is 80!"

    def test_t_too_low(self):
        assert _error("GET /-1234/87.1 HTTP/1.1").message == "t is too low! Got '-1234'! Min allowed t is -40!"

    def test_rh_too_high(self):
        assert _error("GET /15.7/100.1 HTTP/1.1").message == "rh is too high! Got '100.1'! Max allowed rh is 100!"

    def test_rh_too_low(self):
        assert _error("GET /15.7/-0.1 HTTP/1.1").message == "rh is too low! Got '-0.1'! Min allowed rh is 0!"

    def test_t_is_checked_before_rh(self):
        assert _error("GET /100/200 HTTP/1.1").message == "t is too high! Got '100'! Max allowed t is 80!"

    @pytest.mark.parametrize("raw_t, raw_rh", [
        ("80", "50"),
        ("80.0", "50"),
        ("-40", "50"),
        ("-40.0", "50"),
        ("20", "100"),
        ("20", "100.0"),
        ("20", "0"),
        ("20", "0.0"),
        ("20", "-0"),
    ])
    def test_bounds_are_inclusive(self, raw_t, raw_rh):
        reading = validate_reading(raw_t, raw_rh)
        assert reading.t == float(raw_t)
        assert reading.rh == float(raw_rh)

    @pytest.mark.parametrize("raw_t, raw_rh, message", [
        ("80.0001", "50", "t is too high! Got '80.0001'! Max allowed t is 80!"),
        ("-40.0001", "50", "t is too low! Got '-40.0001'! Min allowed t is -40!"),
        ("20", "100.0001", "rh is too high! Got '100.0001'! Max allowed rh is 100!"),
        ("20", "-0.0001", "rh is too low! Got '-0.0001'! Min allowed rh is 0!"),
    ])
    def test_just_outside_bounds(self, raw_t, raw_rh, message):
        with pytest.raises(RequestParseError) as exc_info:
            validate_reading(raw_t, raw_rh)
        assert exc_info.value.message == message

    def test_message_drops_trailing_zero(self):
        assert _error("GET /90.0/50 HTTP/1.1").message == "t is too high! Got '90'! Max allowed t is 80!"

    def test_error_is_a_value_error(self):
        assert isinstance(_error("GET /90/50 HTTP/1.1"), ValueError)


# ---------------------------------------------------------------------------
# Round trip: values written into a path parse back unchanged
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("t", [-40.0, -12.25, 0.0, 0.1, 15.7, 49.5, 79.99, 80.0])
@pytest.mark.parametrize("rh", [0.0, 0.3, 33.333, 87.1, 100.0])
def test_round_trip_generic(t, rh):
    line = f"GET /{format_number(t)}/{format_number(rh)} HTTP/1.1"
    assert parse_request(line, MouldIndexVariant()) == TemperatureHumidity(t=t, rh=rh)


@pytest.mark.parametrize("t, rh", [(-40.0, 0.0), (15.7, 87.1), (80.0, 100.0)])
def test_round_trip_dewpoint(t, rh):
    line = f"GET /dewpoint/{format_number(t)}/{format_number(rh)} HTTP/1.1"
    assert parse_request(line, DewpointVariant()) == TemperatureHumidity(t=t, rh=rh)
