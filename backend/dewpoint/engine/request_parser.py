"""
Request line parser.

Turns the first line of an HTTP request into a validated TemperatureHumidity.
Locating the raw `t` and `rh` path segments is delegated to the endpoint
variant (see dewpoint.engine.variants); number parsing and range checks are
shared by every variant and run in a fixed order:

    1. t parses as a float
    2. rh parses as a float
    3. t <= T_MAX, t >= T_MIN, rh <= RH_MAX, rh >= RH_MIN

The first failure is raised as a RequestParseError.
"""

import re

from dewpoint.config import T_MIN, T_MAX, RH_MIN, RH_MAX
from dewpoint.engine.errors import RequestParseError
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.models.reading import TemperatureHumidity

# Plain decimal literals plus inf / infinity / nan. Narrower than float():
# no digit-group underscores, no surrounding whitespace, ASCII digits only.
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def parse_float(field: str, raw: str) -> float:
    """Parse one path segment, raising INVALID_NUMBER for anything else."""
    if not _FLOAT_RE.fullmatch(raw):
        raise RequestParseError.invalid_number(field, raw)
    return float(raw)


def validate_reading(raw_t: str, raw_rh: str) -> TemperatureHumidity:
    """
    Parse and range-check raw t / rh segments.

    NaN compares false against every bound and therefore passes through.
    """
    t = parse_float("t", raw_t)
    rh = parse_float("rh", raw_rh)

    if t > T_MAX:
        raise RequestParseError.too_high("t", t, T_MAX)
    if t < T_MIN:
        raise RequestParseError.too_low("t", t, T_MIN)
    if rh > RH_MAX:
        raise RequestParseError.too_high("rh", rh, RH_MAX)
    if rh < RH_MIN:
        raise RequestParseError.too_low("rh", rh, RH_MIN)

    return TemperatureHumidity(t=t, rh=rh)


def parse_request(request_line: str, variant: EndpointVariant) -> TemperatureHumidity:
    """
    Parse a request line such as "GET /15.7/87.1 HTTP/1.1".

    Args:
        request_line: First line of the request, without the line terminator
        variant: Endpoint variant that knows where t and rh live in the path

    Raises:
        RequestParseError: route, missing segment, number or range failure
        MalformedRequestLine: the line has no path token
    """
    raw_t, raw_rh = variant.extract_fields(request_line)
    return validate_reading(raw_t, raw_rh)
