"""
Fixed-prefix /dewpoint/{t}/{rh} endpoint: dew point only.

Only request lines starting with "GET /dewpoint/" are served. The dew point
is emitted as a quoted string, unlike the generic endpoint's bare number.
"""

from dewpoint.engine.dewpoint_calc import calc_dewpoint
from dewpoint.engine.errors import RequestParseError
from dewpoint.engine.formatting import format_number
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.models.reading import TemperatureHumidity

ROUTE = "/dewpoint"


class DewpointVariant(EndpointVariant):
    """GET /dewpoint/15.7/87.1 → {"dewpoint":"17.87..."}"""

    usage = "/dewpoint/{t}/{rh}"
    t_index = 2
    rh_index = 3

    def check_route(self, request_line: str) -> None:
        if not request_line.startswith(f"GET {ROUTE}/"):
            raise RequestParseError.wrong_route(ROUTE)

    def success_body(self, reading: TemperatureHumidity) -> str:
        dewpoint = calc_dewpoint(reading)
        return f'{{"dewpoint":"{format_number(dewpoint)}"}}'
