"""
Generic /{t}/{rh} endpoint: dew point plus mould index.

Any request method is accepted.
"""

from dewpoint.engine.dewpoint_calc import calc_dewpoint
from dewpoint.engine.formatting import format_number
from dewpoint.engine.mould_index import calc_mould_index
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.models.reading import TemperatureHumidity


class MouldIndexVariant(EndpointVariant):
    """GET /15.7/87.1 → {"dewpoint":17.87..., "mould_index":2}"""

    usage = "/{t}/{rh}"
    t_index = 1
    rh_index = 2

    def success_body(self, reading: TemperatureHumidity) -> str:
        dewpoint = calc_dewpoint(reading)
        mould_index = calc_mould_index(reading)
        return f'{{"dewpoint":{format_number(dewpoint)}, "mould_index":{mould_index}}}'
