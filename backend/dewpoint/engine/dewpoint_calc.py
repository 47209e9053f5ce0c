"""
Dew point from dry-bulb temperature and relative humidity.

Magnus-Tetens form with b = 17.67, c = 243.5 °C:

    gamma    = ln(100 / RH) + b·T / (c + T)
    dewpoint = c·gamma / (b - gamma)

There is no error path. RH = 0 gives ln(inf) and a NaN result, which is
returned as-is; numpy is used so that the division and logarithm follow IEEE
semantics instead of raising.
"""

import numpy as np

from dewpoint.config import MAGNUS_B, MAGNUS_C
from dewpoint.models.reading import TemperatureHumidity


def calc_dewpoint(reading: TemperatureHumidity) -> float:
    """Dew point in °C for a validated reading."""
    t = np.float64(reading.t)
    rh = np.float64(reading.rh)

    with np.errstate(divide="ignore", invalid="ignore"):
        gamma = np.log(100.0 / rh) + (MAGNUS_B * t) / (MAGNUS_C + t)
        dewpoint = MAGNUS_C * gamma / (MAGNUS_B - gamma)

    return float(dewpoint)
