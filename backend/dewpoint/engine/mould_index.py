"""
Mould growth risk index (0-3) from temperature and relative humidity.

Each row of MOULD_INDEX_TABLE holds, for one whole-degree temperature from
0 to 50 °C, the RH thresholds (%) of risk classes 0, 1 and 2 in columns 1-3.
Column 0 is an unused sentinel. The index is the first class whose threshold
is at or above the rounded RH; above every threshold the index is 3.

Outside (0, 50] °C the index is always 0.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from dewpoint.config import MOULD_T_MIN, MOULD_T_MAX
from dewpoint.models.reading import TemperatureHumidity

MAX_MOULD_INDEX = 3

MOULD_INDEX_TABLE: tuple[tuple[int, int, int, int], ...] = (
    (0, 0, 0, 0),      # 0 °C
    (0, 97, 98, 100),  # 1 °C
    (0, 95, 97, 100),  # 2 °C
    (0, 93, 95, 100),  # 3 °C
    (0, 91, 93, 98),   # 4 °C
    (0, 88, 92, 97),   # 5 °C
    (0, 87, 91, 96),   # 6 °C
    (0, 86, 91, 95),   # 7 °C
    (0, 84, 90, 95),   # 8 °C
    (0, 83, 89, 94),   # 9 °C
    (0, 82, 88, 93),   # 10 °C
    (0, 81, 88, 93),   # 11 °C
    (0, 81, 88, 92),   # 12 °C
    (0, 80, 87, 92),   # 13 °C
    (0, 79, 87, 92),   # 14 °C
    (0, 79, 87, 91),   # 15 °C
    (0, 79, 86, 91),   # 16 °C
    (0, 79, 86, 91),   # 17 °C
    (0, 79, 86, 90),   # 18 °C
    (0, 79, 85, 90),   # 19 °C
    (0, 79, 85, 90),   # 20 °C
    (0, 79, 85, 90),   # 21 °C
    (0, 79, 85, 89),   # 22 °C
    (0, 79, 84, 89),   # 23 °C
    (0, 79, 84, 89),   # 24 °C
    (0, 79, 84, 89),   # 25 °C
    (0, 79, 84, 89),   # 26 °C
    (0, 79, 83, 88),   # 27 °C
    (0, 79, 83, 88),   # 28 °C
    (0, 79, 83, 88),   # 29 °C
    (0, 79, 83, 88),   # 30 °C
    (0, 79, 83, 88),   # 31 °C
    (0, 79, 83, 88),   # 32 °C
    (0, 79, 82, 88),   # 33 °C
    (0, 79, 82, 87),   # 34 °C
    (0, 79, 82, 87),   # 35 °C
    (0, 79, 82, 87),   # 36 °C
    (0, 79, 82, 87),   # 37 °C
    (0, 79, 82, 87),   # 38 °C
    (0, 79, 82, 87),   # 39 °C
    (0, 79, 82, 87),   # 40 °C
    (0, 79, 81, 87),   # 41 °C
    (0, 79, 81, 87),   # 42 °C
    (0, 79, 81, 87),   # 43 °C
    (0, 79, 81, 87),   # 44 °C
    (0, 79, 81, 86),   # 45 °C
    (0, 79, 81, 86),   # 46 °C
    (0, 79, 81, 86),   # 47 °C
    (0, 79, 80, 86),   # 48 °C
    (0, 79, 80, 86),   # 49 °C
    (0, 79, 80, 86),   # 50 °C
)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3).

    NaN maps to 0 and infinities saturate to the 32-bit integer range.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return (2 ** 31 - 1) if value > 0 else -(2 ** 31)
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calc_mould_index(reading: TemperatureHumidity) -> int:
    """Mould index 0-3 for a validated reading."""
    t = round_half_away(reading.t)
    rh = round_half_away(reading.rh)

    if t <= MOULD_T_MIN or t > MOULD_T_MAX:
        return 0

    row = MOULD_INDEX_TABLE[t]
    for column in range(1, 4):
        if rh <= row[column]:
            return column - 1

    return MAX_MOULD_INDEX
