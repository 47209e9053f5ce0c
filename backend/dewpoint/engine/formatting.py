"""
Float rendering for response bodies and error messages.

Values are written with the shortest digits that round-trip, always in
positional notation, and without a trailing ".0" on integral values:

    1234.0  → "1234"
    15.7    → "15.7"
    1e+16   → "10000000000000000"
    -0.0    → "-0"
    nan     → "NaN"
"""

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Render a float the way it appears in response text."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() gives the shortest round-trip digits; Decimal drops the exponent
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
