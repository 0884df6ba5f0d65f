from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, decimals: int) -> float:
    """
    Round *value* to *decimals* places, ties away from zero.

    Built-in ``round`` uses banker's rounding, so 0.5 steps go through
    ``Decimal`` on the shortest repr of the float instead.
    """
    if decimals < 0:
        msg = f'decimals must be non-negative, got {decimals}'
        raise ValueError(msg)
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
