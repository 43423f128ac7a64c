from __future__ import annotations

import math
import sys

from tradein.config import DEFAULT_MIN_TRADE_VALUE

ROUNDING_STEP = 25


def median_rounded_to_25(low: float, high: float, min_value: float = DEFAULT_MIN_TRADE_VALUE) -> int:
    """Single display figure for a low/high range.

    The median is rounded half up to the nearest $25 (387.50 -> 400) and then
    raised to ``min_value`` if it falls below it. Infinite bounds are held to
    the largest finite float and a NaN median yields ``min_value``.
    """
    median = low / 2 + high / 2
    if math.isnan(median):
        return int(math.ceil(min_value))
    median = max(-sys.float_info.max, min(median, sys.float_info.max))
    rounded = math.floor(median / ROUNDING_STEP + 0.5) * ROUNDING_STEP
    if rounded < min_value:
        return int(math.ceil(min_value))
    return int(rounded)
