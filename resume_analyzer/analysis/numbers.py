from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    # 7.5 -> 8, unlike round().
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
