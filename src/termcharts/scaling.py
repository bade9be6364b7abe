import math
from collections.abc import Sequence

import numpy as np


def min_max(values: Sequence[float]) -> tuple[float, float]:
    """Return (min, max) of the values, or (0.0, 0.0) when there are none."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0, 0.0
    return float(arr.min()), float(arr.max())


def normalize(values: Sequence[float]) -> tuple[list[float], float, float]:
    """Map values linearly onto [0, 1].

    Returns the mapped values with the original min and max. A flat series maps
    every element to 0.5 so it still renders as a mid-level line or bar.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return [], 0.0, 0.0
    lo, hi = float(arr.min()), float(arr.max())
    if lo == hi:
        return [0.5] * arr.size, lo, hi
    # Halved operands keep the differences finite near the float limit
    return ((arr / 2 - lo / 2) / (hi / 2 - lo / 2)).tolist(), lo, hi


def fraction(value: float, lo: float, hi: float) -> float:
    """Position of a value inside [lo, hi], 0.5 for a degenerate range."""
    if lo == hi:
        return 0.5
    return (value / 2 - lo / 2) / (hi / 2 - lo / 2)


def scale(value: float, src_min: float, src_max: float, dst_min: float, dst_max: float) -> float:
    if src_min == src_max:
        return dst_min
    t = fraction(value, src_min, src_max)
    return dst_min * (1.0 - t) + dst_max * t


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def all_finite(values: Sequence[float]) -> bool:
    """True if no value is NaN or infinite."""
    return bool(np.isfinite(np.asarray(values, dtype=np.float64)).all())


def sum_unit(values: Sequence[float]) -> float:
    """Power of two no larger than the biggest magnitude, 1.0 for all zeros.

    Sums of values divided by this unit stay finite, and dividing by a power of
    two is exact, so shares computed from the rescaled values are unchanged.
    """
    arr = np.abs(np.asarray(values, dtype=np.float64))
    peak = float(arr.max()) if arr.size else 0.0
    if peak == 0:
        return 1.0
    return math.ldexp(1.0, math.frexp(peak)[1] - 1)
