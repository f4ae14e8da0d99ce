"""Statistical helpers for behavioral feature extraction."""

from typing import List, Sequence
import numpy as np


def population_std(values: Sequence[float]) -> float:
    """
    Population standard deviation (divisor n).

    Returns 0.0 for an empty series.
    """
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))


def safe_mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def consecutive_gaps(timestamps: Sequence[int]) -> List[int]:
    """Differences between consecutive (sorted) timestamps."""
    return [timestamps[i] - timestamps[i - 1] for i in range(1, len(timestamps))]


def consecutive_gap_ratios(gaps: Sequence[int]) -> List[float]:
    """Ratios gap[i] / gap[i-1], skipping zero-length previous gaps."""
    ratios = []
    for i in range(1, len(gaps)):
        if gaps[i - 1] > 0:
            ratios.append(gaps[i] / gaps[i - 1])
    return ratios


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))
