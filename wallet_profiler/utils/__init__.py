"""Utility functions for wallet profiling."""

from wallet_profiler.utils.statistics import (
    population_std,
    safe_mean,
    safe_ratio,
    consecutive_gaps,
    consecutive_gap_ratios,
    clamp
)
from wallet_profiler.utils.formatting import (
    format_address,
    format_sol
)

__all__ = [
    "population_std",
    "safe_mean",
    "safe_ratio",
    "consecutive_gaps",
    "consecutive_gap_ratios",
    "clamp",
    "format_address",
    "format_sol",
]
