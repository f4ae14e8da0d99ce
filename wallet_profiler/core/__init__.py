"""Core profiling components."""

from wallet_profiler.core.entity_registry import KnownEntityRegistry, default_registry
from wallet_profiler.core.feature_engine import FeatureEngine
from wallet_profiler.core.classifier import ProfileClassifier, get_profile_description
from wallet_profiler.core.risk_assessor import assess_risk
from wallet_profiler.core.trends import aggregate_daily_trends
from wallet_profiler.core.profiler import WalletProfiler

__all__ = [
    "KnownEntityRegistry",
    "default_registry",
    "FeatureEngine",
    "ProfileClassifier",
    "get_profile_description",
    "assess_risk",
    "aggregate_daily_trends",
    "WalletProfiler",
]
