"""Data models for wallet profiling."""

from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import (
    BehaviorTag,
    DailyTrend,
    EntityCategory,
    FeatureSet,
    InsightLevel,
    KnownEntity,
    Profile,
    ProfileType,
    RiskAssessment,
    RiskLevel,
    Transaction,
    WalletReport
)

__all__ = [
    "ProfilerConfig",
    "BehaviorTag",
    "DailyTrend",
    "EntityCategory",
    "FeatureSet",
    "InsightLevel",
    "KnownEntity",
    "Profile",
    "ProfileType",
    "RiskAssessment",
    "RiskLevel",
    "Transaction",
    "WalletReport",
]
