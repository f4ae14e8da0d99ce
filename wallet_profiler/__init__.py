"""
Solana Wallet Behavioral Profiler

Behavioral profiling of Solana wallets from their transfer history.
Extracts timing, size and counterparty features, classifies wallets into
activity profiles (BOT_TRADER, SMART_MONEY, WHALE_ACCUMULATOR, HODLER, ...)
and assesses their risk.
"""

__version__ = "1.0.0"
__description__ = "Behavioral profiling engine for Solana wallet transfer histories"

from wallet_profiler.core.profiler import WalletProfiler
from wallet_profiler.core.feature_engine import FeatureEngine
from wallet_profiler.core.classifier import ProfileClassifier
from wallet_profiler.core.risk_assessor import assess_risk
from wallet_profiler.core.entity_registry import KnownEntityRegistry
from wallet_profiler.models.config import ProfilerConfig

__all__ = [
    "WalletProfiler",
    "FeatureEngine",
    "ProfileClassifier",
    "assess_risk",
    "KnownEntityRegistry",
    "ProfilerConfig",
]
