"""Data models for wallet transactions, features and profiles."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Dict, Any


LAMPORTS_PER_SOL = 1_000_000_000
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600


class EntityCategory(str, Enum):
    """Category of a known on-chain entity."""
    EXCHANGE = "exchange"
    DEX = "dex"
    WHALE = "whale"
    PERSONAL = "personal"
    UNKNOWN = "unknown"


class ProfileType(str, Enum):
    """Wallet activity profile."""
    FREQUENT_TRADER = "frequent_trader"
    EARLY_BUYER = "early_buyer"
    SUDDEN_DUMPER = "sudden_dumper"
    HODLER = "hodler"
    INACTIVE = "inactive"
    NEW = "new"
    WHALE_ACCUMULATOR = "whale_accumulator"
    SMART_MONEY = "smart_money"
    SWING_TRADER = "swing_trader"
    INSTITUTIONAL = "institutional"
    BOT_TRADER = "bot_trader"


class BehaviorTag(str, Enum):
    """Behavioral label attached to a profile."""
    WHALE = "Whale"
    ACTIVE_TRADER = "ActiveTrader"
    HOLDER = "Holder"
    VOLATILE = "Volatile"
    BOT_LIKE = "BotLike"
    EXCHANGE_USER = "ExchangeUser"
    DEX_TRADER = "DexTrader"
    HIGH_FREQUENCY = "HighFrequency"
    ACCUMULATOR = "Accumulator"
    DISTRIBUTOR = "Distributor"


class InsightLevel(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class RiskLevel(str, Enum):
    LOW = "low"
    LOW_MEDIUM = "low-medium"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"


@dataclass(frozen=True)
class Transaction:
    """Normalized transfer record."""
    source: Optional[str]
    destination: Optional[str]
    block_time: int  # Unix seconds
    lamports: int  # Base units, 1 SOL = 1e9
    tx_id: Optional[str] = None
    token_address: Optional[str] = None
    token_decimals: int = 9
    flow: Optional[str] = None  # 'in' | 'out' as reported upstream

    @property
    def amount_sol(self) -> float:
        return self.lamports / LAMPORTS_PER_SOL


@dataclass(frozen=True)
class KnownEntity:
    """Pre-classified on-chain address."""
    address: str
    display_name: str
    category: EntityCategory
    sub_label: Optional[str] = None


@dataclass(frozen=True)
class FeatureSet:
    """Aggregate behavioral features of a wallet's transaction history."""

    # Activity
    total_count: int = 0
    time_span_days: float = 0.0
    trading_frequency_per_day: float = 0.0
    first_tx_time: Optional[int] = None
    last_tx_time: Optional[int] = None

    # Transaction size
    large_transaction_count: int = 0
    total_volume_sol: float = 0.0
    avg_transaction_size_sol: float = 0.0
    transaction_size_std_dev: float = 0.0

    # Timing
    inter_transaction_time_std_dev_seconds: float = 0.0
    avg_time_between_transfers_hours: float = 0.0
    volatility_score: float = 0.0  # 0-100
    pattern_regularity_score: float = 0.0  # 0-100

    # Counterparty interactions
    exchange_interaction_count: int = 0
    dex_interaction_count: int = 0
    whale_interaction_count: int = 0

    # Direction heuristic, may be math.inf
    buy_sell_ratio: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


@dataclass(frozen=True)
class Profile:
    """Behavioral profile derived from a FeatureSet."""
    type: ProfileType
    raw_score: float
    normalized_score: float  # 0-10
    behavior_tags: Tuple[BehaviorTag, ...] = ()
    insight_level: InsightLevel = InsightLevel.BASIC


@dataclass(frozen=True)
class RiskAssessment:
    level: RiskLevel
    description: str


@dataclass(frozen=True)
class DailyTrend:
    """Per-day activity bucket used by the trend charts."""
    date: str  # YYYY-MM-DD, UTC
    transaction_count: int = 0
    volume_sol: float = 0.0
    exchange_interactions: int = 0
    dex_interactions: int = 0
    whale_interactions: int = 0


@dataclass
class WalletReport:
    """Complete profiling result for a wallet."""
    features: FeatureSet
    profile: Profile
    risk: RiskAssessment
    description: str
    address: Optional[str] = None

    # Processing metadata
    processing_time_ms: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with display rounding."""
        features = self.features
        return {
            'address': self.address,
            'type': self.profile.type.value,
            'description': self.description,
            'score': round(self.profile.raw_score, 2),
            'normalized_score': round(self.profile.normalized_score, 1),
            'insight_level': self.profile.insight_level.value,
            'behavior_tags': [tag.value for tag in self.profile.behavior_tags],
            'risk': {
                'level': self.risk.level.value,
                'description': self.risk.description
            },
            'features': {
                'total_count': features.total_count,
                'time_span_days': round(features.time_span_days, 2),
                'trading_frequency_per_day': round(features.trading_frequency_per_day, 2),
                'large_transaction_count': features.large_transaction_count,
                'total_volume_sol': round(features.total_volume_sol, 2),
                'avg_transaction_size_sol': round(features.avg_transaction_size_sol, 2),
                'transaction_size_std_dev': round(features.transaction_size_std_dev, 2),
                'inter_transaction_time_std_dev_seconds': round(features.inter_transaction_time_std_dev_seconds, 2),
                'avg_time_between_transfers_hours': round(features.avg_time_between_transfers_hours, 2),
                'volatility_score': round(features.volatility_score, 2),
                'pattern_regularity_score': round(features.pattern_regularity_score, 2),
                'exchange_interaction_count': features.exchange_interaction_count,
                'dex_interaction_count': features.dex_interaction_count,
                'whale_interaction_count': features.whale_interaction_count,
                'buy_sell_ratio': _format_ratio(features.buy_sell_ratio),
                'first_tx_time': features.first_tx_time,
                'last_tx_time': features.last_tx_time
            },
            'processing_time_ms': self.processing_time_ms
        }


def _format_ratio(value: float):
    if math.isinf(value):
        return "inf"
    return round(value, 2)
