"""Rule-based wallet profile classification and scoring."""

import time
from typing import List, Optional
import structlog

from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import (
    BehaviorTag,
    FeatureSet,
    InsightLevel,
    Profile,
    ProfileType,
    SECONDS_PER_DAY
)
from wallet_profiler.utils.statistics import clamp, safe_ratio

logger = structlog.get_logger(__name__)

EARLY_BUYER_AGE_SECONDS = 365 * SECONDS_PER_DAY
INACTIVE_AFTER_SECONDS = 90 * SECONDS_PER_DAY

ADVANCED_SCORE = 150
INTERMEDIATE_SCORE = 80

PROFILE_DESCRIPTIONS = {
    ProfileType.FREQUENT_TRADER: "Frequent Trader: Makes regular transactions, likely an active trader",
    ProfileType.EARLY_BUYER: "Early Buyer: Has been in the ecosystem for a long time",
    ProfileType.SUDDEN_DUMPER: "Sudden Dumper: Makes large transactions in short periods",
    ProfileType.HODLER: "Hodler: Tends to hold assets for long periods",
    ProfileType.INACTIVE: "Inactive: No recent transaction activity",
    ProfileType.NEW: "New Wallet: Limited transaction history",
    ProfileType.WHALE_ACCUMULATOR: "Whale Accumulator: Consistently acquires large amounts of tokens",
    ProfileType.SMART_MONEY: "Smart Money: Shows sophisticated trading patterns and connections to whales",
    ProfileType.SWING_TRADER: "Swing Trader: High volatility trading with frequent position changes",
    ProfileType.INSTITUTIONAL: "Institutional: Large, regular transactions with low volatility patterns",
    ProfileType.BOT_TRADER: "Bot Trader: Extremely regular transaction patterns and high frequency",
}


def get_profile_description(profile_type: ProfileType) -> str:
    """Human-readable description of a profile type."""
    return PROFILE_DESCRIPTIONS.get(profile_type, "Unknown profile")


class ProfileClassifier:
    """Maps a FeatureSet onto a profile type, score, tags and insight level."""

    def __init__(self, config: Optional[ProfilerConfig] = None):
        self.config = config or ProfilerConfig()
        self.logger = logger.bind(component="profile_classifier")

    def classify(self, features: FeatureSet, now: Optional[float] = None,
                 large_transfer_threshold_sol: Optional[float] = None) -> Profile:
        """
        Classify a wallet from its features.

        Args:
            features: Extracted FeatureSet
            now: Reference Unix time for the age rules (default: current time)
            large_transfer_threshold_sol: Overrides the configured threshold

        Returns:
            Profile
        """
        if now is None:
            now = time.time()

        threshold = large_transfer_threshold_sol
        if threshold is None:
            threshold = self.config.large_transfer_threshold_sol

        profile_type = self._determine_profile_type(features, now, threshold)

        if features.is_empty:
            return Profile(
                type=profile_type,
                raw_score=0.0,
                normalized_score=0.0,
                behavior_tags=(),
                insight_level=InsightLevel.BASIC
            )

        raw_score = self._calculate_raw_score(features, threshold)

        profile = Profile(
            type=profile_type,
            raw_score=raw_score,
            normalized_score=clamp(raw_score / 100, 0.0, 10.0),
            behavior_tags=tuple(self._collect_behavior_tags(features, threshold)),
            insight_level=self._determine_insight_level(raw_score)
        )

        self.logger.debug("Wallet classified",
                          profile_type=profile.type.value,
                          raw_score=profile.raw_score,
                          tags=[tag.value for tag in profile.behavior_tags])

        return profile

    def _determine_profile_type(self, f: FeatureSet, now: float, threshold: float) -> ProfileType:
        """Ordered rules; the first match wins."""

        # Very regular spacing at high frequency
        if f.pattern_regularity_score > 80 and f.trading_frequency_per_day > 10:
            return ProfileType.BOT_TRADER

        if f.whale_interaction_count > 3 and f.large_transaction_count > 1 and f.time_span_days > 90:
            return ProfileType.SMART_MONEY

        if f.large_transaction_count > 5 and f.avg_transaction_size_sol > threshold / 5:
            return ProfileType.WHALE_ACCUMULATOR

        if (f.avg_transaction_size_sol > threshold / 10
                and f.volatility_score < 30
                and f.total_count > 10):
            return ProfileType.INSTITUTIONAL

        if f.volatility_score > 70 and f.trading_frequency_per_day > 3:
            return ProfileType.SWING_TRADER

        if f.trading_frequency_per_day > 5:
            return ProfileType.FREQUENT_TRADER

        if f.time_span_days > 180:
            return ProfileType.HODLER

        if f.large_transaction_count > 3 and f.time_span_days < 30:
            return ProfileType.SUDDEN_DUMPER

        if f.first_tx_time is not None and f.first_tx_time < now - EARLY_BUYER_AGE_SECONDS:
            return ProfileType.EARLY_BUYER

        if f.total_count == 0 or (f.last_tx_time is not None
                                  and f.last_tx_time < now - INACTIVE_AFTER_SECONDS):
            return ProfileType.INACTIVE

        return ProfileType.NEW

    def _calculate_raw_score(self, f: FeatureSet, threshold: float) -> float:
        """Weighted composite score, unbounded above."""
        score = 0.0
        score += f.trading_frequency_per_day * 5
        score += f.large_transaction_count * 15
        score += 10 if f.time_span_days > 30 else 0
        score += f.volatility_score * 0.5
        score += safe_ratio(f.exchange_interaction_count, f.total_count) * 30
        score += safe_ratio(f.dex_interaction_count, f.total_count) * 20
        score += safe_ratio(f.whale_interaction_count, f.total_count) * 40
        score += 20 if f.avg_transaction_size_sol > threshold / 10 else 0
        score += f.pattern_regularity_score * 0.2
        return score

    def _collect_behavior_tags(self, f: FeatureSet, threshold: float) -> List[BehaviorTag]:
        tags = []

        if f.avg_transaction_size_sol > threshold / 10:
            tags.append(BehaviorTag.WHALE)
        if f.trading_frequency_per_day > 5:
            tags.append(BehaviorTag.ACTIVE_TRADER)
        if f.time_span_days > 180:
            tags.append(BehaviorTag.HOLDER)
        if f.volatility_score > 70:
            tags.append(BehaviorTag.VOLATILE)
        if f.pattern_regularity_score > 80:
            tags.append(BehaviorTag.BOT_LIKE)
        if f.exchange_interaction_count > 5:
            tags.append(BehaviorTag.EXCHANGE_USER)
        if f.dex_interaction_count > 5:
            tags.append(BehaviorTag.DEX_TRADER)
        if f.avg_time_between_transfers_hours < 1:
            tags.append(BehaviorTag.HIGH_FREQUENCY)
        if f.buy_sell_ratio > 2:
            tags.append(BehaviorTag.ACCUMULATOR)
        if f.buy_sell_ratio < 0.5:
            tags.append(BehaviorTag.DISTRIBUTOR)

        return tags

    def _determine_insight_level(self, raw_score: float) -> InsightLevel:
        if raw_score > ADVANCED_SCORE:
            return InsightLevel.ADVANCED
        if raw_score > INTERMEDIATE_SCORE:
            return InsightLevel.INTERMEDIATE
        return InsightLevel.BASIC
