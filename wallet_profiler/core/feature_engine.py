"""Feature engineering engine for wallet behavioral profiling."""

import math
from typing import List, Optional, Sequence, Dict, Any
import structlog

from wallet_profiler.core.entity_registry import KnownEntityRegistry, default_registry
from wallet_profiler.exceptions import InvalidInputError
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import (
    EntityCategory,
    FeatureSet,
    Transaction,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR
)
from wallet_profiler.utils.statistics import (
    population_std,
    safe_mean,
    safe_ratio,
    consecutive_gaps,
    consecutive_gap_ratios
)

logger = structlog.get_logger(__name__)

# Gap std-dev (days) to volatility points
VOLATILITY_SCALE = 10
MAX_SCORE = 100.0

# Regularity needs more than this many gaps
MIN_PATTERN_GAPS = 5
PATTERN_RATIO_PENALTY = 20


class FeatureEngine:
    """Extracts behavioral features from a wallet's transaction list."""

    def __init__(self, config: Optional[ProfilerConfig] = None,
                 registry: Optional[KnownEntityRegistry] = None):
        self.config = config or ProfilerConfig()
        self.registry = registry if registry is not None else default_registry()
        self.logger = logger.bind(component="feature_engine")

    def extract_features(self, transactions: Sequence[Transaction],
                         reference_address: Optional[str] = None,
                         large_transfer_threshold_sol: Optional[float] = None) -> FeatureSet:
        """
        Extract behavioral features from a transaction list.

        Args:
            transactions: Normalized transactions, in the order received
            reference_address: Address whose incoming transfers count as buys.
                Defaults to the destination of the first transaction in input
                order.
            large_transfer_threshold_sol: Overrides the configured threshold

        Returns:
            FeatureSet; the zero FeatureSet for an empty list

        Raises:
            InvalidInputError: if a transaction lacks a usable time or amount
        """
        if not transactions:
            return FeatureSet()

        self._validate(transactions)

        threshold = large_transfer_threshold_sol
        if threshold is None:
            threshold = self.config.large_transfer_threshold_sol

        # Python's sort is stable, ties keep input order
        sorted_transactions = sorted(transactions, key=lambda tx: tx.block_time)

        activity = self._calculate_activity_features(sorted_transactions)
        sizes = self._calculate_size_features(transactions, threshold)
        timing = self._calculate_timing_features(sorted_transactions)
        interactions = self._calculate_interaction_features(transactions)
        buy_sell_ratio = self._calculate_buy_sell_ratio(transactions, reference_address)

        features = FeatureSet(
            total_count=len(transactions),
            time_span_days=activity['time_span_days'],
            trading_frequency_per_day=activity['trading_frequency_per_day'],
            first_tx_time=activity['first_tx_time'],
            last_tx_time=activity['last_tx_time'],

            large_transaction_count=sizes['large_transaction_count'],
            total_volume_sol=sizes['total_volume_sol'],
            avg_transaction_size_sol=sizes['avg_transaction_size_sol'],
            transaction_size_std_dev=sizes['transaction_size_std_dev'],

            inter_transaction_time_std_dev_seconds=timing['gap_std_dev_seconds'],
            avg_time_between_transfers_hours=timing['avg_gap_hours'],
            volatility_score=timing['volatility_score'],
            pattern_regularity_score=timing['pattern_regularity_score'],

            exchange_interaction_count=interactions[EntityCategory.EXCHANGE],
            dex_interaction_count=interactions[EntityCategory.DEX],
            whale_interaction_count=interactions[EntityCategory.WHALE],

            buy_sell_ratio=buy_sell_ratio
        )

        self.logger.debug("Features extracted",
                          tx_count=features.total_count,
                          time_span_days=features.time_span_days,
                          volatility=features.volatility_score,
                          pattern_score=features.pattern_regularity_score)

        return features

    def _validate(self, transactions: Sequence[Transaction]) -> None:
        for index, tx in enumerate(transactions):
            for field_name in ('block_time', 'lamports'):
                value = getattr(tx, field_name, None)
                if value is None or isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidInputError(f"Transaction {index} has invalid {field_name}",
                                            details={'index': index, 'field': field_name, 'value': value})
                if value < 0:
                    raise InvalidInputError(f"Transaction {index} has negative {field_name}",
                                            details={'index': index, 'field': field_name, 'value': value})

    def _calculate_activity_features(self, sorted_transactions: List[Transaction]) -> Dict[str, Any]:
        """Time span and trading frequency."""
        first_tx_time = sorted_transactions[0].block_time
        last_tx_time = sorted_transactions[-1].block_time

        time_span_days = (last_tx_time - first_tx_time) / SECONDS_PER_DAY
        trading_frequency = safe_ratio(len(sorted_transactions), time_span_days)

        return {
            'first_tx_time': first_tx_time,
            'last_tx_time': last_tx_time,
            'time_span_days': time_span_days,
            'trading_frequency_per_day': trading_frequency
        }

    def _calculate_size_features(self, transactions: Sequence[Transaction],
                                 threshold_sol: float) -> Dict[str, Any]:
        """Large transfer count, volume, mean and population std-dev of sizes."""
        sizes = [tx.amount_sol for tx in transactions]

        return {
            'large_transaction_count': sum(1 for size in sizes if size >= threshold_sol),
            'total_volume_sol': float(sum(sizes)),
            'avg_transaction_size_sol': safe_mean(sizes),
            'transaction_size_std_dev': population_std(sizes)
        }

    def _calculate_timing_features(self, sorted_transactions: List[Transaction]) -> Dict[str, float]:
        """Gap statistics, volatility and pattern regularity."""
        gaps = consecutive_gaps([tx.block_time for tx in sorted_transactions])

        gap_std = population_std(gaps)
        volatility_score = min(MAX_SCORE, (gap_std / SECONDS_PER_DAY) * VOLATILITY_SCALE)

        pattern_score = 0.0
        if len(gaps) > MIN_PATTERN_GAPS:
            ratios = consecutive_gap_ratios(gaps)
            if ratios:
                pattern_score = max(0.0, MAX_SCORE - population_std(ratios) * PATTERN_RATIO_PENALTY)

        return {
            'gap_std_dev_seconds': gap_std,
            'avg_gap_hours': safe_mean(gaps) / SECONDS_PER_HOUR,
            'volatility_score': volatility_score,
            'pattern_regularity_score': pattern_score
        }

    def _calculate_interaction_features(self, transactions: Sequence[Transaction]) -> Dict[EntityCategory, int]:
        """Count transfers touching each known-entity category."""
        counts = {category: 0 for category in EntityCategory}

        for tx in transactions:
            for category in self.registry.categories_for(tx.source, tx.destination):
                counts[category] += 1

        return counts

    def _calculate_buy_sell_ratio(self, transactions: Sequence[Transaction],
                                  reference_address: Optional[str]) -> float:
        """
        Incoming/outgoing count ratio.

        Without an explicit reference address the destination of the first
        transaction in input order is taken as the wallet, so the result
        depends on input order.
        """
        if reference_address is None:
            reference_address = transactions[0].destination

        incoming = sum(1 for tx in transactions if tx.destination == reference_address)
        outgoing = len(transactions) - incoming

        if outgoing == 0:
            return math.inf if incoming > 0 else 0.0
        return incoming / outgoing
