"""Daily aggregation of transfer activity for trend charts."""

import time
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
import structlog

from wallet_profiler.core.entity_registry import KnownEntityRegistry, default_registry
from wallet_profiler.exceptions import InvalidInputError
from wallet_profiler.models.wallet_data import (
    DailyTrend,
    EntityCategory,
    Transaction,
    SECONDS_PER_DAY
)

logger = structlog.get_logger(__name__)

TIMEFRAME_WINDOWS = {
    'all': None,
    'month': 30 * SECONDS_PER_DAY,
    'week': 7 * SECONDS_PER_DAY,
    'day': SECONDS_PER_DAY,
}


def filter_by_timeframe(transactions: Sequence[Transaction], timeframe: str = 'all',
                        now: Optional[float] = None) -> List[Transaction]:
    """Keep transfers strictly newer than ``now`` minus the timeframe window."""
    if timeframe not in TIMEFRAME_WINDOWS:
        raise InvalidInputError(f"Unknown timeframe: {timeframe}",
                                details={'allowed': list(TIMEFRAME_WINDOWS)})

    window = TIMEFRAME_WINDOWS[timeframe]
    if window is None:
        return list(transactions)

    if now is None:
        now = time.time()
    cutoff = now - window
    return [tx for tx in transactions if tx.block_time > cutoff]


def aggregate_daily_trends(transactions: Sequence[Transaction],
                           registry: Optional[KnownEntityRegistry] = None,
                           timeframe: str = 'all',
                           now: Optional[float] = None) -> List[DailyTrend]:
    """
    Group transfers by UTC calendar day.

    Args:
        transactions: Normalized transactions
        registry: Known-entity registry for interaction counts
        timeframe: 'all', 'month', 'week' or 'day'
        now: Reference Unix time for the timeframe window

    Returns:
        DailyTrend buckets sorted by date
    """
    if registry is None:
        registry = default_registry()
    selected = sorted(filter_by_timeframe(transactions, timeframe, now),
                      key=lambda tx: tx.block_time)

    buckets: Dict[str, Dict[str, float]] = {}
    for tx in selected:
        day = datetime.fromtimestamp(tx.block_time, tz=timezone.utc).strftime('%Y-%m-%d')
        bucket = buckets.setdefault(day, {
            'transaction_count': 0,
            'volume_sol': 0.0,
            'exchange_interactions': 0,
            'dex_interactions': 0,
            'whale_interactions': 0
        })

        bucket['transaction_count'] += 1
        bucket['volume_sol'] += tx.amount_sol

        categories = registry.categories_for(tx.source, tx.destination)
        if EntityCategory.EXCHANGE in categories:
            bucket['exchange_interactions'] += 1
        if EntityCategory.DEX in categories:
            bucket['dex_interactions'] += 1
        if EntityCategory.WHALE in categories:
            bucket['whale_interactions'] += 1

    trends = [DailyTrend(date=day, **values) for day, values in sorted(buckets.items())]

    logger.debug("Daily trends aggregated",
                 timeframe=timeframe,
                 transactions=len(selected),
                 days=len(trends))

    return trends
