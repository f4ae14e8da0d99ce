"""Pytest configuration and fixtures for wallet profiler tests."""

import pytest

from wallet_profiler.core.entity_registry import KnownEntityRegistry
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import Transaction, LAMPORTS_PER_SOL


# 2023-11-14T22:13:20Z
NOW = 1_700_000_000
DAY = 86400

WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
OTHER = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T"
WHALE = "MJKqp326RZCHnAAbew9MDdui3iCKWco7fsK9sVuZTX2"
DEX = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"


def make_tx(block_time, sol=1.0, source=OTHER, destination=WALLET, tx_id=None):
    """Build a Transaction from a SOL amount."""
    return Transaction(
        source=source,
        destination=destination,
        block_time=block_time,
        lamports=round(sol * LAMPORTS_PER_SOL),
        tx_id=tx_id
    )


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================

@pytest.fixture
def config():
    """Default profiler configuration."""
    return ProfilerConfig()


@pytest.fixture
def sequential_config():
    """Configuration with parallel batch processing disabled."""
    return ProfilerConfig(enable_parallel_processing=False)


@pytest.fixture
def registry():
    """Registry over the bundled known-wallet table."""
    return KnownEntityRegistry()


@pytest.fixture
def now():
    return NOW


# ============================================================================
# SAMPLE DATA FIXTURES
# ============================================================================

@pytest.fixture
def evenly_spaced():
    """Factory for evenly spaced transfers ending at ``end``."""
    def build(count, gap, sol=1.0, end=NOW, source=OTHER, destination=WALLET):
        start = end - gap * (count - 1)
        return [make_tx(start + i * gap, sol, source, destination) for i in range(count)]
    return build


@pytest.fixture
def raw_transfers():
    """Raw transfer records as returned by the blockchain-data API."""
    return [
        {
            "trans_id": "5h6xBEauJ3PK6SWCZ1PGjBvj8vDdWG3KpwATGy1ARAXF",
            "from_address": OTHER,
            "to_address": WALLET,
            "block_time": NOW - 2 * DAY,
            "amount": 2_500_000_000,
            "flow": "in",
        },
        {
            "trans_id": "3Jw1Fw9sZs4vS5KzHSeMZbWrdMC7UUeNudUqMFtXVpgW",
            "from_address": WALLET,
            "to_address": DEX,
            "block_time": NOW - DAY,
            "amount": 1_000_000_000,
            "flow": "out",
        },
        {
            "src": WHALE,
            "dst": WALLET,
            "blockTime": NOW,
            "lamport": 12_000 * LAMPORTS_PER_SOL,
        },
    ]
