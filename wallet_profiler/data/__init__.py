"""Bundled reference data."""

from wallet_profiler.data.known_wallets import DEXES, EXCHANGES, KNOWN_WALLETS, WHALES

__all__ = [
    "DEXES",
    "EXCHANGES",
    "KNOWN_WALLETS",
    "WHALES",
]
