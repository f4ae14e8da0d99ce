"""Wallet profiling pipeline: features, classification and risk."""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Mapping, Optional, Sequence
import structlog

from wallet_profiler.core.classifier import ProfileClassifier, get_profile_description
from wallet_profiler.core.entity_registry import KnownEntityRegistry, default_registry
from wallet_profiler.core.feature_engine import FeatureEngine
from wallet_profiler.core.risk_assessor import assess_risk
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import Transaction, WalletReport

logger = structlog.get_logger(__name__)


class WalletProfiler:
    """Runs the profiling pipeline for one wallet or a batch of wallets."""

    def __init__(self, config: Optional[ProfilerConfig] = None,
                 registry: Optional[KnownEntityRegistry] = None):
        self.config = config or ProfilerConfig()

        if registry is None:
            if self.config.known_entities_file:
                registry = KnownEntityRegistry.from_json_file(self.config.known_entities_file)
            else:
                registry = default_registry()
        self.registry = registry

        self.feature_engine = FeatureEngine(self.config, self.registry)
        self.classifier = ProfileClassifier(self.config)
        self.logger = logger.bind(component="wallet_profiler")

    def analyze(self, transactions: Sequence[Transaction],
                address: Optional[str] = None,
                reference_address: Optional[str] = None,
                now: Optional[float] = None,
                large_transfer_threshold_sol: Optional[float] = None) -> WalletReport:
        """
        Profile a single wallet.

        Args:
            transactions: Normalized transactions of the wallet
            address: Wallet address, carried into the report only
            reference_address: Address used for the buy/sell direction.
                When omitted the first transaction's destination is used.
            now: Reference Unix time for the age rules
            large_transfer_threshold_sol: Overrides the configured threshold

        Returns:
            WalletReport
        """
        start_time = time.perf_counter()

        features = self.feature_engine.extract_features(
            transactions,
            reference_address=reference_address,
            large_transfer_threshold_sol=large_transfer_threshold_sol
        )
        profile = self.classifier.classify(
            features,
            now=now,
            large_transfer_threshold_sol=large_transfer_threshold_sol
        )
        risk = assess_risk(profile, features)

        report = WalletReport(
            features=features,
            profile=profile,
            risk=risk,
            description=get_profile_description(profile.type),
            address=address,
            processing_time_ms=int((time.perf_counter() - start_time) * 1000)
        )

        self.logger.debug("Wallet profiled",
                          address=address,
                          tx_count=features.total_count,
                          profile_type=profile.type.value,
                          risk_level=risk.level.value)

        return report

    def analyze_batch(self, wallets: Mapping[str, Sequence[Transaction]],
                      now: Optional[float] = None) -> Dict[str, WalletReport]:
        """
        Profile many wallets, in parallel when enabled.

        Each wallet's own address is used as its buy/sell reference address.
        """
        if now is None:
            now = time.time()

        def run(address: str) -> WalletReport:
            return self.analyze(wallets[address], address=address,
                                reference_address=address, now=now)

        addresses = list(wallets)

        if self.config.enable_parallel_processing and len(addresses) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                reports = list(executor.map(run, addresses))
        else:
            reports = [run(address) for address in addresses]

        self.logger.info("Batch profiled",
                         wallets=len(addresses),
                         parallel=self.config.enable_parallel_processing)

        return dict(zip(addresses, reports))
