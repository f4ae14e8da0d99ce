"""
Risk assessment from profile type and features.

Profile types with a known risk character map directly to a level. All other
types are assessed from features: volatility, large transfers, frequency and
whale interactions, in that order. Each outcome carries a fixed description.
"""

import structlog

from wallet_profiler.models.wallet_data import (
    FeatureSet,
    Profile,
    ProfileType,
    RiskAssessment,
    RiskLevel
)

logger = structlog.get_logger(__name__)

PROFILE_RISK = {
    ProfileType.SUDDEN_DUMPER: RiskAssessment(
        RiskLevel.HIGH, "High risk due to sudden large transactions"),
    ProfileType.BOT_TRADER: RiskAssessment(
        RiskLevel.MEDIUM_HIGH, "Automated trading patterns may indicate market manipulation"),
    ProfileType.WHALE_ACCUMULATOR: RiskAssessment(
        RiskLevel.MEDIUM_HIGH, "Large holdings could impact market if sold"),
    ProfileType.HODLER: RiskAssessment(
        RiskLevel.LOW, "Long-term holder with stable behavior"),
    ProfileType.INSTITUTIONAL: RiskAssessment(
        RiskLevel.LOW_MEDIUM, "Institutional-like patterns suggest professional management"),
    ProfileType.SMART_MONEY: RiskAssessment(
        RiskLevel.MEDIUM, "Connected to whale activity with strategic timing"),
}

HIGH_VOLATILITY_RISK = RiskAssessment(RiskLevel.HIGH, "Highly volatile transaction patterns")
LARGE_TRANSACTIONS_RISK = RiskAssessment(RiskLevel.MEDIUM_HIGH, "Multiple large transactions detected")
FREQUENT_TRADING_RISK = RiskAssessment(RiskLevel.MEDIUM_HIGH, "Very frequent trading activity")
WHALE_INTERACTION_RISK = RiskAssessment(RiskLevel.MEDIUM_HIGH, "Significant interactions with whale wallets")
DEFAULT_RISK = RiskAssessment(RiskLevel.MEDIUM, "Standard trading activity")


def assess_risk(profile: Profile, features: FeatureSet) -> RiskAssessment:
    """Return the risk level and description for a classified wallet."""
    risk = PROFILE_RISK.get(profile.type)

    if risk is None:
        if features.volatility_score > 80:
            risk = HIGH_VOLATILITY_RISK
        elif features.large_transaction_count > 5:
            risk = LARGE_TRANSACTIONS_RISK
        elif features.trading_frequency_per_day > 10:
            risk = FREQUENT_TRADING_RISK
        elif features.whale_interaction_count > 5:
            risk = WHALE_INTERACTION_RISK
        else:
            risk = DEFAULT_RISK

    logger.debug("Risk assessed",
                 profile_type=profile.type.value,
                 risk_level=risk.level.value)

    return risk
