"""Heuristic derivation of activity statistics from balance and transaction count"""
import math

from reward_estimator.heuristics import (
    ACTIVE_DAYS_MODEL,
    DORMANT_RECENCY_DAYS,
    MAX_PROTOCOLS,
    MEANINGFUL_TX_RATIO,
    PROTOCOL_LOG_FACTOR,
    RECENCY_LOG_OFFSET,
    RECENCY_NUMERATOR,
    TX_COUNT_TIERS,
    WEALTH_TIERS,
    SaturationModel,
)
from reward_estimator.models.activity import DerivedStats
from reward_estimator.utils.rounding import round_to_int


def meaningful_tx_count(tx_count: int) -> int:
    """Transactions assumed to be swaps, mints or sends rather than approvals or failures"""
    return math.floor(tx_count * MEANINGFUL_TX_RATIO)


def estimate_active_days(tx_count: int, model: SaturationModel = ACTIVE_DAYS_MODEL) -> int:
    """
    Estimate the number of active days with a saturation model.

    Grows quickly for the first few hundred transactions and approaches
    the chain's age asymptotically, so the result never exceeds
    model.max_value. 1200 txs -> 427 days, 5000 txs -> 559 days.
    """
    if tx_count <= 0:
        return 0
    return round_to_int(model.max_value * (1 - math.exp(-tx_count * model.k)))


def estimate_volume(tx_count: int, balance: float) -> tuple[int, str]:
    """
    Estimate lifetime volume in USD and the label of the tier used.

    A per-transaction baseline picked by transaction count is scaled by a
    wealth multiplier picked by balance. Wealth tiers override the label
    of the transaction-count tier.
    """
    base_op_value = TX_COUNT_TIERS[0].base_op_value
    label = TX_COUNT_TIERS[0].label
    for tier in TX_COUNT_TIERS:
        if tx_count >= tier.min_tx_count:
            base_op_value = tier.base_op_value
            label = tier.label

    multiplier = 1
    for tier in WEALTH_TIERS:
        if balance > tier.min_balance:
            multiplier = tier.multiplier
            label = tier.label

    # Raw count, so the baseline captures all activity
    return round_to_int(tx_count * base_op_value * multiplier), label


def estimate_protocols(meaningful_count: int) -> int:
    """Distinct protocols used, growing logarithmically with activity"""
    if meaningful_count == 0:
        return 0
    return min(math.ceil(math.log(meaningful_count + 1) * PROTOCOL_LOG_FACTOR), MAX_PROTOCOLS)


def estimate_recency_days(meaningful_count: int) -> int:
    """Days since last activity; frequent users are more likely to be recent"""
    if meaningful_count == 0:
        return DORMANT_RECENCY_DAYS
    return max(1, math.floor(RECENCY_NUMERATOR / (math.log(meaningful_count + 1) + RECENCY_LOG_OFFSET)))


def derive_stats(tx_count: int, balance: float) -> DerivedStats:
    """Derive activity statistics from a wallet's transaction count and native balance"""
    tx_count = max(int(tx_count), 0)
    balance = max(float(balance), 0.0)
    meaningful = meaningful_tx_count(tx_count)
    volume_usd, volume_method = estimate_volume(tx_count, balance)

    return DerivedStats(
        active_days=estimate_active_days(tx_count),
        volume_usd=volume_usd,
        protocols=estimate_protocols(meaningful),
        recency_days=estimate_recency_days(meaningful),
        volume_method=volume_method,
    )
