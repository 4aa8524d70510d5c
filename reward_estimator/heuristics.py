"""Fixed heuristic tables for the activity model and reward curve"""
from dataclasses import dataclass
from typing import Tuple

# Share of raw transactions assumed to be swaps, mints or sends
# rather than approvals and failed calls
MEANINGFUL_TX_RATIO = 0.8


@dataclass(frozen=True)
class SaturationModel:
    """Asymptotic growth toward a fixed ceiling: max_value * (1 - e^(-k * x))"""
    max_value: int
    k: float


# Base mainnet launched Aug 2023, roughly 560 days of chain history
ACTIVE_DAYS_MODEL = SaturationModel(max_value=560, k=0.0012)


@dataclass(frozen=True)
class TxCountTier:
    """Average USD value per raw transaction for wallets with at least min_tx_count txs"""
    min_tx_count: int
    base_op_value: float
    label: str


@dataclass(frozen=True)
class WealthTier:
    """Volume multiplier for wallets holding more than min_balance native units"""
    min_balance: float
    multiplier: float
    label: str


# Ordered by ascending threshold, the last matching tier wins
TX_COUNT_TIERS: Tuple[TxCountTier, ...] = (
    TxCountTier(min_tx_count=0, base_op_value=15, label="Casual (~$15/op)"),
    TxCountTier(min_tx_count=50, base_op_value=41.5, label="Regular (~$42/tx)"),
)

# Ordered by ascending threshold, the last matching tier wins
WEALTH_TIERS: Tuple[WealthTier, ...] = (
    WealthTier(min_balance=0.5, multiplier=2.5, label="Active (~$100/tx)"),
    WealthTier(min_balance=5.0, multiplier=12, label="Whale (~$500/tx)"),
)

PROTOCOL_LOG_FACTOR = 2.1
MAX_PROTOCOLS = 30

RECENCY_NUMERATOR = 30
RECENCY_LOG_OFFSET = 0.1
DORMANT_RECENCY_DAYS = 90


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of each activity dimension in the final score, summing to 1.0"""
    tx: float = 0.35
    active_days: float = 0.25
    protocols: float = 0.20
    volume: float = 0.15
    recency: float = 0.05


SCORE_WEIGHTS = ScoreWeights()

# Saturation points of the per-dimension scores
TX_LOG_CEILING = 3            # log10(1000 + 1)
ACTIVE_DAYS_CEILING = 365
PROTOCOLS_CEILING = 8
VOLUME_LOG_CEILING = 5.8      # ~$630k
RECENCY_GRACE_DAYS = 7
RECENCY_DECAY_DAYS = 83


@dataclass(frozen=True)
class RewardPoint:
    """Control point of the reward curve: share of the pool paid at a given score"""
    score: float
    pct: float


# Simulated pool of 1 billion tokens
POOL_SIZE = 1_000_000_000

# Ordered by ascending score. Modelled on typical L2 airdrops,
# 1.0 -> 12,000 tokens, 0.75 -> 4,500, 0.5 -> 1,500, 0.25 -> 200
REWARD_CURVE: Tuple[RewardPoint, ...] = (
    RewardPoint(score=0.00, pct=0.0000000),
    RewardPoint(score=0.25, pct=0.0000002),
    RewardPoint(score=0.50, pct=0.0000015),
    RewardPoint(score=0.75, pct=0.0000045),
    RewardPoint(score=1.00, pct=0.0000120),
)
