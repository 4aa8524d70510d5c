"""Activity scoring and normalization"""
import math
from dataclasses import dataclass

from reward_estimator.heuristics import (
    ACTIVE_DAYS_CEILING,
    PROTOCOLS_CEILING,
    RECENCY_DECAY_DAYS,
    RECENCY_GRACE_DAYS,
    SCORE_WEIGHTS,
    TX_LOG_CEILING,
    VOLUME_LOG_CEILING,
    ScoreWeights,
)
from reward_estimator.utils.rounding import round_half_up

# Assumed when recency is unknown
DEFAULT_RECENCY_DAYS = 2


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-dimension scores in [0, 1] and their weighted sum"""
    tx_score: float
    active_days_score: float
    protocol_score: float
    volume_score: float
    recency_score: float
    final_score: float


class ActivityScorer:
    """Calculates normalized activity scores for a wallet"""

    def __init__(self, weights: ScoreWeights = SCORE_WEIGHTS):
        self.weights = weights

    def calculate_tx_score(self, tx_count: int) -> float:
        """Log scale, 1000 txs -> 1.0"""
        return min(math.log10(tx_count + 1) / TX_LOG_CEILING, 1)

    def calculate_active_days_score(self, active_days: int) -> float:
        """Linear, a full year of activity -> 1.0"""
        return min(active_days / ACTIVE_DAYS_CEILING, 1)

    def calculate_protocol_score(self, protocols: int) -> float:
        """Linear, 8 protocols -> 1.0"""
        return min(protocols / PROTOCOLS_CEILING, 1)

    def calculate_volume_score(self, volume_usd: float) -> float:
        """Log scale, ~$630k -> 1.0"""
        return min(math.log10(volume_usd + 1) / VOLUME_LOG_CEILING, 1)

    def calculate_recency_score(self, recency_days: int) -> float:
        """1.0 within a week, then decays linearly to 0 at 90 days"""
        if recency_days <= RECENCY_GRACE_DAYS:
            return 1
        return max(0, 1 - (recency_days - RECENCY_GRACE_DAYS) / RECENCY_DECAY_DAYS)

    def compute_scores(
            self,
            tx_count: int,
            active_days: int,
            protocols: int,
            volume_usd: float,
            recency_days: int = DEFAULT_RECENCY_DAYS
    ) -> ScoreBreakdown:
        """
        Calculate all sub-scores and the weighted final score.

        The final score is summed from full-precision sub-scores; each
        returned field is then rounded on its own (sub-scores to 2
        places, final score to 3).
        """
        tx_score = self.calculate_tx_score(tx_count)
        active_days_score = self.calculate_active_days_score(active_days)
        protocol_score = self.calculate_protocol_score(protocols)
        volume_score = self.calculate_volume_score(volume_usd)
        recency_score = self.calculate_recency_score(recency_days)

        final_score = (
            tx_score * self.weights.tx +
            active_days_score * self.weights.active_days +
            protocol_score * self.weights.protocols +
            volume_score * self.weights.volume +
            recency_score * self.weights.recency
        )

        return ScoreBreakdown(
            tx_score=round_half_up(tx_score, 2),
            active_days_score=round_half_up(active_days_score, 2),
            protocol_score=round_half_up(protocol_score, 2),
            volume_score=round_half_up(volume_score, 2),
            recency_score=round_half_up(recency_score, 2),
            final_score=round_half_up(final_score, 3)
        )
