"""Mapping of activity scores to simulated token rewards"""
from typing import Sequence

from reward_estimator.heuristics import POOL_SIZE, REWARD_CURVE, RewardPoint
from reward_estimator.utils.rounding import round_to_int


class RewardMapper:
    """
    Converts a final score into a token quantity.

    The share of the pool is interpolated linearly between the control
    points of a convex curve, so top scores earn disproportionately more.
    """

    def __init__(self, curve: Sequence[RewardPoint] = REWARD_CURVE, pool_size: int = POOL_SIZE):
        if len(curve) < 2:
            raise ValueError("Reward curve needs at least two control points")
        self.curve = tuple(curve)
        self.pool_size = pool_size

    def interpolate_pct(self, score: float) -> float:
        """Share of the pool for a score, capped at the last control point"""
        for p1, p2 in zip(self.curve, self.curve[1:]):
            if p1.score <= score <= p2.score:
                t = (score - p1.score) / (p2.score - p1.score)
                return p1.pct + t * (p2.pct - p1.pct)
        return self.curve[-1].pct

    def map_score_to_rewards(self, score: float) -> int:
        """Convert a score in [0, 1] to a token quantity"""
        if score <= 0:
            return 0
        return round_to_int(self.pool_size * self.interpolate_pct(score))


_default_mapper = RewardMapper()


def map_score_to_rewards(score: float) -> int:
    """Map a score with the default curve and pool size"""
    return _default_mapper.map_score_to_rewards(score)
